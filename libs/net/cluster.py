import ipaddress
import logging
from collections.abc import Mapping
from functools import cache
from typing import Any

from pytest_testconfig import config as py_config

from libs.net.stack import DEFAULT_CLUSTER_STACK, ClusterStack, IPFamily
from utilities.constants import CIDR_SEPARATOR, CLUSTER_CIDR, MAX_CLUSTER_CIDRS
from utilities.exceptions import (
    DuplicateFamilyError,
    InvalidCIDRError,
    UnsupportedCIDRCountError,
)

LOGGER = logging.getLogger(__name__)


@cache
def cluster_stack() -> ClusterStack:
    """
    Returns the IP stack of the cluster under test, based on the `cluster_cidr` config entry.
    """
    stack = detect_stack(config={CLUSTER_CIDR: py_config.get("cluster_cidr", "")})
    LOGGER.info(f"Cluster network detection: stack={stack.mode.value}, primary={stack.primary.value}")
    return stack


def detect_stack(config: Mapping[str, Any]) -> ClusterStack:
    """
    Detect the cluster IP stack from its comma separated pod CIDRs.

    An absent or blank cluster-cidr means a single-stack IPv4 cluster. Two CIDRs
    make a dual-stack cluster whose primary family is the family of the first one.

    Args:
        config (Mapping[str, Any]): cluster configuration, read for its `cluster-cidr` entry.

    Returns:
        ClusterStack: the stack mode and its primary IP family.

    Raises:
        InvalidCIDRError: If one of the CIDRs cannot be parsed.
        DuplicateFamilyError: If both CIDRs of a dual-stack config belong to the same family.
        UnsupportedCIDRCountError: If more than two CIDRs are configured.
    """
    cluster_cidr = str(config.get(CLUSTER_CIDR) or "").strip()
    if not cluster_cidr:
        return DEFAULT_CLUSTER_STACK

    cidrs = [cidr.strip() for cidr in cluster_cidr.split(CIDR_SEPARATOR)]
    if not any(cidrs):
        # Separators only, no CIDR at all
        cidrs = []
    if not cidrs or len(cidrs) > MAX_CLUSTER_CIDRS:
        LOGGER.error(f"Unsupported number of CIDRs in cluster-cidr '{cluster_cidr}': {len(cidrs)}")
        raise UnsupportedCIDRCountError(
            cluster_cidr=cluster_cidr,
            err_str=f"expected one or two CIDRs, got {len(cidrs)}",
        )

    families = [cidr_family(cidr=cidr, cluster_cidr=cluster_cidr) for cidr in cidrs]
    if len(families) == 1:
        return ClusterStack.single(family=families[0])

    if families[0] == families[1]:
        LOGGER.error(f"Both CIDRs in cluster-cidr '{cluster_cidr}' are {families[0].value}")
        raise DuplicateFamilyError(
            cluster_cidr=cluster_cidr,
            err_str=f"dual-stack requires one IPv4 and one IPv6 CIDR, got two {families[0].value} CIDRs",
        )

    return ClusterStack.dual(primary=families[0])


def cidr_family(cidr: str, cluster_cidr: str) -> IPFamily:
    address, _, prefix = cidr.partition("/")
    try:
        if not address or not prefix.isdigit():
            raise ValueError(f"'{cidr}' is not in address/prefix-length form")
        network = ipaddress.ip_network(cidr, strict=False)
    except ValueError as ex:
        LOGGER.error(f"Failed to parse CIDR '{cidr}' of cluster-cidr '{cluster_cidr}': {ex}")
        raise InvalidCIDRError(cluster_cidr=cluster_cidr, err_str=f"invalid CIDR '{cidr}': {ex}") from ex

    return IPFamily.from_version(version=network.version)
