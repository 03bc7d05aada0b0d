import logging
from collections.abc import Iterable, MutableMapping
from typing import Any

from libs.net.ip import filter_ips_by_family
from libs.net.machine import MachineNetworkInfo, NodeAddressConfig
from libs.net.stack import ClusterStack, IPFamily, StackMode
from utilities.constants import Drivers

LOGGER = logging.getLogger(__name__)


def update_config_with_addresses(
    config: MutableMapping[str, Any],
    info: MachineNetworkInfo,
    stack: ClusterStack,
) -> None:
    """
    Update the node-ip and node-external-ip entries of a node configuration in place.

    Args:
        config (MutableMapping[str, Any]): node configuration, also read for `cloud-provider-name`.
        info (MachineNetworkInfo): addresses reported by the machine driver.
        stack (ClusterStack): IP stack of the cluster.
    """
    if skip_pod_driver(info=info):
        return

    node_config = NodeAddressConfig.from_config(config=config)
    _assign_node_addresses(node_config=node_config, info=info, stack=stack)
    node_config.apply_to(config=config)


def select_node_addresses(node_config: NodeAddressConfig, info: MachineNetworkInfo, stack: ClusterStack) -> None:
    """
    Compute the addresses a node publishes as node-ip and node-external-ip.

    node-ip is only ever appended to. node-external-ip is overwritten only when there is
    something to publish, and is left alone when a cloud provider manages node addressing.
    Running it again with the same machine info is a no-op.

    Args:
        node_config (NodeAddressConfig): node configuration, updated in place.
        info (MachineNetworkInfo): addresses reported by the machine driver.
        stack (ClusterStack): IP stack of the cluster.
    """
    if skip_pod_driver(info=info):
        return

    _assign_node_addresses(node_config=node_config, info=info, stack=stack)


def skip_pod_driver(info: MachineNetworkInfo) -> bool:
    if info.driver_name != Drivers.POD:
        return False

    LOGGER.info("Skipping node address assignment for pod driver machine")
    return True


def _assign_node_addresses(node_config: NodeAddressConfig, info: MachineNetworkInfo, stack: ClusterStack) -> None:
    internal_addresses = info.internal_addresses
    if not internal_addresses:
        # Machines without a private network only report public addresses
        LOGGER.debug(f"No internal addresses reported, using external addresses {info.external_addresses}")
        internal_addresses = info.external_addresses

    node_config.node_ip = merge_unique(
        existing=node_config.node_ip,
        candidates=node_ip_candidates(
            internal_addresses=internal_addresses,
            ipv6_address=info.ipv6_address,
            stack=stack,
        ),
    )
    LOGGER.info(f"node-ip for {stack.mode.value} stack: {node_config.node_ip}")

    if node_config.cloud_provider_name:
        LOGGER.info(
            f"Cloud provider {node_config.cloud_provider_name} manages external addresses, "
            "leaving node-external-ip unchanged"
        )
        return

    external_ips = node_external_ip_candidates(
        external_addresses=info.external_addresses,
        node_ips=node_config.node_ip,
        stack=stack,
    )
    if external_ips:
        node_config.node_external_ip = external_ips
        LOGGER.info(f"node-external-ip for {stack.mode.value} stack: {external_ips}")
    else:
        LOGGER.debug(f"No external addresses to publish, keeping node-external-ip {node_config.node_external_ip}")


def node_ip_candidates(internal_addresses: list[str], ipv6_address: str, stack: ClusterStack) -> list[str]:
    """IPv4 candidates always come before IPv6 candidates, whatever the primary family."""
    internal_ipv4s, internal_ipv6s = filter_ips_by_family(ips=internal_addresses)
    _, dedicated_ipv6s = filter_ips_by_family(ips=[ipv6_address] if ipv6_address else [])
    ipv6_candidates = merge_unique(existing=internal_ipv6s, candidates=dedicated_ipv6s)

    if stack.mode == StackMode.IPV4:
        return internal_ipv4s
    if stack.mode == StackMode.IPV6:
        return ipv6_candidates
    return internal_ipv4s + ipv6_candidates


def node_external_ip_candidates(external_addresses: list[str], node_ips: list[str], stack: ClusterStack) -> list[str]:
    # Addresses published as node-ip are never published as external too
    remaining = merge_unique(
        existing=[],
        candidates=[address for address in external_addresses if address not in node_ips],
    )
    external_ipv4s, external_ipv6s = filter_ips_by_family(ips=remaining)
    by_family = {IPFamily.IPV4: external_ipv4s, IPFamily.IPV6: external_ipv6s}

    if not stack.is_dual_stack:
        return by_family[stack.primary]

    # A secondary-only set of external addresses is never published
    primary_ips = by_family[stack.primary]
    if not primary_ips:
        return []
    return primary_ips + by_family[stack.secondary]


def merge_unique(existing: Iterable[str], candidates: Iterable[str]) -> list[str]:
    merged = list(existing)
    for candidate in candidates:
        if candidate not in merged:
            merged.append(candidate)
    return merged
