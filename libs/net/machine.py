from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from utilities.constants import CLOUD_PROVIDER_NAME, NODE_EXTERNAL_IP, NODE_IP


@dataclass(frozen=True)
class MachineNetworkInfo:
    """
    Addresses reported by the infrastructure driver for a single machine.

    A fresh snapshot is taken on every reconcile. Some drivers report their IPv6
    address out of band from the internal address list, in `ipv6_address`.
    """

    internal_addresses: list[str] = field(default_factory=list)
    external_addresses: list[str] = field(default_factory=list)
    ipv6_address: str = ""
    driver_name: str = ""


@dataclass
class NodeAddressConfig:
    node_ip: list[str] = field(default_factory=list)
    node_external_ip: list[str] = field(default_factory=list)
    cloud_provider_name: str = ""

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> NodeAddressConfig:
        return cls(
            node_ip=to_string_list(value=config.get(NODE_IP)),
            node_external_ip=to_string_list(value=config.get(NODE_EXTERNAL_IP)),
            cloud_provider_name=str(config.get(CLOUD_PROVIDER_NAME) or ""),
        )

    def apply_to(self, config: MutableMapping[str, Any]) -> None:
        config[NODE_IP] = list(self.node_ip)
        # An absent node-external-ip stays absent until there is something to publish
        if self.node_external_ip or NODE_EXTERNAL_IP in config:
            config[NODE_EXTERNAL_IP] = list(self.node_external_ip)


def to_string_list(value: Any) -> list[str]:
    """
    Normalize a configuration value into a list of strings.

    Args:
        value (Any): None, a single string or an iterable of values.

    Returns:
        list[str]: the value as a list; an empty string or None give an empty list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return [str(item) for item in value]
