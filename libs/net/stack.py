from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IPFamily(str, Enum):
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @classmethod
    def from_version(cls, version: int) -> IPFamily:
        return cls.IPV4 if version == 4 else cls.IPV6


class StackMode(str, Enum):
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    DUAL_STACK = "dual-stack"


@dataclass(frozen=True)
class ClusterStack:
    """
    Cluster IP addressing mode.

    Single-stack clusters carry their only family as the primary one.
    Dual-stack clusters carry the family of the first configured CIDR.

    Example:
        ClusterStack.dual(primary=IPFamily.IPV6)
        ClusterStack(mode=StackMode.IPV4, primary=IPFamily.IPV4)
    """

    mode: StackMode
    primary: IPFamily

    def __post_init__(self) -> None:
        if self.mode != StackMode.DUAL_STACK and self.mode.value != self.primary.value:
            raise ValueError(f"Single-stack {self.mode.value} cluster cannot have {self.primary.value} as primary")

    @classmethod
    def single(cls, family: IPFamily) -> ClusterStack:
        return cls(mode=StackMode(family.value), primary=family)

    @classmethod
    def dual(cls, primary: IPFamily) -> ClusterStack:
        return cls(mode=StackMode.DUAL_STACK, primary=primary)

    @property
    def is_dual_stack(self) -> bool:
        return self.mode == StackMode.DUAL_STACK

    @property
    def secondary(self) -> IPFamily | None:
        if not self.is_dual_stack:
            return None
        return IPFamily.IPV6 if self.primary == IPFamily.IPV4 else IPFamily.IPV4


DEFAULT_CLUSTER_STACK = ClusterStack.single(family=IPFamily.IPV4)
