from typing import Final

# Cluster configuration keys
CLUSTER_CIDR: Final[str] = "cluster-cidr"
CLOUD_PROVIDER_NAME: Final[str] = "cloud-provider-name"

# Node (kubelet) configuration keys
NODE_IP: Final[str] = "node-ip"
NODE_EXTERNAL_IP: Final[str] = "node-external-ip"

CIDR_SEPARATOR: Final[str] = ","
MAX_CLUSTER_CIDRS: Final[int] = 2


class Drivers:
    AMAZONEC2: Final[str] = "amazonec2"
    DIGITALOCEAN: Final[str] = "digitalocean"
    # Pod backed virtual nodes have no routable address of their own
    POD: Final[str] = "pod"
