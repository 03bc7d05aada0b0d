import pytest

from libs.net.cluster import cluster_stack
from libs.net.stack import ClusterStack, IPFamily
from utilities.constants import CLOUD_PROVIDER_NAME, NODE_EXTERNAL_IP, NODE_IP


@pytest.fixture()
def empty_node_config():
    return {
        NODE_IP: [],
        NODE_EXTERNAL_IP: [],
        CLOUD_PROVIDER_NAME: "",
    }


@pytest.fixture()
def dual_stack_ipv4_primary():
    return ClusterStack.dual(primary=IPFamily.IPV4)


@pytest.fixture()
def fresh_cluster_stack_cache():
    cluster_stack.cache_clear()
    yield
    cluster_stack.cache_clear()
