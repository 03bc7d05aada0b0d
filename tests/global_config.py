from typing import Any

global config

# Pod CIDRs of the cluster under test, first one is the primary family
cluster_cidr = "10.42.0.0/16,2001:cafe:42:0::/56"


for _dir in dir():
    if not config:  # noqa: F821
        config: dict[str, Any] = {}
    val = locals()[_dir]
    if type(val) not in [bool, list, dict, str]:
        continue

    if _dir in ["encoding", "py_file"]:
        continue

    config[_dir] = locals()[_dir]  # noqa: F821
