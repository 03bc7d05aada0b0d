class ClusterStackError(Exception):
    def __init__(self, cluster_cidr: str, err_str: str):
        self.cluster_cidr = cluster_cidr
        self.err_str = err_str
        super().__init__(err_str)

    def __str__(self) -> str:
        return f"Invalid cluster-cidr '{self.cluster_cidr}': {self.err_str}"


class InvalidCIDRError(ClusterStackError):
    pass


class DuplicateFamilyError(ClusterStackError):
    pass


class UnsupportedCIDRCountError(ClusterStackError):
    pass
