"""Collector package for k8r.

Acquires a cluster client and retrieves the resource snapshot the scanner
runs over. All blocking I/O of a run happens here, before any scan.

Submodules
----------
snapshot -- ClusterSnapshot, client configuration, pod/HPA listing.
"""

from k8r.collector.snapshot import ClusterSnapshot, fetch_snapshot, load_kube_client_config

__all__ = ["ClusterSnapshot", "fetch_snapshot", "load_kube_client_config"]
