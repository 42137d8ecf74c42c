"""Completeness checks over a decoded configuration."""

from typing import Dict, List

from ..model.component import ComponentKind
from ..model.configuration import Configurations


def is_cluster_list_valid(config: Configurations) -> bool:
    """Check that every cluster entry has all of its fields set.

    A single incomplete entry invalidates the whole list.
    """
    return all(cluster.is_complete for cluster in config.cluster_list)


def is_component_versions_valid(config: Configurations) -> bool:
    """Check that a target version is set for every component."""
    return all(config.components.get(kind) for kind in ComponentKind)


def find_invalid_clusters(config: Configurations) -> Dict[str, List[str]]:
    """Map each incomplete cluster entry to the keys it is missing.

    Entries are keyed by their position in the list followed by ``Name`` when
    set, e.g. ``clusterlist[2] (cluster1)``, so repeated names stay apart.
    """
    invalid: Dict[str, List[str]] = {}
    for index, cluster in enumerate(config.cluster_list):
        missing = cluster.missing_fields()
        if missing:
            key = f"clusterlist[{index}]"
            if cluster.name:
                key = f"{key} ({cluster.name})"
            invalid[key] = missing
    return invalid


def find_missing_components(config: Configurations) -> List[str]:
    """List the components without a target version."""
    return [kind.value for kind in ComponentKind if not config.components.get(kind)]


class ConfigurationValidator:
    """Runs the completeness checks against one configuration."""

    def __init__(self, config: Configurations):
        self.config = config

    def is_cluster_list_valid(self) -> bool:
        return is_cluster_list_valid(self.config)

    def is_component_versions_valid(self) -> bool:
        return is_component_versions_valid(self.config)

    def is_valid(self) -> bool:
        """Check both the cluster list and the component versions."""
        return self.is_component_versions_valid() and self.is_cluster_list_valid()

    def errors(self) -> List[str]:
        """Describe every completeness problem found."""
        errors = [
            f"component version not set: {component}"
            for component in find_missing_components(self.config)
        ]
        for cluster, fields in find_invalid_clusters(self.config).items():
            errors.append(f"cluster {cluster} is missing: {', '.join(fields)}")
        return errors
