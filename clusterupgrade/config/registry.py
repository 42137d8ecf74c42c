"""Lookups over the cluster list and the component target versions."""

from typing import List, Optional, Tuple, Union

from ..exceptions import ClusterNotFoundError, InvalidComponentError, VersionMismatchError
from ..model.component import ComponentKind
from ..model.configuration import (
    ClusterListConfiguration,
    ComponentVersionConfigurations,
    Configurations,
)


def resolve_component_kind(component: Union[ComponentKind, str]) -> ComponentKind:
    """Turn a component name into a ComponentKind.

    Raises:
        InvalidComponentError: if the name is not one of the tracked components.
    """
    try:
        return ComponentKind(component)
    except ValueError:
        raise InvalidComponentError(str(component), ComponentKind.values()) from None


class ClusterRegistry:
    """Read-only view of the configured clusters, in configuration order."""

    def __init__(self, config: Configurations):
        self._clusters: Tuple[ClusterListConfiguration, ...] = tuple(config.cluster_list)

    def __iter__(self):
        return iter(self._clusters)

    def __len__(self) -> int:
        return len(self._clusters)

    def names(self) -> List[str]:
        return [cluster.name for cluster in self._clusters]

    def find(self, name: str) -> Optional[ClusterListConfiguration]:
        """Return the first cluster whose name matches exactly, if any."""
        for cluster in self._clusters:
            if cluster.name == name:
                return cluster
        return None

    def cluster_exists(self, name: str) -> bool:
        return self.find(name) is not None

    def get_cluster(self, name: str) -> ClusterListConfiguration:
        cluster = self.find(name)
        if cluster is None:
            raise ClusterNotFoundError(name)
        return cluster

    def get_aws_account_and_region(self, name: str) -> Tuple[str, str]:
        """Return ``(aws_account, aws_region)`` of a cluster.

        Raises:
            ClusterNotFoundError: if no cluster has this name.
        """
        cluster = self.get_cluster(name)
        return cluster.aws_account, cluster.aws_region


class ComponentVersionRegistry:
    """Target versions of the tracked components."""

    def __init__(self, config: Union[Configurations, ComponentVersionConfigurations]):
        if isinstance(config, Configurations):
            config = config.components
        self._versions = config

    def target_version(self, component: Union[ComponentKind, str]) -> str:
        return self._versions.get(resolve_component_kind(component))

    def validate_component_version(
        self, component: Union[ComponentKind, str], version: str
    ) -> None:
        """Check a version against the configured target for a component.

        The comparison is exact: no trimming, case folding or semver parsing.

        Raises:
            InvalidComponentError: if the component name is not recognized.
            VersionMismatchError: if the version differs from the target.
        """
        kind = resolve_component_kind(component)
        expected = self._versions.get(kind)
        if version != expected:
            raise VersionMismatchError(kind.value, expected, version)
