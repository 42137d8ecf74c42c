"""Compare running component versions with the configured targets."""

from typing import List

from ..config.registry import ClusterRegistry, ComponentVersionRegistry
from ..k8s.client import SYSTEM_NAMESPACE, K8sClient
from ..k8s.image import parse_image_reference
from ..model.component import ComponentKind, ComponentStatus
from ..model.configuration import Configurations
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ComponentVersionReconciler:
    """Reports current vs. target version of each component in a cluster."""

    def __init__(
        self,
        config: Configurations,
        client: K8sClient,
        namespace: str = SYSTEM_NAMESPACE,
    ):
        self.clusters = ClusterRegistry(config)
        self.versions = ComponentVersionRegistry(config)
        self.client = client
        self.namespace = namespace

    def component_status(self, cluster_name: str, kind: ComponentKind) -> ComponentStatus:
        """Read one component's image and compare its tag with the target."""
        cluster = self.clusters.get_cluster(cluster_name)
        obj = cluster.workload_object(kind)
        target = self.versions.target_version(kind)

        output = self.client.get_workload_image(obj.type, obj.name, self.namespace)
        if output is None:
            return ComponentStatus(
                component=kind,
                object_name=obj.name,
                object_type=obj.type,
                target_version=target,
                error=f"unable to read image of {obj.type}/{obj.name}",
            )

        image = parse_image_reference(output)
        status = ComponentStatus(
            component=kind,
            object_name=obj.name,
            object_type=obj.type,
            target_version=target,
            current_version=image.tag,
            image_prefix=image.prefix,
        )
        if not status.up_to_date:
            logger.info(
                f"{cluster_name}: {kind.value} runs {image.tag or '<untagged>'}, target is {target}"
            )
        return status

    def reconcile(self, cluster_name: str) -> List[ComponentStatus]:
        """Get the status of every tracked component.

        Raises:
            ClusterNotFoundError: if the cluster is not configured.
        """
        # Fail before running any kubectl command
        self.clusters.get_cluster(cluster_name)
        return [self.component_status(cluster_name, kind) for kind in ComponentKind]

    def outdated(self, cluster_name: str) -> List[ComponentStatus]:
        """Components whose running tag differs from the target."""
        return [status for status in self.reconcile(cluster_name) if not status.up_to_date]
