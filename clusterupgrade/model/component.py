"""Component-related models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ComponentKind(str, Enum):
    """Cluster components tracked for version policy."""

    AWS_NODE = "aws-node"
    CLUSTER_AUTOSCALER = "cluster-autoscaler"
    COREDNS = "coredns"
    KUBE_PROXY = "kube-proxy"

    @classmethod
    def values(cls) -> List[str]:
        return [kind.value for kind in cls]


class ImageSection(str, Enum):
    """Sections of an image reference that can be extracted."""

    TAG = "imageTag"
    PREFIX = "imagePrefix"

    @classmethod
    def values(cls) -> List[str]:
        return [section.value for section in cls]


class ImageReference(BaseModel):
    """Container image split into prefix (registry/repository) and tag."""

    prefix: str
    tag: str = ""

    model_config = ConfigDict(frozen=True)

    def section(self, section: ImageSection) -> str:
        """Return the requested part of the reference."""
        return self.tag if section == ImageSection.TAG else self.prefix


class ComponentStatus(BaseModel):
    """Current vs. target version of one component in one cluster."""

    component: ComponentKind
    object_name: str
    object_type: str
    target_version: str
    current_version: Optional[str] = None
    image_prefix: Optional[str] = None
    error: Optional[str] = None

    @property
    def up_to_date(self) -> bool:
        """Whether the running tag equals the configured target exactly."""
        return self.current_version is not None and self.current_version == self.target_version
