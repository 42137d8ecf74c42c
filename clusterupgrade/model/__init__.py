"""Data models for the cluster upgrade tool."""

from .component import ComponentKind, ComponentStatus, ImageReference, ImageSection
from .configuration import (
    ClusterListConfiguration,
    ComponentVersionConfigurations,
    Configurations,
    K8sObject,
)

__all__ = [
    "ComponentKind",
    "ComponentStatus",
    "ImageReference",
    "ImageSection",
    "ClusterListConfiguration",
    "ComponentVersionConfigurations",
    "Configurations",
    "K8sObject",
]
