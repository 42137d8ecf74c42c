"""Configuration loading, validation and lookups."""

from .loader import file_metadata, load_configuration, read_config
from .registry import ClusterRegistry, ComponentVersionRegistry
from .validator import ConfigurationValidator, is_cluster_list_valid, is_component_versions_valid

__all__ = [
    "file_metadata",
    "load_configuration",
    "read_config",
    "ClusterRegistry",
    "ComponentVersionRegistry",
    "ConfigurationValidator",
    "is_cluster_list_valid",
    "is_component_versions_valid",
]
