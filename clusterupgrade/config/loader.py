"""Configuration file loading."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from ..exceptions import (
    ConfigFileNotFoundError,
    ConfigReadError,
    ConfigUnmarshalError,
    InvalidClusterListError,
    MissingComponentVersionError,
)
from ..model.component import ComponentKind
from ..model.configuration import Configurations
from ..utils.logger import get_logger
from .validator import find_invalid_clusters, is_cluster_list_valid

logger = get_logger(__name__)

CONFIG_FILE_NAME = "config"
CONFIG_FILE_TYPE = "yaml"
CONFIG_DIR_ENV = "K8S_UPGRADE_TOOL_CONFIG_DIR"
DEFAULT_CONFIG_DIR = "$HOME/.k8s-cluster-upgrade-tool"


def file_metadata() -> Tuple[str, str, str]:
    """Return the default ``(file_name, file_type, file_path)`` of the config file."""
    return CONFIG_FILE_NAME, CONFIG_FILE_TYPE, DEFAULT_CONFIG_DIR


def default_config_dir() -> Path:
    """Directory searched for the config file, honouring the env override."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(os.path.expandvars(DEFAULT_CONFIG_DIR)).expanduser()


def config_file_path(
    file_name: str = CONFIG_FILE_NAME,
    file_type: str = CONFIG_FILE_TYPE,
    file_path: Optional[Union[str, Path]] = None,
) -> Path:
    directory = default_config_dir() if file_path is None else Path(os.path.expandvars(str(file_path)))
    return directory.expanduser() / f"{file_name}.{file_type}"


def load_configuration(data: Mapping[str, Any]) -> Configurations:
    """Build a configuration from already decoded data.

    Raises:
        ConfigUnmarshalError: if the data does not fit the configuration model.
    """
    try:
        return Configurations.model_validate(data)
    except ValidationError as e:
        raise ConfigUnmarshalError(f"error un marshaling config file: {e}") from e


def _missing_component_keys(data: Dict[str, Any]) -> list:
    components = data.get("components") or {}
    if not isinstance(components, dict):
        return ComponentKind.values()
    return [kind.value for kind in ComponentKind if components.get(kind.value) is None]


def read_config(
    file_name: str = CONFIG_FILE_NAME,
    file_type: str = CONFIG_FILE_TYPE,
    file_path: Optional[Union[str, Path]] = None,
) -> Configurations:
    """Read, decode and check the config file.

    Raises:
        ConfigFileNotFoundError: the file does not exist.
        ConfigReadError: the file is not a YAML mapping.
        ConfigUnmarshalError: the data does not fit the configuration model.
        MissingComponentVersionError: a component version key is not set.
        InvalidClusterListError: a cluster entry has an empty field.
    """
    path = config_file_path(file_name, file_type, file_path)
    if not path.is_file():
        raise ConfigFileNotFoundError(str(path))

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigReadError(f"error reading from config file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigReadError("error reading from config file: expected a mapping at top level")

    logger.info(f"Config file used: {path}")

    config = load_configuration(data)

    missing = _missing_component_keys(data)
    if missing:
        raise MissingComponentVersionError(missing)

    if not is_cluster_list_valid(config):
        raise InvalidClusterListError(find_invalid_clusters(config))

    for component, version in config.components.as_dict().items():
        logger.info(f"{component} version read from config: {version}")

    return config
