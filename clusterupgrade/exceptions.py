"""Exceptions raised by the upgrade tool."""

from typing import Iterable, List, Optional


class UpgradeToolError(Exception):
    """Base class for all upgrade tool errors."""


class ClusterNotFoundError(UpgradeToolError):
    """Raised when a cluster name is not present in the cluster list."""

    def __init__(self, cluster_name: str):
        self.cluster_name = cluster_name
        super().__init__(
            f"no awsAccount and awsRegion was found for the passed clusterName: {cluster_name}"
        )


class InvalidSelectorError(UpgradeToolError):
    """Raised when a caller passes an identifier outside a closed set."""

    def __init__(self, selector: str, valid: Iterable[str], message: str):
        self.selector = selector
        self.valid: List[str] = list(valid)
        super().__init__(message)


class InvalidComponentError(InvalidSelectorError):
    """Raised for an unrecognized component name."""

    def __init__(self, component: str, valid: Iterable[str]):
        valid = list(valid)
        super().__init__(
            component,
            valid,
            f"please pass a valid component name from this list [{', '.join(valid)}], "
            f"got: {component!r}",
        )


class InvalidImageSectionError(InvalidSelectorError):
    """Raised for an unrecognized image section selector."""

    def __init__(self, section: str, valid: Iterable[str]):
        valid = list(valid)
        super().__init__(
            section,
            valid,
            f"invalid imageSection passed: {section!r} (expected one of: {', '.join(valid)})",
        )


class VersionMismatchError(UpgradeToolError):
    """Raised when a component version differs from the configured target."""

    def __init__(self, component: str, expected: str, actual: str):
        self.component = component
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{component} component version passed doesn't match the version in config, "
            "please check the value in config file"
        )


class ConfigurationError(UpgradeToolError):
    """Base class for errors raised while loading the configuration file."""


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"error finding config file. Does it exist? Please create it in {path} if not"
        )


class ConfigReadError(ConfigurationError):
    """Raised when the configuration file cannot be read as a YAML mapping."""


class ConfigUnmarshalError(ConfigurationError):
    """Raised when decoded data does not fit the configuration model."""


class MissingComponentVersionError(ConfigurationError):
    """Raised when a mandatory component version key is absent."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            "mandatory component version of either aws-node, coredns, kube-proxy or "
            f"cluster-autoscaler not set in config file (missing: {', '.join(self.missing)})"
        )


class InvalidClusterListError(ConfigurationError):
    """Raised when a cluster list entry has an empty field."""

    def __init__(self, invalid: Optional[dict] = None):
        self.invalid = invalid or {}
        details = "; ".join(
            f"{cluster}: {', '.join(fields)}" for cluster, fields in self.invalid.items()
        )
        message = (
            "one of the clusterlist elements has either Name, AwsRegion, AwsAccount, "
            "AwsNodeObject, ClusterAutoscalerObject, KubeProxyObject, CoreDnsObject missing"
        )
        if details:
            message = f"{message} ({details})"
        super().__init__(message)
