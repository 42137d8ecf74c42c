"""Upgrade tool configuration models.

The models mirror the layout of ``config.yaml``::

    components:
      aws-node: v1.12.0-eksbuild.1
      cluster-autoscaler: v1.27.3
      coredns: v1.10.1-eksbuild.2
      kube-proxy: v1.27.4-eksbuild.2
    clusterlist:
      - Name: cluster1
        AwsRegion: eu-west-1
        AwsAccount: "123456789012"
        AwsNodeObject: {name: aws-node, type: daemonset}
        ClusterAutoscalerObject: {name: cluster-autoscaler, type: deployment}
        CoreDnsObject: {name: coredns, type: deployment}
        KubeProxyObject: {name: kube-proxy, type: daemonset}

Missing keys decode to empty strings so that completeness is reported by the
validator instead of failing at decode time.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .component import ComponentKind


def _coerce_str(value: Any) -> Any:
    """Turn YAML nulls and integers into the strings the models expect.

    Floats are rejected: YAML reads `1.10` as 1.1, so the text the user wrote
    cannot be recovered.
    """
    if value is None:
        return ""
    if isinstance(value, float):
        raise ValueError(f"{value!r} was read as a number, quote it in the config file")
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class K8sObject(BaseModel):
    """Kubernetes object that runs a component inside a cluster."""

    name: str = ""
    type: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "type", mode="before")
    @classmethod
    def coerce_strings(cls, value: Any) -> Any:
        return _coerce_str(value)

    @property
    def is_complete(self) -> bool:
        return bool(self.name) and bool(self.type)


# Attribute holding the object reference of every component
_OBJECT_FIELDS: Dict[ComponentKind, str] = {
    ComponentKind.AWS_NODE: "aws_node_object",
    ComponentKind.CLUSTER_AUTOSCALER: "cluster_autoscaler_object",
    ComponentKind.COREDNS: "core_dns_object",
    ComponentKind.KUBE_PROXY: "kube_proxy_object",
}


class ClusterListConfiguration(BaseModel):
    """One managed cluster."""

    name: str = Field("", alias="Name")
    aws_region: str = Field("", alias="AwsRegion")
    aws_account: str = Field("", alias="AwsAccount")
    aws_node_object: K8sObject = Field(default_factory=K8sObject, alias="AwsNodeObject")
    cluster_autoscaler_object: K8sObject = Field(
        default_factory=K8sObject, alias="ClusterAutoscalerObject"
    )
    core_dns_object: K8sObject = Field(default_factory=K8sObject, alias="CoreDnsObject")
    kube_proxy_object: K8sObject = Field(default_factory=K8sObject, alias="KubeProxyObject")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("name", "aws_region", "aws_account", mode="before")
    @classmethod
    def coerce_strings(cls, value: Any) -> Any:
        return _coerce_str(value)

    @field_validator(
        "aws_node_object",
        "cluster_autoscaler_object",
        "core_dns_object",
        "kube_proxy_object",
        mode="before",
    )
    @classmethod
    def empty_object(cls, value: Any) -> Any:
        return {} if value is None else value

    def workload_object(self, kind: ComponentKind) -> K8sObject:
        """Get the object reference for a component."""
        return getattr(self, _OBJECT_FIELDS[ComponentKind(kind)])

    def missing_fields(self) -> List[str]:
        """List the YAML keys left empty in this entry."""
        missing = []
        for attr in ("name", "aws_region", "aws_account"):
            if not getattr(self, attr):
                missing.append(type(self).model_fields[attr].alias)

        for attr in _OBJECT_FIELDS.values():
            obj = getattr(self, attr)
            alias = type(self).model_fields[attr].alias
            if not obj.name:
                missing.append(f"{alias}.name")
            if not obj.type:
                missing.append(f"{alias}.type")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


_VERSION_FIELDS: Dict[ComponentKind, str] = {
    ComponentKind.AWS_NODE: "aws_node",
    ComponentKind.CLUSTER_AUTOSCALER: "cluster_autoscaler",
    ComponentKind.COREDNS: "core_dns",
    ComponentKind.KUBE_PROXY: "kube_proxy",
}


class ComponentVersionConfigurations(BaseModel):
    """Fleet-wide target version for every component."""

    aws_node: str = Field("", alias="aws-node")
    cluster_autoscaler: str = Field("", alias="cluster-autoscaler")
    core_dns: str = Field("", alias="coredns")
    kube_proxy: str = Field("", alias="kube-proxy")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("aws_node", "cluster_autoscaler", "core_dns", "kube_proxy", mode="before")
    @classmethod
    def coerce_strings(cls, value: Any) -> Any:
        return _coerce_str(value)

    def get(self, kind: ComponentKind) -> str:
        """Get the target version of a component."""
        return getattr(self, _VERSION_FIELDS[ComponentKind(kind)])

    def as_dict(self) -> Dict[str, str]:
        return {kind.value: self.get(kind) for kind in ComponentKind}


class Configurations(BaseModel):
    """Complete upgrade tool configuration."""

    components: ComponentVersionConfigurations = Field(
        default_factory=ComponentVersionConfigurations
    )
    cluster_list: List[ClusterListConfiguration] = Field(
        default_factory=list, alias="clusterlist"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("components", mode="before")
    @classmethod
    def empty_components(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("cluster_list", mode="before")
    @classmethod
    def empty_cluster_list(cls, value: Any) -> Any:
        return [] if value is None else value
