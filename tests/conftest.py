"""Test configuration and fixtures."""

import copy
from typing import Any, Dict

import pytest
import yaml

from clusterupgrade.model.configuration import Configurations

SAMPLE_CONFIG: Dict[str, Any] = {
    "components": {
        "aws-node": "aws-node-version",
        "cluster-autoscaler": "cluster-autoscaler-version",
        "coredns": "core-dns-version",
        "kube-proxy": "kube-proxy-version",
    },
    "clusterlist": [
        {
            "Name": "cluster1",
            "AwsRegion": "region1",
            "AwsAccount": "account1",
            "AwsNodeObject": {"name": "aws-node", "type": "daemonset"},
            "ClusterAutoscalerObject": {"name": "cluster-autoscaler", "type": "deployment"},
            "CoreDnsObject": {"name": "coredns", "type": "deployment"},
            "KubeProxyObject": {"name": "kube-proxy", "type": "daemonset"},
        },
        {
            "Name": "cluster2",
            "AwsRegion": "region2",
            "AwsAccount": "account2",
            "AwsNodeObject": {"name": "aws-node", "type": "daemonset"},
            "ClusterAutoscalerObject": {"name": "cluster-autoscaler", "type": "deployment"},
            "CoreDnsObject": {"name": "coredns", "type": "deployment"},
            "KubeProxyObject": {"name": "kube-proxy", "type": "daemonset"},
        },
    ],
}


@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """Decoded config.yaml with two complete clusters."""
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def sample_config(sample_config_data) -> Configurations:
    """Configuration built from the sample data."""
    return Configurations.model_validate(sample_config_data)


@pytest.fixture
def write_config(tmp_path):
    """Write data to ``<tmp_path>/config.yaml`` and return the directory."""

    def _write(data, raw: bool = False):
        content = data if raw else yaml.safe_dump(data)
        (tmp_path / "config.yaml").write_text(content)
        return tmp_path

    return _write
