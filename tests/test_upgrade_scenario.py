"""End to end checks over a two cluster configuration."""

from clusterupgrade.config import (
    ClusterRegistry,
    ComponentVersionRegistry,
    is_cluster_list_valid,
    is_component_versions_valid,
    read_config,
)
from clusterupgrade.k8s import parse_component_image


def test_upgrade_gate(write_config, sample_config_data):
    """Test the checks run before upgrading kube-proxy in cluster1."""
    config = read_config("config", "yaml", write_config(sample_config_data))

    assert is_cluster_list_valid(config) is True
    assert is_component_versions_valid(config) is True
    assert ClusterRegistry(config).get_aws_account_and_region("cluster1") == ("account1", "region1")
    assert ComponentVersionRegistry(config).validate_component_version(
        "kube-proxy", "kube-proxy-version"
    ) is None

    running = parse_component_image(
        "'602401143452.dkr.ecr.eu-west-1.amazonaws.com/eks/kube-proxy:kube-proxy-version'",
        "imageTag",
    )
    assert running == config.components.kube_proxy
