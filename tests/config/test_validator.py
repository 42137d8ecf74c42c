"""Test configuration completeness checks."""

import pytest

from clusterupgrade.config.validator import (
    ConfigurationValidator,
    find_invalid_clusters,
    find_missing_components,
    is_cluster_list_valid,
    is_component_versions_valid,
)
from clusterupgrade.model.configuration import Configurations


class TestClusterListValidation:
    def test_all_fields_present(self, sample_config):
        """Test a list where every entry is complete."""
        assert is_cluster_list_valid(sample_config) is True

    def test_empty_object_type(self, sample_config_data):
        """Test one empty object type invalidates the whole list."""
        sample_config_data["clusterlist"][1]["CoreDnsObject"]["type"] = ""
        config = Configurations.model_validate(sample_config_data)

        assert is_cluster_list_valid(config) is False

    def test_missing_object_key(self, sample_config_data):
        """Test an entry without one of its object keys."""
        del sample_config_data["clusterlist"][1]["CoreDnsObject"]
        config = Configurations.model_validate(sample_config_data)

        assert is_cluster_list_valid(config) is False

    @pytest.mark.parametrize("key", ["Name", "AwsRegion", "AwsAccount"])
    def test_empty_cluster_field(self, sample_config_data, key):
        """Test an empty top level field in the first entry."""
        sample_config_data["clusterlist"][0][key] = ""
        config = Configurations.model_validate(sample_config_data)

        assert is_cluster_list_valid(config) is False

    def test_empty_list(self):
        """Test an empty list has no incomplete entry."""
        assert is_cluster_list_valid(Configurations()) is True

    def test_repeated_calls(self, sample_config):
        assert is_cluster_list_valid(sample_config) == is_cluster_list_valid(sample_config)


class TestComponentVersionValidation:
    def test_all_versions_set(self, sample_config):
        assert is_component_versions_valid(sample_config) is True

    @pytest.mark.parametrize("component", ["aws-node", "cluster-autoscaler", "coredns", "kube-proxy"])
    def test_one_version_empty(self, sample_config_data, component):
        """Test any single empty version fails the check."""
        sample_config_data["components"][component] = ""
        config = Configurations.model_validate(sample_config_data)

        assert is_component_versions_valid(config) is False
        assert find_missing_components(config) == [component]

    def test_no_components(self):
        assert is_component_versions_valid(Configurations()) is False


class TestInvalidClusterReport:
    def test_report_names_fields(self, sample_config_data):
        """Test the report keys entries by position and name."""
        sample_config_data["clusterlist"][0]["AwsRegion"] = ""
        sample_config_data["clusterlist"][1]["Name"] = ""
        config = Configurations.model_validate(sample_config_data)

        assert find_invalid_clusters(config) == {
            "clusterlist[0] (cluster1)": ["AwsRegion"],
            "clusterlist[1]": ["Name"],
        }

    def test_repeated_names_are_kept_apart(self, sample_config_data):
        """Test two incomplete entries sharing a name are both reported."""
        sample_config_data["clusterlist"][1]["Name"] = "cluster1"
        sample_config_data["clusterlist"][0]["AwsAccount"] = ""
        sample_config_data["clusterlist"][1]["AwsRegion"] = ""
        config = Configurations.model_validate(sample_config_data)

        assert find_invalid_clusters(config) == {
            "clusterlist[0] (cluster1)": ["AwsAccount"],
            "clusterlist[1] (cluster1)": ["AwsRegion"],
        }

    def test_report_does_not_change_result(self, sample_config):
        assert find_invalid_clusters(sample_config) == {}
        assert is_cluster_list_valid(sample_config) is True


class TestConfigurationValidator:
    def test_valid_configuration(self, sample_config):
        validator = ConfigurationValidator(sample_config)

        assert validator.is_valid() is True
        assert validator.errors() == []

    def test_errors(self, sample_config_data):
        """Test error messages for versions and clusters."""
        sample_config_data["components"]["kube-proxy"] = ""
        sample_config_data["clusterlist"][1]["KubeProxyObject"]["name"] = ""
        validator = ConfigurationValidator(Configurations.model_validate(sample_config_data))

        assert validator.is_valid() is False
        assert validator.is_cluster_list_valid() is False
        assert validator.is_component_versions_valid() is False
        assert validator.errors() == [
            "component version not set: kube-proxy",
            "cluster clusterlist[1] (cluster2) is missing: KubeProxyObject.name",
        ]
