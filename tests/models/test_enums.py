"""Tests for open enumerations."""

from codebuild_env.models.enums import (
    ComputeType,
    EnvironmentType,
    EnvironmentVariableType,
    ImagePullCredentialsType,
)


class TestOpenEnum:
    """Test the exists() membership check."""

    def test_known_tag(self):
        assert EnvironmentType.exists("LINUX_CONTAINER")
        assert ComputeType.exists("ATTRIBUTE_BASED_COMPUTE")
        assert ImagePullCredentialsType.exists("CODEBUILD")

    def test_unknown_tag(self):
        assert not EnvironmentType.exists("linux_container")
        assert not ComputeType.exists("BUILD_GENERAL2_HUGE")

    def test_member(self):
        assert EnvironmentVariableType.exists(EnvironmentVariableType.PLAINTEXT)

    def test_members_compare_to_strings(self):
        assert ComputeType.BUILD_GENERAL1_SMALL == "BUILD_GENERAL1_SMALL"
