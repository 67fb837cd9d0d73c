"""Unit tests for gitlab module schemas."""

import pytest
from pydantic import ValidationError

from modules.gitlab.schemas import (
    AccessLevel,
    GroupUserInput,
    GroupUserOperation,
    GroupUserOutput,
)

pytestmark = pytest.mark.unit


class TestAccessLevel:
    """Test AccessLevel enum."""

    def test_documented_values(self):
        """Access levels map to GitLab's numeric roles."""
        assert [level.value for level in AccessLevel] == [10, 20, 30, 40, 50]
        assert AccessLevel.MAINTAINER == 40


class TestGroupUserInput:
    """Test GroupUserInput validation."""

    def test_accepts_aliases(self):
        """Template field names populate the model."""
        params = GroupUserInput.model_validate(
            {
                "repoUrl": "gitlab.com?repo=repo&owner=owner",
                "groupId": 123,
                "userIds": [456, 789],
                "accessLevel": 30,
            }
        )

        assert params.repo_url == "gitlab.com?repo=repo&owner=owner"
        assert params.group_id == 123
        assert params.user_ids == [456, 789]
        assert params.access_level is AccessLevel.DEVELOPER
        assert params.token is None

    def test_accepts_field_names(self):
        """Python field names populate the model too."""
        params = GroupUserInput(
            repo_url="gitlab.com", group_id=1, user_ids=[2], action="remove"
        )

        assert params.action is GroupUserOperation.REMOVE

    def test_action_defaults_to_add(self):
        """A missing action resolves to add at the boundary."""
        params = GroupUserInput.model_validate(
            {"repoUrl": "gitlab.com", "groupId": 1, "userIds": [2]}
        )

        assert params.action is GroupUserOperation.ADD
        assert params.access_level is None

    def test_rejects_unknown_action(self):
        """Only add and remove are valid actions."""
        with pytest.raises(ValidationError):
            GroupUserInput.model_validate(
                {"repoUrl": "gitlab.com", "groupId": 1, "userIds": [2], "action": "ban"}
            )

    @pytest.mark.parametrize("level", [0, 5, 35, 60])
    def test_rejects_undocumented_access_levels(self, level):
        """Access levels outside 10/20/30/40/50 are rejected."""
        with pytest.raises(ValidationError):
            GroupUserInput.model_validate(
                {
                    "repoUrl": "gitlab.com",
                    "groupId": 1,
                    "userIds": [2],
                    "accessLevel": level,
                }
            )

    def test_rejects_empty_user_ids(self):
        """At least one user id is required."""
        with pytest.raises(ValidationError):
            GroupUserInput.model_validate(
                {"repoUrl": "gitlab.com", "groupId": 1, "userIds": []}
            )

    @pytest.mark.parametrize("missing", ["repoUrl", "groupId", "userIds"])
    def test_rejects_missing_required_fields(self, missing):
        """repoUrl, groupId and userIds are required."""
        data = {"repoUrl": "gitlab.com", "groupId": 1, "userIds": [2]}
        del data[missing]

        with pytest.raises(ValidationError):
            GroupUserInput.model_validate(data)

    def test_rejects_non_numeric_user_ids(self):
        """User ids must be integers."""
        with pytest.raises(ValidationError):
            GroupUserInput.model_validate(
                {"repoUrl": "gitlab.com", "groupId": 1, "userIds": ["alice"]}
            )


class TestGroupUserOutput:
    """Test GroupUserOutput serialization."""

    def test_dump_uses_aliases_and_skips_unset(self):
        """Unset accessLevel is omitted from the dump."""
        output = GroupUserOutput.model_validate({"userIds": [1, 2], "groupId": 3})

        assert output.model_dump(by_alias=True, exclude_unset=True) == {
            "userIds": [1, 2],
            "groupId": 3,
        }
