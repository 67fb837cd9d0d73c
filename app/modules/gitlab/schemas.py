from typing import Annotated, List, Optional
from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict, Field


class AccessLevel(IntEnum):
    """GitLab group member access levels."""

    GUEST = 10
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50


class GroupUserOperation(str, Enum):
    """Schema for group membership operations."""

    ADD = "add"
    REMOVE = "remove"


class GroupUserInput(BaseModel):
    """Schema for the gitlab:group:user action input."""

    model_config = ConfigDict(populate_by_name=True)

    repo_url: Annotated[
        str,
        Field(
            ...,
            alias="repoUrl",
            min_length=1,
            description=(
                "Accepts the format 'gitlab.com?repo=project_name&owner=group_name' "
                "where 'project_name' is the repository name and 'group_name' "
                "is a group or username"
            ),
            json_schema_extra={"example": "gitlab.com?repo=repo&owner=owner"},
        ),
    ]
    token: Annotated[
        Optional[str],
        Field(
            default=None,
            description="The token to use for authorization to GitLab",
        ),
    ] = None
    group_id: Annotated[
        int,
        Field(
            ...,
            alias="groupId",
            description="The ID of the group to add/remove the users from",
            json_schema_extra={"example": 123},
        ),
    ]
    user_ids: Annotated[
        List[int],
        Field(
            ...,
            alias="userIds",
            min_length=1,
            description="The IDs of the users to add/remove",
            json_schema_extra={"example": [456, 789]},
        ),
    ]
    action: Annotated[
        GroupUserOperation,
        Field(
            default=GroupUserOperation.ADD,
            description="The action to perform: add or remove the users",
        ),
    ] = GroupUserOperation.ADD
    access_level: Annotated[
        Optional[AccessLevel],
        Field(
            default=None,
            alias="accessLevel",
            description=(
                "The access level for the users (10=Guest, 20=Reporter, "
                "30=Developer, 40=Maintainer, 50=Owner). "
                'Required when action is "add".'
            ),
        ),
    ] = None


class GroupUserOutput(BaseModel):
    """Schema for the gitlab:group:user action output."""

    model_config = ConfigDict(populate_by_name=True)

    user_ids: Annotated[
        Optional[List[int]],
        Field(
            default=None,
            alias="userIds",
            description="The IDs of the users that were added or removed",
        ),
    ] = None
    group_id: Annotated[
        Optional[int],
        Field(
            default=None,
            alias="groupId",
            description="The ID of the group the users were added to or removed from",
        ),
    ] = None
    access_level: Annotated[
        Optional[int],
        Field(
            default=None,
            alias="accessLevel",
            description="The access level granted to the users (only for add action)",
        ),
    ] = None
