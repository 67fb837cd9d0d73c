"""Template examples for the gitlab:group:user action."""

from typing import Any, Dict

import yaml

from infrastructure.scaffolder import TemplateExample

ACTION_ID = "gitlab:group:user"


def _step(name: str, step_input: Dict[str, Any], **extra: Any) -> str:
    step: Dict[str, Any] = {
        "id": "gitlabGroupUser",
        "name": name,
        "action": ACTION_ID,
    }
    step.update(extra)
    step["input"] = step_input
    return yaml.safe_dump({"steps": [step]}, sort_keys=False)


examples = [
    TemplateExample(
        description="Add a single user to a group as a Developer (default action)",
        example=_step(
            "Add User to Group",
            {"repoUrl": "gitlab.com", "groupId": 123, "userIds": [456], "accessLevel": 30},
        ),
    ),
    TemplateExample(
        description="Add multiple users to a group as Developers",
        example=_step(
            "Add Users to Group",
            {
                "repoUrl": "gitlab.com",
                "groupId": 123,
                "userIds": [456, 789, 101],
                "accessLevel": 30,
            },
        ),
    ),
    TemplateExample(
        description="Add multiple users to a group as Maintainers",
        example=_step(
            "Add Users to Group",
            {
                "repoUrl": "gitlab.com",
                "groupId": 123,
                "userIds": [456, 789],
                "action": "add",
                "accessLevel": 40,
            },
        ),
    ),
    TemplateExample(
        description="Remove multiple users from a group",
        example=_step(
            "Remove Users from Group",
            {
                "repoUrl": "gitlab.com",
                "groupId": 123,
                "userIds": [456, 789],
                "action": "remove",
            },
        ),
    ),
    TemplateExample(
        description="Add users to a group in dry run mode",
        example=_step(
            "Add Users to Group",
            {"repoUrl": "gitlab.com", "groupId": 123, "userIds": [456, 789], "accessLevel": 30},
            isDryRun=True,
        ),
    ),
    TemplateExample(
        description="Add users to a group as Guests",
        example=_step(
            "Add Users to Group",
            {"repoUrl": "gitlab.com", "groupId": 123, "userIds": [456], "accessLevel": 10},
        ),
    ),
    TemplateExample(
        description="Add users to a group with a custom token",
        example=_step(
            "Add Users to Group",
            {
                "repoUrl": "gitlab.com",
                "groupId": 123,
                "userIds": [456, 789],
                "accessLevel": 30,
                "token": "${{ secrets.GITLAB_TOKEN }}",
            },
        ),
    ),
]
