"""GitLab scaffolder actions.

Usage:
    from infrastructure.scaffolder import ActionRegistry
    from modules.gitlab import register_actions

    registry = ActionRegistry()
    register_actions(registry)
"""

from typing import Optional

from infrastructure.scaffolder import ActionRegistry
from integrations.gitlab import ScmIntegrations
from modules.gitlab.group_user import create_gitlab_group_user_action


def register_actions(
    registry: ActionRegistry, integrations: Optional[ScmIntegrations] = None
) -> ActionRegistry:
    """Register every GitLab action in registry."""
    registry.register(create_gitlab_group_user_action(integrations=integrations))
    return registry


__all__ = ["create_gitlab_group_user_action", "register_actions"]
