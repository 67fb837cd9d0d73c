"""Action registry for registration and discovery."""

from typing import Dict, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.scaffolder.action import TemplateAction

logger = get_module_logger()


class ActionRegistry:
    """Registry of template actions keyed by action id.

    Example:
        registry = ActionRegistry()
        registry.register(create_gitlab_group_user_action(integrations))
        action = registry.get("gitlab:group:user")
    """

    def __init__(self):
        self._actions: Dict[str, TemplateAction] = {}

    def register(self, action: TemplateAction) -> TemplateAction:
        """Register an action.

        Raises:
            ValueError: If an action with the same id is already registered
        """
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' is already registered")
        self._actions[action.id] = action
        logger.debug("registered_action", action_id=action.id)
        return action

    def get(self, action_id: str) -> Optional[TemplateAction]:
        """Get an action by id, or None if unknown."""
        return self._actions.get(action_id)

    def list(self) -> List[TemplateAction]:
        """List registered actions in registration order."""
        return list(self._actions.values())

    def __contains__(self, action_id: str) -> bool:
        return action_id in self._actions

    def __len__(self) -> int:
        return len(self._actions)
