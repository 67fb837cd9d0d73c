"""Scaffolder action framework.

Template actions are registered in an ActionRegistry and executed through
run_action / run_step, which validate raw input, provide an ActionContext
(outputs, logger, dry run flag, checkpoints) and validate outputs.
"""

from infrastructure.scaffolder.action import TemplateAction, TemplateExample
from infrastructure.scaffolder.context import ActionContext
from infrastructure.scaffolder.errors import InputError
from infrastructure.scaffolder.registry import ActionRegistry
from infrastructure.scaffolder.runner import run_action, run_step

__all__ = [
    "TemplateAction",
    "TemplateExample",
    "ActionContext",
    "InputError",
    "ActionRegistry",
    "run_action",
    "run_step",
]
