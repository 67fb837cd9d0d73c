"""Run template actions and template steps.

The runner is the boundary between untyped step input and action handlers:
raw input is validated into the action's input model before the handler
runs, and recorded outputs are validated against the output model after.
Handler exceptions are logged and re-raised unchanged.
"""

from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from pydantic import ValidationError

from infrastructure.idempotency import IdempotencyCache
from infrastructure.logging import bind_task_context, get_module_logger
from infrastructure.scaffolder.action import TemplateAction
from infrastructure.scaffolder.context import ActionContext
from infrastructure.scaffolder.errors import InputError
from infrastructure.scaffolder.registry import ActionRegistry

logger = get_module_logger()


def run_action(
    action: TemplateAction,
    raw_input: Mapping[str, Any],
    *,
    task_id: Optional[str] = None,
    is_dry_run: bool = False,
    checkpoints: Optional[IdempotencyCache] = None,
    step_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Validate input, run the action handler and return its outputs.

    Args:
        action: Action to run
        raw_input: Untyped step input
        task_id: Task id; pass the same id when retrying so completed
            checkpoints are skipped. Generated when omitted.
        is_dry_run: Run without side effects
        checkpoints: Checkpoint store (defaults to the shared cache)
        step_id: Template step id; scopes checkpoints and is logged

    Returns:
        Outputs keyed by their schema names

    Raises:
        InputError: If input is invalid or dry run is unsupported
    """
    if is_dry_run and not action.supports_dry_run:
        raise InputError(f"Action {action.id} does not support dry run")

    try:
        parsed_input = action.input_model.model_validate(dict(raw_input or {}))
    except ValidationError as e:
        raise InputError(f"Invalid input passed to action {action.id}: {e}") from e

    task_id = task_id or str(uuid4())
    ctx = ActionContext(
        action_id=action.id,
        task_id=task_id,
        input=parsed_input,
        is_dry_run=is_dry_run,
        checkpoints=checkpoints,
        step_id=step_id,
        base_logger=action.logger,
    )

    with bind_task_context(task_id, action_id=action.id, step_id=step_id):
        logger.info("action_started", dry_run=is_dry_run)
        try:
            action.handler(ctx)
        except Exception as e:
            logger.error(
                "action_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        logger.info("action_completed", outputs=sorted(ctx.outputs))

    if action.output_model is None:
        return dict(ctx.outputs)
    outputs = action.output_model.model_validate(ctx.outputs)
    return outputs.model_dump(by_alias=True, exclude_unset=True)


def run_step(
    step: Mapping[str, Any],
    registry: ActionRegistry,
    *,
    task_id: Optional[str] = None,
    checkpoints: Optional[IdempotencyCache] = None,
) -> Dict[str, Any]:
    """Run a single template step.

    Args:
        step: Step mapping with "action", optional "id", "name", "input"
            and "isDryRun" keys, as written in a template
        registry: Registry to resolve the action id from
        task_id: Task id shared across retries
        checkpoints: Checkpoint store (defaults to the shared cache)

    Returns:
        Outputs of the step

    Raises:
        InputError: If the step references an unknown action
    """
    action_id = step.get("action")
    action = registry.get(action_id) if action_id else None
    if action is None:
        raise InputError(f"Template action with ID '{action_id}' is not registered")

    return run_action(
        action,
        step.get("input") or {},
        task_id=task_id,
        is_dry_run=bool(step.get("isDryRun", False)),
        checkpoints=checkpoints,
        step_id=step.get("id"),
    )
