"""Action execution context - workflow agnostic."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from structlog.stdlib import BoundLogger

from infrastructure.idempotency import IdempotencyCache, get_cache
from infrastructure.logging import get_module_logger

logger = get_module_logger()

T = TypeVar("T")


@dataclass
class ActionContext:
    """Context handed to an action handler for a single task execution.

    Attributes:
        action_id: Id of the running action (e.g. "gitlab:group:user")
        task_id: Id of the surrounding task; retries of a task reuse it
        step_id: Id of the template step; scopes checkpoints within the task
        input: Validated input model instance
        is_dry_run: When True the handler must not cause side effects
        checkpoints: Store of completed checkpoints (shared across retries)
        outputs: Values recorded through output()
        logger: base_logger (or this module's logger) bound with action,
            task and step ids
        base_logger: Logger of the action module

    Example:
        ctx.checkpoint(
            key="gitlab.group.user.add.123.456",
            fn=lambda: client.group_members.add(123, 456, 30),
        )
        ctx.output("groupId", 123)
    """

    action_id: str
    task_id: str
    input: Any
    is_dry_run: bool = False
    checkpoints: Optional[IdempotencyCache] = None
    step_id: Optional[str] = None
    base_logger: Optional[BoundLogger] = field(default=None, repr=False)
    outputs: Dict[str, Any] = field(default_factory=dict)
    logger: BoundLogger = field(init=False, repr=False)

    def __post_init__(self):
        if self.checkpoints is None:
            self.checkpoints = get_cache()
        base = self.base_logger if self.base_logger is not None else logger
        self.logger = base.bind(
            action_id=self.action_id, task_id=self.task_id, step_id=self.step_id
        )

    def output(self, name: str, value: Any) -> None:
        """Record an output value for the step."""
        self.outputs[name] = value

    def checkpoint(self, key: str, fn: Callable[[], T]) -> T:
        """Run fn at most once per key for this task step.

        A key already completed by an earlier execution of the same step
        returns the stored result without calling fn. If fn raises, nothing
        is recorded and the exception propagates.

        Args:
            key: Checkpoint key, unique per side effect within the step
            fn: Zero-argument callable performing the side effect

        Returns:
            The result of fn, or the stored result of an earlier run
        """
        if not key:
            raise ValueError("Checkpoint key must be a non-empty string")

        store_key = self._store_key(key)
        cached = self.checkpoints.get(store_key)
        if cached is not None:
            self.logger.info("checkpoint_hit", key=key)
            return cached.get("result")

        result = fn()
        self.checkpoints.set(store_key, {"result": result})
        self.logger.debug("checkpoint_recorded", key=key)
        return result

    def _store_key(self, key: str) -> str:
        # <task>:<step>:<key>; <task>:<key> outside a template step
        if self.step_id:
            return f"{self.task_id}:{self.step_id}:{key}"
        return f"{self.task_id}:{key}"
