"""Scaffolder action data models."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Type

from pydantic import BaseModel
from structlog.stdlib import BoundLogger

from infrastructure.scaffolder.context import ActionContext


@dataclass
class TemplateExample:
    """Documented usage of an action as a template step.

    Attributes:
        description: What the example demonstrates
        example: YAML document containing the template steps
    """

    description: str
    example: str


@dataclass
class TemplateAction:
    """Action definition runnable as a template step.

    Attributes:
        id: Action id referenced by template steps (e.g. "gitlab:group:user")
        description: Human-readable description
        handler: Callable receiving the ActionContext
        input_model: Pydantic model the raw step input is validated against
        output_model: Optional pydantic model validating recorded outputs
        supports_dry_run: Whether the handler honours ctx.is_dry_run
        examples: Documented template examples
        logger: Logger of the module defining the action; handler events
            are emitted through it
    """

    id: str
    description: str
    handler: Callable[[ActionContext], None]
    input_model: Type[BaseModel]
    output_model: Optional[Type[BaseModel]] = None
    supports_dry_run: bool = False
    examples: List[TemplateExample] = field(default_factory=list)
    logger: Optional[BoundLogger] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.id:
            raise ValueError("Action id must be a non-empty string")
