"""Fixtures for scaffolder framework tests."""

from typing import List, Optional

import pytest
from pydantic import BaseModel, ConfigDict, Field

from infrastructure.scaffolder import TemplateAction


class EchoInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    item_ids: List[int] = Field(alias="itemIds", default_factory=list)


class EchoOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    item_count: Optional[int] = Field(default=None, alias="itemCount")


@pytest.fixture
def echo_handler():
    """Handler recording what it was called with."""
    calls = []

    def handler(ctx):
        calls.append(ctx)
        ctx.output("message", ctx.input.message)
        if not ctx.is_dry_run:
            ctx.output("itemCount", len(ctx.input.item_ids))

    handler.calls = calls
    return handler


@pytest.fixture
def echo_action(echo_handler):
    """Dry-run capable action with input and output models."""
    return TemplateAction(
        id="test:echo",
        description="Echo input",
        handler=echo_handler,
        input_model=EchoInput,
        output_model=EchoOutput,
        supports_dry_run=True,
    )
