"""The gitlab:group:user scaffolder action.

Adds users to, or removes users from, a GitLab group. Users are processed
one at a time in input order; each membership change runs under its own
checkpoint so a retried task skips users it already handled. The first
failing call aborts the batch and propagates unchanged.
"""

from functools import partial
from typing import Callable, Optional

from infrastructure.idempotency import CheckpointKeyBuilder
from infrastructure.logging import get_module_logger
from infrastructure.scaffolder import ActionContext, InputError, TemplateAction
from infrastructure.services import get_scm_integrations
from integrations.gitlab import (
    GitlabClient,
    RepoLocation,
    ScmIntegrations,
    get_client,
    parse_repo_url,
)
from modules.gitlab.examples import ACTION_ID, examples
from modules.gitlab.schemas import (
    AccessLevel,
    GroupUserInput,
    GroupUserOperation,
    GroupUserOutput,
)

logger = get_module_logger()

checkpoint_keys = CheckpointKeyBuilder(namespace="gitlab.group.user")

ACCESS_LEVEL_REQUIRED_MESSAGE = (
    'accessLevel is required when action is "add". Valid values are: '
    + ", ".join(f"{level.value} ({level.name.title()})" for level in AccessLevel)
)

ClientFactory = Callable[..., GitlabClient]
RepoUrlParser = Callable[[str, ScmIntegrations], RepoLocation]


def _emit_outputs(ctx: ActionContext, params: GroupUserInput) -> None:
    ctx.output("userIds", list(params.user_ids))
    ctx.output("groupId", params.group_id)
    if params.action == GroupUserOperation.ADD:
        ctx.output("accessLevel", int(params.access_level))


def create_gitlab_group_user_action(
    integrations: Optional[ScmIntegrations] = None,
    client_factory: ClientFactory = get_client,
    repo_url_parser: RepoUrlParser = parse_repo_url,
) -> TemplateAction:
    """Create the gitlab:group:user action.

    Args:
        integrations: GitLab integrations (defaults to the configured ones)
        client_factory: Called as client_factory(host=, integrations=, token=)
        repo_url_parser: Called as repo_url_parser(repo_url, integrations)

    Returns:
        TemplateAction ready to be registered
    """
    if integrations is None:
        integrations = get_scm_integrations()

    def handler(ctx: ActionContext) -> None:
        params: GroupUserInput = ctx.input
        operation = params.action
        group_id = params.group_id

        if operation == GroupUserOperation.ADD and params.access_level is None:
            raise InputError(ACCESS_LEVEL_REQUIRED_MESSAGE)

        if ctx.is_dry_run:
            ctx.logger.info(
                "dry_run_group_membership",
                operation=operation.value,
                group_id=group_id,
                user_ids=params.user_ids,
            )
            _emit_outputs(ctx, params)
            return

        location = repo_url_parser(params.repo_url, integrations)
        client = client_factory(
            host=location.host, integrations=integrations, token=params.token
        )

        if operation == GroupUserOperation.ADD:
            access_level = int(params.access_level)
            ctx.logger.info(
                "adding_users_to_group",
                group_id=group_id,
                user_ids=params.user_ids,
                access_level=access_level,
            )
            for user_id in params.user_ids:
                ctx.checkpoint(
                    key=checkpoint_keys.build("add", group_id, user_id),
                    fn=partial(
                        client.group_members.add, group_id, user_id, access_level
                    ),
                )
                ctx.logger.info(
                    "user_added_to_group", group_id=group_id, user_id=user_id
                )
        else:
            ctx.logger.info(
                "removing_users_from_group",
                group_id=group_id,
                user_ids=params.user_ids,
            )
            for user_id in params.user_ids:
                ctx.checkpoint(
                    key=checkpoint_keys.build("remove", group_id, user_id),
                    fn=partial(client.group_members.remove, group_id, user_id),
                )
                ctx.logger.info(
                    "user_removed_from_group", group_id=group_id, user_id=user_id
                )

        _emit_outputs(ctx, params)

    return TemplateAction(
        id=ACTION_ID,
        description="Adds or removes users from a GitLab group",
        handler=handler,
        input_model=GroupUserInput,
        output_model=GroupUserOutput,
        supports_dry_run=True,
        examples=examples,
        logger=logger,
    )
