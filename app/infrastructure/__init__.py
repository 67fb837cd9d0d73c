"""Infrastructure modules for the scaffolder actions.

Centralized infrastructure components:
- configuration: Settings management (Settings, GitlabSettings, IdempotencySettings)
- logging: Structured logging (get_module_logger, bind_task_context)
- idempotency: Checkpoint cache
- scaffolder: Template action framework (ActionContext, ActionRegistry, run_action)
- services: Application-scoped providers (get_settings, get_scm_integrations)
"""
