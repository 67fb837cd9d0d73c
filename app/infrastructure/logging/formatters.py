"""Structlog processors that keep credentials out of log output.

Step inputs carry GitLab tokens (``token`` field, ``PRIVATE-TOKEN`` header,
``glpat-`` personal access tokens), so masking runs on every entry.
"""

import re
from typing import Any, Mapping

# Key fragments whose values are always redacted (matched case-insensitively)
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "cookie",
        "bearer",
    }
)

# GitLab token prefixes: personal, OAuth, deploy, CI job, runner
GITLAB_TOKEN_RE = re.compile(r"\b(?:glpat|gloas|gldt|glcbt|glrt)-[A-Za-z0-9_\-.]{8,}")


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that redacts credentials in log entries.

    Values under a sensitive key are replaced entirely, including inside
    nested mappings such as a raw step input. GitLab tokens embedded in any
    other string value are replaced in place.

    Args:
        mask_value: Replacement for redacted values.
        additional_patterns: Extra key fragments to treat as sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def is_sensitive(key: Any) -> bool:
        key_lower = str(key).lower()
        return any(pattern in key_lower for pattern in patterns)

    def mask(value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                k: mask_value if is_sensitive(k) and v is not None else mask(v)
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [mask(item) for item in value]
        if isinstance(value, str):
            return GITLAB_TOKEN_RE.sub(mask_value, value)
        return value

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return mask(event_dict)

    return processor
