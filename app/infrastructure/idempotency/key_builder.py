"""Checkpoint key builder for consistent key generation."""

from typing import Any


class CheckpointKeyBuilder:
    """Build readable, deterministic checkpoint keys.

    Keys are dot-joined so they stay greppable in logs and in the
    checkpoint store.

    Example:
        >>> builder = CheckpointKeyBuilder(namespace="gitlab.group.user")
        >>> builder.build("add", 123, 456)
        'gitlab.group.user.add.123.456'
    """

    def __init__(self, namespace: str):
        """Initialize key builder.

        Args:
            namespace: Namespace for key isolation (e.g., "gitlab.group.user")
        """
        if not namespace:
            raise ValueError("namespace must be a non-empty string")
        self.namespace = namespace

    def build(self, operation: str, *parts: Any) -> str:
        """Build a checkpoint key from an operation and its identifying parts.

        Args:
            operation: Operation kind (e.g., "add", "remove")
            *parts: Parent and item identifiers, most general first

        Returns:
            Checkpoint key string
        """
        if not operation:
            raise ValueError("operation must be a non-empty string")
        return ".".join([self.namespace, operation, *(str(part) for part in parts)])
