"""
Dependency injection services.

Provides provider functions for application-scoped singletons.
"""

from infrastructure.services.providers import (
    get_settings,
    get_scm_integrations,
)

__all__ = [
    "get_settings",
    "get_scm_integrations",
]
