"""Core module exports."""

from testplane.core.errors import (
    ConfigError,
    ErrorCode,
    SpawnError,
    TestPlaneError,
    TestRunError,
)
from testplane.core.logging import (
    configure_logging,
    current_invocation_id,
    get_logger,
    invocation_scope,
)
from testplane.core.progress import spinner, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "SpawnError",
    "TestPlaneError",
    "TestRunError",
    # Logging
    "configure_logging",
    "current_invocation_id",
    "get_logger",
    "invocation_scope",
    # Progress
    "spinner",
    "status",
]
