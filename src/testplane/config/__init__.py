"""Config module exports."""

from testplane.config.loader import load_config
from testplane.config.models import (
    IntegrationTestConfig,
    LoggingConfig,
    LogOutputConfig,
    NotificationConfig,
    PathsConfig,
    RunnerConfig,
    TestPlaneConfig,
    UnitTestConfig,
)

__all__ = [
    "load_config",
    "IntegrationTestConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "NotificationConfig",
    "PathsConfig",
    "RunnerConfig",
    "TestPlaneConfig",
    "UnitTestConfig",
]
