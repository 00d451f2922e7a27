"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTPLANE__SECTION__KEY)
3. Repo YAML (.testplane/config.yaml)
4. Global YAML (~/.config/testplane/config.yaml)
5. Built-in defaults (this file)

Examples:
    TESTPLANE__LOGGING__LEVEL=DEBUG
    TESTPLANE__UNIT__TIMEOUT_SEC=120
    TESTPLANE__RUNNER__MAX_OUTPUT_BYTES=1048576
    TESTPLANE__NOTIFICATION__ENDPOINT=http://localhost:3000/api/coral
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from testplane.config.constants import (
    DEFAULT_INTEGRATION_TIMEOUT_SEC,
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_UNIT_TIMEOUT_SEC,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every parser decision.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """Supervised process runner configuration.

    Env vars:
        TESTPLANE__RUNNER__MAX_OUTPUT_BYTES: Per-stream capture limit
        TESTPLANE__RUNNER__KILL_GRACE_SEC: Wait after kill before giving up on pipes
        TESTPLANE__RUNNER__HARDEN_ENV: Export non-interactive defaults to tests
    """

    max_output_bytes: int = Field(
        default=DEFAULT_MAX_OUTPUT_BYTES,
        description="Maximum characters kept per stream (stdout, stderr). "
        "Output beyond this is dropped and the result is flagged as truncated.",
    )
    kill_grace_sec: float = Field(
        default=2.0,
        description="How long to wait for pipes to drain after a timeout kill.",
    )
    harden_env: bool = Field(
        default=True,
        description="Export CI/non-interactive variables (CI, NO_COLOR, ...) to the "
        "test process. Caller-provided variables still win.",
    )

    @field_validator("max_output_bytes")
    @classmethod
    def validate_max_output(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_output_bytes must be positive, got {v}")
        return v


class UnitTestConfig(BaseModel):
    """Unit test orchestration.

    Env vars:
        TESTPLANE__UNIT__TIMEOUT_SEC: Hard timeout for one unit test run
    """

    timeout_sec: float = Field(
        default=DEFAULT_UNIT_TIMEOUT_SEC,
        description="Hard timeout (10 min). The process group is killed on expiry.",
    )


class IntegrationTestConfig(BaseModel):
    """Integration test orchestration.

    Env vars:
        TESTPLANE__INTEGRATION__TIMEOUT_SEC: Hard timeout for one integration run
        TESTPLANE__INTEGRATION__NODE_ENV: NODE_ENV exported to the test process
    """

    timeout_sec: float = Field(
        default=DEFAULT_INTEGRATION_TIMEOUT_SEC,
        description="Hard timeout (20 min). Integration suites boot services and run longer.",
    )
    node_env: str = Field(
        default="test",
        description="Value exported as NODE_ENV unless the caller overrides it.",
    )


class PathsConfig(BaseModel):
    """Filesystem locations for per-invocation artifacts.

    Env vars:
        TESTPLANE__PATHS__LOG_DIR: Directory for run logs and screenshot folders
    """

    log_dir: str = Field(
        default="logs",
        description="Run logs and screenshot directories. Relative paths resolve "
        "against the current working directory.",
    )

    def resolved_log_dir(self) -> Path:
        return Path(self.log_dir).expanduser().resolve()


class NotificationConfig(BaseModel):
    """Lifecycle notification delivery.

    Env vars:
        TESTPLANE__NOTIFICATION__ENABLED: POST lifecycle events to the endpoint
        TESTPLANE__NOTIFICATION__ENDPOINT: Receiver URL
        TESTPLANE__NOTIFICATION__TIMEOUT_SEC: Per-request timeout
    """

    enabled: bool = Field(
        default=False,
        description="When false, lifecycle events are only logged.",
    )
    endpoint: str = Field(
        default="http://localhost:3000/api/coral",
        description="URL receiving started/completed/error events as JSON.",
    )
    timeout_sec: float = Field(
        default=5.0,
        description="Per-request timeout. Delivery failures never fail a test run.",
    )


class TestPlaneConfig(BaseModel):
    """Root configuration for TestPlane."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    unit: UnitTestConfig = Field(default_factory=UnitTestConfig)
    integration: IntegrationTestConfig = Field(default_factory=IntegrationTestConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    notification: NotificationConfig = Field(default_factory=NotificationConfig)
