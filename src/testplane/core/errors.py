"""TestPlane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test execution
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Test execution (7xxx)
    TEST_COMMAND_UNDETERMINABLE = 7001
    TEST_SPAWN_FAILED = 7002
    TEST_TIMEOUT = 7003
    TEST_REPO_NOT_FOUND = 7004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TestPlaneError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TEST_TIMEOUT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestPlaneError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class SpawnError(TestPlaneError):
    """The test process could not be started at all."""

    @classmethod
    def command_not_found(cls, command: str, executable: str) -> "SpawnError":
        return cls(
            code=ErrorCode.TEST_SPAWN_FAILED,
            message=f"Executable not found: {executable}",
            details={"command": command, "executable": executable},
        )

    @classmethod
    def os_error(cls, command: str, cwd: str, reason: str) -> "SpawnError":
        return cls(
            code=ErrorCode.TEST_SPAWN_FAILED,
            message=f"OS error executing command: {reason}",
            details={"command": command, "cwd": cwd, "reason": reason},
        )


class TestRunError(TestPlaneError):
    """Invocation-level failure of a unit or integration test run.

    ``details["kind"]`` always names the test kind that failed.
    """

    @property
    def kind(self) -> str | None:
        return self.details.get("kind")

    @classmethod
    def repo_not_found(cls, kind: str, path: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_REPO_NOT_FOUND,
            message=f"Failed to run {kind} tests: Repository path does not exist: {path}",
            details={"kind": kind, "path": path},
        )

    @classmethod
    def command_undeterminable(cls, kind: str, tag: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_COMMAND_UNDETERMINABLE,
            message=(
                f"Failed to run {kind} tests: "
                f"Could not determine {kind} test command for project type: {tag}"
            ),
            details={"kind": kind, "tag": tag},
        )

    @classmethod
    def spawn_failed(cls, kind: str, cause: SpawnError) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_SPAWN_FAILED,
            message=f"Failed to run {kind} tests: {cause.message}",
            details={"kind": kind, **cause.details},
        )

    @classmethod
    def timeout(
        cls,
        kind: str,
        command: str,
        timeout_sec: float,
        *,
        stdout: str = "",
        stderr: str = "",
    ) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_TIMEOUT,
            message=f"Failed to run {kind} tests: Command timed out after {timeout_sec}s: {command}",
            retryable=True,
            details={
                "kind": kind,
                "command": command,
                "timeout_sec": timeout_sec,
                "stdout": stdout,
                "stderr": stderr,
            },
        )

    @classmethod
    def internal(cls, kind: str, reason: str) -> "TestRunError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Failed to run {kind} tests: {reason}",
            details={"kind": kind, "reason": reason},
        )

