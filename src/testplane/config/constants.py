"""Configuration constants.

Values here are not user-configurable; configurable defaults that merely
start from these live in models.py.
"""

# =============================================================================
# Process Runner
# =============================================================================

DEFAULT_MAX_OUTPUT_BYTES = 10 * 1024 * 1024
"""Per-stream capture limit for test output (10 MiB)."""

READ_CHUNK_SIZE = 64 * 1024
"""Bytes requested per read from a child pipe."""

SHELL_BUILTINS = frozenset(
    {"echo", "cd", "exit", "true", "false", "test", "[", "export", "set", "exec", "kill", ":"}
)
"""Leading tokens that resolve inside the shell and need no executable on PATH."""

# =============================================================================
# Orchestrator
# =============================================================================

DEFAULT_UNIT_TIMEOUT_SEC = 600.0
DEFAULT_INTEGRATION_TIMEOUT_SEC = 1200.0

VCS_METADATA_DIRS = frozenset({".git", ".hg", ".svn"})
"""Entries ignored when deciding whether a repository is empty."""

EMPTY_REPOSITORY_MESSAGE = "Repository is empty, no tests to run"
EMPTY_REPOSITORY_CASE = "repository-empty-check"

SCREENSHOT_ENV_VAR = "SCREENSHOT_DIR"
