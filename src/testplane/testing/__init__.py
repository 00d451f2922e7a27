"""Testing subsystem: detection, command resolution, execution, parsing."""

from testplane.testing.commands import CommandResolver
from testplane.testing.detection import ProjectTypeDetector
from testplane.testing.environment import prepare_environment
from testplane.testing.models import (
    ProcessOutcome,
    ProjectTag,
    TestCase,
    TestCommand,
    TestKind,
    TestRunResult,
    TestSummary,
)
from testplane.testing.notify import HttpNotifier, LifecycleEvent, LoggingNotifier, Notifier
from testplane.testing.orchestrator import (
    IntegrationTestOrchestrator,
    RunContext,
    RunState,
    TestOrchestrator,
    UnitTestOrchestrator,
    orchestrator_for,
)
from testplane.testing.parsers import get_parser, parse_outcome
from testplane.testing.process import BoundedBuffer, SupervisedProcessRunner

__all__ = [
    # Models
    "ProcessOutcome",
    "ProjectTag",
    "TestCase",
    "TestCommand",
    "TestKind",
    "TestRunResult",
    "TestSummary",
    # Pipeline
    "BoundedBuffer",
    "CommandResolver",
    "ProjectTypeDetector",
    "SupervisedProcessRunner",
    "get_parser",
    "parse_outcome",
    "prepare_environment",
    # Orchestration
    "IntegrationTestOrchestrator",
    "RunContext",
    "RunState",
    "TestOrchestrator",
    "UnitTestOrchestrator",
    "orchestrator_for",
    # Notifications
    "HttpNotifier",
    "LifecycleEvent",
    "LoggingNotifier",
    "Notifier",
]
