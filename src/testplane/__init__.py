"""TestPlane - detect, run and normalize test suites across stacks."""

__version__ = "0.1.0"
