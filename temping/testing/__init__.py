"""Helpers for wiring a sandbox into pytest and unittest suites."""
from .unittest_support import SandboxTestCaseMixin

__all__ = ["SandboxTestCaseMixin"]
