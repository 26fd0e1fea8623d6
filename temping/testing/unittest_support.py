"""Filesystem sandboxes for unittest testcases."""
from __future__ import annotations

import os
import shutil
import tempfile
from typing import Dict, Optional

from temping.sandbox import Temping

# This makes TestResult ignore lines from this module in tracebacks
__unittest = True


class SandboxTestCaseMixin:
    """TestCase mixin adding per-test :class:`Temping` sandboxes.

    ``self.sandbox()`` returns the same sandbox for the rest of the test.
    Pass a name to get further independent sandboxes. Every sandbox is reset,
    and its scratch parent removed, at test-cleanup time.
    """

    def sandbox(self, name: Optional[str] = None) -> Temping:
        sandboxes: Dict[Optional[str], Temping] = self.__dict__.setdefault("_temping_sandboxes", {})
        existing = sandboxes.get(name)
        if existing is not None:
            return existing

        suffix = f"-{name}" if name else ""
        parent = tempfile.mkdtemp(prefix="temping-", suffix=suffix)
        sandbox = Temping(os.path.join(parent, "root"))
        sandboxes[name] = sandbox
        self.addCleanup(shutil.rmtree, parent, True)
        self.addCleanup(sandbox.reset)
        return sandbox
