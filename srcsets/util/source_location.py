# SPDX-License-Identifier: MIT
"""Source location tracking for user-facing objects.

Source sets, targets and errors remember where in the user's build
description they were created so messages can point back at it.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class SourceLocation:
    """A file/line pair in user code.

    Attributes:
        filename: Path of the file.
        lineno: Line number (1-based).
        function: Name of the enclosing function, if known.
    """

    filename: str
    lineno: int
    function: str | None = None

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


def get_caller_location() -> SourceLocation | None:
    """Return the location of the first stack frame outside srcsets.

    Frames belonging to the srcsets package itself are skipped so the
    location refers to the build description that called into us.
    Falls back to the immediate caller when every frame is internal
    (e.g. when srcsets is driven from its own CLI).
    """
    frame = inspect.currentframe()
    if frame is None:
        return None
    try:
        caller = frame.f_back
        fallback = caller
        while caller is not None:
            filename = os.path.abspath(caller.f_code.co_filename)
            if not filename.startswith(_PACKAGE_DIR + os.sep):
                return SourceLocation(
                    caller.f_code.co_filename,
                    caller.f_lineno,
                    caller.f_code.co_name,
                )
            caller = caller.f_back
        if fallback is None:
            return None
        return SourceLocation(
            fallback.f_code.co_filename, fallback.f_lineno, fallback.f_code.co_name
        )
    finally:
        del frame
