"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (``run_app``), the action
executor, and the lower-level event loop used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import ActionDeps
    from .loop import RuntimeLoopCallbacks


def run_app(*args, **kwargs):
    """Lazily import the app entrypoint to avoid terminal setup on import."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def execute_action(*args, **kwargs):
    from .app import execute_action as _execute_action

    return _execute_action(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    if name == "ActionDeps":
        from . import app as _app

        return getattr(_app, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ActionDeps",
    "RuntimeLoopCallbacks",
    "execute_action",
    "run_app",
    "run_main_loop",
]
