"""Registry of reset hooks for module-level state (``cfg`` and friends)."""

from __future__ import annotations

from collections.abc import Callable

ResetFn = Callable[[], None]

_reset_fns: list[ResetFn] = []


def register_singleton(reset_fn: ResetFn) -> ResetFn:
    """Add *reset_fn* to the registry; usable as a decorator.

    Registering the same function twice is a no-op, so a re-imported
    module does not reset its state twice.
    """
    if reset_fn not in _reset_fns:
        _reset_fns.append(reset_fn)
    return reset_fn


def reset_all_singletons() -> None:
    """Run the hooks in registration order."""
    for fn in list(_reset_fns):
        fn()
