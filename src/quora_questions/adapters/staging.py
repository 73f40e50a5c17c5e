"""Deferred writes for Supabase repositories."""

from collections.abc import Callable

Write = Callable[[], None]


def run_or_stage(write: Write, pending: list[Write] | None) -> None:
    """Run a write now, or queue it when a unit of work is collecting writes."""
    if pending is None:
        write()
    else:
        pending.append(write)
