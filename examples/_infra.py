"""Shared helpers for examples."""

from __future__ import annotations

from typing import Any

from kungfu import Ok, Error, Some


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def show(value: Any) -> str:
    """Render kungfu outcomes compactly."""
    match value:
        case Ok(inner):
            return f"Ok({show(inner)})"
        case Error(inner):
            return f"Error({show(inner)})"
        case Some(inner):
            return f"Some({show(inner)})"
        case tuple():
            return "(" + ", ".join(show(v) for v in value) + ")"
        case _:
            return repr(value)
