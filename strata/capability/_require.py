"""
Capability resolution — explicit and eager.

There is no registry: the caller hands an instance in, and we ask the
instance what it can do before anything gets built.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from loguru import logger

logger = logger.bind(component="strata.capability")


# ═══════════════════════════════════════════════════════════════════════════════
# Missing Capability — structural error
# ═══════════════════════════════════════════════════════════════════════════════


class MissingCapabilityError(TypeError):
    """A representation lacks a capability the caller declared."""

    def __init__(self, capability: type, representation: str) -> None:
        self.capability = capability
        self.representation = representation
        super().__init__(
            f"missing capability: {capability.__name__} "
            f"is not provided by {representation}"
        )


def _name_of(m: object) -> str:
    name = getattr(m, "name", None)
    return name if isinstance(name, str) else type(m).__name__


# ═══════════════════════════════════════════════════════════════════════════════
# provides() / require()
# ═══════════════════════════════════════════════════════════════════════════════


def provides(m: object, capability: type) -> bool:
    """Check whether m satisfies a capability protocol."""
    return isinstance(m, capability)


def require(m: object, *capabilities: type) -> None:
    """
    Fail fast unless m satisfies every capability.

    Example:
        require(m, Sequencing, StateAccess)
    """
    for capability in capabilities:
        if not provides(m, capability):
            logger.debug(
                "{} rejected: lacks {}", _name_of(m), capability.__name__
            )
            raise MissingCapabilityError(capability, _name_of(m))


# ═══════════════════════════════════════════════════════════════════════════════
# @requires — declared capability set for generic logic
# ═══════════════════════════════════════════════════════════════════════════════


def requires[**P, R](
    *capabilities: type,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Declare the capabilities a generic function needs from its `m` argument.

    The check runs when the function is called, before it builds any
    computation, so a bad stack never produces a half-built value.

    Example:
        @requires(Sequencing, StateAccess)
        def bump(m, key: str):
            return m.modify(lambda s: {**s, key: s.get(key, 0) + 1})
    """

    def decorate(fn: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(fn)
        if "m" not in signature.parameters:
            raise TypeError(f"{fn.__qualname__} has no `m` parameter to check")

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound = signature.bind(*args, **kwargs)
            require(bound.arguments["m"], *capabilities)
            return fn(*args, **kwargs)

        wrapper.__capabilities__ = capabilities  # type: ignore[attr-defined]
        return wrapper

    return decorate


def capabilities_of(fn: Callable[..., Any]) -> tuple[type, ...]:
    """Capabilities declared with @requires (empty if undeclared)."""
    return getattr(fn, "__capabilities__", ())


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "MissingCapabilityError",
    "provides",
    "require",
    "requires",
    "capabilities_of",
)
