"""
Capability — minimal contracts logic may require from an effect context.

    from strata import capability as Cap

    @Cap.requires(Cap.Sequencing, Cap.StateAccess)
    def count(m):
        return Cap.inspect(m, len)
"""

from __future__ import annotations

from strata.capability._types import (
    Sequencing,
    StateAccess,
    ErrorSignal,
)
from strata.capability._require import (
    MissingCapabilityError,
    provides,
    require,
    requires,
    capabilities_of,
)
from strata.capability._derived import (
    fmap,
    then,
    traverse,
    sequence,
    when,
    inspect,
    attempt,
    ensure,
)

__all__ = (
    "Sequencing",
    "StateAccess",
    "ErrorSignal",
    "MissingCapabilityError",
    "provides",
    "require",
    "requires",
    "capabilities_of",
    "fmap",
    "then",
    "traverse",
    "sequence",
    "when",
    "inspect",
    "attempt",
    "ensure",
)
