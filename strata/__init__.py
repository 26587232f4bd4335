"""
strata — logic written once against capabilities, run in any effect stack.

    from strata import capability as Cap   # Sequencing, StateAccess, ErrorSignal
    from strata import monads as M         # Representations and layers
    from strata import stack as S          # Build and peel stacks
    from strata import store as KV         # Key-value store example domain
"""

from strata import capability
from strata import monads
from strata import stack
from strata import store
from strata import lift
from strata import laws
from strata._types import (
    Eff,
    Unit,
    Pair,
    Result,
    Ok,
    Error,
    Option,
    Some,
    Nothing,
    LazyCoroResult,
)

__version__ = "0.1.0"

__all__ = (
    "capability",
    "monads",
    "stack",
    "store",
    "lift",
    "laws",
    "Eff",
    "Unit",
    "Pair",
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
)
