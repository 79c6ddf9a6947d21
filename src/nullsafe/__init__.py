"""
nullsafe - absence-safe access to nested values

Fetch values through chains of accessors without checking every level for None.
"""

from nullsafe.accessor import (
    fetch_chain,
    fetch_chain_or_default,
    fetch_safe,
    fetch_safe_or_default,
    is_absence_error,
    is_chain_present,
    is_present,
)
from nullsafe.chain import Chain
from nullsafe.exceptions import AbsentValueError, InvalidChainError, NullSafeError

__version__ = "0.1.0"
__all__ = [
    "AbsentValueError",
    "Chain",
    "InvalidChainError",
    "NullSafeError",
    "fetch_chain",
    "fetch_chain_or_default",
    "fetch_safe",
    "fetch_safe_or_default",
    "is_absence_error",
    "is_chain_present",
    "is_present",
]
