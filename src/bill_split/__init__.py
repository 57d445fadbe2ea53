"""BillSplit - Split a bill fairly, spreading the rounding remainder at random."""

__version__ = "0.1.0"

from .allocator import DEFAULT_ROUNDING_UNIT, allocate, allocate_among, split
from .config import Settings, load_settings
from .exceptions import (
    AllocationError,
    BillSplitError,
    ConfigurationError,
    InvalidAmount,
    InvalidParticipantCount,
    RoundingError,
)
from .models import AllocationRequest, AllocationResult, Participant
from .money import format_amount, parse_amount, to_minor_units

__all__ = [
    "DEFAULT_ROUNDING_UNIT",
    "allocate",
    "allocate_among",
    "split",
    "Settings",
    "load_settings",
    "AllocationError",
    "BillSplitError",
    "ConfigurationError",
    "InvalidAmount",
    "InvalidParticipantCount",
    "RoundingError",
    "AllocationRequest",
    "AllocationResult",
    "Participant",
    "format_amount",
    "parse_amount",
    "to_minor_units",
]
