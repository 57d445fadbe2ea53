"""Fair-remainder allocation of a bill among participants."""

import logging
import random
import threading
from collections.abc import Sequence

from .exceptions import (
    ConfigurationError,
    InvalidAmount,
    InvalidParticipantCount,
    RoundingError,
)
from .models import AllocationRequest, AllocationResult, Participant

logger = logging.getLogger(__name__)

# 250.00 in a currency with two decimal places
DEFAULT_ROUNDING_UNIT = 25000

_thread_state = threading.local()


def default_rng() -> random.Random:
    """Return this thread's generator, creating it on first use."""
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = random.Random()
        _thread_state.rng = rng
    return rng


def _validate(total: int, count: int, rounding_unit: int) -> None:
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise InvalidAmount(total)
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidParticipantCount(count)
    if (
        isinstance(rounding_unit, bool)
        or not isinstance(rounding_unit, int)
        or rounding_unit < 1
    ):
        raise ConfigurationError(
            f"Rounding unit must be a positive whole number of minor units "
            f"(got {rounding_unit!r})"
        )


def _distribute(
    total: int,
    names: Sequence[str | None],
    rounding_unit: int,
    rng: random.Random | None,
) -> AllocationResult:
    """
    Split ``total`` among ``len(names)`` participants.

    Input must already have passed ``_validate``.

    Steps:
    1. Give everyone the largest multiple of ``rounding_unit`` that fits
    2. Shuffle the participant indices
    3. Hand out the remainder round-robin over the shuffled order, at most
       ``rounding_unit`` per step; the last step may be a smaller fragment

    Args:
        total: Amount to split, in minor units
        names: One entry per participant (None for unnamed)
        rounding_unit: Granularity of baseline shares and adjustments
        rng: Source of the shuffle; defaults to a per-thread generator

    Returns:
        The allocation result

    Raises:
        RoundingError: If the shares don't add up to ``total``
    """
    count = len(names)

    base = total // count // rounding_unit * rounding_unit
    remainder = total - base * count

    shares = [base] * count
    received_extra = [False] * count

    order = list(range(count))
    (rng or default_rng()).shuffle(order)

    left = remainder
    position = 0
    while left > 0:
        extra = min(rounding_unit, left)
        index = order[position]
        shares[index] += extra
        received_extra[index] = True
        left -= extra
        position = (position + 1) % count

    if sum(shares) != total:
        raise RoundingError(
            f"Allocated {sum(shares)} minor units but the total is {total}"
        )

    recipients = [i for i in order if received_extra[i]]
    logger.debug(
        f"Split {total} among {count}: base {base}, remainder {remainder} "
        f"to participants {recipients}"
    )

    return AllocationResult(
        total=total,
        rounding_unit=rounding_unit,
        base_share=base,
        remainder=remainder,
        participants=tuple(
            Participant(
                index=i,
                name=names[i],
                share=shares[i],
                received_extra=received_extra[i],
            )
            for i in range(count)
        ),
    )


def allocate(
    total: int,
    count: int,
    *,
    rounding_unit: int = DEFAULT_ROUNDING_UNIT,
    rng: random.Random | None = None,
) -> AllocationResult:
    """
    Split ``total`` minor units among ``count`` unnamed participants.

    Raises:
        InvalidAmount: If ``total`` is negative
        InvalidParticipantCount: If ``count`` is less than 1
        ConfigurationError: If ``rounding_unit`` is not positive
    """
    _validate(total, count, rounding_unit)
    return _distribute(total, [None] * count, rounding_unit, rng)


def allocate_among(
    total: int,
    names: Sequence[str],
    *,
    rounding_unit: int = DEFAULT_ROUNDING_UNIT,
    rng: random.Random | None = None,
) -> AllocationResult:
    """Split ``total`` among named participants, keeping the given order."""
    names = list(names)
    _validate(total, len(names), rounding_unit)
    return _distribute(total, names, rounding_unit, rng)


def split(
    request: AllocationRequest,
    *,
    rounding_unit: int = DEFAULT_ROUNDING_UNIT,
    rng: random.Random | None = None,
) -> AllocationResult:
    """Run an allocation for a prepared request."""
    if request.names is not None:
        return allocate_among(
            request.total, request.names, rounding_unit=rounding_unit, rng=rng
        )
    return allocate(
        request.total,
        request.participant_count,
        rounding_unit=rounding_unit,
        rng=rng,
    )
