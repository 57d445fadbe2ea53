"""Pydantic domain models for BillSplit."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ============================================================================
# Request Models
# ============================================================================


class AllocationRequest(BaseModel):
    """A single split request, built fresh for each user action.

    Amounts are integer minor units. When ``names`` is given the participant
    count is taken from it; otherwise ``participant_count`` is used as-is.
    Range checks are left to the allocator so that bad input surfaces as
    InvalidAmount / InvalidParticipantCount rather than a ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    total: int
    participant_count: int
    names: tuple[str, ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _count_from_names(cls, data):
        if isinstance(data, dict) and data.get("names") is not None:
            data = dict(data)
            data.setdefault("participant_count", len(data["names"]))
        return data

    @model_validator(mode="after")
    def _names_match_count(self):
        if self.names is not None and len(self.names) != self.participant_count:
            raise ValueError(
                f"participant_count ({self.participant_count}) does not match "
                f"number of names ({len(self.names)})"
            )
        return self


# ============================================================================
# Result Models
# ============================================================================


class Participant(BaseModel):
    """One participant's outcome of an allocation run."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    name: str | None = None  # opaque, carried through unchanged
    share: int = Field(ge=0)  # minor units
    received_extra: bool = False


class AllocationResult(BaseModel):
    """Immutable outcome of splitting ``total`` among the participants.

    ``base_share`` is the baseline every participant got; ``remainder`` is what
    was handed out on top of it, in increments of at most ``rounding_unit``.
    """

    model_config = ConfigDict(frozen=True)

    total: int
    rounding_unit: int
    base_share: int
    remainder: int
    participants: tuple[Participant, ...]

    @property
    def shares(self) -> list[int]:
        """Shares in participant order."""
        return [p.share for p in self.participants]

    @property
    def allocated_total(self) -> int:
        """Sum of all shares (always equal to ``total``)."""
        return sum(p.share for p in self.participants)

    @property
    def extra_recipients(self) -> list[Participant]:
        """Participants who absorbed part of the remainder."""
        return [p for p in self.participants if p.received_extra]
