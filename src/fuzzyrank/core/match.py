"""Match entities produced by the weighted matcher."""

from pydantic import BaseModel, ConfigDict, Field

from ..config.models import RecordTypeDescriptor
from .record import Record

# Contribution of a key that did not match; never wins a max() against a real score.
NO_MATCH_SCORE = float("-inf")


class FieldMatch(BaseModel):
    """Result of matching one field.

    Attributes:
        raw_score: Score reported by the fuzzy primitive (higher is better)
        target: The text that was matched
    """

    raw_score: float
    target: str

    model_config = ConfigDict(frozen=True)


class RecordMatch(BaseModel):
    """A record together with its per-field matches and aggregate score.

    `record` is held by reference: it is the same object the fetcher returned.
    """

    record: Record
    field_matches: list[FieldMatch | None]
    aggregate_score: float

    model_config = ConfigDict(frozen=True)

    @property
    def record_id(self) -> str | int:
        return self.record.id

    def __lt__(self, other: "RecordMatch") -> bool:
        """Enable sorting by score (descending)."""
        return self.aggregate_score > other.aggregate_score


class SearchResult(BaseModel):
    """Ranked matches for one record type.

    Attributes:
        descriptor: The record type that was searched
        ranked: Matches sorted by aggregate score, highest first
        total: Number of matches before the limit was applied
    """

    descriptor: RecordTypeDescriptor
    ranked: list[RecordMatch] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def records(self) -> list[Record]:
        return [match.record for match in self.ranked]
