"""Configuration models for searchable record types.

This module defines Pydantic models describing how one class of records is
matched: which fields are searched, how each field is weighted, and the
threshold/limit/truncation applied around the fuzzy-match primitive.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MergeStrategy(StrEnum):
    """How transliterated hits are folded into the primary ranking.

    Attributes:
        UNION: Replace weaker primary entries and insert records that only
            matched through transliteration.
        REPLACE_ONLY: Only replace existing primary entries; records found
            solely by the transliterated pass are dropped.
    """
    UNION = "union"
    REPLACE_ONLY = "replace_only"


class FieldWeight(BaseModel):
    """A searchable field and the bonus added to its raw match score.

    Attributes:
        name: Field name on the record
        weight: Signed value added to the field's raw score
    """

    name: str = Field(..., min_length=1)
    weight: float = 0.0

    model_config = ConfigDict(frozen=True)


class MatchOptions(BaseModel):
    """Options passed to the weighted matcher.

    Attributes:
        threshold: Minimum raw per-field score a record needs to be kept
        limit: Maximum number of ranked results
        keys: Ordered fields to match; index i lines up with sub-score i
        character_limit: Optional maximum field length before matching
    """

    threshold: float = 50.0
    limit: int = Field(default=100, ge=1)
    keys: tuple[FieldWeight, ...]
    character_limit: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_keys(self) -> "MatchOptions":
        if not self.keys:
            raise ValueError("keys must contain at least one field")
        names = [key.name for key in self.keys]
        if len(names) != len(set(names)):
            raise ValueError(f"keys must be unique, got {names}")
        return self

    @property
    def key_names(self) -> list[str]:
        return [key.name for key in self.keys]


class RecordTypeDescriptor(BaseModel):
    """Describes one class of searchable records.

    Immutable for the duration of a search.
    """

    uid: str = Field(..., min_length=1)
    model_name: str = Field(..., min_length=1)
    plural_name: str = Field(..., min_length=1)
    transliterate: bool = False
    localized: bool = False
    merge_strategy: MergeStrategy = MergeStrategy.UNION
    match_options: MatchOptions

    model_config = ConfigDict(frozen=True)
