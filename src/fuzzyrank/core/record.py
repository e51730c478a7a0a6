"""Record entity representing one searchable item."""

from typing import Any

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    A searchable record: an identity plus a mapping of field name to value.

    `transliterations` holds Latin-normalized copies of matched fields. It is
    filled only during a transliterated pass and never serialized.
    """
    id: str | int
    fields: dict[str, Any] = Field(default_factory=dict)
    transliterations: dict[str, str] = Field(default_factory=dict, exclude=True)

    model_config = {
        "frozen": False,
    }

    @classmethod
    def from_dict(cls, data: dict[str, Any], id_field: str = "id") -> "Record":
        """Build a record from a flat row as returned by a data store."""
        fields = dict(data)
        record_id = fields.pop(id_field)
        return cls(id=record_id, fields=fields)

    def get_field(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def set_field(self, name: str, value: Any) -> None:
        self.fields[name] = value

    def text(self, name: str, transliterated: bool = False) -> str | None:
        """Return the matchable text for a field, or None if missing or empty."""
        source = self.transliterations if transliterated else self.fields
        value = source.get(name)
        if not isinstance(value, str) or not value:
            return None
        return value

    def to_dict(self) -> dict[str, Any]:
        """Flatten back to a row with the identity under `id`."""
        return {"id": self.id, **self.fields}
