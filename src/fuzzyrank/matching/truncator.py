"""Field truncation applied before matching.

Matching cost grows with candidate length, so long free-text fields are cut
to a fixed number of characters before any pass runs. The tail of a very
long field rarely decides a match.
"""

from collections.abc import Iterable

from loguru import logger

from ..core.record import Record


def truncate_fields(
    records: Iterable[Record], keys: Iterable[str], character_limit: int | None
) -> int:
    """Cut configured fields to `character_limit` characters, in place.

    Fields that are missing, empty, not strings or not listed in `keys` are
    left untouched. Truncating twice with the same limit changes nothing.

    Args:
        records: Records to mutate
        keys: Field names eligible for truncation
        character_limit: Maximum length; None disables truncation

    Returns:
        Number of field values that were shortened
    """
    if character_limit is None:
        return 0

    key_names = list(keys)
    shortened = 0
    for record in records:
        for name in key_names:
            value = record.fields.get(name)
            if not isinstance(value, str) or not value:
                continue
            if len(value) > character_limit:
                record.fields[name] = value[:character_limit]
                shortened += 1

    logger.debug(f"Truncated {shortened} field value(s) to {character_limit} characters")
    return shortened
