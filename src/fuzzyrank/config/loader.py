"""Build record type descriptors from plugin-style configuration.

The accepted layout mirrors the search plugin config::

    {
        "contentTypes": [
            {
                "uid": "api::book.book",
                "modelName": "book",
                "pluralName": "books",
                "transliterate": true,
                "fuzzysortOptions": {
                    "characterLimit": 500,
                    "threshold": 40,
                    "limit": 15,
                    "keys": [
                        {"name": "title", "weight": 100},
                        {"name": "description", "weight": -100}
                    ]
                }
            }
        ]
    }
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import FieldWeight, MatchOptions, MergeStrategy, RecordTypeDescriptor
from .settings import Settings
from .settings import settings as default_settings


def _build_descriptor(entry: dict[str, Any], settings: Settings) -> RecordTypeDescriptor:
    if not isinstance(entry, dict):
        raise TypeError(f"content type must be a mapping, got {type(entry).__name__}")
    options = entry.get("fuzzysortOptions") or {}
    if not isinstance(options, dict):
        raise TypeError(f"'fuzzysortOptions' must be a mapping, got {type(options).__name__}")
    model_name = entry.get("modelName")
    plural_name = entry.get("pluralName") or (f"{model_name}s" if model_name else None)

    match_options = MatchOptions(
        threshold=options.get("threshold", settings.DEFAULT_THRESHOLD),
        limit=options.get("limit", settings.DEFAULT_LIMIT),
        character_limit=options.get("characterLimit"),
        keys=tuple(FieldWeight(**key) for key in options.get("keys", [])),
    )

    return RecordTypeDescriptor(
        uid=entry.get("uid"),
        model_name=model_name,
        plural_name=plural_name,
        transliterate=entry.get("transliterate", False),
        localized=entry.get("localized", False),
        merge_strategy=MergeStrategy(entry.get("mergeStrategy", MergeStrategy.UNION)),
        match_options=match_options,
    )


def load_descriptors(
    data: dict[str, Any], settings: Settings | None = None
) -> list[RecordTypeDescriptor]:
    """Validate a config mapping and return one descriptor per content type.

    Args:
        data: Parsed plugin configuration
        settings: Source of default threshold/limit (global settings if omitted)

    Returns:
        Descriptors in configuration order

    Raises:
        ConfigurationError: If the mapping is malformed
    """
    settings = settings or default_settings

    if not isinstance(data, dict):
        raise ConfigurationError("Search configuration must be a mapping")

    content_types = data.get("contentTypes")
    if not isinstance(content_types, list) or not content_types:
        raise ConfigurationError("'contentTypes' must be a non-empty list")

    descriptors = []
    for index, entry in enumerate(content_types):
        try:
            descriptors.append(_build_descriptor(entry, settings))
        except (ValidationError, ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid content type configuration at index {index}",
                details={"uid": entry.get("uid") if isinstance(entry, dict) else None},
                original_error=e,
            ) from e

    uids = [d.uid for d in descriptors]
    if len(uids) != len(set(uids)):
        raise ConfigurationError("Duplicate content type uid", details={"uids": uids})

    logger.info(f"Loaded {len(descriptors)} searchable record type(s): {uids}")
    return descriptors


def load_descriptors_file(path: str | Path, settings: Settings | None = None) -> list[RecordTypeDescriptor]:
    """Read a JSON config file and build descriptors from it."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read search configuration from {path}", original_error=e
        ) from e
    return load_descriptors(data, settings)
