"""Default query validator."""

from collections.abc import Iterable

from loguru import logger

from ..config.models import RecordTypeDescriptor
from ..config.settings import settings
from ..errors import InvalidQueryError
from .base import BaseQueryValidator


class DescriptorQueryValidator(BaseQueryValidator):
    """Validates searches against the record type configuration.

    A request is rejected when:
    - `searchable_uids` is given and the record type is not in it
    - a locale is passed for a record type that is not localized
    - the locale is not one of `supported_locales` (when that set is non-empty)

    Args:
        searchable_uids: Record type uids allowed to be searched (None = any)
        supported_locales: Accepted locales, defaults to settings.SUPPORTED_LOCALES
    """

    def __init__(
        self,
        searchable_uids: Iterable[str] | None = None,
        supported_locales: Iterable[str] | None = None,
    ):
        self.searchable_uids = set(searchable_uids) if searchable_uids is not None else None
        self.supported_locales = set(
            supported_locales if supported_locales is not None else settings.SUPPORTED_LOCALES
        )

    async def validate(self, descriptor: RecordTypeDescriptor, locale: str | None = None) -> None:
        details = {"uid": descriptor.uid, "locale": locale}

        if self.searchable_uids is not None and descriptor.uid not in self.searchable_uids:
            raise InvalidQueryError(f"Record type '{descriptor.uid}' is not searchable", details=details)

        if locale is None:
            return

        if not descriptor.localized:
            raise InvalidQueryError(
                f"A locale was specified but '{descriptor.uid}' is not localized", details=details
            )

        if self.supported_locales and locale not in self.supported_locales:
            raise InvalidQueryError(f"Locale '{locale}' is not supported", details=details)

        logger.debug(f"Validated search on {descriptor.uid} (locale={locale})")
