"""Latin transliteration backed by Unidecode."""

from unidecode import UnidecodeError, unidecode

from ..errors import TransliterationError
from .base import BaseTransliterator


class LatinTransliterator(BaseTransliterator):
    """ASCII transliteration: "Café" -> "Cafe", "Zürich" -> "Zurich".

    Args:
        errors: Unidecode policy for characters without a mapping
            ("ignore", "replace", "preserve" or "strict")
        replace_str: Substitute used with errors="replace"
    """

    def __init__(self, errors: str = "ignore", replace_str: str = "?"):
        self.errors = errors
        self.replace_str = replace_str

    def to_latin(self, text: str) -> str:
        if not isinstance(text, str):
            raise TransliterationError(
                "Only strings can be transliterated",
                details={"type": type(text).__name__},
            )
        try:
            return unidecode(text, errors=self.errors, replace_str=self.replace_str)
        except UnidecodeError as e:
            raise TransliterationError(
                "No transliteration for character",
                details={"index": e.index},
                original_error=e,
            ) from e
