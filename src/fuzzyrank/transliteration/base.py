"""Transliterator interface."""

from abc import ABC, abstractmethod


class BaseTransliterator(ABC):
    """Maps text to a Latin-script, diacritic-folded approximation."""

    @abstractmethod
    def to_latin(self, text: str) -> str:
        """Transliterate text.

        Raises:
            TransliterationError: If the text cannot be processed
        """
        pass

    def __call__(self, text: str) -> str:
        return self.to_latin(text)
