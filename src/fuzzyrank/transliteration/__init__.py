"""Transliteration and merging of the transliterated pass."""

from .base import BaseTransliterator
from .latin import LatinTransliterator
from .merge import TransliterationMergeEngine

__all__ = [
    "BaseTransliterator",
    "LatinTransliterator",
    "TransliterationMergeEngine",
]
