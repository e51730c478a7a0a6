"""Configuration for searchable record types and global settings."""

from .loader import load_descriptors, load_descriptors_file
from .models import FieldWeight, MatchOptions, MergeStrategy, RecordTypeDescriptor
from .settings import Settings, load_settings, settings

__all__ = [
    "FieldWeight",
    "MatchOptions",
    "MergeStrategy",
    "RecordTypeDescriptor",
    "Settings",
    "load_settings",
    "settings",
    "load_descriptors",
    "load_descriptors_file",
]
