"""
locale-checker

Reports translation keys that exist in one language's namespace file but are
missing from another language's file of the same name, and can rewrite the
files with their keys sorted.
"""

from .checker import CompletenessChecker, find_missing_keys
from .config import CheckerConfig
from .loader import TreeLoader
from .stack import KeyStack

__version__ = "0.1.0"

__all__ = [
    "CheckerConfig",
    "CompletenessChecker",
    "KeyStack",
    "TreeLoader",
    "find_missing_keys",
]
