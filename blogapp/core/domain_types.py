"""Domain Types — enums shared across layers.

Invariants:
    - Page states encoded as an Enum, never raw strings
"""

from enum import Enum


class PageState(str, Enum):
    """Browser page lifecycle. Only a reload returns to LOGGED_OUT."""
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"
