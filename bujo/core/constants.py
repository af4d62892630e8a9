"""
Application-wide constants.

Centralize magic strings here so the authorization gate, the
label resolver and the settings layer agree on the same values.
"""

from enum import Enum


# ========================================
# Content Types
# ========================================

class ContentType(str, Enum):
    """
    Kinds of content an authorization check can be about.

    Usage:
        content_type = ContentType.LABEL
        print(content_type == "LABEL")  # True
    """

    LABEL = "LABEL"
    TASK = "TASK"
    TRANSACTION = "TRANSACTION"
    NOTE = "NOTE"
    PROJECT = "PROJECT"


# ========================================
# Operations
# ========================================

class Operation(str, Enum):
    """Operations a requester may attempt on a piece of content."""

    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


# ========================================
# Missing Label Policy
# ========================================

class MissingLabelPolicy(str, Enum):
    """
    What label resolution does with an id that no longer resolves.

    An item may still reference a label removed by a concurrent delete.
    """

    DROP = "drop"
    """Remove the id from the item's labels (logged at WARNING)."""

    PLACEHOLDER = "placeholder"
    """Keep the position with a LabelView flagged as missing."""

    FAIL = "fail"
    """Raise ResourceNotFoundError."""


# ========================================
# Grouping
# ========================================

DEFAULT_TIMEZONE = "UTC"
