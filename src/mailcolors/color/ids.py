# mailcolors/color/ids.py
"""
Colour object identifiers and the policy of each regex-backed rule class.
"""

from enum import IntEnum
from typing import Dict, NamedTuple


class ColorId(IntEnum):
    """Every colour object of the display surface (closed set)."""

    ATTACHMENT = 1
    ATTACH_HEADERS = 2
    BODY = 3
    BOLD = 4
    ERROR = 5
    HDRDEFAULT = 6
    HEADER = 7
    INDEX = 8
    INDEX_AUTHOR = 9
    INDEX_FLAGS = 10
    INDEX_SUBJECT = 11
    INDEX_TAG = 12
    INDICATOR = 13
    MARKERS = 14
    MESSAGE = 15
    NORMAL = 16
    QUOTED = 17
    SEARCH = 18
    SIGNATURE = 19
    STATUS = 20
    TILDE = 21
    TREE = 22
    UNDERLINE = 23


class RuleClassPolicy(NamedTuple):
    """How a rule class compares and compiles its patterns."""

    case_sensitive: bool
    structured: bool


# Only these classes keep a regex rule list
RULE_CLASSES: Dict[ColorId, RuleClassPolicy] = {
    ColorId.ATTACH_HEADERS: RuleClassPolicy(case_sensitive=True, structured=False),
    ColorId.BODY: RuleClassPolicy(case_sensitive=True, structured=False),
    ColorId.HEADER: RuleClassPolicy(case_sensitive=False, structured=False),
    ColorId.INDEX: RuleClassPolicy(case_sensitive=True, structured=True),
    ColorId.INDEX_AUTHOR: RuleClassPolicy(case_sensitive=True, structured=True),
    ColorId.INDEX_FLAGS: RuleClassPolicy(case_sensitive=True, structured=True),
    ColorId.INDEX_SUBJECT: RuleClassPolicy(case_sensitive=True, structured=True),
    ColorId.INDEX_TAG: RuleClassPolicy(case_sensitive=True, structured=True),
    ColorId.STATUS: RuleClassPolicy(case_sensitive=True, structured=False),
}

# Classes handled by the generic (no submatch) dispatcher
COLOR_LIST_CLASSES = frozenset(RULE_CLASSES) - {ColorId.STATUS}

# Classes handled by the status dispatcher
STATUS_LIST_CLASSES = frozenset({ColorId.STATUS})


def class_name(class_id) -> str:
    """Printable name for a colour id, tolerating foreign values."""
    name = getattr(class_id, "name", None)
    return name.lower() if name else str(class_id)
