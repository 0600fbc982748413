"""
Field validators shared by the pydantic schemas.

Each validator is a pure function of the proposed value: it returns the
(possibly normalized) value or raises ``ValueError`` with the reason.
"""
from __future__ import annotations

from typing import List, Optional

NAME_MAX = 256
NOTE_MAX = 2048
URI_MAX = 512
CLASS_MAX = 512
CLASS_LIST_MAX = 128


def name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not value.strip():
        raise ValueError("can't be blank")
    if len(value) > NAME_MAX:
        raise ValueError(f"should be at most {NAME_MAX} characters")
    return value


def note(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) > NOTE_MAX:
        raise ValueError(f"should be at most {NOTE_MAX} characters")
    return value


def uri(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not value.strip():
        raise ValueError("can't be blank")
    if len(value) > URI_MAX:
        raise ValueError(f"should be at most {URI_MAX} characters")
    return value


def class_list(value: Optional[List[str]]) -> Optional[List[str]]:
    """Validate classification tags; duplicates are dropped keeping order."""
    if value is None:
        return None
    if len(value) > CLASS_LIST_MAX:
        raise ValueError(f"should have at most {CLASS_LIST_MAX} items")
    seen = []
    for tag in value:
        if not tag or not tag.strip():
            raise ValueError("can't contain blank items")
        if len(tag) > CLASS_MAX:
            raise ValueError(f"items should be at most {CLASS_MAX} characters")
        if tag not in seen:
            seen.append(tag)
    return seen
