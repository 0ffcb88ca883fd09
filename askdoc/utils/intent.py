"""Question parsing that decides which stored files a question refers to."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

COMPARE_PATTERN = re.compile(
    r"compare (the )?file (about|with) (.+?) (and|with) (the )?file (about|with) (.+)",
    re.IGNORECASE,
)

# Checked in order; the first phrase present wins.
SWITCH_PHRASES = (
    ("first file", 0),
    ("second file", 1),
)
COMPARE_MODE_PHRASE = "both files"


@dataclass(frozen=True)
class CompareTopics:
    first_topic: str
    second_topic: str


@dataclass(frozen=True)
class SwitchTo:
    index: int


@dataclass(frozen=True)
class SetCompareMode:
    pass


@dataclass(frozen=True)
class NoIntent:
    pass


Intent = Union[CompareTopics, SwitchTo, SetCompareMode, NoIntent]


def extract_file_topics(question: str):
    """Return the two lowercased topics of a "compare the file about X and the file about Y" request."""
    match = COMPARE_PATTERN.search(question or "")
    if not match:
        return None
    return match.group(3).lower(), match.group(7).lower()


def parse_intent(question: str) -> Intent:
    """Classify a question into the file-selection intent it expresses."""
    topics = extract_file_topics(question)
    if topics is not None:
        return CompareTopics(*topics)

    lowered = (question or "").lower()
    for phrase, index in SWITCH_PHRASES:
        if phrase in lowered:
            return SwitchTo(index)

    if COMPARE_MODE_PHRASE in lowered:
        return SetCompareMode()

    return NoIntent()
