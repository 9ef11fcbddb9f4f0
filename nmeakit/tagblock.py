"""NMEA 4.10 tag block parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import reduce

TAG_BLOCK_SEP = "\\"
_CHECKSUM_SEP = "*"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")

_INT_TAGS = {"c": "time", "n": "line_count", "r": "relative_time"}
_STR_TAGS = {"d": "destination", "g": "grouping", "s": "source", "t": "text"}


class TagBlockError(ValueError):
    """Raised when a tag block is malformed."""


@dataclass(frozen=True)
class TagBlock:
    """Metadata carried in a tag block in front of a sentence."""

    time: int = 0
    relative_time: int = 0
    destination: str = ""
    grouping: str = ""
    line_count: int = 0
    source: str = ""
    text: str = field(default="")


def _checksum(s: str) -> str:
    return "%02X" % reduce(lambda acc, b: acc ^ b, s.encode("utf-8"), 0)


def _parse_int64(raw: str) -> int:
    if _SIGNED_DIGITS.fullmatch(raw):
        value = int(raw)
        if _INT64_MIN <= value <= _INT64_MAX:
            return value
    raise TagBlockError(f"nmea: tagblock unable to parse uint64 [{raw}]")


def parse_tag_block(raw: str) -> tuple[TagBlock, int]:
    """Parse a tag block at the start of ``raw``.

    Returns the tag block and the length of the tag block prefix; the length
    is 0 (with an empty tag block) when there is none.
    """
    start = raw.find(TAG_BLOCK_SEP)
    if start == -1:
        return TagBlock(), 0
    end = raw.rfind(TAG_BLOCK_SEP)
    if end <= start:
        raise TagBlockError("nmea: sentence tag block is missing '\\' at the end")
    tags = raw[start + 1 : end]
    sep = tags.find(_CHECKSUM_SEP)
    if sep == -1:
        raise TagBlockError("nmea: tagblock does not contain checksum separator")

    fields_raw = tags[:sep]
    checksum_raw = tags[sep + 1 :].upper()
    computed = _checksum(fields_raw)
    if computed != checksum_raw:
        raise TagBlockError(f"nmea: tagblock checksum mismatch [{computed} != {checksum_raw}]")

    values: dict[str, int | str] = {}
    for item in fields_raw.split(","):
        key, found, value = item.partition(":")
        if not found:
            raise TagBlockError(
                f"nmea: tagblock field is malformed (should be <key>:<value>) [{item}]"
            )
        if key in _INT_TAGS:
            values[_INT_TAGS[key]] = _parse_int64(value)
        elif key in _STR_TAGS:
            values[_STR_TAGS[key]] = value
    return TagBlock(**values), end + 1