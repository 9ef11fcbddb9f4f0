"""Base sentence parsing, checksums and typed field access."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Optional

from .tagblock import TagBlock, parse_tag_block
from .types import NullFloat, NullInt, Time, parse_lat_long, parse_time

SENTENCE_START = "$"
SENTENCE_START_ENCAPSULATED = "!"
PROPRIETARY_SENTENCE_PREFIX = "P"
QUERY_SENTENCE_POSTFIX = "Q"
FIELD_SEP = ","
CHECKSUM_SEP = "*"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DEC_INT = re.compile(r"[+-]?[0-9]+")
_HEX_INT = re.compile(r"[+-]?[0-9a-fA-F]+")


class NMEAError(ValueError):
    """Raised when a sentence cannot be parsed."""


class NotSupportedError(NMEAError):
    """Raised when no parser exists for a sentence prefix."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"nmea: sentence prefix '{prefix}' not supported")
        self.prefix = prefix

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NotSupportedError) and other.prefix == self.prefix

    def __hash__(self) -> int:
        return hash(self.prefix)


@dataclass
class BaseSentence:
    """The common parts of every NMEA sentence."""

    talker: str = ""
    type: str = ""
    fields: list[str] = field(default_factory=list)
    checksum: str = ""
    raw: str = ""
    tag_block: TagBlock = field(default_factory=TagBlock)

    def prefix(self) -> str:
        """Talker id followed by the sentence type."""
        return self.talker + self.type

    def data_type(self) -> str:
        """The sentence type."""
        return self.type

    def talker_id(self) -> str:
        """The talker id."""
        return self.talker

    def __str__(self) -> str:
        return self.raw


def _parse_int(s: str, pattern: re.Pattern, base: int) -> int:
    if not pattern.fullmatch(s):
        raise ValueError(s)
    value = int(s, base)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(s)
    return value


def _parse_float(s: str) -> float:
    if not s.isascii() or "_" in s or s != s.strip():
        raise ValueError(s)
    return float(s)


class FieldReader:
    """Reads typed values from a sentence's fields, keeping the first error."""

    def __init__(self, sentence: BaseSentence) -> None:
        self.sentence = sentence
        self.fields = sentence.fields
        self.error: Optional[NMEAError] = None

    def _fail(self, context: str, value: str) -> None:
        if self.error is None:
            self.error = NMEAError(
                f"nmea: {self.sentence.prefix()} invalid {context}: {value}"
            )

    def assert_type(self, type_name: str) -> None:
        """Record an error unless the sentence has the given type."""
        if self.sentence.type != type_name:
            self._fail("type", self.sentence.type)

    def string(self, index: int, context: str) -> str:
        """The raw field value."""
        if not 0 <= index < len(self.fields):
            self._fail(context, "index out of range")
            return ""
        return self.fields[index]

    def enum_string(self, index: int, context: str, *args: str) -> str:
        """The field value, which must be empty or one of ``args``."""
        s = self.string(index, context)
        if s == "" or s in args:
            return s
        self._fail(context, s)
        return ""

    def float64(self, index: int, context: str) -> float:
        """The field as a float; 0 when empty."""
        s = self.string(index, context)
        if s == "":
            return 0.0
        try:
            return _parse_float(s)
        except ValueError:
            self._fail(context, s)
            return 0.0

    def int64(self, index: int, context: str) -> int:
        """The field as a decimal integer; 0 when empty."""
        s = self.string(index, context)
        if s == "":
            return 0
        try:
            return _parse_int(s, _DEC_INT, 10)
        except ValueError:
            self._fail(context, s)
            return 0

    def hex_int64(self, index: int, context: str) -> int:
        """The field as a hexadecimal integer; 0 when empty."""
        s = self.string(index, context)
        if s == "":
            return 0
        try:
            return _parse_int(s, _HEX_INT, 16)
        except ValueError:
            self._fail(context, s)
            return 0

    def null_int64(self, index: int, context: str) -> NullInt:
        """The field as an optional integer."""
        s = self.string(index, context)
        if s == "":
            return NullInt()
        try:
            return NullInt(_parse_int(s, _DEC_INT, 10), True)
        except ValueError:
            self._fail(context, s)
            return NullInt()

    def null_float64(self, index: int, context: str) -> NullFloat:
        """The field as an optional float."""
        s = self.string(index, context)
        if s == "":
            return NullFloat()
        try:
            return NullFloat(_parse_float(s), True)
        except ValueError:
            self._fail(context, s)
            return NullFloat()

    def lat_long(self, value_index: int, dir_index: int, context: str) -> float:
        """A coordinate made of a value field and a direction field."""
        value = self.string(value_index, context)
        direction = self.string(dir_index, context)
        if value == "" and direction == "":
            return 0.0
        try:
            result = parse_lat_long(f"{value} {direction}")
        except ValueError as exc:
            self._fail(context, str(exc))
            return 0.0
        if direction in ("N", "S") and not -90.0 <= result <= 90.0:
            self._fail(context, "latitude is not in range (-90, 90)")
        elif direction in ("W", "E") and not -180.0 <= result <= 180.0:
            self._fail(context, "longitude is not in range (-180, 180)")
        return result

    def time(self, index: int, context: str) -> Time:
        """The field as a wall clock time."""
        s = self.string(index, context)
        try:
            return parse_time(s)
        except ValueError:
            self._fail(context, s)
            return Time()

    def six_bit_ascii_armour(self, index: int, fill_bits: int, context: str) -> bytes:
        """Decode a six-bit ASCII armoured payload into one byte per bit."""
        payload = self.string(index, "encoded payload").encode("utf-8")
        if not 0 <= fill_bits < 6:
            self._fail(context, "fill bits")
            return b""
        num_bits = len(payload) * 6 - fill_bits
        if num_bits < 0:
            self._fail(context, "num bits")
            return b""
        bits: list[int] = []
        for v in payload:
            if v < 48 or v >= 120 or 88 <= v < 96:
                self._fail(context, "data byte")
                return b""
            v -= 48
            if v > 40:
                v -= 8
            bits.extend((v >> j) & 1 for j in range(5, -1, -1))
        return bytes(bits[:num_bits])


def checksum(s: str) -> str:
    """XOR of all bytes of ``s`` as two upper-case hex digits."""
    return "%02X" % reduce(lambda acc, b: acc ^ b, s.encode("utf-8"), 0)


def check_crc(sentence: BaseSentence, raw_fields: str) -> None:
    """Raise unless the sentence checksum matches its fields."""
    if sentence.checksum == "":
        raise NMEAError("nmea: sentence does not contain checksum separator")
    computed = checksum(raw_fields)
    if computed != sentence.checksum:
        raise NMEAError(
            f"nmea: sentence checksum mismatch [{computed} != {sentence.checksum}]"
        )


def parse_prefix(prefix: str) -> tuple[str, str]:
    """Split a sentence address into talker id and sentence type."""
    if prefix == "":
        raise NMEAError("nmea: sentence prefix is empty")
    if prefix[0] == PROPRIETARY_SENTENCE_PREFIX:
        return PROPRIETARY_SENTENCE_PREFIX, prefix[1:]
    if len(prefix) == 5:
        if prefix[4] == QUERY_SENTENCE_POSTFIX:
            return prefix[:2], QUERY_SENTENCE_POSTFIX
        return prefix[:2], prefix[2:]
    return "", prefix


PrefixParser = Callable[[str], "tuple[str, str]"]
CRCChecker = Callable[[BaseSentence, str], None]
TagBlockHandler = Callable[[TagBlock], None]


def parse_base_sentence(
    raw: str,
    prefix_parser: Optional[PrefixParser] = None,
    crc_checker: Optional[CRCChecker] = None,
    on_tag_block: Optional[TagBlockHandler] = None,
) -> BaseSentence:
    """Parse the envelope of a sentence: tag block, address, fields and checksum."""
    raw = raw.strip()
    if raw == "":
        raise NMEAError("nmea: can not parse empty input")
    tag_block, tag_len = parse_tag_block(raw)
    if tag_len > 0 and on_tag_block is not None:
        on_tag_block(tag_block)
    raw = raw[tag_len:]

    if not raw or raw[0] not in (SENTENCE_START, SENTENCE_START_ENCAPSULATED):
        raise NMEAError("nmea: sentence does not start with a '$' or '!'")
    body, sep, check = raw[1:].partition(CHECKSUM_SEP)
    checksum_raw = check.upper() if sep else ""
    fields = body.split(FIELD_SEP)

    talker, typ = (prefix_parser or parse_prefix)(fields[0])
    sentence = BaseSentence(
        talker=talker,
        type=typ,
        fields=fields[1:],
        checksum=checksum_raw,
        raw=raw,
        tag_block=tag_block,
    )
    (crc_checker or check_crc)(sentence, body)
    return sentence