"""Coordinate, time and date value types and their text formats."""

from __future__ import annotations

import math
import re
import unicodedata
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

STATUS_VALID = "A"
STATUS_INVALID = "V"

TEMPERATURE_CELSIUS = "C"
TEMPERATURE_FAHRENHEIT = "F"
TEMPERATURE_KELVIN = "K"

DISTANCE_UNIT_KILOMETRE = "K"
DISTANCE_UNIT_NAUTICAL_MILE = "N"
DISTANCE_UNIT_STATUTE_MILE = "S"
DISTANCE_UNIT_METRE = "M"
DISTANCE_UNIT_FEET = "f"
DISTANCE_UNIT_FATHOM = "F"

UNIT_AMPERE = "A"
UNIT_BARS = "B"
UNIT_BINARY = "B"
UNIT_CELSIUS = TEMPERATURE_CELSIUS
UNIT_FAHRENHEIT = TEMPERATURE_FAHRENHEIT
UNIT_DEGREES = "D"
UNIT_HERTZ = "H"
UNIT_LITRES_PER_SECOND = "I"
UNIT_KELVIN = TEMPERATURE_KELVIN
UNIT_KILOGRAM_PER_CUBIC_METRE = "K"
UNIT_METERS = DISTANCE_UNIT_METRE
UNIT_NEWTONS = "N"
UNIT_CUBIC_METERS = "M"
UNIT_REVOLUTIONS_PER_MINUTE = "R"
UNIT_PERCENT = "P"
UNIT_PASCAL = "P"
UNIT_PARTS_PER_THOUSAND = "S"
UNIT_VOLTS = "V"

SPEED_KNOTS = "N"
SPEED_METER_PER_SECOND = "M"
SPEED_KILOMETER_PER_HOUR = "K"

HEADING_MAGNETIC = "M"
HEADING_TRUE = "T"

BEARING_MAGNETIC = "M"
BEARING_TRUE = "T"

FAA_MODE_AUTONOMOUS = "A"
FAA_MODE_DIFFERENTIAL = "D"
FAA_MODE_ESTIMATED = "E"
FAA_MODE_RTK_FLOAT = "F"
FAA_MODE_MANUAL_INPUT = "M"
FAA_MODE_DATA_NOT_VALID = "N"
FAA_MODE_PRECISE = "P"
FAA_MODE_RTK_INTEGER = "R"
FAA_MODE_SIMULATED = "S"

NAV_STATUS_SAFE = "S"
NAV_STATUS_CAUTION = "C"
NAV_STATUS_UNSAFE = "U"
NAV_STATUS_NOT_VALID = "V"

DEGREES = "\u00b0"
MINUTES = "'"
SECONDS = '"'
POINT = "."
NORTH = "N"
SOUTH = "S"
EAST = "E"
WEST = "W"
LEFT = "L"
RIGHT = "R"

_DIGITS = re.compile(r"[0-9]+")
_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_TIME_RE = re.compile(r"[0-9]{6}(\.[0-9]*)?")


def _parse_float(s: str) -> float:
    """Parse a float strictly: ASCII only, no surrounding space, no underscores."""
    if not s or not s.isascii() or "_" in s or s != s.strip():
        raise ValueError(f"invalid syntax: {s!r}")
    return float(s)


def _atoi(s: str) -> int:
    if not _SIGNED_DIGITS.fullmatch(s):
        raise ValueError(f"invalid syntax: {s!r}")
    return int(s)


def _is_number(ch: str) -> bool:
    return unicodedata.category(ch).startswith("N")


@dataclass(frozen=True)
class Time:
    """Wall clock time of day; ``valid`` is False for an empty field."""

    valid: bool = False
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __str__(self) -> str:
        seconds = self.second + self.millisecond / 1000
        return "%02d:%02d:%07.4f" % (self.hour, self.minute, seconds)


@dataclass(frozen=True)
class Date:
    """Calendar date with a two-digit year; ``valid`` is False for an empty field."""

    valid: bool = False
    dd: int = 0
    mm: int = 0
    yy: int = 0

    def __str__(self) -> str:
        return "%02d/%02d/%02d" % (self.dd, self.mm, self.yy)


@dataclass(frozen=True)
class NullFloat:
    """A float that may be absent."""

    value: float = 0.0
    valid: bool = False


@dataclass(frozen=True)
class NullInt:
    """An integer that may be absent."""

    value: int = 0
    valid: bool = False


def parse_lat_long(s: str) -> float:
    """Parse a coordinate given in DMS, GPS or decimal form."""
    for parser in (parse_dms, parse_gps, parse_decimal):
        try:
            return parser(s)
        except ValueError:
            continue
    raise ValueError(f"cannot parse [{s}], unknown format")


def parse_gps(s: str) -> float:
    """Parse a GPS/NMEA coordinate such as ``15113.4322 S``."""
    parts = s.split(" ")
    if len(parts) != 2:
        raise ValueError(f"invalid format: {s}")
    number, direction = parts
    try:
        value = _parse_float(number)
    except ValueError as exc:
        raise ValueError(f"parse error: {exc}") from None
    degrees = math.floor(value / 100)
    minutes = value - degrees * 100
    value = degrees + minutes / 60
    if direction in (NORTH, EAST):
        return value
    if direction in (SOUTH, WEST):
        return 0 - value
    raise ValueError(f"invalid direction [{direction}]")


def format_gps(value: float) -> str:
    """Format a coordinate as degrees and decimal minutes, GPS style."""
    degrees = math.floor(abs(value))
    fraction = (abs(value) - degrees) * 60
    padding = "0" if fraction < 10 else ""
    return "%d%s%.4f" % (int(degrees), padding, fraction)


def parse_decimal(s: str) -> float:
    """Parse a decimal coordinate such as ``151.196019``."""
    try:
        value = _parse_float(s)
    except ValueError:
        raise ValueError("parse error (not decimal coordinate)") from None
    if s[0] != "-" and len(s.split(".")[0]) > 3:
        raise ValueError("parse error (not decimal coordinate)")
    return value


def parse_dms(s: str) -> float:
    """Parse a coordinate in degrees, minutes and seconds, e.g. ``33° 23' 22"``."""
    degrees = 0
    minutes = 0
    seconds = 0.0
    end_number = False
    buffer = ""
    for ch in s:
        if _is_number(ch) or ch == POINT:
            if end_number:
                raise ValueError("parse error (no delimiter)")
            buffer += ch
        elif ch.isspace() and buffer:
            end_number = True
        elif ch == DEGREES:
            if not _DIGITS.fullmatch(buffer):
                raise ValueError("parse error (degrees)")
            degrees = int(buffer)
            buffer = ""
            end_number = False
        elif ch == MINUTES:
            if not _DIGITS.fullmatch(buffer):
                raise ValueError("parse error (minutes)")
            minutes = int(buffer)
            buffer = ""
            end_number = False
        elif ch == SECONDS:
            try:
                seconds = _parse_float(buffer)
            except ValueError:
                raise ValueError("parse error (seconds)") from None
            buffer = ""
            end_number = False
        elif ch.isspace():
            continue
        else:
            raise ValueError(f"parse error (unknown symbol [{ch.encode('utf-8')[0]}])")
    if buffer:
        raise ValueError(f"parse error (trailing data [{buffer}])")
    return degrees + minutes / 60.0 + seconds / 60.0 / 60.0


def format_dms(value: float) -> str:
    """Format a coordinate as degrees, minutes and seconds."""
    val = abs(value)
    degrees = int(math.floor(val))
    minutes = int(math.floor(60 * (val - degrees)))
    seconds = 3600 * (val - degrees - (minutes / 60))
    return "%d\u00b0 %d' %f\"" % (degrees, minutes, seconds)


def parse_time(s: str) -> Time:
    """Parse ``hhmmss.ss`` wall clock time; an empty string gives an invalid time."""
    if s == "":
        return Time()
    if not _TIME_RE.fullmatch(s):
        raise ValueError(f"parse time: expected hhmmss.ss format, got '{s}'")
    hour = int(s[:2])
    minute = int(s[2:4])
    frac, whole = math.modf(float(s[4:]))
    return Time(True, hour, minute, int(whole), int(math.floor(frac * 1000 + 0.5)))


def parse_date(ddmmyy: str) -> Date:
    """Parse a ``ddmmyy`` date; an empty string gives an invalid date."""
    if ddmmyy == "":
        return Date()
    if len(ddmmyy) != 6:
        raise ValueError(f"parse date: expected ddmmyy format, got '{ddmmyy}'")
    try:
        dd = _atoi(ddmmyy[0:2])
        mm = _atoi(ddmmyy[2:4])
        yy = _atoi(ddmmyy[4:6])
    except ValueError:
        raise ValueError(ddmmyy) from None
    return Date(True, dd, mm, yy)


def date_time(reference_year: int, date: Date, time: Time) -> datetime | None:
    """Combine a date and time into a UTC datetime.

    The century comes from ``reference_year`` (the current year when 0).
    Returns None when either value is invalid. Out-of-range fields are normalised.
    """
    if not date.valid or not time.valid:
        return None
    if reference_year == 0:
        reference_year = datetime.now(timezone.utc).year
    century = math.trunc(reference_year / 100) * 100
    month_index = date.mm - 1
    year = century + date.yy + month_index // 12
    month = month_index % 12 + 1
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    return start + timedelta(
        days=date.dd - 1,
        hours=time.hour,
        minutes=time.minute,
        seconds=time.second,
        milliseconds=time.millisecond,
    )


def lat_dir(value: float) -> str:
    """Return the latitude hemisphere symbol."""
    return SOUTH if value < 0.0 else NORTH


def lon_dir(value: float) -> str:
    """Return the longitude hemisphere symbol."""
    return WEST if value < 0.0 else EAST