"""Heading, radar target and text sentences."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .base import FIELD_SEP, BaseSentence, FieldReader, NMEAError
from .types import (
    DISTANCE_UNIT_KILOMETRE,
    DISTANCE_UNIT_NAUTICAL_MILE,
    DISTANCE_UNIT_STATUTE_MILE,
    Time,
)

TYPE_THS = "THS"
TYPE_TLB = "TLB"
TYPE_TLL = "TLL"
TYPE_TTD = "TTD"
TYPE_TTM = "TTM"
TYPE_TXT = "TXT"

AUTONOMOUS_THS = "A"
ESTIMATED_THS = "E"
MANUAL_THS = "M"
SIMULATOR_THS = "S"
INVALID_THS = "V"

RADAR_TARGET_LOST = "L"
RADAR_TARGET_ACQUISITION = "Q"
RADAR_TARGET_TRACKING = "T"

_TARGET_STATUSES = (RADAR_TARGET_LOST, RADAR_TARGET_ACQUISITION, RADAR_TARGET_TRACKING)


def _base_values(base: BaseSentence) -> dict:
    return {f.name: getattr(base, f.name) for f in fields(BaseSentence)}


def _finish(reader: FieldReader, sentence):
    if reader.error is not None:
        raise reader.error
    return sentence


@dataclass
class THS(BaseSentence):
    """Vessel heading in degrees true with status."""

    heading: float = 0.0
    status: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "THS":
        r = FieldReader(base)
        r.assert_type(TYPE_THS)
        return _finish(r, cls(
            **_base_values(base),
            heading=r.float64(0, "heading"),
            status=r.enum_string(
                1, "status", AUTONOMOUS_THS, ESTIMATED_THS, MANUAL_THS,
                SIMULATOR_THS, INVALID_THS,
            ),
        ))


@dataclass(frozen=True)
class TLBTarget:
    """A target number and its label."""

    target_number: float = 0.0
    target_label: str = ""


@dataclass
class TLB(BaseSentence):
    """Target labels."""

    targets: list[TLBTarget] = field(default_factory=list)

    @classmethod
    def from_base(cls, base: BaseSentence) -> "TLB":
        r = FieldReader(base)
        r.assert_type(TYPE_TLB)
        count = len(r.fields)
        if count < 2:
            raise NMEAError("TLB is missing fields for parsing target pairs")
        if count % 2 != 0:
            raise NMEAError("TLB data set field count is not exactly dividable by 2")
        targets = [
            TLBTarget(r.float64(i, "target number"), r.string(i + 1, "target label"))
            for i in range(0, count, 2)
        ]
        return _finish(r, cls(**_base_values(base), targets=targets))


@dataclass
class TLL(BaseSentence):
    """Target latitude and longitude."""

    target_number: int = 0
    target_latitude: float = 0.0
    target_longitude: float = 0.0
    target_name: str = ""
    time_utc: Time = field(default_factory=Time)
    target_status: str = ""
    reference_target: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "TLL":
        r = FieldReader(base)
        r.assert_type(TYPE_TLL)
        return _finish(r, cls(
            **_base_values(base),
            target_number=r.int64(0, "target number"),
            target_latitude=r.lat_long(1, 2, "latitude"),
            target_longitude=r.lat_long(3, 4, "longitude"),
            target_name=r.string(5, "target name"),
            time_utc=r.time(6, "UTC time"),
            target_status=r.enum_string(7, "target status", *_TARGET_STATUSES),
            reference_target=r.enum_string(8, "reference target", "R"),
        ))


@dataclass
class TTD(BaseSentence):
    """Tracked target data sent by radars."""

    num_fragments: int = 0
    fragment_number: int = 0
    message_id: int = 0
    payload: bytes = b""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "TTD":
        r = FieldReader(base)
        r.assert_type(TYPE_TTD)
        num_fragments = r.hex_int64(0, "number of fragments")
        fragment_number = r.hex_int64(1, "fragment number")
        message_id = r.int64(2, "sequence number")
        fill = r.int64(4, "number of padding bits")
        return _finish(r, cls(
            **_base_values(base),
            num_fragments=num_fragments,
            fragment_number=fragment_number,
            message_id=message_id,
            payload=r.six_bit_ascii_armour(3, fill, "payload"),
        ))


@dataclass
class TTM(BaseSentence):
    """Tracked target message."""

    target_number: int = 0
    target_distance: float = 0.0
    bearing: float = 0.0
    bearing_type: str = ""
    target_speed: float = 0.0
    target_course: float = 0.0
    course_type: str = ""
    distance_cpa: float = 0.0
    time_cpa: float = 0.0
    speed_units: str = ""
    target_name: str = ""
    target_status: str = ""
    reference_target: str = ""
    time_utc: Time = field(default_factory=Time)
    type_of_acquisition: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "TTM":
        r = FieldReader(base)
        r.assert_type(TYPE_TTM)
        return _finish(r, cls(
            **_base_values(base),
            target_number=r.int64(0, "target number"),
            target_distance=r.float64(1, "target Distance"),
            bearing=r.float64(2, "bearing"),
            bearing_type=r.enum_string(3, "bearing type", "T", "R"),
            target_speed=r.float64(4, "target speed"),
            target_course=r.float64(5, "target course"),
            course_type=r.enum_string(6, "course type", "T", "R"),
            distance_cpa=r.float64(7, "distance CPA"),
            time_cpa=r.float64(8, "time of CPA"),
            speed_units=r.enum_string(
                9, "speed units", DISTANCE_UNIT_KILOMETRE,
                DISTANCE_UNIT_NAUTICAL_MILE, DISTANCE_UNIT_STATUTE_MILE,
            ),
            target_name=r.string(10, "target name"),
            target_status=r.enum_string(11, "target status", *_TARGET_STATUSES),
            reference_target=r.enum_string(12, "reference target", "R"),
            time_utc=r.time(13, "UTC time"),
            type_of_acquisition=r.enum_string(14, "type of acquisition", "A", "M", "R"),
        ))


@dataclass
class TXT(BaseSentence):
    """Short human readable text message."""

    total_number: int = 0
    number: int = 0
    id: int = 0
    message: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "TXT":
        r = FieldReader(base)
        r.assert_type(TYPE_TXT)
        return _finish(r, cls(
            **_base_values(base),
            total_number=r.int64(0, "total number of sentences"),
            number=r.int64(1, "sentence number"),
            id=r.int64(2, "sentence identifier"),
            message=FIELD_SEP.join(r.fields[3:]),
        ))