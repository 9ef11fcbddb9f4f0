"""AIS payload, voyage, waypoint, date/time and water speed sentences."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .base import BaseSentence, FieldReader
from .types import (
    BEARING_MAGNETIC,
    BEARING_TRUE,
    SPEED_KNOTS,
    STATUS_INVALID,
    STATUS_VALID,
    NullFloat,
    NullInt,
    Time,
)

TYPE_VDM = "VDM"
TYPE_VDO = "VDO"
TYPE_VSD = "VSD"
TYPE_WPL = "WPL"
TYPE_ZDA = "ZDA"
TYPE_VBW = "VBW"
TYPE_VDR = "VDR"
TYPE_VHW = "VHW"

_STATUSES = (STATUS_VALID, STATUS_INVALID)


def _base_values(base: BaseSentence) -> dict:
    return {f.name: getattr(base, f.name) for f in fields(BaseSentence)}


def _finish(reader: FieldReader, sentence):
    if reader.error is not None:
        raise reader.error
    return sentence


@dataclass
class VDMVDO(BaseSentence):
    """Encapsulated binary payload, most commonly AIS data."""

    num_fragments: int = 0
    fragment_number: int = 0
    message_id: int = 0
    channel: str = ""
    payload: bytes = b""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VDMVDO":
        r = FieldReader(base)
        num_fragments = r.int64(0, "number of fragments")
        fragment_number = r.int64(1, "fragment number")
        message_id = r.int64(2, "sequence number")
        channel = r.string(3, "channel ID")
        fill = r.int64(5, "number of padding bits")
        return _finish(r, cls(
            **_base_values(base),
            num_fragments=num_fragments,
            fragment_number=fragment_number,
            message_id=message_id,
            channel=channel,
            payload=r.six_bit_ascii_armour(4, fill, "payload"),
        ))


@dataclass
class VSD(BaseSentence):
    """AIS voyage static data; absent values mean unchanged."""

    type_of_ship_and_cargo: NullInt = field(default_factory=NullInt)
    static_draught_meters: NullFloat = field(default_factory=NullFloat)
    persons_on_board: NullInt = field(default_factory=NullInt)
    destination: str = ""
    estimated_arrival_time: NullInt = field(default_factory=NullInt)
    estimated_arrival_day: NullInt = field(default_factory=NullInt)
    estimated_arrival_month: NullInt = field(default_factory=NullInt)
    navigational_status: NullInt = field(default_factory=NullInt)
    regional_application: NullInt = field(default_factory=NullInt)

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VSD":
        r = FieldReader(base)
        r.assert_type(TYPE_VSD)
        return _finish(r, cls(
            **_base_values(base),
            type_of_ship_and_cargo=r.null_int64(0, "type of ship and cargo"),
            static_draught_meters=r.null_float64(1, "maximum present static draught"),
            persons_on_board=r.null_int64(2, "persons on-board"),
            destination=r.string(3, "destination"),
            estimated_arrival_time=r.null_int64(4, "estimated arrival time"),
            estimated_arrival_day=r.null_int64(5, "estimated arrival day"),
            estimated_arrival_month=r.null_int64(6, "estimated arrival month"),
            navigational_status=r.null_int64(7, "navigational status"),
            regional_application=r.null_int64(8, "Regional application"),
        ))


@dataclass
class WPL(BaseSentence):
    """Waypoint location."""

    latitude: float = 0.0
    longitude: float = 0.0
    ident: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "WPL":
        r = FieldReader(base)
        r.assert_type(TYPE_WPL)
        return _finish(r, cls(
            **_base_values(base),
            latitude=r.lat_long(0, 1, "latitude"),
            longitude=r.lat_long(2, 3, "longitude"),
            ident=r.string(4, "ident of nth waypoint"),
        ))


@dataclass
class ZDA(BaseSentence):
    """UTC date and time with local zone offset."""

    time: Time = field(default_factory=Time)
    day: int = 0
    month: int = 0
    year: int = 0
    offset_hours: int = 0
    offset_minutes: int = 0

    @classmethod
    def from_base(cls, base: BaseSentence) -> "ZDA":
        r = FieldReader(base)
        r.assert_type(TYPE_ZDA)
        return _finish(r, cls(
            **_base_values(base),
            time=r.time(0, "time"),
            day=r.int64(1, "day"),
            month=r.int64(2, "month"),
            year=r.int64(3, "year"),
            offset_hours=r.int64(4, "offset (hours)"),
            offset_minutes=r.int64(5, "offset (minutes)"),
        ))


@dataclass
class VBW(BaseSentence):
    """Dual ground/water speed."""

    longitudinal_water_speed_knots: float = 0.0
    transverse_water_speed_knots: float = 0.0
    water_speed_status_valid: bool = False
    water_speed_status: str = ""

    longitudinal_ground_speed_knots: float = 0.0
    transverse_ground_speed_knots: float = 0.0
    ground_speed_status_valid: bool = False
    ground_speed_status: str = ""

    stern_traverse_water_speed_knots: float = 0.0
    stern_traverse_water_speed_status_valid: bool = False
    stern_traverse_water_speed_status: str = ""

    stern_traverse_ground_speed_knots: float = 0.0
    stern_traverse_ground_speed_status_valid: bool = False
    stern_traverse_ground_speed_status: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VBW":
        r = FieldReader(base)
        r.assert_type(TYPE_VBW)
        values = dict(
            longitudinal_water_speed_knots=r.float64(0, "longitudinal water speed"),
            transverse_water_speed_knots=r.float64(1, "transverse water speed"),
            water_speed_status_valid=r.string(2, "water speed status valid") == STATUS_VALID,
            water_speed_status=r.enum_string(2, "water speed status", *_STATUSES),
            longitudinal_ground_speed_knots=r.float64(3, "longitudinal ground speed"),
            transverse_ground_speed_knots=r.float64(4, "transverse ground speed"),
            ground_speed_status_valid=r.string(5, "ground speed status valid") == STATUS_VALID,
            ground_speed_status=r.enum_string(5, "ground speed status", *_STATUSES),
        )
        if len(r.fields) > 6:
            values.update(
                stern_traverse_water_speed_knots=r.float64(6, "stern traverse water speed"),
                stern_traverse_water_speed_status_valid=(
                    r.string(7, "stern water speed status valid") == STATUS_VALID
                ),
                stern_traverse_water_speed_status=r.enum_string(
                    7, "stern water speed status", *_STATUSES
                ),
                stern_traverse_ground_speed_knots=r.float64(8, "stern traverse ground speed"),
                stern_traverse_ground_speed_status_valid=(
                    r.string(9, "stern ground speed status valid") == STATUS_VALID
                ),
                stern_traverse_ground_speed_status=r.enum_string(
                    9, "stern ground speed status", *_STATUSES
                ),
            )
        return _finish(r, cls(**_base_values(base), **values))


@dataclass
class VDR(BaseSentence):
    """Set and drift of the current."""

    set_degrees_true: float = 0.0
    set_degrees_true_unit: str = ""
    set_degrees_magnetic: float = 0.0
    set_degrees_magnetic_unit: str = ""
    drift_knots: float = 0.0
    drift_unit: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VDR":
        r = FieldReader(base)
        r.assert_type(TYPE_VDR)
        return _finish(r, cls(
            **_base_values(base),
            set_degrees_true=r.float64(0, "true set degrees"),
            set_degrees_true_unit=r.enum_string(1, "true set unit", BEARING_TRUE),
            set_degrees_magnetic=r.float64(2, "magnetic set degrees"),
            set_degrees_magnetic_unit=r.enum_string(3, "magnetic set unit", BEARING_MAGNETIC),
            drift_knots=r.float64(4, "drift knots"),
            drift_unit=r.enum_string(5, "drift unit", SPEED_KNOTS),
        ))


@dataclass
class VHW(BaseSentence):
    """Water speed and heading."""

    true_heading: float = 0.0
    magnetic_heading: float = 0.0
    speed_through_water_knots: float = 0.0
    speed_through_water_kph: float = 0.0

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VHW":
        r = FieldReader(base)
        r.assert_type(TYPE_VHW)
        return _finish(r, cls(
            **_base_values(base),
            true_heading=r.float64(0, "true heading"),
            magnetic_heading=r.float64(2, "magnetic heading"),
            speed_through_water_knots=r.float64(4, "speed through water in knots"),
            speed_through_water_kph=r.float64(6, "speed through water in kilometers per hour"),
        ))