"""Log, wind, track, transducer and cross-track error sentences."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .base import BaseSentence, FieldReader, NMEAError
from .types import (
    DISTANCE_UNIT_KILOMETRE,
    DISTANCE_UNIT_METRE,
    DISTANCE_UNIT_NAUTICAL_MILE,
    DISTANCE_UNIT_STATUTE_MILE,
    LEFT,
    RIGHT,
    SPEED_KILOMETER_PER_HOUR,
    SPEED_KNOTS,
    SPEED_METER_PER_SECOND,
    UNIT_AMPERE,
    UNIT_BARS,
    UNIT_BINARY,
    UNIT_CELSIUS,
    UNIT_CUBIC_METERS,
    UNIT_DEGREES,
    UNIT_HERTZ,
    UNIT_KELVIN,
    UNIT_KILOGRAM_PER_CUBIC_METRE,
    UNIT_LITRES_PER_SECOND,
    UNIT_METERS,
    UNIT_NEWTONS,
    UNIT_PARTS_PER_THOUSAND,
    UNIT_PASCAL,
    UNIT_PERCENT,
    UNIT_REVOLUTIONS_PER_MINUTE,
    UNIT_VOLTS,
)

TYPE_VLW = "VLW"
TYPE_VPW = "VPW"
TYPE_VTG = "VTG"
TYPE_VWR = "VWR"
TYPE_VWT = "VWT"
TYPE_XDR = "XDR"
TYPE_XTE = "XTE"

TRANSDUCER_ANGULAR_DISPLACEMENT_XDR = "A"
TRANSDUCER_TEMPERATURE_XDR = "C"
TRANSDUCER_DEPTH_XDR = "D"
TRANSDUCER_FREQUENCY_XDR = "F"
TRANSDUCER_HUMIDITY_XDR = "H"
TRANSDUCER_FORCE_XDR = "N"
TRANSDUCER_PRESSURE_XDR = "P"
TRANSDUCER_FLOW_XDR = "R"
TRANSDUCER_ABSOLUTE_HUMIDITY_XDR = "B"
TRANSDUCER_GENERIC_XDR = "G"
TRANSDUCER_CURRENT_XDR = "I"
TRANSDUCER_SALINITY_XDR = "L"
TRANSDUCER_SWITCH_VALVE_XDR = "S"
TRANSDUCER_TACHOMETER_XDR = "T"
TRANSDUCER_VOLTAGE_XDR = "U"
TRANSDUCER_VOLUME_XDR = "V"

# XTE warning flags: general warning (A = clear/not used, V = set),
# lock warning (V = set, A = clear).
STATUS_WARNING_A_CLEAR_OR_NOT_USED = "A"
STATUS_WARNING_A_SET = "V"
STATUS_WARNING_B_SET = "V"
STATUS_WARNING_B_CLEAR = "A"

_TRANSDUCER_TYPES = (
    TRANSDUCER_ANGULAR_DISPLACEMENT_XDR,
    TRANSDUCER_TEMPERATURE_XDR,
    TRANSDUCER_DEPTH_XDR,
    TRANSDUCER_FREQUENCY_XDR,
    TRANSDUCER_HUMIDITY_XDR,
    TRANSDUCER_FORCE_XDR,
    TRANSDUCER_PRESSURE_XDR,
    TRANSDUCER_FLOW_XDR,
    TRANSDUCER_ABSOLUTE_HUMIDITY_XDR,
    TRANSDUCER_GENERIC_XDR,
    TRANSDUCER_CURRENT_XDR,
    TRANSDUCER_SALINITY_XDR,
    TRANSDUCER_SWITCH_VALVE_XDR,
    TRANSDUCER_TACHOMETER_XDR,
    TRANSDUCER_VOLTAGE_XDR,
    TRANSDUCER_VOLUME_XDR,
)

_MEASUREMENT_UNITS = (
    UNIT_AMPERE,
    UNIT_BARS,
    UNIT_BINARY,
    UNIT_CELSIUS,
    UNIT_DEGREES,
    UNIT_HERTZ,
    UNIT_LITRES_PER_SECOND,
    UNIT_KELVIN,
    UNIT_KILOGRAM_PER_CUBIC_METRE,
    UNIT_NEWTONS,
    UNIT_METERS,
    UNIT_CUBIC_METERS,
    UNIT_REVOLUTIONS_PER_MINUTE,
    UNIT_PERCENT,
    UNIT_PASCAL,
    UNIT_PARTS_PER_THOUSAND,
    UNIT_VOLTS,
)


def _base_values(base: BaseSentence) -> dict:
    return {f.name: getattr(base, f.name) for f in fields(BaseSentence)}


def _finish(reader: FieldReader, sentence):
    if reader.error is not None:
        raise reader.error
    return sentence


@dataclass
class VLW(BaseSentence):
    """Distance travelled through water (and over ground, NMEA 3+)."""

    total_in_water: float = 0.0
    total_in_water_unit: str = ""
    since_reset_in_water: float = 0.0
    since_reset_in_water_unit: str = ""
    total_on_ground: float = 0.0
    total_on_ground_unit: str = ""
    since_reset_on_ground: float = 0.0
    since_reset_on_ground_unit: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VLW":
        r = FieldReader(base)
        r.assert_type(TYPE_VLW)
        nm = DISTANCE_UNIT_NAUTICAL_MILE
        values = dict(
            total_in_water=r.float64(0, "total cumulative water distance"),
            total_in_water_unit=r.enum_string(1, "total cumulative water distance unit", nm),
            since_reset_in_water=r.float64(2, "water distance since reset"),
            since_reset_in_water_unit=r.enum_string(3, "water distance since reset unit", nm),
        )
        if len(r.fields) > 4:
            values.update(
                total_on_ground=r.float64(4, "total cumulative ground distance"),
                total_on_ground_unit=r.enum_string(
                    5, "total cumulative ground distance unit", nm
                ),
                since_reset_on_ground=r.float64(6, "ground distance since reset"),
                since_reset_on_ground_unit=r.enum_string(
                    7, "ground distance since reset unit", nm
                ),
            )
        return _finish(r, cls(**_base_values(base), **values))


@dataclass
class VPW(BaseSentence):
    """Speed measured parallel to wind."""

    speed_knots: float = 0.0
    speed_knots_unit: str = ""
    speed_mps: float = 0.0
    speed_mps_unit: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VPW":
        r = FieldReader(base)
        r.assert_type(TYPE_VPW)
        return _finish(r, cls(
            **_base_values(base),
            speed_knots=r.float64(0, "wind speed in knots"),
            speed_knots_unit=r.enum_string(1, "wind speed in knots unit", SPEED_KNOTS),
            speed_mps=r.float64(2, "wind speed in meters per second"),
            speed_mps_unit=r.enum_string(
                3, "wind speed in meters per second unit", SPEED_METER_PER_SECOND
            ),
        ))


@dataclass
class VTG(BaseSentence):
    """Track made good and ground speed."""

    true_track: float = 0.0
    magnetic_track: float = 0.0
    ground_speed_knots: float = 0.0
    ground_speed_kph: float = 0.0
    faa_mode: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VTG":
        r = FieldReader(base)
        r.assert_type(TYPE_VTG)
        values = dict(
            true_track=r.float64(0, "true track"),
            magnetic_track=r.float64(2, "magnetic track"),
            ground_speed_knots=r.float64(4, "ground speed (knots)"),
            ground_speed_kph=r.float64(6, "ground speed (km/h)"),
        )
        if len(r.fields) > 8:
            # Not an enum: some devices send proprietary values.
            values["faa_mode"] = r.string(8, "FAA mode")
        return _finish(r, cls(**_base_values(base), **values))


def _wind_values(r: FieldReader, angle_context: str, bow_context: str) -> dict:
    return dict(
        angle=r.float64(0, angle_context),
        direction_bow=r.enum_string(1, bow_context, LEFT, RIGHT),
        speed_knots=r.float64(2, "wind speed in knots"),
        speed_knots_unit=r.enum_string(3, "wind speed in knots unit", SPEED_KNOTS),
        speed_mps=r.float64(4, "wind speed in meters per second"),
        speed_mps_unit=r.enum_string(
            5, "wind speed in meters per second unit", SPEED_METER_PER_SECOND
        ),
        speed_kph=r.float64(6, "wind speed in kilometers per hour"),
        speed_kph_unit=r.enum_string(
            7, "wind speed in kilometers per hour unit", SPEED_KILOMETER_PER_HOUR
        ),
    )


@dataclass
class VWR(BaseSentence):
    """Relative wind speed and angle."""

    measured_angle: float = 0.0
    measured_direction_bow: str = ""
    speed_knots: float = 0.0
    speed_knots_unit: str = ""
    speed_mps: float = 0.0
    speed_mps_unit: str = ""
    speed_kph: float = 0.0
    speed_kph_unit: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VWR":
        r = FieldReader(base)
        r.assert_type(TYPE_VWR)
        values = _wind_values(r, "measured wind angle", "measured wind direction to bow")
        return _finish(r, cls(
            **_base_values(base),
            measured_angle=values.pop("angle"),
            measured_direction_bow=values.pop("direction_bow"),
            **values,
        ))


@dataclass
class VWT(BaseSentence):
    """True wind speed and angle."""

    true_angle: float = 0.0
    true_direction_bow: str = ""
    speed_knots: float = 0.0
    speed_knots_unit: str = ""
    speed_mps: float = 0.0
    speed_mps_unit: str = ""
    speed_kph: float = 0.0
    speed_kph_unit: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "VWT":
        r = FieldReader(base)
        r.assert_type(TYPE_VWT)
        values = _wind_values(r, "true wind angle", "true wind direction to bow")
        return _finish(r, cls(
            **_base_values(base),
            true_angle=values.pop("angle"),
            true_direction_bow=values.pop("direction_bow"),
            **values,
        ))


@dataclass(frozen=True)
class XDRMeasurement:
    """One transducer measurement; the unit may be empty."""

    transducer_type: str = ""
    value: float = 0.0
    unit: str = ""
    transducer_name: str = ""


@dataclass
class XDR(BaseSentence):
    """Transducer measurements."""

    measurements: list[XDRMeasurement] = field(default_factory=list)

    @classmethod
    def from_base(cls, base: BaseSentence) -> "XDR":
        r = FieldReader(base)
        r.assert_type(TYPE_XDR)
        if len(r.fields) % 4 != 0:
            raise NMEAError("XDR field count is not exactly dividable by 4")
        measurements = [
            XDRMeasurement(
                transducer_type=r.enum_string(i, "transducer type", *_TRANSDUCER_TYPES),
                value=r.float64(i + 1, "measurement value"),
                unit=r.enum_string(i + 2, "measurement unit", *_MEASUREMENT_UNITS),
                transducer_name=r.string(i + 3, "transducer name"),
            )
            for i in range(0, len(r.fields), 4)
        ]
        return _finish(r, cls(**_base_values(base), measurements=measurements))


@dataclass
class XTE(BaseSentence):
    """Measured cross-track error."""

    status_general_warning: str = ""
    status_lock_warning: str = ""
    cross_track_error_magnitude: float = 0.0
    direction_to_steer: str = ""
    cross_track_units: str = ""
    faa_mode: str = ""

    @classmethod
    def from_base(cls, base: BaseSentence) -> "XTE":
        r = FieldReader(base)
        r.assert_type(TYPE_XTE)
        values = dict(
            status_general_warning=r.enum_string(
                0, "general warning",
                STATUS_WARNING_A_CLEAR_OR_NOT_USED, STATUS_WARNING_A_SET,
            ),
            status_lock_warning=r.enum_string(
                1, "lock warning", STATUS_WARNING_B_SET, STATUS_WARNING_B_CLEAR
            ),
            cross_track_error_magnitude=r.float64(2, "cross track error magnitude"),
            direction_to_steer=r.enum_string(3, "direction to steer", LEFT, RIGHT),
            cross_track_units=r.enum_string(
                4, "cross track units", DISTANCE_UNIT_KILOMETRE,
                DISTANCE_UNIT_NAUTICAL_MILE, DISTANCE_UNIT_STATUTE_MILE,
                DISTANCE_UNIT_METRE,
            ),
        )
        if len(r.fields) > 5:
            # Not an enum: some devices send proprietary values.
            values["faa_mode"] = r.string(5, "FAA mode")
        return _finish(r, cls(**_base_values(base), **values))