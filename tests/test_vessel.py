import dataclasses

import pytest

from nmeakit.base import BaseSentence, NMEAError, parse_base_sentence
from nmeakit.types import NullFloat, NullInt, Time, parse_lat_long
from nmeakit.vessel import VBW, VDMVDO, VDR, VHW, VSD, WPL, ZDA

_EMPTY_BASE = {
    f.name: getattr(BaseSentence(), f.name) for f in dataclasses.fields(BaseSentence)
}


def _parse(cls, raw):
    return cls.from_base(parse_base_sentence(raw))


def _strip(sentence):
    return dataclasses.replace(sentence, **_EMPTY_BASE)


def _expect_error(cls, raw, message):
    with pytest.raises(NMEAError) as exc:
        _parse(cls, raw)
    assert str(exc.value) == message


PAYLOAD_SINGLE = bytes([
    0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 0, 1, 0, 0, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1, 1, 0, 0,
    0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 1, 0,
    1, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 1, 0, 1, 1, 1, 0,
    0, 1, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0, 0, 1, 1, 0, 0, 1, 0, 1, 0, 0,
    0, 1, 1, 0, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 1, 0,
    0, 0, 1, 1, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 1, 0, 0,
])

PAYLOAD_PADDED = bytes([
    0, 1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 0, 1, 1, 0, 1, 0, 0, 0, 1, 1,
    1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0, 1,
    0, 0, 1, 1, 0, 1, 0, 0, 1, 1, 0, 0, 0, 1, 0, 1, 0, 1, 1, 0, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0,
    0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 0, 0, 0, 1, 0, 1, 1, 1, 0, 0, 1, 0, 1, 1,
    0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
])


@pytest.mark.parametrize(
    "raw, expected",
    [
        (
            "!AIVDM,1,1,,A,13aGt0PP0jPN@9fMPKVDJgwfR>`<,0*55",
            VDMVDO(num_fragments=1, fragment_number=1, message_id=0, channel="A",
                   payload=PAYLOAD_SINGLE),
        ),
        (
            "!AIVDM,1,1,,A,H77nSfPh4U=<E`H4U8G;:222220,2*1F",
            VDMVDO(num_fragments=1, fragment_number=1, message_id=0, channel="A",
                   payload=PAYLOAD_PADDED),
        ),
        (
            "!AIVDM,2,2,4,B,00000000000,2*23",
            VDMVDO(num_fragments=2, fragment_number=2, message_id=4, channel="B",
                   payload=bytes(64)),
        ),
        (
            "!AIVDM,1,1,,1,,0*56",
            VDMVDO(num_fragments=1, fragment_number=1, message_id=0, channel="1",
                   payload=b""),
        ),
    ],
)
def test_vdm_good(raw, expected):
    assert _strip(_parse(VDMVDO, raw)) == expected


@pytest.mark.parametrize(
    "raw, message",
    [
        ("!AIVDM,x,1,,1,000 00,0*0F", "nmea: AIVDM invalid number of fragments: x"),
        ("!AIVDM,1,1,,1,000 00,0*46", "nmea: AIVDM invalid payload: data byte"),
        ("!AIVDM,1,1,,1,000,-3*48", "nmea: AIVDM invalid payload: fill bits"),
        ("!AIVDO,1,1,,1,000,20*56", "nmea: AIVDO invalid payload: fill bits"),
        ("!AIVDM,1,1,,1,,2*54", "nmea: AIVDM invalid payload: num bits"),
    ],
)
def test_vdm_errors(raw, message):
    _expect_error(VDMVDO, raw, message)


def test_vdm_keeps_base_sentence():
    m = _parse(VDMVDO, "!AIVDM,2,2,4,B,00000000000,2*23")
    assert m.prefix() == "AIVDM"
    assert m.fields == ["2", "2", "4", "B", "00000000000", "2"]
    assert str(m) == "!AIVDM,2,2,4,B,00000000000,2*23"


def test_vsd_good():
    m = _parse(VSD, "$RAVSD,0,4.5,6,@@@@@@@@@@@@@@@@@@@@,220516,01,02,8,*6E")
    assert _strip(m) == VSD(
        type_of_ship_and_cargo=NullInt(0, True),
        static_draught_meters=NullFloat(4.5, True),
        persons_on_board=NullInt(6, True),
        destination="@@@@@@@@@@@@@@@@@@@@",
        estimated_arrival_time=NullInt(220516, True),
        estimated_arrival_day=NullInt(1, True),
        estimated_arrival_month=NullInt(2, True),
        navigational_status=NullInt(8, True),
        regional_application=NullInt(0, False),
    )


@pytest.mark.parametrize(
    "raw, message",
    [
        ("$RAVSD,x,4.5,6,@@@@@@@@@@@@@@@@@@@@,220516,01,02,8,*26",
         "nmea: RAVSD invalid type of ship and cargo: x"),
        ("$RAVSD,0,4.x,6,@@@@@@@@@@@@@@@@@@@@,220516,01,02,8,*23",
         "nmea: RAVSD invalid maximum present static draught: 4.x"),
        ("$RAVSD,0,4.5,x,@@@@@@@@@@@@@@@@@@@@,220516,01,02,8,*20",
         "nmea: RAVSD invalid persons on-board: x"),
        ("$RAVSD,0,4.5,6,@@@@@@@@@@@@@@@@@@@@,22051x,01,02,8,*20",
         "nmea: RAVSD invalid estimated arrival time: 22051x"),
        ("$RAVSD,0,4.5,6,@@@@@@@@@@@@@@@@@@@@,220516,x1,02,8,*26",
         "nmea: RAVSD invalid estimated arrival day: x1"),
        ("$RAVSD,0,4.5,6,@@@@@@@@@@@@@@@@@@@@,220516,01,x2,8,*26",
         "nmea: RAVSD invalid estimated arrival month: x2"),
        ("$RAVSD,0,4.5,6,@@@@@@@@@@@@@@@@@@@@,220516,01,02,x,*2E",
         "nmea: RAVSD invalid navigational status: x"),
        ("$RAVSD,0,4.5,6,@@@@@@@@@@@@@@@@@@@@,220516,01,02,8,x*16",
         "nmea: RAVSD invalid Regional application: x"),
    ],
)
def test_vsd_errors(raw, message):
    _expect_error(VSD, raw, message)


@pytest.mark.parametrize(
    "raw, lat, lon",
    [
        ("$IIWPL,5503.4530,N,01037.2742,E,411*6F", "5503.4530 N", "01037.2742 E"),
        ("$IIWPL,3356.4650,S,15124.5567,E,411*73", "3356.4650 S", "15124.5567 E"),
    ],
)
def test_wpl_good(raw, lat, lon):
    m = _parse(WPL, raw)
    assert _strip(m) == WPL(
        latitude=parse_lat_long(lat), longitude=parse_lat_long(lon), ident="411"
    )


def test_wpl_southern_latitude_is_negative():
    m = _parse(WPL, "$IIWPL,3356.4650,S,15124.5567,E,411*73")
    assert m.latitude == pytest.approx(-33.94108, abs=0.001)
    assert m.longitude == pytest.approx(151.40928, abs=0.001)


@pytest.mark.parametrize(
    "raw, message",
    [
        ("$IIWPL,A,N,01037.2742,E,411*01",
         "nmea: IIWPL invalid latitude: cannot parse [A N], unknown format"),
        ("$IIWPL,5503.4530,N,A,E,411*36",
         "nmea: IIWPL invalid longitude: cannot parse [A E], unknown format"),
        ("$IIWPL,A,S,15124.5567,E,411*18",
         "nmea: IIWPL invalid latitude: cannot parse [A S], unknown format"),
        ("$IIWPL,3356.4650,S,A,E,411*2E",
         "nmea: IIWPL invalid longitude: cannot parse [A E], unknown format"),
    ],
)
def test_wpl_errors(raw, message):
    _expect_error(WPL, raw, message)


def test_zda_good():
    m = _parse(ZDA, "$GPZDA,172809.456,12,07,1996,00,00*57")
    assert _strip(m) == ZDA(
        time=Time(valid=True, hour=17, minute=28, second=9, millisecond=456),
        day=12,
        month=7,
        year=1996,
        offset_hours=0,
        offset_minutes=0,
    )


def test_zda_invalid_day():
    _expect_error(
        ZDA,
        "$GPZDA,220516,D,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*76",
        "nmea: GPZDA invalid day: D",
    )


def test_vbw_good():
    m = _parse(VBW, "$VMVBW,-7.1,0.1,A,,,V,,V,,V*65")
    assert _strip(m) == VBW(
        longitudinal_water_speed_knots=-7.1,
        transverse_water_speed_knots=0.1,
        water_speed_status_valid=True,
        water_speed_status="A",
        longitudinal_ground_speed_knots=0,
        transverse_ground_speed_knots=0,
        ground_speed_status_valid=False,
        ground_speed_status="V",
        stern_traverse_water_speed_knots=0,
        stern_traverse_water_speed_status_valid=False,
        stern_traverse_water_speed_status="V",
        stern_traverse_ground_speed_knots=0,
        stern_traverse_ground_speed_status_valid=False,
        stern_traverse_ground_speed_status="V",
    )


@pytest.mark.parametrize(
    "raw, message",
    [
        ("$VMVBW,x,0.1,A,,,V,,V,,V*18",
         "nmea: VMVBW invalid longitudinal water speed: x"),
        ("$VMVBW,0.1,x,A,0.3,0.4,A,0.5,A,0.6,A*0b",
         "nmea: VMVBW invalid transverse water speed: x"),
        ("$VMVBW,0.1,0.2,X,0.3,0.4,A,0.5,A,0.6,A*46",
         "nmea: VMVBW invalid water speed status: X"),
        ("$VMVBW,0.1,0.2,A,X,0.4,A,0.5,A,0.6,A*2a",
         "nmea: VMVBW invalid longitudinal ground speed: X"),
        ("$VMVBW,0.1,0.2,A,0.3,X,A,0.5,A,0.6,A*2d",
         "nmea: VMVBW invalid transverse ground speed: X"),
        ("$VMVBW,0.1,0.2,A,0.3,0.4,X,0.5,A,0.6,A*46",
         "nmea: VMVBW invalid ground speed status: X"),
        ("$VMVBW,0.1,0.2,A,0.3,0.4,A,X,A,0.6,A*2c",
         "nmea: VMVBW invalid stern traverse water speed: X"),
        ("$VMVBW,0.1,0.2,A,0.3,0.4,A,0.5,X,0.6,A*46",
         "nmea: VMVBW invalid stern water speed status: X"),
        ("$VMVBW,0.1,0.2,A,0.3,0.4,A,0.5,A,X,A*2f",
         "nmea: VMVBW invalid stern traverse ground speed: X"),
        ("$VMVBW,0.1,0.2,A,0.3,0.4,A,0.5,A,0.6,X*46",
         "nmea: VMVBW invalid stern ground speed status: X"),
    ],
)
def test_vbw_errors(raw, message):
    _expect_error(VBW, raw, message)


def test_vdr_good():
    m = _parse(VDR, "$IIVDR,10.1,T,12.3,M,1.2,N*3A")
    assert _strip(m) == VDR(
        set_degrees_true=10.1,
        set_degrees_true_unit="T",
        set_degrees_magnetic=12.3,
        set_degrees_magnetic_unit="M",
        drift_knots=1.2,
        drift_unit="N",
    )


@pytest.mark.parametrize(
    "raw, message",
    [
        ("$IIVDR,10.1,x,12.3,M,1.2,N*16", "nmea: IIVDR invalid true set unit: x"),
        ("$IIVDR,10.1,T,12.3,x,1.2,N*0f", "nmea: IIVDR invalid magnetic set unit: x"),
        ("$IIVDR,10.1,T,12.3,M,1.2,x*0c", "nmea: IIVDR invalid drift unit: x"),
    ],
)
def test_vdr_errors(raw, message):
    _expect_error(VDR, raw, message)


def test_vhw_good():
    m = _parse(VHW, "$VWVHW,45.0,T,43.0,M,3.5,N,6.4,K*56")
    assert _strip(m) == VHW(
        true_heading=45.0,
        magnetic_heading=43.0,
        speed_through_water_knots=3.5,
        speed_through_water_kph=6.4,
    )


def test_vhw_bad_true_heading():
    _expect_error(
        VHW, "$VWVHW,T,45.0,43.0,M,3.5,N,6.4,K*56", "nmea: VWVHW invalid true heading: T"
    )


def test_wrong_type_is_rejected():
    base = parse_base_sentence("$IIVDR,10.1,T,12.3,M,1.2,N*3A")
    with pytest.raises(NMEAError) as exc:
        VHW.from_base(base)
    assert str(exc.value) == "nmea: IIVDR invalid type: VDR"