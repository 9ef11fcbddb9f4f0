# nmeakit

nmeakit parses NMEA 0183 sentences, as sent by GPS receivers, radars, AIS
transceivers and marine instruments, into typed Python objects. It has no
dependencies outside the standard library.

It handles:

- checksum validation and talker/type prefix splitting, including
  proprietary (`P...`) and query (`XXYYQ`) addresses;
- NMEA 4.10 tag blocks (`\s:...,c:...*hh\`), including lines that carry a
  header in front of the tag block;
- coordinates written as GPS (`3345.1232 N`), decimal (`151.234532`) or
  degrees/minutes/seconds (`33° 12' 34.3423"`);
- these sentence types:
  - `$` sentences: THS, TLB, TLL, TTM, TXT, VBW, VDR, VHW, VLW, VPW, VSD,
    VTG, VWR, VWT, WPL, XDR, XTE, ZDA;
  - `!` (encapsulated) sentences: TTD, VDM, VDO.

## Installation

```
pip install nmeakit
```

## Parsing sentences

```python
from nmeakit.parser import parse

sentence = parse("$GPZDA,172809.456,12,07,1996,00,00*57")
print(sentence.prefix())   # GPZDA
print(sentence.year)       # 1996
print(sentence.time)       # 17:28:09.4560
```

Every parsed sentence is a dataclass that extends `BaseSentence`
(`nmeakit.base`), so it also carries `talker`, `type`, `fields`,
`checksum`, `raw` and `tag_block`, and has the methods `prefix()`,
`data_type()` and `talker_id()`. `str(sentence)` gives the raw sentence
without its tag block.

The sentence classes live in `nmeakit.radar` (THS, TLB, TLL, TTD, TTM,
TXT), `nmeakit.vessel` (VDMVDO, VSD, WPL, ZDA, VBW, VDR, VHW) and
`nmeakit.environment` (VLW, VPW, VTG, VWR, VWT, XDR, XTE). Each has a
`from_base(base)` class method that builds it from a `BaseSentence`.

For VDM/VDO and TTD the `payload` is the decoded six-bit armour as `bytes`
holding one bit (0 or 1) per byte; the AIS message inside is not decoded
further.

### Errors

- `NMEAError` (`nmeakit.base`) is raised for bad input: empty lines, a
  missing `$`/`!`, a missing or wrong checksum, an empty prefix, or a field
  that does not hold what its sentence type expects (for example
  `nmea: INTHS invalid status: B`).
- `NotSupportedError`, a subclass of `NMEAError`, is raised when no parser
  exists for the sentence type; its `prefix` attribute holds the prefix.
- `TagBlockError` (`nmeakit.tagblock`) is raised for a malformed tag block.

All three are subclasses of `ValueError`.

## Configuring a parser

`SentenceParser` gives control over each step of parsing:

- `custom_parsers`: a dict from sentence type to a callable that takes a
  `BaseSentence` and returns a sentence object; these take precedence over
  the built-in parsers;
- `parse_prefix`: replaces the default split of the address into talker id
  and type (`nmeakit.base.parse_prefix`);
- `check_crc`: replaces the default checksum check
  (`nmeakit.base.check_crc`), for example to accept sentences without one;
- `on_tag_block`: called with every `TagBlock` before the sentence part is
  parsed;
- `on_base_sentence`: called with the `BaseSentence` before dispatch, and
  may change it in place.

Any callback may raise to stop parsing.

```python
from nmeakit.parser import SentenceParser

blocks = []
parser = SentenceParser(on_tag_block=blocks.append)
parser.parse(r"\s:Satelite_1,c:1553390539*62\!AIVDM,1,1,,A,13M@ah0025QdPDTCOl`K6`nV00Sv,0*52")
print(blocks[0].source)  # Satelite_1
```

A `SentenceParser` is not safe to share between threads. The module-level
`parse` uses one shared parser guarded by a lock.

## Custom sentence types

`register_parser(sentence_type, parser)` adds a parser to the shared
parser used by `parse`. It raises `NMEAError` if a parser for that type is
already registered. `must_register_parser` does the same and returns the
parser it was given.

A custom parser can read fields with `FieldReader` from `nmeakit.base`. Its
methods (`string`, `enum_string`, `float64`, `int64`, `hex_int64`,
`null_int64`, `null_float64`, `lat_long`, `time`,
`six_bit_ascii_armour`) return a default value for a bad field and keep
the first error in `reader.error` instead of raising:

```python
from nmeakit.base import FieldReader
from nmeakit.parser import register_parser

def parse_zzz(base):
    reader = FieldReader(base)
    number = reader.int64(0, "number")
    text = reader.string(1, "str")
    if reader.error is not None:
        raise reader.error
    return base, number, text

register_parser("ZZZ", parse_zzz)
```

## Tag blocks

```python
from nmeakit.tagblock import parse_tag_block

block, length = parse_tag_block(r"\s:Satelite_1,c:1553390539*62\!AIVDM,1,2,3")
# block.source == "Satelite_1", block.time == 1553390539, length == 30
```

A line without a tag block gives an empty `TagBlock` and a length of 0.

## Coordinates, dates and times

```python
from nmeakit.types import (
    date_time, format_dms, format_gps, parse_date, parse_lat_long, parse_time,
)

lat = parse_lat_long("3345.1232 N")     # 33.75205...
format_gps(151.434367)                  # "15126.0620"
format_dms(45.0)                        # '45° 0\' 0.000000"'
t = parse_time("112233.123")            # Time(valid=True, hour=11, ...)
d = parse_date("010203")                # Date(valid=True, dd=1, mm=2, yy=3)
date_time(2024, d, t)                   # datetime in UTC, year 2003
```

`parse_gps`, `parse_decimal` and `parse_dms` parse one format each;
`lat_dir` and `lon_dir` give the hemisphere letter. An empty time or date
string gives a value with `valid=False`, and `date_time` returns `None`
when either is not valid. Parse failures raise `ValueError`.

## What nmeakit does not do

- It has no command-line tool and does not read from serial ports,
  sockets or files; pass it one line at a time.
- Only the sentence types listed above are built in. Common GPS sentences
  such as GGA, RMC, GSA or GSV are not; they raise `NotSupportedError`
  unless you register a parser for them.
- It does not build or write sentences, and does not decode AIS message
  contents.

## Running the tests

```
pip install -e ".[test]"
pytest
```