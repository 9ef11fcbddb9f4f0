"""Dispatch of raw NMEA 0183 lines to typed sentence parsers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from .base import (
    SENTENCE_START,
    SENTENCE_START_ENCAPSULATED,
    BaseSentence,
    CRCChecker,
    NMEAError,
    NotSupportedError,
    PrefixParser,
    TagBlockHandler,
    parse_base_sentence,
)
from .environment import (
    TYPE_VLW,
    TYPE_VPW,
    TYPE_VTG,
    TYPE_VWR,
    TYPE_VWT,
    TYPE_XDR,
    TYPE_XTE,
    VLW,
    VPW,
    VTG,
    VWR,
    VWT,
    XDR,
    XTE,
)
from .radar import (
    THS,
    TLB,
    TLL,
    TTD,
    TTM,
    TXT,
    TYPE_THS,
    TYPE_TLB,
    TYPE_TLL,
    TYPE_TTD,
    TYPE_TTM,
    TYPE_TXT,
)
from .vessel import (
    TYPE_VBW,
    TYPE_VDM,
    TYPE_VDO,
    TYPE_VDR,
    TYPE_VHW,
    TYPE_VSD,
    TYPE_WPL,
    TYPE_ZDA,
    VBW,
    VDMVDO,
    VDR,
    VHW,
    VSD,
    WPL,
    ZDA,
)

ParserFunc = Callable[[BaseSentence], BaseSentence]
BaseSentenceHandler = Callable[[BaseSentence], None]

_STANDARD_PARSERS: Dict[str, ParserFunc] = {
    TYPE_THS: THS.from_base,
    TYPE_TLB: TLB.from_base,
    TYPE_TLL: TLL.from_base,
    TYPE_TTM: TTM.from_base,
    TYPE_TXT: TXT.from_base,
    TYPE_VBW: VBW.from_base,
    TYPE_VDR: VDR.from_base,
    TYPE_VHW: VHW.from_base,
    TYPE_VLW: VLW.from_base,
    TYPE_VPW: VPW.from_base,
    TYPE_VSD: VSD.from_base,
    TYPE_VTG: VTG.from_base,
    TYPE_VWR: VWR.from_base,
    TYPE_VWT: VWT.from_base,
    TYPE_WPL: WPL.from_base,
    TYPE_XDR: XDR.from_base,
    TYPE_XTE: XTE.from_base,
    TYPE_ZDA: ZDA.from_base,
}

_ENCAPSULATED_PARSERS: Dict[str, ParserFunc] = {
    TYPE_TTD: TTD.from_base,
    TYPE_VDM: VDMVDO.from_base,
    TYPE_VDO: VDMVDO.from_base,
}

_PARSERS_BY_START = {
    SENTENCE_START: _STANDARD_PARSERS,
    SENTENCE_START_ENCAPSULATED: _ENCAPSULATED_PARSERS,
}


@dataclass
class SentenceParser:
    """Configurable parser turning raw lines into typed sentences.

    Instances are not safe to share between threads.

    ``custom_parsers`` maps sentence types to parsers and takes precedence
    over the built-in ones. ``parse_prefix`` and ``check_crc`` replace the
    default address splitting and checksum validation. ``on_tag_block`` is
    called for every tag block before the sentence part is parsed, and
    ``on_base_sentence`` may inspect or modify the base sentence before
    dispatch. Any of the callbacks may raise to abort parsing.
    """

    custom_parsers: Dict[str, ParserFunc] = field(default_factory=dict)
    parse_prefix: Optional[PrefixParser] = None
    check_crc: Optional[CRCChecker] = None
    on_tag_block: Optional[TagBlockHandler] = None
    on_base_sentence: Optional[BaseSentenceHandler] = None

    def parse(self, raw: str) -> BaseSentence:
        """Parse ``raw`` into the matching sentence type."""
        sentence = parse_base_sentence(
            raw, self.parse_prefix, self.check_crc, self.on_tag_block
        )
        if self.on_base_sentence is not None:
            self.on_base_sentence(sentence)

        custom = self.custom_parsers.get(sentence.type)
        if custom is not None:
            return custom(sentence)

        table = _PARSERS_BY_START.get(sentence.raw[:1], {})
        builtin = table.get(sentence.type)
        if builtin is None:
            raise NotSupportedError(sentence.prefix())
        return builtin(sentence)


_default_lock = threading.Lock()
_default_parser = SentenceParser()


def register_parser(sentence_type: str, parser: ParserFunc) -> None:
    """Register a parser for ``sentence_type`` with the shared parser.

    Raises NMEAError if a parser for that type is already registered.
    """
    with _default_lock:
        if sentence_type in _default_parser.custom_parsers:
            raise NMEAError(
                f"nmea: parser for sentence type '\"{sentence_type}\"' already exists"
            )
        _default_parser.custom_parsers[sentence_type] = parser


def must_register_parser(sentence_type: str, parser: ParserFunc) -> ParserFunc:
    """Register a parser with the shared parser and return it.

    Raises NMEAError on a duplicate registration.
    """
    register_parser(sentence_type, parser)
    return parser


def parse(raw: str) -> BaseSentence:
    """Parse ``raw`` with the shared parser."""
    with _default_lock:
        return _default_parser.parse(raw)