"""Options of the mpls action."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .attributes import (
    NativeStruct,
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    decode_attributes,
    marshal_attributes,
)
from .helpers import endian_swap_uint16

_TCA_MPLS_TM = 1
_TCA_MPLS_PARMS = 2
_TCA_MPLS_PAD = 3
_TCA_MPLS_PROTO = 4
_TCA_MPLS_LABEL = 5
_TCA_MPLS_TC = 6
_TCA_MPLS_TTL = 7
_TCA_MPLS_BOS = 8


class MPLSAction(enum.IntEnum):
    """Operations the mpls action performs."""

    POP = 1
    PUSH = 2
    MODIFY = 3
    DEC_TTL = 4
    MAC_PUSH = 5


@dataclass
class MPLSParam(NativeStruct):
    """Parameters of the mpls action, as struct tc_mpls."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    m_action: int = 0
    _layout = ("I", "I", "I", "I", "I", "i")


@dataclass
class MPLS:
    """Attributes of the mpls action."""

    parms: MPLSParam | None = None
    tm: Tcft | None = None
    proto: int | None = None
    label: int | None = None
    tc: int | None = None
    ttl: int | None = None
    bos: int | None = None


def _to_int16(value: int) -> int:
    return value - 0x10000 if value >= 0x8000 else value


def unmarshal_mpls(data: bytes) -> MPLS:
    """Decode mpls attributes."""
    info = MPLS()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_MPLS_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_MPLS_PARMS:
            info.parms = MPLSParam.unpack(attr.data)
        elif kind == _TCA_MPLS_PAD:
            continue
        elif kind == _TCA_MPLS_PROTO:
            info.proto = _to_int16(endian_swap_uint16(attr.int16() & 0xFFFF))
        elif kind == _TCA_MPLS_LABEL:
            info.label = attr.uint32()
        elif kind == _TCA_MPLS_TC:
            info.tc = attr.uint8()
        elif kind == _TCA_MPLS_TTL:
            info.ttl = attr.uint8()
        elif kind == _TCA_MPLS_BOS:
            info.bos = attr.uint8()
        else:
            raise TcError(f"unmarshal_mpls(): unknown attribute {kind}: {attr.data.hex()}")
    return info


def marshal_mpls(info: MPLS | None) -> bytes:
    """Encode mpls attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("MPLS")
    if info.tm is not None:
        raise NoArgAlterError("MPLS tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_MPLS_PARMS, info.parms.pack()))
    if info.proto is not None:
        options.append(Option(ValueType.INT16_BE, _TCA_MPLS_PROTO, info.proto))
    if info.label is not None:
        options.append(Option(ValueType.UINT32, _TCA_MPLS_LABEL, info.label))
    if info.tc is not None:
        options.append(Option(ValueType.UINT8, _TCA_MPLS_TC, info.tc))
    if info.ttl is not None:
        options.append(Option(ValueType.UINT8, _TCA_MPLS_TTL, info.ttl))
    if info.bos is not None:
        options.append(Option(ValueType.UINT8, _TCA_MPLS_BOS, info.bos))
    return marshal_attributes(options)