"""Options of the connmark action."""

from __future__ import annotations

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

_TCA_CONNMARK_PARMS = 1
_TCA_CONNMARK_TM = 2
_TCA_CONNMARK_PAD = 3


@dataclass
class ConnmarkParam(NativeStruct):
    """Parameters of the connmark action, as struct tc_connmark."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    zone: int = 0
    _layout = ("I", "I", "I", "I", "I", "H")


@dataclass
class Connmark:
    """Attributes of the connmark action."""

    parms: ConnmarkParam | None = None
    tm: Tcft | None = None


def unmarshal_connmark(data: bytes) -> Connmark:
    """Decode connmark attributes."""
    info = Connmark()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_CONNMARK_PARMS:
            info.parms = ConnmarkParam.unpack(attr.data)
        elif attr.attr_type == _TCA_CONNMARK_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_CONNMARK_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_connmark(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info


def marshal_connmark(info: Connmark | None) -> bytes:
    """Encode connmark attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Connmark")
    if info.tm is not None:
        raise NoArgAlterError("Connmark tm")
    options = []
    if info.parms is not None:
        options.append(
            Option(ValueType.BYTES, _TCA_CONNMARK_PARMS, info.parms.pack_aligned())
        )
    return marshal_attributes(options)