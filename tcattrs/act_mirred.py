"""Options of the mirred action."""

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

_TCA_MIRRED_TM = 1
_TCA_MIRRED_PARMS = 2
_TCA_MIRRED_PAD = 3
_TCA_MIRRED_BLOCK_ID = 4


@dataclass
class MirredParam(NativeStruct):
    """Parameters of the mirred action, as struct tc_mirred."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    eaction: int = 0
    if_index: int = 0
    _layout = ("I", "I", "I", "I", "I", "I", "I")


@dataclass
class Mirred:
    """Attributes of the mirred action."""

    parms: MirredParam | None = None
    tm: Tcft | None = None
    block_id: int | None = None


def unmarshal_mirred(data: bytes) -> Mirred:
    """Decode mirred attributes."""
    info = Mirred()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_MIRRED_PARMS:
            info.parms = MirredParam.unpack(attr.data)
        elif attr.attr_type == _TCA_MIRRED_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_MIRRED_PAD:
            continue
        elif attr.attr_type == _TCA_MIRRED_BLOCK_ID:
            info.block_id = attr.uint32()
        else:
            raise TcError(
                f"unmarshal_mirred(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info


def marshal_mirred(info: Mirred | None) -> bytes:
    """Encode mirred attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Mirred")
    if info.tm is not None:
        raise NoArgAlterError("Mirred tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_MIRRED_PARMS, info.parms.pack()))
    if info.block_id is not None:
        options.append(Option(ValueType.UINT32, _TCA_MIRRED_BLOCK_ID, info.block_id))
    return marshal_attributes(options)