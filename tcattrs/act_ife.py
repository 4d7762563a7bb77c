"""Options of the ife (inter-FE) action."""

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
from .helpers import bytes_to_hardware_addr, hardware_addr_to_bytes

_TCA_IFE_PARMS = 1
_TCA_IFE_TM = 2
_TCA_IFE_DMAC = 3
_TCA_IFE_SMAC = 4
_TCA_IFE_TYPE = 5
_TCA_IFE_METALST = 6
_TCA_IFE_PAD = 7


@dataclass
class IfeParms(NativeStruct):
    """Parameters of the ife action, as struct tc_ife."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    flags: int = 0
    _layout = ("I", "I", "I", "I", "I", "H")


@dataclass
class Ife:
    """Attributes of the ife action."""

    parms: IfeParms | None = None
    smac: bytes | None = None
    dmac: bytes | None = None
    type: int | None = None
    tm: Tcft | None = None


def marshal_ife(info: Ife | None) -> bytes:
    """Encode ife attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Ife")
    if info.tm is not None:
        raise NoArgAlterError("Ife tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_IFE_PARMS, info.parms.pack_aligned()))
    if info.smac is not None:
        options.append(Option(ValueType.BYTES, _TCA_IFE_SMAC, hardware_addr_to_bytes(info.smac)))
    if info.dmac is not None:
        options.append(Option(ValueType.BYTES, _TCA_IFE_DMAC, hardware_addr_to_bytes(info.dmac)))
    if info.type is not None:
        options.append(Option(ValueType.UINT16, _TCA_IFE_TYPE, info.type))
    return marshal_attributes(options)


def unmarshal_ife(data: bytes) -> Ife:
    """Decode ife attributes."""
    info = Ife()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_IFE_PARMS:
            info.parms = IfeParms.unpack(attr.data)
        elif kind == _TCA_IFE_SMAC:
            info.smac = bytes_to_hardware_addr(attr.data)
        elif kind == _TCA_IFE_DMAC:
            info.dmac = bytes_to_hardware_addr(attr.data)
        elif kind == _TCA_IFE_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_IFE_TYPE:
            info.type = attr.uint16()
        elif kind == _TCA_IFE_PAD:
            continue
        else:
            raise TcError(f"unmarshal_ife(): unknown attribute {kind}: {attr.data.hex()}")
    return info