"""Options of the skbmod action."""

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

_TCA_SKBMOD_TM = 1
_TCA_SKBMOD_PARMS = 2
_TCA_SKBMOD_DMAC = 3
_TCA_SKBMOD_SMAC = 4
_TCA_SKBMOD_ETYPE = 5
_TCA_SKBMOD_PAD = 6


@dataclass
class SkbModParms(NativeStruct):
    """Parameters of the skbmod action, as struct tc_skbmod."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    flags: int = 0
    _layout = ("I", "I", "I", "I", "I", "Q")


@dataclass
class SkbMod:
    """Attributes of the skbmod action."""

    tm: Tcft | None = None
    parms: SkbModParms | None = None
    dmac: bytes | None = None
    smac: bytes | None = None
    etype: int | None = None


def marshal_skbmod(info: SkbMod | None) -> bytes:
    """Encode skbmod attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("skbmod")
    if info.tm is not None:
        raise NoArgAlterError("skbmod tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_SKBMOD_PARMS, info.parms.pack()))
    if info.dmac is not None:
        options.append(
            Option(ValueType.BYTES, _TCA_SKBMOD_DMAC, hardware_addr_to_bytes(info.dmac))
        )
    if info.smac is not None:
        options.append(
            Option(ValueType.BYTES, _TCA_SKBMOD_SMAC, hardware_addr_to_bytes(info.smac))
        )
    if info.etype is not None:
        options.append(Option(ValueType.UINT16, _TCA_SKBMOD_ETYPE, info.etype))
    return marshal_attributes(options)


def unmarshal_skbmod(data: bytes) -> SkbMod:
    """Decode skbmod attributes."""
    info = SkbMod()
    for attr in decode_attributes(data):
        kind = attr.attr_type
        if kind == _TCA_SKBMOD_PARMS:
            info.parms = SkbModParms.unpack(attr.data)
        elif kind == _TCA_SKBMOD_TM:
            info.tm = Tcft.unpack(attr.data)
        elif kind == _TCA_SKBMOD_DMAC:
            info.dmac = bytes_to_hardware_addr(attr.data)
        elif kind == _TCA_SKBMOD_SMAC:
            info.smac = bytes_to_hardware_addr(attr.data)
        elif kind == _TCA_SKBMOD_ETYPE:
            info.etype = attr.uint16()
        elif kind == _TCA_SKBMOD_PAD:
            continue
        else:
            raise TcError(f"unmarshal_skbmod(): unknown attribute {kind}: {attr.data.hex()}")
    return info