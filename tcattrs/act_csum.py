"""Options of the csum action."""

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

_TCA_CSUM_PARMS = 1
_TCA_CSUM_TM = 2
_TCA_CSUM_PAD = 3


@dataclass
class CsumParms(NativeStruct):
    """Parameters of the csum action, as struct tc_csum."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    update_flags: int = 0
    _layout = ("I", "I", "I", "I", "I", "I")


@dataclass
class Csum:
    """Attributes of the csum action."""

    parms: CsumParms | None = None
    tm: Tcft | None = None


def marshal_csum(info: Csum | None) -> bytes:
    """Encode csum attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Csum")
    if info.tm is not None:
        raise NoArgAlterError("Csum tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_CSUM_PARMS, info.parms.pack()))
    return marshal_attributes(options)


def unmarshal_csum(data: bytes) -> Csum:
    """Decode csum attributes."""
    info = Csum()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_CSUM_PARMS:
            info.parms = CsumParms.unpack(attr.data)
        elif attr.attr_type == _TCA_CSUM_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_CSUM_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_csum(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info