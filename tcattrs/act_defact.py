"""Options of the defact action."""

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

_TCA_DEF_TM = 1
_TCA_DEF_PARMS = 2
_TCA_DEF_DATA = 3
_TCA_DEF_PAD = 4


@dataclass
class DefactParms(NativeStruct):
    """Parameters of the defact action, as struct tc_defact."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class Defact:
    """Attributes of the defact action."""

    parms: DefactParms | None = None
    tm: Tcft | None = None
    data: str | None = None


def marshal_defact(info: Defact | None) -> bytes:
    """Encode defact attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Defact")
    if info.tm is not None:
        raise NoArgAlterError("Defact tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_DEF_PARMS, info.parms.pack()))
    if info.data is not None:
        options.append(Option(ValueType.STRING, _TCA_DEF_DATA, info.data))
    return marshal_attributes(options)


def unmarshal_defact(data: bytes) -> Defact:
    """Decode defact attributes."""
    info = Defact()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_DEF_PARMS:
            info.parms = DefactParms.unpack(attr.data)
        elif attr.attr_type == _TCA_DEF_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_DEF_DATA:
            info.data = attr.string()
        elif attr.attr_type == _TCA_DEF_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_defact(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info