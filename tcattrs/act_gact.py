"""Options of the gact action."""

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

_TCA_GACT_TM = 1
_TCA_GACT_PARMS = 2
_TCA_GACT_PROB = 3
_TCA_GACT_PAD = 4


@dataclass
class GactProb(NativeStruct):
    """Probability settings of the gact action, as struct tc_gact_p."""

    ptype: int = 0
    pval: int = 0
    paction: int = 0
    _layout = ("H", "H", "I")


@dataclass
class GactParms(NativeStruct):
    """Parameters of the gact action, as struct tc_gact."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    _layout = ("I", "I", "I", "I", "I")


@dataclass
class Gact:
    """Attributes of the gact action."""

    tm: Tcft | None = None
    parms: GactParms | None = None
    prob: GactProb | None = None


def marshal_gact(info: Gact | None) -> bytes:
    """Encode gact attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Gact")
    if info.tm is not None:
        raise NoArgAlterError("Gact tm")
    options = []
    if info.prob is not None:
        options.append(Option(ValueType.BYTES, _TCA_GACT_PROB, info.prob.pack()))
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_GACT_PARMS, info.parms.pack()))
    return marshal_attributes(options)


def unmarshal_gact(data: bytes) -> Gact:
    """Decode gact attributes."""
    info = Gact()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_GACT_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_GACT_PARMS:
            info.parms = GactParms.unpack(attr.data)
        elif attr.attr_type == _TCA_GACT_PROB:
            info.prob = GactProb.unpack(attr.data)
        elif attr.attr_type == _TCA_GACT_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_gact(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info