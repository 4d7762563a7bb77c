"""Options of the nat action."""

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

_TCA_NAT_PARMS = 1
_TCA_NAT_TM = 2
_TCA_NAT_PAD = 3


@dataclass
class NatParms(NativeStruct):
    """Parameters of the nat action, as struct tc_nat."""

    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    old_addr: int = 0
    new_addr: int = 0
    mask: int = 0
    flags: int = 0
    _layout = ("I",) * 9


@dataclass
class Nat:
    """Attributes of the nat action."""

    parms: NatParms | None = None
    tm: Tcft | None = None


def marshal_nat(info: Nat | None) -> bytes:
    """Encode nat attributes; the timestamps cannot be set."""
    if info is None:
        raise NoArgError("Nat")
    if info.tm is not None:
        raise NoArgAlterError("Nat tm")
    options = []
    if info.parms is not None:
        options.append(Option(ValueType.BYTES, _TCA_NAT_PARMS, info.parms.pack()))
    return marshal_attributes(options)


def unmarshal_nat(data: bytes) -> Nat:
    """Decode nat attributes."""
    info = Nat()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_NAT_PARMS:
            info.parms = NatParms.unpack(attr.data)
        elif attr.attr_type == _TCA_NAT_TM:
            info.tm = Tcft.unpack(attr.data)
        elif attr.attr_type == _TCA_NAT_PAD:
            continue
        else:
            raise TcError(
                f"unmarshal_nat(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info