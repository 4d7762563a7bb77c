"""Options of the hfsc discipline and its classes."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .attributes import (
    NativeStruct,
    NoArgError,
    Option,
    TcError,
    ValueType,
    decode_attributes,
    marshal_attributes,
)

_TCA_HFSC_RSC = 1
_TCA_HFSC_FSC = 2
_TCA_HFSC_USC = 3

_CURVES = (("rsc", _TCA_HFSC_RSC), ("fsc", _TCA_HFSC_FSC), ("usc", _TCA_HFSC_USC))
_CURVE_BY_TYPE = {attr_type: name for name, attr_type in _CURVES}

_QOPT = struct.Struct("=H")


@dataclass
class ServiceCurve(NativeStruct):
    """A service curve, as struct tc_service_curve."""

    m1: int = 0
    d: int = 0
    m2: int = 0
    _layout = ("I", "I", "I")


@dataclass
class Hfsc:
    """Attributes of an hfsc class."""

    rsc: ServiceCurve | None = None
    fsc: ServiceCurve | None = None
    usc: ServiceCurve | None = None


@dataclass
class HfscQOpt:
    """Options of the hfsc qdisc."""

    def_cls: int = 0


def unmarshal_hfsc(data: bytes) -> Hfsc:
    """Decode hfsc class attributes."""
    info = Hfsc()
    for attr in decode_attributes(data):
        name = _CURVE_BY_TYPE.get(attr.attr_type)
        if name is None:
            raise TcError(
                f"unmarshal_hfsc(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
        setattr(info, name, ServiceCurve.unpack(attr.data))
    return info


def marshal_hfsc(info: Hfsc | None) -> bytes:
    """Encode hfsc class attributes."""
    if info is None:
        raise NoArgError("Hfsc")
    options = [
        Option(ValueType.BYTES, attr_type, getattr(info, name).pack())
        for name, attr_type in _CURVES
        if getattr(info, name) is not None
    ]
    return marshal_attributes(options)


def unmarshal_hfsc_qopt(data: bytes) -> HfscQOpt:
    """Decode the hfsc qdisc options: the default class as native uint16."""
    if len(data) < _QOPT.size:
        raise TcError(f"HfscQOpt: need {_QOPT.size} bytes, got {len(data)}")
    return HfscQOpt(_QOPT.unpack_from(bytes(data))[0])


def marshal_hfsc_qopt(info: HfscQOpt | None) -> bytes:
    """Encode the hfsc qdisc options."""
    if info is None:
        raise NoArgError("HfscQOpt")
    try:
        return _QOPT.pack(info.def_cls)
    except struct.error as exc:
        raise TcError(f"HfscQOpt: {exc}") from exc