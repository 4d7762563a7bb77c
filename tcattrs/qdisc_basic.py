"""Options of the atm, cbs, codel, drr and dsmark disciplines."""

from __future__ import annotations

from dataclasses import dataclass, field

from .attributes import (
    NativeStruct,
    NoArgError,
    Option,
    TcError,
    ValueType,
    decode_attributes,
    marshal_attributes,
)

_TCA_ATM_FD = 1
_TCA_ATM_PTR = 2
_TCA_ATM_HDR = 3
_TCA_ATM_EXCESS = 4
_TCA_ATM_ADDR = 5
_TCA_ATM_STATE = 6

_TCA_CBS_PARMS = 1

_TCA_CODEL_TARGET = 1
_TCA_CODEL_LIMIT = 2
_TCA_CODEL_INTERVAL = 3
_TCA_CODEL_ECN = 4
_TCA_CODEL_CE_THRESHOLD = 5

_TCA_DRR_QUANTUM = 1

_TCA_DSMARK_INDICES = 1
_TCA_DSMARK_DEFAULT_INDEX = 2
_TCA_DSMARK_SET_TC_INDEX = 3
_TCA_DSMARK_MASK = 4
_TCA_DSMARK_VALUE = 5


def _unknown(where: str, attr) -> TcError:
    return TcError(f"{where}(): unknown attribute {attr.attr_type}: {attr.data.hex()}")


@dataclass
class AtmPvc(NativeStruct):
    """Permanent virtual circuit address, as struct sockaddr_atmpvc."""

    sap_family: int = 0
    itf: int = 0
    vpi: int = 0
    vci: int = 0
    _layout = ("B", "B", "B", "B")


@dataclass
class Atm:
    """Attributes of the atm discipline."""

    fd: int | None = None
    excess: int | None = None
    addr: AtmPvc | None = None
    state: int | None = None


def unmarshal_atm(data: bytes) -> Atm:
    info = Atm()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_ATM_FD:
            info.fd = attr.uint32()
        elif attr.attr_type == _TCA_ATM_EXCESS:
            info.excess = attr.uint32()
        elif attr.attr_type == _TCA_ATM_ADDR:
            info.addr = AtmPvc.unpack(attr.data)
        elif attr.attr_type == _TCA_ATM_STATE:
            info.state = attr.uint32()
        else:
            raise _unknown("unmarshal_atm", attr)
    return info


def marshal_atm(info: Atm | None) -> bytes:
    if info is None:
        raise NoArgError("Atm")
    options = []
    if info.addr is not None:
        options.append(Option(ValueType.BYTES, _TCA_ATM_ADDR, info.addr.pack()))
    if info.fd is not None:
        options.append(Option(ValueType.UINT32, _TCA_ATM_FD, info.fd))
    if info.excess is not None:
        options.append(Option(ValueType.UINT32, _TCA_ATM_EXCESS, info.excess))
    if info.state is not None:
        options.append(Option(ValueType.UINT32, _TCA_ATM_STATE, info.state))
    return marshal_attributes(options)


@dataclass
class CbsOpt(NativeStruct):
    """Parameters of the cbs discipline, as struct tc_cbs_qopt."""

    offload: int = 0
    pad: tuple[int, int, int] = (0, 0, 0)
    hi_credit: int = 0
    lo_credit: int = 0
    idle_slope: int = 0
    send_slope: int = 0
    _layout = ("B", "3B", "i", "i", "i", "i")


@dataclass
class Cbs:
    """Attributes of the cbs discipline."""

    parms: CbsOpt | None = None


def unmarshal_cbs(data: bytes) -> Cbs:
    info = Cbs()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_CBS_PARMS:
            info.parms = CbsOpt.unpack(attr.data)
        else:
            raise _unknown("unmarshal_cbs", attr)
    return info


def marshal_cbs(info: Cbs | None) -> bytes:
    if info is None:
        raise NoArgError("Cbs")
    if info.parms is None:
        raise NoArgError("Cbs parms")
    return marshal_attributes([Option(ValueType.BYTES, _TCA_CBS_PARMS, info.parms.pack())])


@dataclass
class Codel:
    """Attributes of the codel discipline."""

    target: int | None = None
    limit: int | None = None
    interval: int | None = None
    ecn: int | None = None
    ce_threshold: int | None = None


_CODEL_FIELDS = (
    ("target", _TCA_CODEL_TARGET),
    ("limit", _TCA_CODEL_LIMIT),
    ("interval", _TCA_CODEL_INTERVAL),
    ("ecn", _TCA_CODEL_ECN),
    ("ce_threshold", _TCA_CODEL_CE_THRESHOLD),
)


def unmarshal_codel(data: bytes) -> Codel:
    info = Codel()
    by_type = {attr_type: name for name, attr_type in _CODEL_FIELDS}
    for attr in decode_attributes(data):
        name = by_type.get(attr.attr_type)
        if name is None:
            raise _unknown("unmarshal_codel", attr)
        setattr(info, name, attr.uint32())
    return info


def marshal_codel(info: Codel | None) -> bytes:
    if info is None:
        raise NoArgError("Codel")
    options = [
        Option(ValueType.UINT32, attr_type, getattr(info, name))
        for name, attr_type in _CODEL_FIELDS
        if getattr(info, name) is not None
    ]
    return marshal_attributes(options)


@dataclass
class Drr:
    """Attributes of the drr discipline."""

    quantum: int | None = None


def unmarshal_drr(data: bytes) -> Drr:
    info = Drr()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_DRR_QUANTUM:
            info.quantum = attr.uint32()
        else:
            raise _unknown("unmarshal_drr", attr)
    return info


def marshal_drr(info: Drr | None) -> bytes:
    if info is None:
        raise NoArgError("Drr")
    options = []
    if info.quantum is not None:
        options.append(Option(ValueType.UINT32, _TCA_DRR_QUANTUM, info.quantum))
    return marshal_attributes(options)


@dataclass
class Dsmark:
    """Attributes of the dsmark discipline."""

    indices: int | None = None
    default_index: int | None = None
    set_tc_index: bool | None = None
    mask: int | None = None
    value: int | None = field(default=None)


def unmarshal_dsmark(data: bytes) -> Dsmark:
    info = Dsmark()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_DSMARK_INDICES:
            info.indices = attr.uint16()
        elif attr.attr_type == _TCA_DSMARK_DEFAULT_INDEX:
            info.default_index = attr.uint16()
        elif attr.attr_type == _TCA_DSMARK_SET_TC_INDEX:
            info.set_tc_index = attr.flag()
        elif attr.attr_type == _TCA_DSMARK_MASK:
            info.mask = attr.uint8()
        elif attr.attr_type == _TCA_DSMARK_VALUE:
            info.value = attr.uint8()
        else:
            raise _unknown("unmarshal_dsmark", attr)
    return info


def marshal_dsmark(info: Dsmark | None) -> bytes:
    if info is None:
        raise NoArgError("Dsmark")
    options = []
    if info.indices is not None:
        options.append(Option(ValueType.UINT16, _TCA_DSMARK_INDICES, info.indices))
    if info.default_index is not None:
        options.append(Option(ValueType.UINT16, _TCA_DSMARK_DEFAULT_INDEX, info.default_index))
    if info.mask is not None:
        options.append(Option(ValueType.UINT8, _TCA_DSMARK_MASK, info.mask))
    if info.value is not None:
        options.append(Option(ValueType.UINT8, _TCA_DSMARK_VALUE, info.value))
    if info.set_tc_index is not None:
        options.append(Option(ValueType.FLAG, _TCA_DSMARK_SET_TC_INDEX, info.set_tc_index))
    return marshal_attributes(options)