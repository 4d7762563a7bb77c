"""Options of the fq discipline."""

from __future__ import annotations

import struct
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

_TCA_FQ_HORIZON_DROP = 15
_TCA_FQ_PRIOMAP = 16
_TCA_FQ_WEIGHTS = 17
_TCA_FQ_OFFLOAD_HORIZON = 18

_FQ_UINT32_FIELDS = (
    ("plimit", 1),
    ("flow_plimit", 2),
    ("quantum", 3),
    ("init_quantum", 4),
    ("rate_enable", 5),
    ("flow_default_rate", 6),
    ("flow_max_rate", 7),
    ("buckets_log", 8),
    ("flow_refill_delay", 9),
    ("orphan_mask", 10),
    ("low_rate_threshold", 11),
    ("ce_threshold", 12),
    ("timer_slack", 13),
    ("horizon", 14),
)
_FQ_BY_TYPE = {attr_type: name for name, attr_type in _FQ_UINT32_FIELDS}
_TC_PRIO_COUNT = 16


@dataclass
class FqPrioQopt(NativeStruct):
    """Band mapping of the fq discipline, as struct tc_prio_qopt."""

    bands: int = 0
    prio_map: tuple[int, ...] = field(default=(0,) * _TC_PRIO_COUNT)
    _layout = ("i", f"{_TC_PRIO_COUNT}B")


@dataclass
class Fq:
    """Attributes of the fq discipline."""

    plimit: int | None = None
    flow_plimit: int | None = None
    quantum: int | None = None
    init_quantum: int | None = None
    rate_enable: int | None = None
    flow_default_rate: int | None = None
    flow_max_rate: int | None = None
    buckets_log: int | None = None
    flow_refill_delay: int | None = None
    orphan_mask: int | None = None
    low_rate_threshold: int | None = None
    ce_threshold: int | None = None
    timer_slack: int | None = None
    horizon: int | None = None
    horizon_drop: int | None = None
    prio_map: FqPrioQopt | None = None
    weights: list[int] | None = None
    offload_horizon: int | None = None


def _unpack_weights(data: bytes) -> list[int]:
    count = len(data) // 4
    return list(struct.unpack_from(f"={count}i", data))


def _pack_weights(weights: list[int]) -> bytes:
    try:
        return struct.pack(f"={len(weights)}i", *weights)
    except struct.error as exc:
        raise TcError(f"Fq weights: {exc}") from exc


def unmarshal_fq(data: bytes) -> Fq:
    """Decode fq attributes."""
    info = Fq()
    for attr in decode_attributes(data):
        name = _FQ_BY_TYPE.get(attr.attr_type)
        if name is not None:
            setattr(info, name, attr.uint32())
        elif attr.attr_type == _TCA_FQ_HORIZON_DROP:
            info.horizon_drop = attr.uint8()
        elif attr.attr_type == _TCA_FQ_PRIOMAP:
            info.prio_map = FqPrioQopt.unpack(attr.data)
        elif attr.attr_type == _TCA_FQ_WEIGHTS:
            info.weights = _unpack_weights(attr.data)
        elif attr.attr_type == _TCA_FQ_OFFLOAD_HORIZON:
            info.offload_horizon = attr.uint32()
        else:
            raise TcError(
                f"unmarshal_fq(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
    return info


def marshal_fq(info: Fq | None) -> bytes:
    """Encode fq attributes."""
    if info is None:
        raise NoArgError("Fq")
    options = [
        Option(ValueType.UINT32, attr_type, getattr(info, name))
        for name, attr_type in _FQ_UINT32_FIELDS
        if getattr(info, name) is not None
    ]
    if info.horizon_drop is not None:
        options.append(Option(ValueType.UINT8, _TCA_FQ_HORIZON_DROP, info.horizon_drop))
    if info.prio_map is not None:
        options.append(Option(ValueType.BYTES, _TCA_FQ_PRIOMAP, info.prio_map.pack()))
    if info.weights is not None:
        options.append(Option(ValueType.BYTES, _TCA_FQ_WEIGHTS, _pack_weights(info.weights)))
    if info.offload_horizon is not None:
        options.append(
            Option(ValueType.UINT32, _TCA_FQ_OFFLOAD_HORIZON, info.offload_horizon)
        )
    return marshal_attributes(options)