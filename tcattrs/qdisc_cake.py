"""Options of the cake discipline."""

from __future__ import annotations

from dataclasses import dataclass

from .attributes import (
    NoArgError,
    Option,
    TcError,
    ValueType,
    decode_attributes,
    marshal_attributes,
)

_TCA_CAKE_PAD = 1
_TCA_CAKE_BASE_RATE64 = 2

# Every other cake attribute is a 32 bit value; listed in attribute order.
_CAKE_UINT32_FIELDS = (
    ("diff_serv_mode", 3),
    ("atm", 4),
    ("flow_mode", 5),
    ("overhead", 6),
    ("rtt", 7),
    ("target", 8),
    ("autorate", 9),
    ("memory", 10),
    ("nat", 11),
    ("raw", 12),
    ("wash", 13),
    ("mpu", 14),
    ("ingress", 15),
    ("ack_filter", 16),
    ("split_gso", 17),
    ("fw_mark", 18),
)
_CAKE_BY_TYPE = {attr_type: name for name, attr_type in _CAKE_UINT32_FIELDS}


@dataclass
class Cake:
    """Attributes of the cake discipline."""

    base_rate: int | None = None
    diff_serv_mode: int | None = None
    atm: int | None = None
    flow_mode: int | None = None
    overhead: int | None = None
    rtt: int | None = None
    target: int | None = None
    autorate: int | None = None
    memory: int | None = None
    nat: int | None = None
    raw: int | None = None
    wash: int | None = None
    mpu: int | None = None
    ingress: int | None = None
    ack_filter: int | None = None
    split_gso: int | None = None
    fw_mark: int | None = None


def unmarshal_cake(data: bytes) -> Cake:
    """Decode cake attributes."""
    info = Cake()
    for attr in decode_attributes(data):
        if attr.attr_type == _TCA_CAKE_BASE_RATE64:
            info.base_rate = attr.uint64()
        elif attr.attr_type == _TCA_CAKE_PAD:
            continue
        else:
            name = _CAKE_BY_TYPE.get(attr.attr_type)
            if name is None:
                raise TcError(
                    f"unmarshal_cake(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
                )
            setattr(info, name, attr.uint32())
    return info


def marshal_cake(info: Cake | None) -> bytes:
    """Encode cake attributes."""
    if info is None:
        raise NoArgError("Cake")
    options = []
    if info.base_rate is not None:
        options.append(Option(ValueType.UINT64, _TCA_CAKE_BASE_RATE64, info.base_rate))
    options.extend(
        Option(ValueType.UINT32, attr_type, getattr(info, name))
        for name, attr_type in _CAKE_UINT32_FIELDS
        if getattr(info, name) is not None
    )
    return marshal_attributes(options)