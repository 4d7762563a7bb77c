"""Options of the fq_codel discipline."""

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

TCA_FQ_CODEL_XSTATS_QDISC = 0
TCA_FQ_CODEL_XSTATS_CLASS = 1

# (field name, attribute type, value type) in attribute order.
_FQ_CODEL_FIELDS = (
    ("target", 1, ValueType.UINT32),
    ("limit", 2, ValueType.UINT32),
    ("interval", 3, ValueType.UINT32),
    ("ecn", 4, ValueType.UINT32),
    ("flows", 5, ValueType.UINT32),
    ("quantum", 6, ValueType.UINT32),
    ("ce_threshold", 7, ValueType.UINT32),
    ("drop_batch_size", 8, ValueType.UINT32),
    ("memory_limit", 9, ValueType.UINT32),
    ("ce_threshold_selector", 10, ValueType.UINT8),
    ("ce_threshold_mask", 11, ValueType.UINT8),
)
_FQ_CODEL_BY_TYPE = {attr_type: (name, kind) for name, attr_type, kind in _FQ_CODEL_FIELDS}


@dataclass
class FqCodel:
    """Attributes of the fq_codel discipline."""

    target: int | None = None
    limit: int | None = None
    interval: int | None = None
    ecn: int | None = None
    flows: int | None = None
    quantum: int | None = None
    ce_threshold: int | None = None
    drop_batch_size: int | None = None
    memory_limit: int | None = None
    ce_threshold_selector: int | None = None
    ce_threshold_mask: int | None = None


def marshal_fq_codel(info: FqCodel | None) -> bytes:
    """Encode fq_codel attributes."""
    if info is None:
        raise NoArgError("FqCodel")
    options = [
        Option(kind, attr_type, getattr(info, name))
        for name, attr_type, kind in _FQ_CODEL_FIELDS
        if getattr(info, name) is not None
    ]
    return marshal_attributes(options)


def unmarshal_fq_codel(data: bytes) -> FqCodel:
    """Decode fq_codel attributes."""
    info = FqCodel()
    for attr in decode_attributes(data):
        entry = _FQ_CODEL_BY_TYPE.get(attr.attr_type)
        if entry is None:
            raise TcError(
                f"unmarshal_fq_codel(): unknown attribute {attr.attr_type}: {attr.data.hex()}"
            )
        name, kind = entry
        value = attr.uint8() if kind is ValueType.UINT8 else attr.uint32()
        setattr(info, name, value)
    return info