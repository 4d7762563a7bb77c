import pytest

from tcattrs.attributes import NoArgError, Option, TcError, ValueType, marshal_attributes
from tcattrs.qdisc_fq_codel import FqCodel, marshal_fq_codel, unmarshal_fq_codel


def test_round_trip_all_fields():
    value = FqCodel(
        target=1,
        limit=2,
        interval=3,
        ecn=4,
        flows=5,
        quantum=6,
        ce_threshold=7,
        drop_batch_size=8,
        memory_limit=9,
        ce_threshold_selector=10,
        ce_threshold_mask=11,
    )
    assert unmarshal_fq_codel(marshal_fq_codel(value)) == value


def test_single_field_encoding():
    assert marshal_fq_codel(FqCodel(ce_threshold_mask=11)) == bytes(
        [0x5, 0x0, 0xB, 0x0, 0xB, 0x0, 0x0, 0x0]
    )


def test_empty_marshals_to_nothing():
    assert marshal_fq_codel(FqCodel()) == b""


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_fq_codel(None)


def test_unmarshal_truncated():
    with pytest.raises(TcError):
        unmarshal_fq_codel(b"\x00")


def test_unmarshal_unknown_attribute():
    data = marshal_attributes([Option(ValueType.UINT32, 42, 1)])
    with pytest.raises(TcError):
        unmarshal_fq_codel(data)