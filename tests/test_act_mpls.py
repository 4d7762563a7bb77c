import pytest

from tcattrs.act_mpls import MPLS, MPLSAction, MPLSParam, marshal_mpls, unmarshal_mpls
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    decode_attributes,
    marshal_attributes,
)

MPLS_TM = 1
MPLS_PROTO = 4


def _enrich(data):
    tm = Tcft(install=9, last_use=8, expires=7, first_use=6)
    return data + marshal_attributes([Option(ValueType.BYTES, MPLS_TM, tm.pack())]), tm


def test_all_options_round_trip():
    value = MPLS(
        parms=MPLSParam(index=1, m_action=MPLSAction.MODIFY),
        proto=101,
        label=102,
        tc=103,
        ttl=104,
        bos=105,
    )
    data, tm = _enrich(marshal_mpls(value))
    got = unmarshal_mpls(data)
    value.tm = tm
    assert got == value
    assert got.parms.m_action == MPLSAction.MODIFY


def test_negative_proto_round_trip():
    got = unmarshal_mpls(marshal_mpls(MPLS(proto=-73)))
    assert got.proto == -73


def test_proto_is_big_endian():
    attrs = decode_attributes(marshal_mpls(MPLS(proto=0x8847 - 0x10000)))
    assert attrs[0].attr_type == MPLS_PROTO
    assert attrs[0].data == b"\x88\x47"


def test_tm():
    with pytest.raises(NoArgAlterError):
        marshal_mpls(MPLS(tm=Tcft(install=1, last_use=2)))


def test_marshal_nil():
    with pytest.raises(NoArgError):
        marshal_mpls(None)


def test_unmarshal_truncated():
    with pytest.raises(TcError):
        unmarshal_mpls(b"\x00")


def test_unknown_attribute():
    with pytest.raises(TcError):
        unmarshal_mpls(marshal_attributes([Option(ValueType.UINT8, 30, 1)]))