from ipaddress import IPv4Address, IPv6Address

import pytest

from tcattrs.act_tunnel_key import (
    TunnelKey,
    TunnelParms,
    marshal_tunnel_key,
    unmarshal_tunnel_key,
)
from tcattrs.attributes import (
    InvalidArgError,
    NoArgError,
    Option,
    Tcft,
    ValueType,
    marshal_attributes,
)

_TM = 1
_PAD = 8
_IPV4 = IPv4Address("127.0.0.1")
_IPV6 = IPv6Address("fe80::42")


def _enrich(data: bytes) -> tuple[bytes, Tcft]:
    tm = Tcft(1, 2, 3, 4)
    extra = marshal_attributes(
        [
            Option(ValueType.BYTES, _TM, tm.pack()),
            Option(ValueType.BYTES, _PAD, b""),
        ]
    )
    return data + extra, tm


@pytest.mark.parametrize(
    "value",
    [
        TunnelKey(
            parms=TunnelParms(
                index=3, capab=0, action=3, ref_cnt=1, bind_cnt=1, tunnel_key_action=0
            ),
            key_enc_src=_IPV4,
            key_enc_dst=_IPV4,
            key_no_frag=True,
        ),
        TunnelKey(
            parms=TunnelParms(index=42),
            key_enc_src=_IPV6,
            key_enc_dst=_IPV6,
            key_enc_key_id=0xAA55,
            key_enc_dst_port=22,
            key_no_csum=1,
            key_enc_tos=2,
            key_enc_ttl=42,
        ),
    ],
    ids=["simple", "IPv6"],
)
def test_round_trip(value):
    data, tm = _enrich(marshal_tunnel_key(value))
    result = unmarshal_tunnel_key(data)
    value.tm = tm
    assert result == value


def test_tm_is_not_sent():
    data = marshal_tunnel_key(TunnelKey(tm=Tcft(1, 0, 0, 0)))
    assert data == b""


def test_key_id_is_big_endian():
    assert marshal_tunnel_key(TunnelKey(key_enc_key_id=1)) == bytes(
        [0x08, 0x00, 0x07, 0x00, 0x00, 0x00, 0x00, 0x01]
    )


def test_dst_port_is_big_endian():
    assert marshal_tunnel_key(TunnelKey(key_enc_dst_port=22)) == bytes(
        [0x06, 0x00, 0x09, 0x00, 0x00, 0x16, 0x00, 0x00]
    )


def test_different_destination_v6():
    value = TunnelKey(key_enc_src=_IPV6, key_enc_dst=IPv6Address("2001:db8::1"))
    result = unmarshal_tunnel_key(marshal_tunnel_key(value))
    assert result.key_enc_dst == IPv6Address("2001:db8::1")
    assert result.key_enc_src == _IPV6


def test_invalid_v6_length():
    data = marshal_attributes([Option(ValueType.BYTES, 5, b"\x01\x02\x03")])
    with pytest.raises(InvalidArgError):
        unmarshal_tunnel_key(data)


def test_nil():
    with pytest.raises(NoArgError):
        marshal_tunnel_key(None)