import dataclasses

import pytest

from tcattrs.act_bpf import ActBpf, ActBpfParms, marshal_act_bpf, unmarshal_act_bpf
from tcattrs.attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    Tcft,
    ValueType,
    marshal_attributes,
)

BPF_TM = 1
BPF_PAD = 7


def inject_tcft(data, attr_type):
    tm = Tcft(install=11, last_use=22, expires=33, first_use=44)
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, tm.pack())]), tm


def inject_attribute(data, payload, attr_type):
    return data + marshal_attributes([Option(ValueType.BYTES, attr_type, payload)])


@pytest.mark.parametrize(
    "value, enrich",
    [
        (ActBpf(fd=12, name="simpleTest"), None),
        (ActBpf(fd=12, name="simpleTest", parms=ActBpfParms(action=2, index=4)), None),
        (
            ActBpf(fd=12, name="simpleTest", parms=ActBpfParms(action=2, index=4)),
            Tcft(install=1, last_use=2, expires=3, first_use=4),
        ),
        (
            ActBpf(
                ops=bytes([0x6, 0x0, 0x0, 0x0, 0xFF, 0xFF, 0xFF, 0xFF]),
                ops_len=1,
                id=42,
                tag=b"foo",
            ),
            None,
        ),
    ],
    ids=["simple", "extended", "Tm Attribute", "legacy BPF"],
)
def test_round_trip(value, enrich):
    data = marshal_act_bpf(value)
    if enrich is not None:
        data += marshal_attributes([Option(ValueType.BYTES, BPF_TM, enrich.pack())])
    data, tm = inject_tcft(data, BPF_TM)
    data = inject_attribute(data, b"", BPF_PAD)
    expected = dataclasses.replace(value, tm=tm)
    assert unmarshal_act_bpf(data) == expected


def test_tm_cannot_be_altered():
    with pytest.raises(NoArgAlterError):
        marshal_act_bpf(ActBpf(fd=12, name="simpleTest", tm=Tcft(install=1)))


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_act_bpf(None)


def test_name_encoding():
    assert marshal_act_bpf(ActBpf(name="ab")) == bytes([0x7, 0x0, 0x6, 0x0, 0x61, 0x62, 0x0, 0x0])


def test_unknown_attribute():
    with pytest.raises(TcError):
        unmarshal_act_bpf(marshal_attributes([Option(ValueType.UINT32, 42, 1)]))