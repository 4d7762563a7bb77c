import pytest

from tcattrs.attributes import NoArgError, Option, TcError, ValueType, marshal_attributes
from tcattrs.qdisc_hfsc import (
    Hfsc,
    HfscQOpt,
    ServiceCurve,
    marshal_hfsc,
    marshal_hfsc_qopt,
    unmarshal_hfsc,
    unmarshal_hfsc_qopt,
)


@pytest.mark.parametrize(
    "value",
    [
        Hfsc(rsc=ServiceCurve(m1=12, d=34, m2=56)),
        Hfsc(fsc=ServiceCurve(m1=13, d=35, m2=57)),
        Hfsc(usc=ServiceCurve(m1=14, d=36, m2=58)),
    ],
    ids=["Rsc", "Fsc", "Usc"],
)
def test_hfsc_round_trip(value):
    assert unmarshal_hfsc(marshal_hfsc(value)) == value


def test_hfsc_curve_attribute_length():
    data = marshal_hfsc(Hfsc(rsc=ServiceCurve(1, 2, 3)))
    assert len(data) == 16
    assert data[:4] == bytes([0x10, 0x0, 0x1, 0x0])


def test_hfsc_marshal_none():
    with pytest.raises(NoArgError):
        marshal_hfsc(None)


def test_hfsc_unknown_attribute():
    with pytest.raises(TcError):
        unmarshal_hfsc(marshal_attributes([Option(ValueType.UINT32, 9, 1)]))


def test_hfsc_short_curve():
    with pytest.raises(TcError):
        unmarshal_hfsc(marshal_attributes([Option(ValueType.BYTES, 1, b"\x01\x02")]))


@pytest.mark.parametrize("def_cls", [1, 0, 0xFFFF])
def test_hfsc_qopt_round_trip(def_cls):
    data = marshal_hfsc_qopt(HfscQOpt(def_cls=def_cls))
    assert len(data) == 2
    assert unmarshal_hfsc_qopt(data) == HfscQOpt(def_cls=def_cls)


def test_hfsc_qopt_marshal_none():
    with pytest.raises(NoArgError):
        marshal_hfsc_qopt(None)


def test_hfsc_qopt_short_data():
    with pytest.raises(TcError):
        unmarshal_hfsc_qopt(b"\x01")