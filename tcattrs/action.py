"""Actions attached to filters and classes, and their per-kind options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple

from .act_bpf import ActBpf, marshal_act_bpf, unmarshal_act_bpf
from .act_connmark import Connmark, marshal_connmark, unmarshal_connmark
from .act_csum import Csum, marshal_csum, unmarshal_csum
from .act_ct import Ct, marshal_ct, unmarshal_ct
from .act_ctinfo import CtInfo, marshal_ctinfo, unmarshal_ctinfo
from .act_defact import Defact, marshal_defact, unmarshal_defact
from .act_gact import Gact, marshal_gact, unmarshal_gact
from .act_gate import Gate, marshal_gate, unmarshal_gate
from .act_ife import Ife, marshal_ife, unmarshal_ife
from .act_ipt import Ipt, marshal_ipt, unmarshal_ipt
from .act_mirred import Mirred, marshal_mirred, unmarshal_mirred
from .act_mpls import MPLS, marshal_mpls, unmarshal_mpls
from .act_nat import Nat, marshal_nat, unmarshal_nat
from .act_sample import Sample, marshal_sample, unmarshal_sample
from .act_skbedit import SkbEdit, marshal_skbedit, unmarshal_skbedit
from .act_skbmod import SkbMod, marshal_skbmod, unmarshal_skbmod
from .act_tunnel_key import TunnelKey, marshal_tunnel_key, unmarshal_tunnel_key
from .act_vlan import VLan, marshal_vlan, unmarshal_vlan
from .attributes import (
    NoArgAlterError,
    NoArgError,
    Option,
    TcError,
    ValueType,
    decode_attributes,
    marshal_attributes,
)
from .constants import RTM_DELACTION

TCA_ACT_UNSPEC = 0
TCA_ACT_KIND = 1
TCA_ACT_OPTIONS = 2
TCA_ACT_INDEX = 3
TCA_ACT_STATS = 4
TCA_ACT_PAD = 5
TCA_ACT_COOKIE = 6
TCA_ACT_FLAGS = 7
TCA_ACT_HW_STATS = 8
TCA_ACT_USED_HW_STATS = 9
TCA_ACT_IN_HW_COUNT = 10

NLA_F_NESTED = 1 << 15
_NLA_TYPE_MASK = 0x3FFF

ACT_BIND = 1
ACT_NO_BIND = 0
ACT_UNBIND = 1
ACT_NO_UNBIND = 0
ACT_REPLACE = 1
ACT_NO_REPLACE = 0

ACT_OK = 0
ACT_RECLASSIFY = 1
ACT_SHOT = 2
ACT_PIPE = 3
ACT_STOLEN = 4
ACT_QUEUED = 5
ACT_REPEAT = 6
ACT_REDIRECT = 7
ACT_TRAP = 8


@dataclass
class Action:
    """An action with its generic attributes and the options of its kind.

    ``stats`` holds the raw encoded statistics block.
    """

    kind: str = ""
    index: int = 0
    stats: bytes | None = None
    cookie: bytes | None = None
    flags: int | None = None
    hw_stats: int | None = None
    used_hw_stats: int | None = None
    in_hw_count: int | None = None

    bpf: ActBpf | None = None
    connmark: Connmark | None = None
    csum: Csum | None = None
    ct: Ct | None = None
    ctinfo: CtInfo | None = None
    defact: Defact | None = None
    gact: Gact | None = None
    gate: Gate | None = None
    ife: Ife | None = None
    ipt: Ipt | None = None
    mirred: Mirred | None = None
    nat: Nat | None = None
    sample: Sample | None = None
    vlan: VLan | None = None
    tunnel_key: TunnelKey | None = None
    mpls: MPLS | None = None
    skbedit: SkbEdit | None = None
    skbmod: SkbMod | None = None


class _Kind(NamedTuple):
    field: str
    marshal: Callable[[Any], bytes]
    unmarshal: Callable[[bytes], Any]


_KINDS = {
    "bpf": _Kind("bpf", marshal_act_bpf, unmarshal_act_bpf),
    "connmark": _Kind("connmark", marshal_connmark, unmarshal_connmark),
    "csum": _Kind("csum", marshal_csum, unmarshal_csum),
    "ct": _Kind("ct", marshal_ct, unmarshal_ct),
    "ctinfo": _Kind("ctinfo", marshal_ctinfo, unmarshal_ctinfo),
    "defact": _Kind("defact", marshal_defact, unmarshal_defact),
    "gact": _Kind("gact", marshal_gact, unmarshal_gact),
    "gate": _Kind("gate", marshal_gate, unmarshal_gate),
    "ife": _Kind("ife", marshal_ife, unmarshal_ife),
    "ipt": _Kind("ipt", marshal_ipt, unmarshal_ipt),
    "mirred": _Kind("mirred", marshal_mirred, unmarshal_mirred),
    "nat": _Kind("nat", marshal_nat, unmarshal_nat),
    "sample": _Kind("sample", marshal_sample, unmarshal_sample),
    "vlan": _Kind("vlan", marshal_vlan, unmarshal_vlan),
    "tunnel_key": _Kind("tunnel_key", marshal_tunnel_key, unmarshal_tunnel_key),
    "mpls": _Kind("mpls", marshal_mpls, unmarshal_mpls),
    "skbedit": _Kind("skbedit", marshal_skbedit, unmarshal_skbedit),
    "skbmod": _Kind("skbmod", marshal_skbmod, unmarshal_skbmod),
}


def _is_missing_argument(exc: TcError) -> bool:
    return isinstance(exc, NoArgError) and not isinstance(exc, NoArgAlterError)


def unmarshal_actions(data: bytes) -> list[Action]:
    """Decode a list of nested actions."""
    return [unmarshal_action(attr.data) for attr in decode_attributes(data)]


def unmarshal_action(data: bytes) -> Action:
    """Decode a single action and the options of its kind."""
    info = Action()
    act_options = b""
    for attr in decode_attributes(data):
        kind = attr.attr_type & _NLA_TYPE_MASK
        if kind == TCA_ACT_KIND:
            info.kind = attr.string()
        elif kind == TCA_ACT_INDEX:
            info.index = attr.uint32()
        elif kind == TCA_ACT_OPTIONS:
            act_options = bytes(attr.data)
        elif kind == TCA_ACT_COOKIE:
            info.cookie = bytes(attr.data)
        elif kind == TCA_ACT_STATS:
            info.stats = bytes(attr.data)
        elif kind == TCA_ACT_FLAGS:
            info.flags = attr.uint64()
        elif kind == TCA_ACT_HW_STATS:
            info.hw_stats = attr.uint64()
        elif kind == TCA_ACT_USED_HW_STATS:
            info.used_hw_stats = attr.uint64()
        elif kind == TCA_ACT_IN_HW_COUNT:
            info.in_hw_count = attr.uint32()
        elif kind == TCA_ACT_PAD:
            continue
        else:
            raise TcError(f"unmarshal_action(): unknown attribute {kind}: {attr.data.hex()}")
    if act_options:
        extract_act_options(act_options, info, info.kind)
    return info


def marshal_actions(cmd: int, actions: list[Action]) -> bytes:
    """Encode actions as a list numbered from 1."""
    options = [
        Option(
            ValueType.BYTES,
            position,
            marshal_action(cmd, action, TCA_ACT_OPTIONS | NLA_F_NESTED),
        )
        for position, action in enumerate(actions, start=1)
    ]
    return marshal_attributes(options)


def marshal_action(cmd: int, info: Action | None, act_option: int) -> bytes:
    """Encode one action; its options go under the attribute type ``act_option``.

    Missing kind options are tolerated, as is any option error on deletion.
    """
    if info is None:
        raise NoArgError("Action")
    if not info.kind:
        raise TcError("kind is missing")
    handler = _KINDS.get(info.kind)
    if handler is None:
        raise TcError(f"unknown kind '{info.kind}'")

    try:
        data = handler.marshal(getattr(info, handler.field))
    except TcError as exc:
        if not _is_missing_argument(exc) and cmd != RTM_DELACTION:
            raise
        data = b""

    options = [
        Option(ValueType.BYTES, act_option, data),
        Option(ValueType.STRING, TCA_ACT_KIND, info.kind),
    ]
    if info.index != 0:
        options.append(Option(ValueType.UINT32, TCA_ACT_INDEX, info.index))
    if info.stats is not None:
        options.append(Option(ValueType.BYTES, TCA_ACT_STATS, info.stats))
    if info.cookie is not None:
        options.append(Option(ValueType.BYTES, TCA_ACT_COOKIE, info.cookie))
    if info.flags is not None:
        options.append(Option(ValueType.UINT64, TCA_ACT_FLAGS, info.flags))
    return marshal_attributes(options)


def extract_act_options(data: bytes, action: Action, kind: str) -> Any:
    """Decode the options of ``kind``, store them on ``action`` and return them."""
    handler = _KINDS.get(kind)
    if handler is None:
        raise TcError(f"extract_act_options(): unsupported kind: {kind}")
    value = handler.unmarshal(data)
    setattr(action, handler.field, value)
    return value