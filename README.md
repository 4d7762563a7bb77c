# tcattrs

`tcattrs` converts Linux traffic-control (tc) settings to netlink attribute
bytes and converts those bytes back to settings. It handles the option blocks
of several queueing disciplines and tc actions. It only builds and parses
bytes. It needs no sockets and runs on any operating system.

## Installation

```
pip install tcattrs
```

Install the `test` extra to run the test suite:

```
pip install "tcattrs[test]"
pytest
```

## What is covered

Queueing disciplines:

| Module | Dataclasses | Functions |
|---|---|---|
| `tcattrs.qdisc_basic` | `Atm`, `AtmPvc`, `Cbs`, `CbsOpt`, `Codel`, `Drr`, `Dsmark` | `marshal_atm`/`unmarshal_atm`, `marshal_cbs`/`unmarshal_cbs`, `marshal_codel`/`unmarshal_codel`, `marshal_drr`/`unmarshal_drr`, `marshal_dsmark`/`unmarshal_dsmark` |
| `tcattrs.qdisc_cake` | `Cake` | `marshal_cake`, `unmarshal_cake` |
| `tcattrs.qdisc_fq` | `Fq`, `FqPrioQopt` | `marshal_fq`, `unmarshal_fq` |
| `tcattrs.qdisc_ets` | `Ets` | `marshal_ets`, `unmarshal_ets`, plus the nested `marshal_ets_quanta`/`unmarshal_ets_quanta` and `marshal_ets_prio_map`/`unmarshal_ets_prio_map` |
| `tcattrs.qdisc_fq_codel` | `FqCodel` | `marshal_fq_codel`, `unmarshal_fq_codel` |
| `tcattrs.qdisc_hfsc` | `Hfsc`, `ServiceCurve`, `HfscQOpt` | `marshal_hfsc`/`unmarshal_hfsc`, `marshal_hfsc_qopt`/`unmarshal_hfsc_qopt` |

Actions, one module each: `act_bpf`, `act_connmark`, `act_csum`, `act_ct`,
`act_ctinfo`, `act_defact`, `act_gact`, `act_gate`, `act_ife`, `act_ipt`,
`act_mirred`, `act_mpls`, `act_nat`, `act_sample`, `act_skbedit`,
`act_skbmod`, `act_tunnel_key` and `act_vlan`. Each module provides a
dataclass, a parameter struct such as `MirredParam` or `GactParms`, and a
`marshal_<name>`/`unmarshal_<name>` pair. `tcattrs.action` wraps all of them
in `Action`.

## Usage

Fields left as `None` are not encoded. A `marshal_*` function called with
`None` instead of a dataclass raises `NoArgError`.

```python
from tcattrs.qdisc_fq_codel import FqCodel, marshal_fq_codel, unmarshal_fq_codel

opts = FqCodel(target=5000, limit=10240, ecn=1)
data = marshal_fq_codel(opts)
assert unmarshal_fq_codel(data) == opts
```

### Actions

`marshal_actions(cmd, actions)` encodes a list of `Action` objects the way a
filter carries them: a nested list numbered from 1. `unmarshal_actions(data)`
decodes that list. `Action.kind` selects which options field is encoded, for
example `"mirred"` uses `Action.mirred`.

```python
from tcattrs.action import Action, marshal_actions, unmarshal_actions
from tcattrs.act_mirred import Mirred, MirredParam

act = Action(kind="mirred", mirred=Mirred(parms=MirredParam(index=42, action=1)))
data = marshal_actions(0, [act])
assert unmarshal_actions(data) == [act]
```

`marshal_action(cmd, info, act_option)` handles these cases as follows:

- A missing options object for the kind is accepted, and an empty options
  attribute is written.
- When `cmd` is `tcattrs.constants.RTM_DELACTION`, any error from the kind's
  options is ignored.
- A missing or unknown kind raises `TcError`.

The `tm` timestamps of an action are read-only. Every action except
`tunnel_key` raises `NoArgAlterError` when `tm` is set on marshalling.
`tunnel_key` does not send the timestamps.

### Low-level attributes

`tcattrs.attributes` holds the netlink attribute encoder and decoder that the
other modules use:

- `marshal_attributes`: encodes a list of `Option` values.
- `decode_attributes`: decodes bytes into `Attribute` objects.
- `Attribute` has typed readers: `uint8()` … `int64()`, `string()` and `flag()`.
- `NativeStruct` is the base class for packed kernel structs. It provides
  `pack`, `pack_aligned` and `unpack`.

```python
from tcattrs.attributes import Option, ValueType, marshal_attributes, decode_attributes

data = marshal_attributes([Option(ValueType.UINT32, 3, 125)])
(attr,) = decode_attributes(data)
assert attr.attr_type == 3 and attr.uint32() == 125
```

### Helpers and constants

`tcattrs.helpers` converts addresses to and from the layouts the kernel uses:

- `ip_to_uint32` and `uint32_to_ip`: IPv4 address as a native-endian integer.
- `bytes_to_ip` and `ip_to_bytes`: address as 4 or 16 bytes.
- `hardware_addr_to_bytes`: accepts bytes, or text such as
  `"02:00:00:00:00:01"`, `"02-00-00-00-00-01"` or `"0200.0000.0001"`.
- `bytes_to_hardware_addr`, `endian_swap_uint16`, `endian_swap_uint32` and
  `bytes_to_int32`.

`tcattrs.constants` provides:

- The rtnetlink message numbers, such as `RTM_NEWTFILTER` and `RTM_DELACTION`.
- `FILTER_KINDS`.
- `is_filter`, `is_chain_action` and `is_del_action`.

### Errors

All errors are subclasses of `tcattrs.attributes.TcError`:

- `NoArgError`: a required argument is missing.
- `NoArgAlterError`: a read-only field such as `tm` was given.
- `InvalidArgError`: a value is invalid, for example an address of the wrong length.
- `NotImplementedTcError`: the feature is not supported.

Decoding an unknown attribute type, or an attribute of the wrong length,
raises `TcError`.

## What it does not do

- It does not talk to the kernel. No netlink socket is opened, and nothing
  adds, replaces, deletes or lists qdiscs, classes, filters or actions.
- It does not encode classifier (filter) options. `constants.is_filter` only
  recognises filter kind names.
- It has no `police` action. `Action.stats` is kept as raw bytes and is not
  decoded into statistics.