# hashmesh

Building blocks for a node of a hash-IP mesh network. In such a network each
node has a virtual IPv6 address in `fd42::/16`. This package is a library. It
has no command of its own.

## Modules

- `hashmesh.generator`: `Generator` writes a compact binary format. It covers
  single bytes and big-endian integers 1 to 8 octets wide
  (`push_integer_u`). It also has Bitcoin-style `uvarint`s on 1, 3, 5 or 9
  octets, length-prefixed data (`push_bytes_sizeoctets`, `push_varstring`),
  lists (`push_vector_string`, `push_vector_object`) and maps
  (`push_map_object`, written in ascending key order). You pass your own
  serialize functions for objects. `getvalue()` returns the bytes.
  `max_value_of_octets(n)` gives the largest value of an `n`-octet field. The
  writer refuses that value itself with `FormatErrorWriteValueTooBig`.
- `hashmesh.parser`: `Parser` reads the same format back. Strings come back as
  `bytes`. `pop_map_object` raises `FormatErrorReadBadFormat` on a repeated
  key. Reading past the end raises `FormatErrorRead`. `is_end()` tells whether
  all input was read, and `debug()` describes the position it is at.
- `hashmesh.errors`: `FormatError` and its subclasses.
- `hashmesh.strings_utils`: hex helpers `to_hex`, `from_hex`, `int2hexchar`,
  `hexchar2int` and `doublehexchar2int`, all lower case only. Also debug dumps
  with `to_debug` and `to_debug_b`. `chardbg` shows one character, e.g. `0x0`,
  `0x1F=31` or the character itself. `DebugStyle` selects how much of long
  data is shown.
- `hashmesh.haship`: `HashipAddr` is a 16-octet address. Build it from IPv6
  text (`from_dot`) or binary (`from_bin`). `get_hip_as_string(with_dots)`
  gives its hex form. `addr_is_galaxy(addr)` checks for the `fd42` prefix.
- `hashmesh.netutils`: `parse_ip_string("100.200.50.50:32000")` checks an
  IPv4 `ip:port` peer reference and returns `("100.200.50.50", 32000)`. A bad
  length, a bad port or an address outside the usual unicast classes raises
  `ValueError`.
- `hashmesh.protocol`: the `ProtoCmd` command values and the protocol size
  and TTL constants. `command_is_valid_from_unknown_peer(cmd)` is true only
  for hello and ping commands.
- `hashmesh.peering_stats`: `PeeringStats` holds per-peer byte and packet
  totals and the connection time as `HH:MM:SS`. Its `DataTransmissionBuffer`
  keeps a per-interval history and renders it as Google Charts JavaScript
  snippets. Both take an optional `clock` function.
- `hashmesh.rpc`: `RpcServer` is a threaded TCP server and a context manager.
  Every message, in either direction, has a 2-octet big-endian length
  prefix; `encode_frame` builds one. A message is JSON. The command name is
  the value under the smallest key of an object, or the first element of an
  array. The registered function receives the whole message text and returns
  the reply. An unknown command or bad JSON closes the connection.
- `hashmesh.nonce`: `show_nice_nonce` renders a nonce as `(0*N)...V`.
- `hashmesh.project`: `project_version_info(features)` describes code levels
  and crypto features. It also has `enabled_or_disabled` and
  `InvalidArgumentInVersion`.
- `hashmesh.syserror`: `errno_to_string` gives the system message for an
  errno value.
- `hashmesh.text_ui`: `ask_user_forpermission(msg)` asks on the terminal. Only
  the exact answer `YES` counts as yes.

## Example

```python
from hashmesh.generator import Generator
from hashmesh.parser import Parser

gen = Generator()
gen.push_integer_uvarint(1000)
gen.push_varstring(b"hello")

parser = Parser(gen.getvalue())
assert parser.pop_integer_uvarint() == 1000
assert parser.pop_varstring() == b"hello"
assert parser.is_end()
```

```python
from hashmesh.haship import HashipAddr, addr_is_galaxy

addr = HashipAddr.from_dot("fd42:10a9:4318:509b:80ab:8042:6275:609b")
print(addr.get_hip_as_string(True))   # fd42:10a9:4318:509b:80ab:8042:6275:609b
print(addr_is_galaxy(addr))           # True
```

## What it does not do

This is not a node you can run. It has no command-line program and no tunnel
or packet forwarding. It does not generate, store, sign or verify keys, so it
cannot derive an address from a public key. It reads no configuration files
and serves no HTTP debug page. Those pieces have to be built on top of these
modules.

## Install and test

```
pip install .
pip install .[test]
pytest
```