# paxlib

A small toolkit of low-level building blocks, written in plain Python with no
third-party dependencies:

- `paxlib.number`: the `IntType` enum of fixed-width integer types (sizes and
  limits), plus `magnitude`, `float_magnitude`, `direction` and `clamp`.
- `paxlib.memory`: operations on mutable byte buffers in elements of a given
  stride: `zero`, `flip`, `copy`, `copy_flipped`, `copy_back`, `copy_forward`,
  `is_equal`.
- `paxlib.arena`: `Arena`, a bump allocator over one fixed `bytearray`, and
  `ArenaError`.
- `paxlib.byteorder`: `ByteOrder`, `native_byte_order` and conversions between
  host and network order for integers, floats and raw buffers.
- `paxlib.numformat`: `FormatOptions`, `FormatFlag`, `format_unsigned`,
  `format_signed` and `digit_from_value`, for writing integers in any radix
  from 2 to 36.
- `paxlib.numparse`: `parse_unsigned`, `parse_signed` and `value_from_digit`,
  strict width-checked reading of integers; failures raise `ParseError`.
- `paxlib.jsonevent`: the `Event` type shared by the JSON reader and writer,
  with `EventType` and `LayerType`.
- `paxlib.jsontoken`: `Lexer`, which splits JSON text into `Token`s.
- `paxlib.jsonreader`: `JsonReader`, which turns tokens into events carrying
  member names.
- `paxlib.jsonwriter`: `JsonWriter`, which writes events to a text stream as
  compact JSON.

## Installation

```
pip install paxlib
```

## Formatting and parsing numbers

```python
from paxlib.numformat import FormatFlag, FormatOptions, format_signed
from paxlib.numparse import parse_signed, parse_unsigned

options = FormatOptions(radix=16, flags=FormatFlag.LEADING_PLUS | FormatFlag.UPPER_CASE)
format_signed(127, options, 8)   # '+7F'
format_signed(-16, options, 8)   # '-10'

parse_unsigned("ff", FormatOptions.with_radix(16), 8)   # 255
parse_signed("-128", FormatOptions.with_radix(10), 8)   # -128
```

Parsing is strict: a leading `+` is refused unless `FormatFlag.LEADING_PLUS`
is set, a leading zero (as in `"007"`) is refused unless
`FormatFlag.LEADING_ZERO` is set, and a value that does not fit the requested
width raises `ParseError`. Formatting raises `FormatError` for a value outside
the width or a radix outside 2..36.

## The arena

```python
from paxlib.arena import Arena, ArenaError

arena = Arena(16)
view = arena.reserve(3, 4)    # 12 zeroed bytes, aligned to 4
arena.offset                  # 12
saved = arena.offset
try:
    arena.reserve(2, 4)       # needs bytes 12..20, only 16 exist
except ArenaError:
    arena.rewind(saved)
arena.clear()                 # hand everything back at once
```

Single reservations are never given back: `release` returns `False` for a view
of the arena and raises `ValueError` for anything else.

## Byte order

```python
from paxlib.byteorder import local_from_net, native_byte_order, net_from_local

native_byte_order()            # ByteOrder.REVERSE on a little-endian host
net_from_local(1, 2, False)    # 256 on a little-endian host
local_from_net(256, 2, False)  # 1 on a little-endian host
```

## Tokens

```python
from paxlib.jsontoken import Lexer

[token.type.name for token in Lexer("[1, -2]")]
# ['ARRAY_OPEN', 'UNSIGNED', 'COMMA', 'INTEGER', 'ARRAY_CLOSE']
```

Iteration stops at the end of the text, or just after the first error token.

## Reading JSON as events

```python
from paxlib.jsonevent import EventType
from paxlib.jsonreader import JsonReader

for event in JsonReader('{"name": "gio", "code": 156}', 16):
    if event.type is EventType.STRING:
        print(event.name, event.value)   # name gio
```

Values inside an object carry their member name in `event.name`. A member
whose value is an object or an array is announced by a `NAME` event before the
opening bracket. Integers with a leading `-` come back as `INTEGER` events,
other integers as `UNSIGNED`. Nesting deeper than the given depth raises
`JsonDepthError`. `JsonReader.next()` returns an event of type `COUNT` at the
end of the input.

## Writing JSON from events

```python
import io

from paxlib.jsonevent import Event
from paxlib.jsonwriter import JsonWriter

out = io.StringIO()
JsonWriter(out, 16).write_all([
    Event.object_open(),
    Event.string("gio", "name"),
    Event.unsigned(156, "code"),
    Event.object_close(),
])
out.getvalue()  # '{"name":"gio","code":156}'
```

`JsonWriteError` is raised for a value without a name inside an object, a
`NAME` event outside an object, nesting deeper than the given depth, or an
event type the writer cannot write.

## What it does not do

- Fractional numbers are not supported: the lexer and reader report them as an
  error ("Not implemented yet"), and the writer refuses `FLOATING` events.
- Strings are not unescaped when read nor escaped when written; a string runs
  up to the next `"`.
- There is no command-line tool and no allocation of system memory pages; the
  arena is an ordinary `bytearray`.

## Running the tests

```
pip install -e ".[test]"
pytest
```