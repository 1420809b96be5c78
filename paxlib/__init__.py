"""Integer, arena, byte-order and radix helpers with a streaming JSON reader and writer."""

__version__ = "0.1.0"

__all__ = [
    "number",
    "memory",
    "arena",
    "byteorder",
    "numformat",
    "numparse",
    "jsonevent",
    "jsontoken",
    "jsonreader",
    "jsonwriter",
]