"""Byte stream reading and the base box types of the ISO media file format."""

from __future__ import annotations

import enum


class StringType(enum.Enum):
    """How strings are stored inside boxes."""

    NULL_TERMINATED = "null_terminated"
    PASCAL = "pascal"


class BinaryStream:
    """Sequential big-endian reader over a block of bytes."""

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self):
        return self._pos

    @property
    def remaining(self):
        return len(self._data) - self._pos

    def read(self, size):
        """Consume and return exactly ``size`` bytes."""
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes ({size})")
        if size > self.remaining:
            raise EOFError(
                f"need {size} bytes at offset {self._pos}, only {self.remaining} left"
            )
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def peek(self, offset, size):
        """Return ``size`` bytes starting ``offset`` bytes ahead, without consuming."""
        start = self._pos + offset
        if offset < 0 or size < 0 or start + size > len(self._data):
            raise EOFError(f"cannot peek {size} bytes at offset {offset}")
        return self._data[start:start + size]

    def _read_int(self, size):
        return int.from_bytes(self.read(size), "big")

    def read_uint8(self):
        return self._read_int(1)

    def read_uint16(self):
        return self._read_int(2)

    def read_uint32(self):
        return self._read_int(4)

    def read_uint64(self):
        return self._read_int(8)

    def read_fourcc(self):
        return self.read(4).decode("latin-1")

    def read_pascal_string(self):
        length = self.read_uint8()
        return self.read(length).decode("utf-8", errors="replace")

    def read_null_terminated_string(self):
        end = self._data.find(b"\0", self._pos)
        if end < 0:
            raw = self.read(self.remaining)
        else:
            raw = self.read(end - self._pos)
            self._pos += 1
        return raw.decode("utf-8", errors="replace")

    def has_bytes_available(self):
        return self.remaining > 0


def _describe(obj, indent):
    pad = "    " * indent
    lines = [f"{pad}[{obj.name}]"]
    for key, value in obj.displayable_properties():
        lines.append(f"{pad}    {key}: {value}")
    children = getattr(obj, "displayable_objects", None)
    for child in children() if children is not None else ():
        if hasattr(child, "describe"):
            lines.append(child.describe(indent + 1))
        else:
            lines.append(_describe(child, indent + 1))
    return "\n".join(lines)


class Box:
    """A box whose payload is kept as raw bytes."""

    def __init__(self, name):
        self.name = name
        self.data = b""

    def read_data(self, parser, stream):
        """Keep everything left in the stream as the box payload."""
        self.data = stream.read(stream.remaining)

    def displayable_properties(self):
        return []

    def displayable_objects(self):
        return []

    def describe(self, indent=0):
        """Render the box and its children as indented text."""
        return _describe(self, indent)


class FullBox(Box):
    """A box that starts with an 8-bit version and 24-bit flags."""

    def __init__(self, name):
        super().__init__(name)
        self.version = 0
        self.flags = 0

    def read_data(self, parser, stream):
        header = stream.read_uint32()
        self.version = header >> 24
        self.flags = header & 0x00FFFFFF

    def displayable_properties(self):
        props = super().displayable_properties()
        props.append(("Version", str(self.version)))
        props.append(("Flags", f"0x{self.flags:X}"))
        return props


class ContainerBox(Box):
    """A box whose payload is a sequence of child boxes."""

    def __init__(self, name):
        super().__init__(name)
        self.boxes = []

    def read_data(self, parser, stream):
        self.boxes = read_boxes(parser, stream)

    def add_box(self, box):
        if box is not None:
            self.boxes.append(box)

    def displayable_objects(self):
        return list(self.boxes)


def read_boxes(parser, stream):
    """Read consecutive boxes until the stream is exhausted.

    Box instances come from ``parser.create_box``; without a parser every
    box is a plain :class:`Box`.
    """
    boxes = []
    while stream.has_bytes_available():
        size = stream.read_uint32()
        name = stream.read_fourcc()
        header = 8
        if size == 1:
            size = stream.read_uint64()
            header = 16
        elif size == 0:
            size = header + stream.remaining
        if size < header:
            raise ValueError(f"invalid size {size} for box '{name}'")
        content = BinaryStream(stream.read(size - header))
        box = parser.create_box(name) if parser is not None else Box(name)
        box.read_data(parser, content)
        boxes.append(box)
    return boxes