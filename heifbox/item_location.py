"""Item location box: where each item's data lives in the file."""

from __future__ import annotations

from dataclasses import dataclass, field

from heifbox.box import FullBox

_SIZED_READERS = {
    2: "read_uint16",
    4: "read_uint32",
    8: "read_uint64",
}


def _read_sized(stream, size):
    """Read an unsigned field of ``size`` bytes; unsupported sizes yield 0."""
    reader = _SIZED_READERS.get(size)
    if reader is None:
        return 0
    return getattr(stream, reader)()


@dataclass
class Extent:
    """One contiguous piece of an item's data."""

    index: int = 0
    offset: int = 0
    length: int = 0

    @property
    def name(self):
        return "Extent"

    @classmethod
    def read(cls, stream, iloc):
        """Read an extent laid out according to the sizes declared by ``iloc``."""
        extent = cls()
        if iloc.version in (1, 2) and iloc.index_size > 0:
            extent.index = _read_sized(stream, iloc.index_size)
        extent.offset = _read_sized(stream, iloc.offset_size)
        extent.length = _read_sized(stream, iloc.length_size)
        return extent

    def displayable_properties(self):
        return [
            ("Index", str(self.index)),
            ("Offset", str(self.offset)),
            ("Length", str(self.length)),
        ]


@dataclass
class Item:
    """Location of one item, made of one or more extents."""

    item_id: int = 0
    construction_method: int = 0
    data_reference_index: int = 0
    base_offset: int = 0
    extents: list = field(default_factory=list)

    @property
    def name(self):
        return "Item"

    @classmethod
    def read(cls, stream, iloc):
        """Read an item entry laid out according to ``iloc``'s version and sizes."""
        item = cls()
        if iloc.version < 2:
            item.item_id = stream.read_uint16()
        elif iloc.version == 2:
            item.item_id = stream.read_uint32()
        if iloc.version in (1, 2):
            item.construction_method = stream.read_uint16() & 0xF
        item.data_reference_index = stream.read_uint16()
        item.base_offset = _read_sized(stream, iloc.base_offset_size)
        count = stream.read_uint16()
        item.extents = [Extent.read(stream, iloc) for _ in range(count)]
        return item

    def displayable_properties(self):
        return [
            ("Item ID", str(self.item_id)),
            ("Construction method", str(self.construction_method)),
            ("Data reference index", str(self.data_reference_index)),
            ("Base offset", str(self.base_offset)),
            ("Extent count", str(len(self.extents))),
        ]

    def displayable_objects(self):
        return list(self.extents)


class ILOC(FullBox):
    """Item location box."""

    def __init__(self):
        super().__init__("iloc")
        self.offset_size = 0
        self.length_size = 0
        self.base_offset_size = 0
        self.index_size = 0
        self.items = []

    def read_data(self, parser, stream):
        super().read_data(parser, stream)
        sizes = stream.read_uint8()
        self.offset_size = sizes >> 4
        self.length_size = sizes & 0xF
        sizes = stream.read_uint8()
        self.base_offset_size = sizes >> 4
        self.index_size = sizes & 0xF
        count = stream.read_uint16() if self.version < 2 else stream.read_uint32()
        self.items = [Item.read(stream, self) for _ in range(count)]

    def displayable_properties(self):
        props = super().displayable_properties()
        props.append(("Offset size", str(self.offset_size)))
        props.append(("Length size", str(self.length_size)))
        props.append(("Base offset size", str(self.base_offset_size)))
        if self.version in (1, 2):
            props.append(("Index size", str(self.index_size)))
        props.append(("Items", str(len(self.items))))
        return props

    def displayable_objects(self):
        return list(self.items)

    def get_item(self, item_id):
        """Return the item with ``item_id``, or None if there is none."""
        return next((item for item in self.items if item.item_id == item_id), None)