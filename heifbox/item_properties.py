"""Item property association box and item property container box."""

from __future__ import annotations

from dataclasses import dataclass, field

from heifbox.box import ContainerBox, FullBox


@dataclass
class Association:
    """Link from an item to one property in the property container."""

    essential: bool = False
    property_index: int = 0

    @property
    def name(self):
        return "Association"

    @classmethod
    def read(cls, stream, ipma):
        """Read an association; flag bit 0 of ``ipma`` selects 15-bit indices."""
        if ipma.flags & 0x01:
            value = stream.read_uint16()
            return cls(essential=(value >> 15) == 1, property_index=value & 0x7FFF)
        value = stream.read_uint8()
        return cls(essential=(value >> 7) == 1, property_index=value & 0x7F)

    def displayable_properties(self):
        return [
            ("Essential", "yes" if self.essential else "no"),
            ("Property index", str(self.property_index)),
        ]


@dataclass
class Entry:
    """The property associations of one item."""

    item_id: int = 0
    associations: list = field(default_factory=list)

    @property
    def name(self):
        return "Entry"

    @classmethod
    def read(cls, stream, ipma):
        """Read an entry laid out according to ``ipma``'s version and flags."""
        item_id = stream.read_uint16() if ipma.version < 1 else stream.read_uint32()
        count = stream.read_uint8()
        associations = [Association.read(stream, ipma) for _ in range(count)]
        return cls(item_id=item_id, associations=associations)

    def displayable_properties(self):
        return [
            ("Item ID", str(self.item_id)),
            ("Associations", str(len(self.associations))),
        ]

    def displayable_objects(self):
        return list(self.associations)


class IPMA(FullBox):
    """Item property association box."""

    def __init__(self):
        super().__init__("ipma")
        self.entries = []

    def read_data(self, parser, stream):
        super().read_data(parser, stream)
        count = stream.read_uint32()
        self.entries.extend(Entry.read(stream, self) for _ in range(count))

    def displayable_properties(self):
        return [("Entries", str(len(self.entries)))]

    def displayable_objects(self):
        return list(self.entries)

    def get_entry(self, item_id):
        """Return the entry for ``item_id``, or None if there is none."""
        return next((entry for entry in self.entries if entry.item_id == item_id), None)


class IPCO(ContainerBox):
    """Item property container box."""

    def __init__(self):
        super().__init__("ipco")

    def property_at_index(self, index):
        """Return the property at zero-based ``index``, or None when out of range."""
        if index < 0 or index >= len(self.boxes):
            return None
        return self.boxes[index]

    def property_for(self, association):
        """Return the property an association points to (indices start at 1)."""
        index = association.property_index
        if index == 0 or len(self.boxes) < index:
            return None
        return self.boxes[index - 1]

    def properties_for(self, entry):
        """Return the properties of all resolvable associations of ``entry``."""
        found = (self.property_for(a) for a in entry.associations)
        return [prop for prop in found if prop is not None]