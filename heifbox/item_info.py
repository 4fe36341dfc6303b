"""Item information boxes: one entry per item, and the table holding them."""

from __future__ import annotations

from heifbox.box import FullBox, StringType, read_boxes


def _string_reader(parser, stream):
    """Pick the string reader matching the parser's preferred string type."""
    string_type = getattr(parser, "preferred_string_type", StringType.NULL_TERMINATED)
    if string_type == StringType.PASCAL:
        return stream.read_pascal_string
    return stream.read_null_terminated_string


class INFE(FullBox):
    """Item information entry."""

    def __init__(self):
        super().__init__("infe")
        self.item_id = 0
        self.item_protection_index = 0
        self.item_type = ""
        self.item_name = ""
        self.content_type = ""
        self.content_encoding = ""
        self.item_uri_type = ""

    def read_data(self, parser, stream):
        super().read_data(parser, stream)
        read_string = _string_reader(parser, stream)

        if self.version in (0, 1):
            self.item_id = stream.read_uint16()
            self.item_protection_index = stream.read_uint16()
            self.item_name = read_string()
            self.content_type = read_string()
            self.content_encoding = read_string()

        if self.version >= 2:
            if self.version == 2:
                self.item_id = stream.read_uint16()
            elif self.version == 3:
                self.item_id = stream.read_uint32()
            self.item_protection_index = stream.read_uint16()
            self.item_type = stream.read_fourcc()
            if self.item_type == "mime":
                self.content_type = read_string()
                self.content_encoding = read_string()
            elif self.item_type == "uri ":
                self.item_uri_type = read_string()

    def displayable_properties(self):
        props = super().displayable_properties()
        props.extend(
            [
                ("Item ID", str(self.item_id)),
                ("Item protection index", str(self.item_protection_index)),
                ("Item type", self.item_type),
                ("Item name", self.item_name),
                ("Content type", self.content_type),
                ("Content encoding", self.content_encoding),
                ("Item URI type", self.item_uri_type),
            ]
        )
        return props


class IINF(FullBox):
    """Item information box: the list of item entries."""

    def __init__(self):
        super().__init__("iinf")
        self.entries = []

    @property
    def boxes(self):
        return list(self.entries)

    def read_data(self, parser, stream):
        super().read_data(parser, stream)
        # The declared entry count is skipped; entries are read until the end.
        if self.version == 0:
            stream.read_uint16()
        else:
            stream.read_uint32()
        self.entries = []
        for box in read_boxes(parser, stream):
            self.add_box(box)

    def add_entry(self, entry):
        if entry is not None:
            self.entries.append(entry)

    def add_box(self, box):
        """Add ``box`` if it is an item entry; anything else is ignored."""
        if isinstance(box, INFE):
            self.add_entry(box)

    def get_item_info(self, item_id):
        """Return the entry for ``item_id``, or None if there is none."""
        return next((infe for infe in self.entries if infe.item_id == item_id), None)

    def displayable_objects(self):
        return list(self.entries)