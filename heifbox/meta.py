"""Metadata box and item reference box."""

from __future__ import annotations

from heifbox.box import Box, FullBox, _describe, read_boxes


class META(FullBox):
    """Metadata container.

    Some writers omit the version and flags and start the children right
    away; this is detected by finding an ``hdlr`` type where the first
    child's type would sit.
    """

    def __init__(self):
        super().__init__("meta")
        self.is_full_box = True
        self.boxes = []

    def read_data(self, parser, stream):
        self.is_full_box = stream.peek(4, 4) != b"hdlr"
        if self.is_full_box:
            super().read_data(parser, stream)
        self.boxes = read_boxes(parser, stream)

    def add_box(self, box):
        if box is not None:
            self.boxes.append(box)

    def displayable_properties(self):
        if self.is_full_box:
            return super().displayable_properties()
        return Box.displayable_properties(self)

    def displayable_objects(self):
        return list(self.boxes)

    def describe(self, indent=0):
        """Render the box and its children, with version and flags only for full boxes."""
        return _describe(self, indent)


class IREF(FullBox):
    """Item reference box."""

    def __init__(self):
        super().__init__("iref")
        self.boxes = []

    def read_data(self, parser, stream):
        super().read_data(parser, stream)
        if parser is None:
            self.boxes = read_boxes(parser, stream)
            return
        parser.set_info("iref", self)
        try:
            self.boxes = read_boxes(parser, stream)
        finally:
            parser.set_info("iref", None)

    def add_box(self, box):
        if box is not None:
            self.boxes.append(box)

    def displayable_objects(self):
        return list(self.boxes)