"""Image spatial extent, rotation and grid descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from heifbox.box import Box, FullBox


class ISPE(FullBox):
    """Image spatial extents."""

    def __init__(self):
        super().__init__("ispe")
        self.display_width = 0
        self.display_height = 0

    def read_data(self, parser, stream):
        super().read_data(parser, stream)
        self.display_width = stream.read_uint32()
        self.display_height = stream.read_uint32()

    def displayable_properties(self):
        props = super().displayable_properties()
        props.append(("Display width", str(self.display_width)))
        props.append(("Display height", str(self.display_height)))
        return props


class IROT(Box):
    """Image rotation, in steps of 90 degrees anticlockwise."""

    def __init__(self):
        super().__init__("irot")
        self.angle = 0

    def read_data(self, parser, stream):
        self.angle = stream.read_uint8() & 0x03

    def displayable_properties(self):
        props = super().displayable_properties()
        props.append(("Angle", str(self.angle)))
        return props


@dataclass
class ImageGrid:
    """Layout of a derived grid image."""

    version: int = 0
    flags: int = 0
    rows: int = 0
    columns: int = 0
    output_width: int = 0
    output_height: int = 0

    @property
    def name(self):
        return "ImageGrid"

    @classmethod
    def read(cls, stream):
        """Read a grid descriptor; flag bit 0 selects 32-bit output dimensions."""
        grid = cls(
            version=stream.read_uint8(),
            flags=stream.read_uint8(),
            rows=stream.read_uint8(),
            columns=stream.read_uint8(),
        )
        if grid.flags & 1:
            grid.output_width = stream.read_uint32()
            grid.output_height = stream.read_uint32()
        else:
            grid.output_width = stream.read_uint16()
            grid.output_height = stream.read_uint16()
        return grid

    def displayable_properties(self):
        return [
            ("Version", str(self.version)),
            ("Flags", str(self.flags)),
            ("Rows", str(self.rows)),
            ("Columns", str(self.columns)),
            ("Output width", str(self.output_width)),
            ("Output height", str(self.output_height)),
        ]