import struct

import pytest

from heifbox.box import BinaryStream, Box, read_boxes
from heifbox.image_properties import IROT, ISPE, ImageGrid


class _Parser:
    def create_box(self, box_type):
        return {"ispe": ISPE, "irot": IROT}.get(box_type, lambda: Box(box_type))()


def test_ispe_reads_dimensions():
    box = ISPE()
    box.read_data(None, BinaryStream(bytes(4) + struct.pack(">II", 4032, 3024)))
    assert box.name == "ispe"
    assert (box.display_width, box.display_height) == (4032, 3024)
    props = dict(box.displayable_properties())
    assert props["Display width"] == "4032"
    assert props["Display height"] == "3024"
    assert props["Version"] == "0"


def test_ispe_truncated_raises():
    with pytest.raises(EOFError):
        ISPE().read_data(None, BinaryStream(bytes(4) + b"\0\0"))


def test_irot_masks_angle():
    box = IROT()
    box.read_data(None, BinaryStream(b"\x01"))
    assert box.angle == 1
    box.read_data(None, BinaryStream(b"\xfd"))
    assert box.angle == 1
    assert box.displayable_properties() == [("Angle", "1")]


def test_boxes_through_read_boxes():
    ispe_payload = bytes(4) + struct.pack(">II", 640, 480)
    data = (
        struct.pack(">I", 8 + len(ispe_payload)) + b"ispe" + ispe_payload
        + struct.pack(">I", 9) + b"irot" + b"\x02"
    )
    ispe, irot = read_boxes(_Parser(), BinaryStream(data))
    assert isinstance(ispe, ISPE)
    assert ispe.display_width == 640
    assert irot.angle == 2
    assert "Display width: 640" in ispe.describe(0)


def test_image_grid_16_bit_dimensions():
    data = bytes([0, 0, 1, 2]) + struct.pack(">HH", 512, 256)
    stream = BinaryStream(data)
    grid = ImageGrid.read(stream)
    assert grid == ImageGrid(0, 0, 1, 2, 512, 256)
    assert not stream.has_bytes_available()


def test_image_grid_32_bit_dimensions():
    data = bytes([0, 1, 3, 4]) + struct.pack(">II", 70000, 80000)
    grid = ImageGrid.read(BinaryStream(data))
    assert grid.flags == 1
    assert (grid.rows, grid.columns) == (3, 4)
    assert (grid.output_width, grid.output_height) == (70000, 80000)


def test_image_grid_properties_and_name():
    grid = ImageGrid(version=0, flags=0, rows=1, columns=2, output_width=10, output_height=20)
    assert grid.name == "ImageGrid"
    assert grid.displayable_properties() == [
        ("Version", "0"),
        ("Flags", "0"),
        ("Rows", "1"),
        ("Columns", "2"),
        ("Output width", "10"),
        ("Output height", "20"),
    ]


def test_image_grid_truncated_raises():
    with pytest.raises(EOFError):
        ImageGrid.read(BinaryStream(bytes([0, 1, 1, 1]) + b"\0\0"))