import pytest

from heifbox.box import BinaryStream
from heifbox.hvcc import HVCC

HEADER = bytes.fromhex(
    "01"  # configuration version
    "01"  # profile space / tier / idc
    "60000000"  # compatibility flags
    "900000000000"  # constraint indicator flags
    "5A"  # level
    "F000"  # min spatial segmentation
    "FC"  # parallelism
    "FD"  # chroma format
    "F8"  # luma depth
    "F8"  # chroma depth
    "0000"  # avg frame rate
    "0F"  # frame rate / layers / nested / length size
)

ARRAY = bytes.fromhex("A0" "0001" "0003" "400C01")


def _parse(payload):
    box = HVCC()
    box.read_data(None, BinaryStream(payload))
    return box


def test_defaults():
    box = HVCC()
    assert box.name == "hvcC"
    assert box.configuration_version == 0
    assert box.general_constraint_indicator_flags == 0
    assert box.arrays == []


def test_header_fields():
    box = _parse(HEADER + b"\x00")
    assert box.configuration_version == 1
    assert box.general_profile_idc == 1
    assert box.general_profile_space == 0
    assert box.general_tier_flag == 0
    assert box.general_profile_compatibility_flags == 0x60000000
    assert box.general_constraint_indicator_flags == int.from_bytes(HEADER[6:12], "big")
    assert box.general_level_idc == 0x5A
    assert box.avg_frame_rate == 0
    assert box.length_size_minus_one == 3
    assert box.arrays == []


def test_reserved_bits_are_masked():
    box = _parse(HEADER + b"\x00")
    assert box.min_spatial_segmentation_idc == 0
    assert box.parallelism_type == 0
    assert box.bit_depth_luma_minus8 == 0
    assert box.bit_depth_chroma_minus8 == 0


def test_arrays_are_read():
    box = _parse(HEADER + b"\x01" + ARRAY)
    assert len(box.arrays) == 1
    array = box.arrays[0]
    assert array.array_completeness is True
    assert array.nal_units == [ARRAY[-3:]]
    assert box.displayable_objects() == box.arrays


def test_missing_arrays_are_tolerated():
    box = _parse(HEADER + b"\x02" + ARRAY)
    assert len(box.arrays) == 1


def test_truncated_header_raises():
    with pytest.raises(EOFError):
        _parse(HEADER[:10])


def test_displayable_properties():
    box = _parse(HEADER + b"\x01" + ARRAY)
    props = dict(box.displayable_properties())
    assert props["Configuration version"] == "1"
    assert props["General profile compatibility flags"] == "0x60000000"
    assert props["General tier flag"] == "0x0"
    assert props["Arrays"] == "1"
    keys = [key for key, _ in box.displayable_properties()]
    assert keys[0] == "Configuration version"
    assert keys[-1] == "Arrays"


def test_describe_lists_arrays():
    text = _parse(HEADER + b"\x01" + ARRAY).describe()
    assert text.startswith("[hvcC]")
    assert "[Array]" in text