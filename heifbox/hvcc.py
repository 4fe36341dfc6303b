"""HEVC decoder configuration record box."""

from __future__ import annotations

from dataclasses import dataclass, field

from heifbox.box import Box


def _hex(value):
    return f"0x{value:X}"


@dataclass
class _NALArray:
    """A group of NAL units of one type, as stored in the configuration record."""

    array_completeness: bool = False
    nal_unit_type: int = 0
    nal_units: list = field(default_factory=list)

    @property
    def name(self):
        return "Array"

    @classmethod
    def read(cls, stream):
        header = stream.read_uint8()
        count = stream.read_uint16()
        units = [stream.read(stream.read_uint16()) for _ in range(count)]
        return cls(
            array_completeness=bool(header >> 7),
            nal_unit_type=header & 0x3F,
            nal_units=units,
        )

    def displayable_properties(self):
        return [
            ("Array completeness", "yes" if self.array_completeness else "no"),
            ("NAL unit type", str(self.nal_unit_type)),
            ("NAL units", str(len(self.nal_units))),
        ]


class HVCC(Box):
    """HEVC configuration box."""

    def __init__(self):
        super().__init__("hvcC")
        self.configuration_version = 0
        self.general_profile_space = 0
        self.general_tier_flag = 0
        self.general_profile_idc = 0
        self.general_profile_compatibility_flags = 0
        self.general_constraint_indicator_flags = 0
        self.general_level_idc = 0
        self.min_spatial_segmentation_idc = 0
        self.parallelism_type = 0
        self.chroma_format = 0
        self.bit_depth_luma_minus8 = 0
        self.bit_depth_chroma_minus8 = 0
        self.avg_frame_rate = 0
        self.constant_frame_rate = 0
        self.num_temporal_layers = 0
        self.temporal_id_nested = 0
        self.length_size_minus_one = 0
        self.arrays = []

    def read_data(self, parser, stream):
        self.configuration_version = stream.read_uint8()

        value = stream.read_uint8()
        self.general_profile_space = value >> 6
        self.general_tier_flag = (value >> 5) & 0x01
        self.general_profile_idc = value & 0x1F
        self.general_profile_compatibility_flags = stream.read_uint32()

        high = stream.read_uint16()
        low = stream.read_uint32()
        self.general_constraint_indicator_flags = (high << 32) | low
        self.general_level_idc = stream.read_uint8()

        self.min_spatial_segmentation_idc = stream.read_uint16() & 0x0FFF
        self.parallelism_type = stream.read_uint8() & 0x03
        self.chroma_format = stream.read_uint8() & 0x03
        self.bit_depth_luma_minus8 = stream.read_uint8() & 0x07
        self.bit_depth_chroma_minus8 = stream.read_uint8() & 0x07
        self.avg_frame_rate = stream.read_uint16()

        value = stream.read_uint8()
        self.constant_frame_rate = (value >> 6) & 0x03
        self.num_temporal_layers = (value >> 3) & 0x07
        self.temporal_id_nested = (value >> 2) & 0x01
        self.length_size_minus_one = value & 0x03

        count = stream.read_uint8()
        self.arrays = []
        for _ in range(count):
            # Some files declare more arrays than they contain.
            if not stream.has_bytes_available():
                break
            self.arrays.append(_NALArray.read(stream))

    def displayable_properties(self):
        props = super().displayable_properties()
        props.extend(
            [
                ("Configuration version", str(self.configuration_version)),
                ("General profile space", str(self.general_profile_space)),
                ("General tier flag", _hex(self.general_tier_flag)),
                ("General profile IDC", str(self.general_profile_idc)),
                (
                    "General profile compatibility flags",
                    _hex(self.general_profile_compatibility_flags),
                ),
                (
                    "General constraint indicator flags",
                    _hex(self.general_constraint_indicator_flags),
                ),
                ("General level IDC", str(self.general_level_idc)),
                ("Min spacial segmentation IDC", str(self.min_spatial_segmentation_idc)),
                ("Parallelism type", str(self.parallelism_type)),
                ("Chroma format", str(self.chroma_format)),
                ("Bit depth luma minus 8", str(self.bit_depth_luma_minus8)),
                ("Bit depth chroma minus 8", str(self.bit_depth_chroma_minus8)),
                ("Avg frame rate", str(self.avg_frame_rate)),
                ("Constant frame rate", str(self.constant_frame_rate)),
                ("Num temporal layers", str(self.num_temporal_layers)),
                ("Temporal id nested", str(self.temporal_id_nested)),
                ("Length size minus one", str(self.length_size_minus_one)),
                ("Arrays", str(len(self.arrays))),
            ]
        )
        return props

    def displayable_objects(self):
        return list(self.arrays)