"""Box types of the ISO base media file format, with HEIF image support."""

__version__ = "0.1.0"
__all__ = [
    "box",
    "image_properties",
    "item_location",
    "item_info",
    "meta",
    "item_properties",
    "hvcc",
]