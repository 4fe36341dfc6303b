# heifbox

`heifbox` reads boxes of the ISO base media file format, with a focus on the
boxes found in HEIF/HEIC images:

| Module                      | Contents                                                   |
|-----------------------------|------------------------------------------------------------|
| `heifbox.box`               | `BinaryStream`, `StringType`, `Box`, `FullBox`, `ContainerBox`, `read_boxes` |
| `heifbox.image_properties`  | `ISPE` (spatial extents), `IROT` (rotation), `ImageGrid`   |
| `heifbox.item_location`     | `ILOC` with its `Item` and `Extent` records                |
| `heifbox.item_info`         | `IINF` and its `INFE` entries                              |
| `heifbox.meta`              | `META` and `IREF`                                          |
| `heifbox.item_properties`   | `IPMA` (with `Entry`, `Association`) and `IPCO`            |
| `heifbox.hvcc`              | `HVCC`, the HEVC decoder configuration record              |

It is pure Python and needs nothing beyond the standard library.

## Installation

```
pip install heifbox
```

## Reading a single box

Every box class reads its payload (the bytes after the 8- or 16-byte box
header) from a `BinaryStream` with `read_data(parser, stream)`. Boxes that
hold no children accept `None` as the parser.

```python
from heifbox.box import BinaryStream
from heifbox.image_properties import ISPE

ispe = ISPE()
ispe.read_data(None, BinaryStream(bytes.fromhex("00000000" "00000F00" "00000870")))
print(ispe.display_width, ispe.display_height)   # 3840 2160
print(ispe.describe())
```

`BinaryStream` reads big-endian integers (`read_uint8` … `read_uint64`),
four-character codes, Pascal and NUL-terminated strings; reading past the end
raises `EOFError`.

`describe(indent)` renders a box, its properties and its child objects as
indented text.

## Reading a tree of boxes

`read_boxes(parser, stream)` reads consecutive boxes until the stream is
exhausted, handling 64-bit sizes (`size == 1`) and boxes running to the end
(`size == 0`); a size smaller than its header raises `ValueError`. It asks
`parser.create_box(name)` for each box instance, so the box types it knows are
whatever that object returns. With `None` as the parser, every box becomes a
plain `Box` keeping its raw payload in `data`.

The object passed as the parser is used for:

- `create_box(name)` — return a new box for a four-character type;
- `set_info(key, value)` — called by `IREF` with the key `"iref"` while its
  children are read;
- `preferred_string_type` (optional) — a `StringType`; `INFE` reads
  Pascal strings when it is `StringType.PASCAL` and NUL-terminated strings
  otherwise.

A small factory covering the HEIF boxes:

```python
from heifbox.box import BinaryStream, Box, ContainerBox, StringType, read_boxes
from heifbox.hvcc import HVCC
from heifbox.image_properties import IROT, ISPE
from heifbox.item_info import IINF, INFE
from heifbox.item_location import ILOC
from heifbox.item_properties import IPCO, IPMA
from heifbox.meta import IREF, META

BOX_TYPES = {
    "meta": META, "iinf": IINF, "infe": INFE, "iloc": ILOC, "iref": IREF,
    "ipco": IPCO, "ipma": IPMA, "ispe": ISPE, "irot": IROT, "hvcC": HVCC,
}
CONTAINERS = {"iprp", "dinf"}


class BoxFactory:
    preferred_string_type = StringType.NULL_TERMINATED

    def __init__(self):
        self.info = {}

    def create_box(self, name):
        if name in BOX_TYPES:
            return BOX_TYPES[name]()
        if name in CONTAINERS:
            return ContainerBox(name)
        return Box(name)

    def set_info(self, key, value):
        self.info[key] = value


with open("photo.heic", "rb") as f:
    boxes = read_boxes(BoxFactory(), BinaryStream(f.read()))

for box in boxes:
    print(box.describe(0))
```

## Finding the image items

```python
meta = next(b for b in boxes if isinstance(b, META))
iinf = next(b for b in meta.boxes if isinstance(b, IINF))
iloc = next(b for b in meta.boxes if isinstance(b, ILOC))

for entry in iinf.entries:
    location = iloc.get_item(entry.item_id)
    print(entry.item_id, entry.item_type, location.extents if location else None)
```

`META` also accepts the variant without version and flags: when the bytes
where the first child's type would sit read `hdlr`, it is treated as a plain
box (`is_full_box` is then `False`).

Item properties are reached through `ipma` associations and the `ipco`
container:

```python
iprp = next(b for b in meta.boxes if b.name == "iprp")
ipco = next(b for b in iprp.boxes if isinstance(b, IPCO))
ipma = next(b for b in iprp.boxes if isinstance(b, IPMA))

entry = ipma.get_entry(item_id)
for prop in ipco.properties_for(entry):
    print(prop.name, prop.displayable_properties())
```

Property indices in associations are 1-based, as in the file format; an index
of 0 or past the end yields no property. `IPCO.property_at_index` takes a
0-based index and returns `None` when it is out of range.

Grid items carry an image grid descriptor in their data, read with
`ImageGrid.read(BinaryStream(item_bytes))`.

## What this package does not do

- There is no file-level parser and no built-in table mapping box types to
  classes: `read_boxes` relies on the `create_box` object you supply.
- There is no command-line tool.
- Boxes are only read, never written. Unknown boxes, including `mdat`, keep
  their whole payload in memory, and input is read from an in-memory
  `BinaryStream`.

## Running the tests

```
pip install -e .[test]
pytest
```