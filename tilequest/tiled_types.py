"""Data model for maps, tilesets and objects made with a tile map editor."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, List, Optional

_GID_MASK = (1 << 28) - 1


@dataclass
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


@dataclass
class TextureRect:
    """A rectangle in pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class PropertyType(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    COLOR = "color"
    FILE = "file"
    OBJECT = "object"
    CLASS = "class"


@dataclass
class Property:
    name: str = ""
    type: PropertyType = PropertyType.STRING
    value: Any = ""


def find_property(
    properties: Iterable[Property], name: str, type: PropertyType
) -> Optional[Any]:
    """Return the value of the first property with this name and type, or None."""
    for prop in properties:
        if prop.name == name and prop.type is type:
            return prop.value
    return None


@dataclass(frozen=True)
class TileGid:
    """A global tile ID in the low 28 bits with flip flags in the high 4 bits."""

    value: int = 0

    @property
    def gid(self) -> int:
        return self.value & _GID_MASK

    @property
    def rotated_hexagonal_120(self) -> bool:
        return bool(self.value >> 28 & 1)

    @property
    def flipped_diagonally(self) -> bool:
        return bool(self.value >> 29 & 1)

    @property
    def flipped_vertically(self) -> bool:
        return bool(self.value >> 30 & 1)

    @property
    def flipped_horizontally(self) -> bool:
        return bool(self.value >> 31 & 1)


@dataclass
class TilesetLink:
    first_gid: int = 0
    tileset_id: int = 0


class ObjectType(Enum):
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    POINT = "point"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    TILE = "tile"
    TEXT = "text"


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Object:
    id: int = 0  # valid IDs are >= 1
    type: ObjectType = ObjectType.RECTANGLE
    template_path: str = ""
    name: str = ""
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    tile: TileGid = field(default_factory=TileGid)
    tileset: TilesetLink = field(default_factory=TilesetLink)
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class Frame:
    duration_ms: int = 0
    tile_id: int = 0


@dataclass
class Tile:
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    objects: List[Object] = field(default_factory=list)
    animation: List[Frame] = field(default_factory=list)


@dataclass
class WangColor:
    name: str = ""
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    tile_id: int = 0
    probability: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class WangTile:
    TOP: ClassVar[int] = 0
    TOP_RIGHT: ClassVar[int] = 1
    RIGHT: ClassVar[int] = 2
    BOTTOM_RIGHT: ClassVar[int] = 3
    BOTTOM: ClassVar[int] = 4
    BOTTOM_LEFT: ClassVar[int] = 5
    LEFT: ClassVar[int] = 6
    TOP_LEFT: ClassVar[int] = 7
    COUNT: ClassVar[int] = 8

    tile_id: int = 0
    wang_ids: List[int] = field(default_factory=lambda: [0] * WangTile.COUNT)


@dataclass
class WangSet:
    name: str = ""
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    tile_id: int = 0
    colors: List[WangColor] = field(default_factory=list)
    tiles: List[WangTile] = field(default_factory=list)


@dataclass
class Tileset:
    path: str = ""
    image_path: str = ""
    name: str = ""
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    tiles: List[Tile] = field(default_factory=list)
    wangsets: List[WangSet] = field(default_factory=list)
    tile_count: int = 0
    columns: int = 0
    tile_width: int = 0
    tile_height: int = 0
    spacing: int = 0
    margin: int = 0


class LayerType(Enum):
    TILE = "tile"
    OBJECT = "object"
    IMAGE = "image"
    GROUP = "group"


@dataclass
class Layer:
    type: LayerType = LayerType.TILE
    name: str = ""
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    tiles: List[TileGid] = field(default_factory=list)
    objects: List[Object] = field(default_factory=list)
    width: int = 0
    height: int = 0
    visible: bool = True


@dataclass
class Map:
    path: str = ""
    class_: str = ""
    properties: List[Property] = field(default_factory=list)
    tilesets: List[TilesetLink] = field(default_factory=list)
    layers: List[Layer] = field(default_factory=list)
    width: int = 0
    height: int = 0
    tile_width: int = 0
    tile_height: int = 0


@dataclass
class Context:
    file_load_callback: Optional[Callable[[str], Optional[str]]] = None
    debug_message_callback: Optional[Callable[[str], None]] = None
    tilesets: List[Tileset] = field(default_factory=list)
    templates: List[Object] = field(default_factory=list)
    maps: List[Map] = field(default_factory=list)