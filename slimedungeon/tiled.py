"""Tiled map and tileset records and their JSON readers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from slimedungeon.components import AnimationFrame

log = logging.getLogger(__name__)


@dataclass
class Property:
    name: str = ""
    type: str = ""
    value: str = ""


@dataclass
class Layer:
    compression: str = ""
    data: str = ""
    encoding: str = ""
    height: int = 0
    id: int = 0
    name: str = ""
    opacity: float = 0.0
    properties: list[Property] = field(default_factory=list)
    type: str = ""
    visible: bool = False
    width: int = 0
    x: int = 0
    y: int = 0


@dataclass
class TileMap:
    compressionlevel: int = 0
    height: int = 0
    infinite: bool = False
    layers: list[Layer] = field(default_factory=list)
    nextlayerid: int = 0
    nextobjectid: int = 0
    orientation: str = ""
    renderorder: str = ""
    tiledversion: str = ""
    tileheight: int = 0
    tilesets: dict[str, int] = field(default_factory=dict)
    tilewidth: int = 0
    type: str = ""
    version: str = ""
    width: int = 0


@dataclass
class ObjectProperty:
    name: str = ""
    type: str = ""
    value: str = ""


@dataclass(eq=False)
class Collision:
    """A collision box; two boxes are equal when their geometry is."""

    id: int = 0
    x: float = 0.0
    y: float = 0.0
    width: float = 16.0
    height: float = 16.0
    properties: list[ObjectProperty] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collision):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (
            other.x,
            other.y,
            other.width,
            other.height,
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass
class Tile:
    id: int = 0
    properties: list[ObjectProperty] = field(default_factory=list)
    animation: list[AnimationFrame] = field(default_factory=list)
    objects: list[Collision] = field(default_factory=list)


@dataclass
class Tileset:
    columns: int = 0
    image: str = ""
    imageheight: int = 0
    imagewidth: int = 0
    margin: int = 0
    name: str = ""
    spacing: int = 0
    tilecount: int = 0
    tiledversion: str = ""
    tileheight: int = 0
    tiles: list[Tile] = field(default_factory=list)
    tilewidth: int = 0
    type: str = ""
    version: str = ""


def file_stem(path: str) -> str:
    """Return the part of a path after the last '/' and before the last '.'."""
    name = path.rsplit("/", 1)[-1]
    if "." in name:
        name = name.rsplit(".", 1)[0]
    return name


def _property(data: Mapping[str, Any]) -> Property:
    return Property(str(data["name"]), str(data["type"]), str(data["value"]))


def _object_property(data: Mapping[str, Any]) -> ObjectProperty:
    return ObjectProperty(str(data["name"]), str(data["type"]), str(data["value"]))


def _layer(data: Mapping[str, Any]) -> Layer:
    return Layer(
        compression=str(data["compression"]),
        data=str(data["data"]),
        encoding=str(data["encoding"]),
        height=int(data["height"]),
        id=int(data["id"]),
        name=str(data["name"]),
        opacity=float(data["opacity"]),
        type=str(data["type"]),
        visible=bool(data["visible"]),
        width=int(data["width"]),
        x=int(data["x"]),
        y=int(data["y"]),
        properties=[_property(p) for p in data.get("properties", [])],
    )


def map_from_dict(data: Mapping[str, Any]) -> TileMap:
    """Build a map from decoded Tiled JSON; raise KeyError on a missing field."""
    tilesets: dict[str, int] = {}
    for entry in data["tilesets"]:
        first_gid = int(entry["firstgid"])
        tilesets.setdefault(file_stem(str(entry["source"])), first_gid)
    return TileMap(
        compressionlevel=int(data["compressionlevel"]),
        height=int(data["height"]),
        infinite=bool(data["infinite"]),
        layers=[_layer(layer) for layer in data["layers"]],
        nextlayerid=int(data["nextlayerid"]),
        nextobjectid=int(data["nextobjectid"]),
        orientation=str(data["orientation"]),
        renderorder=str(data["renderorder"]),
        tiledversion=str(data["tiledversion"]),
        tileheight=int(data["tileheight"]),
        tilewidth=int(data["tilewidth"]),
        type=str(data["type"]),
        version=str(data["version"]),
        width=int(data["width"]),
        tilesets=tilesets,
    )


def _frame(data: Mapping[str, Any]) -> AnimationFrame:
    return AnimationFrame(tile_id=int(data["tileid"]), duration=float(data["duration"]))


def _collision(data: Mapping[str, Any]) -> Collision:
    return Collision(
        id=int(data["id"]),
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        height=float(data["height"]),
        properties=[_object_property(p) for p in data.get("properties", [])],
    )


def _tile(data: Mapping[str, Any]) -> Tile:
    tile = Tile(id=int(data["id"]))
    if "animation" in data:
        tile.animation = [_frame(f) for f in data["animation"]]
    if "properties" in data:
        tile.properties = [_object_property(p) for p in data["properties"]]
    group = data.get("objectgroup")
    if group is not None:
        if "animations" in group:
            tile.animation = [_frame(f) for f in group["animations"]]
        if "objects" in group:
            tile.objects = [_collision(o) for o in group["objects"]]
    return tile


def tileset_from_dict(data: Mapping[str, Any]) -> Tileset:
    """Build a tileset from decoded Tiled JSON; raise KeyError on a missing field."""
    return Tileset(
        columns=int(data["columns"]),
        imageheight=int(data["imageheight"]),
        imagewidth=int(data["imagewidth"]),
        margin=int(data["margin"]),
        name=str(data["name"]),
        spacing=int(data["spacing"]),
        tilecount=int(data["tilecount"]),
        tiledversion=str(data["tiledversion"]),
        tileheight=int(data["tileheight"]),
        tilewidth=int(data["tilewidth"]),
        type=str(data["type"]),
        version=str(data["version"]),
        tiles=[_tile(t) for t in data.get("tiles", [])],
        image=file_stem(str(data["image"])),
    )


def _load(path: str) -> Any:
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def parse_map(path: str) -> TileMap:
    """Read a map file; on any failure log it and return an empty map."""
    try:
        return map_from_dict(_load(path))
    except (OSError, ValueError, KeyError, TypeError) as error:
        log.error("could not read map %s: %s", path, error)
        return TileMap()


def parse_tileset(path: str) -> Tileset:
    """Read a tileset file; on any failure log it and return an empty tileset."""
    try:
        return tileset_from_dict(_load(path))
    except (OSError, ValueError, KeyError, TypeError) as error:
        log.error("could not read tileset %s: %s", path, error)
        return Tileset()