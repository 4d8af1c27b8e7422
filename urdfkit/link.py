"""Links and their parts: geometry, materials, inertia, visuals and collisions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from xml.etree.ElementTree import Element

from .common import ParseError, lexical_cast, log_debug, log_error
from .pose import Pose, Vector3, parse_pose, parse_vector3

__all__ = [
    "Color",
    "GeometryType",
    "Sphere",
    "Box",
    "Cylinder",
    "Mesh",
    "Material",
    "Inertial",
    "Visual",
    "Collision",
    "Link",
    "parse_color",
    "parse_material",
    "parse_sphere",
    "parse_box",
    "parse_cylinder",
    "parse_mesh",
    "parse_geometry",
    "parse_inertial",
    "parse_visual",
    "parse_collision",
    "parse_link",
]


@dataclass
class Color:
    """An RGBA colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


class GeometryType(enum.Enum):
    """The kinds of shape a visual or collision element can hold."""

    SPHERE = "sphere"
    BOX = "box"
    CYLINDER = "cylinder"
    MESH = "mesh"


@dataclass
class Sphere:
    """A sphere of a given radius."""

    radius: float = 0.0
    type: GeometryType = field(default=GeometryType.SPHERE, init=False)


@dataclass
class Box:
    """A box of the given dimensions."""

    dim: Vector3 = field(default_factory=Vector3)
    type: GeometryType = field(default=GeometryType.BOX, init=False)


@dataclass
class Cylinder:
    """A cylinder of a given length and radius."""

    length: float = 0.0
    radius: float = 0.0
    type: GeometryType = field(default=GeometryType.CYLINDER, init=False)


@dataclass
class Mesh:
    """A mesh stored in a file, with a scale per axis."""

    filename: str = ""
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    type: GeometryType = field(default=GeometryType.MESH, init=False)


Geometry = Union[Sphere, Box, Cylinder, Mesh]


@dataclass
class Material:
    """A named material with an optional texture and colour."""

    name: str = ""
    texture_filename: str = ""
    color: Color = field(default_factory=Color)


@dataclass
class Inertial:
    """Mass properties of a link."""

    origin: Pose = field(default_factory=Pose)
    mass: float = 0.0
    ixx: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyy: float = 0.0
    iyz: float = 0.0
    izz: float = 0.0


@dataclass
class Visual:
    """The visual appearance of a link."""

    origin: Pose = field(default_factory=Pose)
    geometry: Optional[Geometry] = None
    material_name: str = ""
    material: Optional[Material] = None
    name: str = ""


@dataclass
class Collision:
    """The collision shape of a link."""

    origin: Pose = field(default_factory=Pose)
    geometry: Optional[Geometry] = None
    name: str = ""


@dataclass
class Link:
    """A rigid body of a robot, with its place in the kinematic tree."""

    name: str = ""
    inertial: Optional[Inertial] = None
    visual: Optional[Visual] = None
    visual_array: list[Visual] = field(default_factory=list)
    collision: Optional[Collision] = None
    collision_array: list[Collision] = field(default_factory=list)
    parent_joint: Optional[Any] = field(default=None, repr=False, compare=False)
    parent_link: Optional["Link"] = field(default=None, repr=False, compare=False)
    child_joints: list[Any] = field(default_factory=list, repr=False, compare=False)
    child_links: list["Link"] = field(default_factory=list, repr=False, compare=False)


def parse_color(text: str) -> Color:
    """Parse four space-separated numbers into a colour."""
    values = [lexical_cast(piece) for piece in text.split(" ") if piece]
    if len(values) != 4:
        raise ParseError(
            f"Parser found {len(values)} elements but 4 expected while parsing color [{text}]"
        )
    return Color(*values)


def parse_material(element: Element, only_name_is_ok: bool) -> Material:
    """Parse a material element.

    A material with neither colour nor texture raises ``ParseError`` unless
    ``only_name_is_ok`` is true, in which case only its name is kept.
    """
    name = element.get("name")
    if name is None:
        raise ParseError("Material must contain a name attribute")
    material = Material(name=name)
    has_rgb = False
    has_filename = False

    texture = element.find("texture")
    if texture is not None:
        filename = texture.get("filename")
        if filename is not None:
            material.texture_filename = filename
            has_filename = True

    color = element.find("color")
    if color is not None:
        rgba = color.get("rgba")
        if rgba is not None:
            try:
                material.color = parse_color(rgba)
                has_rgb = True
            except ParseError as exc:
                material.color = Color()
                log_error(f"Material [{name}] has malformed color rgba values: {exc}")

    if not has_rgb and not has_filename:
        if not only_name_is_ok:
            raise ParseError(f"Material [{name}] color has no rgba and is not defined in file")
        log_debug("urdfdom: material has only name, actual material definition may be in the model")
    return material


def parse_sphere(element: Element) -> Sphere:
    """Parse a sphere element."""
    radius = element.get("radius")
    if radius is None:
        raise ParseError("Sphere shape must have a radius attribute")
    return Sphere(radius=lexical_cast(radius))


def parse_box(element: Element) -> Box:
    """Parse a box element."""
    size = element.get("size")
    if size is None:
        raise ParseError("Box shape has no size attribute")
    return Box(dim=parse_vector3(size))


def parse_cylinder(element: Element) -> Cylinder:
    """Parse a cylinder element."""
    length = element.get("length")
    radius = element.get("radius")
    if length is None or radius is None:
        raise ParseError("Cylinder shape must have both length and radius attributes")
    return Cylinder(length=lexical_cast(length), radius=lexical_cast(radius))


def parse_mesh(element: Element) -> Mesh:
    """Parse a mesh element; the scale defaults to one on every axis."""
    filename = element.get("filename")
    if filename is None:
        raise ParseError("Mesh must contain a filename attribute")
    mesh = Mesh(filename=filename)
    scale = element.get("scale")
    if scale is not None:
        try:
            mesh.scale = parse_vector3(scale)
        except ParseError as exc:
            raise ParseError(f"Mesh scale was specified, but could not be parsed: {exc}") from exc
    return mesh


_SHAPE_PARSERS = {
    "sphere": parse_sphere,
    "box": parse_box,
    "cylinder": parse_cylinder,
    "mesh": parse_mesh,
}


def parse_geometry(element: Optional[Element]) -> Geometry:
    """Parse the single shape held by a geometry element."""
    if element is None:
        raise ParseError("Missing geometry element")
    shape = next(iter(element), None)
    if shape is None:
        raise ParseError("Geometry tag contains no child element.")
    parser = _SHAPE_PARSERS.get(shape.tag)
    if parser is None:
        raise ParseError(f"Unknown geometry type '{shape.tag}'")
    return parser(shape)


_INERTIA_KEYS = ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")


def parse_inertial(element: Element) -> Inertial:
    """Parse an inertial element: origin, mass and inertia tensor."""
    inertial = Inertial()
    origin = element.find("origin")
    if origin is not None:
        inertial.origin = parse_pose(origin)

    mass = element.find("mass")
    if mass is None:
        raise ParseError("Inertial element must have a mass element")
    mass_value = mass.get("value")
    if mass_value is None:
        raise ParseError("Inertial: mass element must have value attribute")
    inertial.mass = lexical_cast(mass_value)

    inertia = element.find("inertia")
    if inertia is None:
        raise ParseError("Inertial element must have inertia element")
    if any(inertia.get(key) is None for key in _INERTIA_KEYS):
        raise ParseError("Inertial: inertia element must have ixx,ixy,ixz,iyy,iyz,izz attributes")
    for key in _INERTIA_KEYS:
        setattr(inertial, key, lexical_cast(inertia.get(key)))
    return inertial


def parse_visual(element: Element) -> Visual:
    """Parse a visual element: origin, geometry, name and material."""
    visual = Visual()
    origin = element.find("origin")
    if origin is not None:
        visual.origin = parse_pose(origin)

    visual.geometry = parse_geometry(element.find("geometry"))

    name = element.get("name")
    if name is not None:
        visual.name = name

    material = element.find("material")
    if material is not None:
        material_name = material.get("name")
        if material_name is None:
            raise ParseError("Visual material must contain a name attribute")
        visual.material_name = material_name
        visual.material = parse_material(material, True)
    return visual


def parse_collision(element: Element) -> Collision:
    """Parse a collision element: origin, geometry and name."""
    collision = Collision()
    origin = element.find("origin")
    if origin is not None:
        collision.origin = parse_pose(origin)

    collision.geometry = parse_geometry(element.find("geometry"))

    name = element.get("name")
    if name is not None:
        collision.name = name
    return collision


def parse_link(element: Element) -> Link:
    """Parse a link element with its inertial, visual and collision parts."""
    name = element.get("name")
    if name is None:
        raise ParseError("No name given for the link.")
    link = Link(name=name)

    inertial = element.find("inertial")
    if inertial is not None:
        try:
            link.inertial = parse_inertial(inertial)
        except ParseError as exc:
            raise ParseError(f"Could not parse inertial element for Link [{name}]: {exc}") from exc

    for visual in element.findall("visual"):
        try:
            link.visual_array.append(parse_visual(visual))
        except ParseError as exc:
            raise ParseError(f"Could not parse visual element for Link [{name}]: {exc}") from exc
    if link.visual_array:
        link.visual = link.visual_array[0]

    for collision in element.findall("collision"):
        try:
            link.collision_array.append(parse_collision(collision))
        except ParseError as exc:
            raise ParseError(
                f"Could not parse collision element for Link [{name}]: {exc}"
            ) from exc
    if link.collision_array:
        link.collision = link.collision_array[0]
    return link