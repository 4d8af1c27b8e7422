"""Worlds: robots placed in a scene together with static objects, lights and cameras."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional
from xml.etree import ElementTree
from xml.etree.ElementTree import Element, SubElement

from .common import ParseError, log_debug
from .link import Box, Collision, Cylinder, Mesh, Sphere, Visual, parse_collision, parse_visual
from .pose import Pose, Vector3, parse_pose, parse_vector3

__all__ = [
    "Light",
    "Camera",
    "StaticObject",
    "Graphics",
    "Robot",
    "World",
    "parse_light",
    "parse_camera",
    "parse_static_object",
    "parse_robot",
    "parse_urdf_world",
    "export_world",
]


@dataclass
class Light:
    """A named light source with an optional type, position and target."""

    name: str = ""
    type: str = ""
    position: Vector3 = field(default_factory=Vector3)
    lookat: Vector3 = field(default_factory=Vector3)


@dataclass
class Camera:
    """A named viewpoint: where it sits, what it looks at and which way is up."""

    name: str = ""
    position: Vector3 = field(default_factory=Vector3)
    lookat: Vector3 = field(default_factory=Vector3)
    vertical: Vector3 = field(default_factory=Vector3)


@dataclass
class StaticObject:
    """An object fixed in the world, with visual and collision shapes."""

    name: str = ""
    origin: Pose = field(default_factory=Pose)
    visual: Optional[Visual] = None
    visual_array: list[Visual] = field(default_factory=list)
    collision: Optional[Collision] = None
    collision_array: list[Collision] = field(default_factory=list)


@dataclass
class Graphics:
    """The lights, cameras and static objects of a world, by name."""

    lights: dict[str, Light] = field(default_factory=dict)
    cameras: dict[str, Camera] = field(default_factory=dict)
    static_objects: dict[str, StaticObject] = field(default_factory=dict)

    def get_light(self, name: str) -> Optional[Light]:
        """Return the light of that name, or ``None``."""
        return self.lights.get(name)

    def get_camera(self, name: str) -> Optional[Camera]:
        """Return the camera of that name, or ``None``."""
        return self.cameras.get(name)

    def get_static_object(self, name: str) -> Optional[StaticObject]:
        """Return the static object of that name, or ``None``."""
        return self.static_objects.get(name)


@dataclass
class Robot:
    """A robot instance: a model file placed at an origin in the world."""

    name: str = ""
    model_filename: str = ""
    model_name: str = ""
    model_working_dir: str = ""
    origin: Pose = field(default_factory=Pose)


@dataclass
class World:
    """A parsed world description."""

    name: str = ""
    gravity: Vector3 = field(default_factory=Vector3)
    models: dict[str, Robot] = field(default_factory=dict)
    graphics: Graphics = field(default_factory=Graphics)

    def get_robot(self, name: str) -> Optional[Robot]:
        """Return the robot of that name, or ``None``."""
        return self.models.get(name)


def _required_name(element: Element, what: str) -> str:
    name = element.get("name")
    if not name:
        raise ParseError(f"{what} must have a non-empty name attribute")
    return name


def _xyz(element: Element, tag: str, owner: str, required: bool) -> Optional[Vector3]:
    child = element.find(tag)
    if child is None:
        if required:
            raise ParseError(f"{owner} is missing its <{tag}> element")
        return None
    xyz = child.get("xyz")
    if xyz is None:
        raise ParseError(f"{owner}: <{tag}> element has no xyz attribute")
    return parse_vector3(xyz)


def parse_light(element: Element) -> Light:
    """Parse a light element; type, position and lookat are optional."""
    light = Light(name=_required_name(element, "Light"))
    light_type = element.get("type")
    if light_type is not None:
        light.type = light_type
    position = _xyz(element, "position", f"Light [{light.name}]", False)
    if position is not None:
        light.position = position
    lookat = _xyz(element, "lookat", f"Light [{light.name}]", False)
    if lookat is not None:
        light.lookat = lookat
    return light


def parse_camera(element: Element) -> Camera:
    """Parse a camera element; position, lookat and vertical are all required."""
    name = _required_name(element, "Camera")
    owner = f"Camera [{name}]"
    return Camera(
        name=name,
        position=_xyz(element, "position", owner, True),
        lookat=_xyz(element, "lookat", owner, True),
        vertical=_xyz(element, "vertical", owner, True),
    )


def parse_static_object(element: Element) -> StaticObject:
    """Parse a static_object element with its origin, visuals and collisions."""
    name = element.get("name")
    if name is None:
        raise ParseError("Static object must have a name attribute")
    obj = StaticObject(name=name, origin=parse_pose(element.find("origin")))
    obj.visual_array = [parse_visual(visual) for visual in element.findall("visual")]
    if obj.visual_array:
        obj.visual = obj.visual_array[0]
    obj.collision_array = [
        parse_collision(collision) for collision in element.findall("collision")
    ]
    if obj.collision_array:
        obj.collision = obj.collision_array[0]
    return obj


def parse_robot(element: Element) -> Robot:
    """Parse a robot element of a world: its name, model reference and origin."""
    robot = Robot(name=_required_name(element, "Robot"))
    model = element.find("model")
    if model is None:
        raise ParseError(f"Robot [{robot.name}] has no <model> element")
    path = model.get("path")
    if not path:
        raise ParseError(f"Robot [{robot.name}]: model must have a non-empty path attribute")
    robot.model_filename = path
    model_name = model.get("name")
    if not model_name:
        raise ParseError(f"Robot [{robot.name}]: model must have a non-empty name attribute")
    robot.model_name = model_name
    working_dir = model.get("dir")
    if working_dir is not None:
        robot.model_working_dir = working_dir
    robot.origin = parse_pose(element.find("origin"))
    return robot


def _insert_unique(table: dict, name: str, item, what: str) -> None:
    if name in table:
        raise ParseError(f"{what} '{name}' is not unique.")
    table[name] = item
    log_debug(f"urdfdom: successfully parsed a new {what} in the world", name)


def parse_urdf_world(xml_string: str) -> World:
    """Parse a world description document."""
    try:
        document = ElementTree.fromstring(xml_string)
    except ElementTree.ParseError as exc:
        raise ParseError(str(exc)) from exc
    world_element = document if document.tag == "world" else document.find("world")
    if world_element is None:
        raise ParseError("Could not find the 'world' element in the xml file")

    world = World(name=_required_name(world_element, "World"))
    gravity = world_element.get("gravity")
    if gravity is not None:
        world.gravity = parse_vector3(gravity)

    for element in world_element.findall("robot"):
        robot = parse_robot(element)
        _insert_unique(world.models, robot.name, robot, "robot")
    for element in world_element.findall("static_object"):
        obj = parse_static_object(element)
        _insert_unique(world.graphics.static_objects, obj.name, obj, "static object")
    for element in world_element.findall("light"):
        light = parse_light(element)
        _insert_unique(world.graphics.lights, light.name, light, "light")
    for element in world_element.findall("camera"):
        camera = parse_camera(element)
        _insert_unique(world.graphics.cameras, camera.name, camera, "camera")
    return world


def _numbers(values: Iterable[float]) -> str:
    return " ".join(repr(float(value)) for value in values)


def _origin_element(parent: Element, pose: Pose) -> None:
    SubElement(
        parent,
        "origin",
        xyz=_numbers(pose.position),
        rpy=_numbers(pose.rotation.to_rpy()),
    )


def _geometry_element(parent: Element, geometry) -> None:
    holder = SubElement(parent, "geometry")
    if isinstance(geometry, Sphere):
        SubElement(holder, "sphere", radius=repr(float(geometry.radius)))
    elif isinstance(geometry, Box):
        SubElement(holder, "box", size=_numbers(geometry.dim))
    elif isinstance(geometry, Cylinder):
        SubElement(
            holder,
            "cylinder",
            length=repr(float(geometry.length)),
            radius=repr(float(geometry.radius)),
        )
    elif isinstance(geometry, Mesh):
        SubElement(holder, "mesh", filename=geometry.filename, scale=_numbers(geometry.scale))
    else:
        raise ParseError(f"Cannot export geometry {geometry!r}")


def _shape_element(parent: Element, tag: str, shape) -> None:
    element = SubElement(parent, tag)
    if shape.name:
        element.set("name", shape.name)
    _origin_element(element, shape.origin)
    _geometry_element(element, shape.geometry)
    material_name = getattr(shape, "material_name", "")
    if material_name:
        SubElement(element, "material", name=material_name)


def _xyz_element(parent: Element, tag: str, vector: Vector3) -> None:
    SubElement(parent, tag, xyz=_numbers(vector))


def export_world(world: World) -> Element:
    """Build a world element that parses back into an equivalent world."""
    root = Element("world", name=world.name, gravity=_numbers(world.gravity))
    for robot in world.models.values():
        element = SubElement(root, "robot", name=robot.name)
        model = SubElement(element, "model", path=robot.model_filename, name=robot.model_name)
        if robot.model_working_dir:
            model.set("dir", robot.model_working_dir)
        _origin_element(element, robot.origin)
    for obj in world.graphics.static_objects.values():
        element = SubElement(root, "static_object", name=obj.name)
        _origin_element(element, obj.origin)
        for visual in obj.visual_array:
            _shape_element(element, "visual", visual)
        for collision in obj.collision_array:
            _shape_element(element, "collision", collision)
    for light in world.graphics.lights.values():
        element = SubElement(root, "light", name=light.name)
        if light.type:
            element.set("type", light.type)
        _xyz_element(element, "position", light.position)
        _xyz_element(element, "lookat", light.lookat)
    for camera in world.graphics.cameras.values():
        element = SubElement(root, "camera", name=camera.name)
        _xyz_element(element, "position", camera.position)
        _xyz_element(element, "lookat", camera.lookat)
        _xyz_element(element, "vertical", camera.vertical)
    return root