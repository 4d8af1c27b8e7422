"""Visual sensors (cameras and ray scanners) attached to links."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union
from xml.etree.ElementTree import Element

from .common import ParseError, log_error
from .pose import Pose, parse_pose

__all__ = [
    "SensorType",
    "CameraSensor",
    "RaySensor",
    "Sensor",
    "parse_camera_sensor",
    "parse_ray",
    "parse_visual_sensor",
    "parse_sensor",
]


class SensorType(enum.Enum):
    """The kinds of visual sensor a description can declare."""

    CAMERA = "camera"
    RAY = "ray"


@dataclass
class CameraSensor:
    """A camera producing images of a given size and field of view."""

    width: int = 0
    height: int = 0
    format: str = ""
    hfov: float = 0.0
    near: float = 0.0
    far: float = 0.0
    type: SensorType = field(default=SensorType.CAMERA, init=False)


@dataclass
class RaySensor:
    """A ray-casting range sensor with horizontal and vertical sweeps."""

    horizontal_samples: int = 1
    horizontal_resolution: float = 1.0
    horizontal_min_angle: float = 0.0
    horizontal_max_angle: float = 0.0
    vertical_samples: int = 1
    vertical_resolution: float = 1.0
    vertical_min_angle: float = 0.0
    vertical_max_angle: float = 0.0
    type: SensorType = field(default=SensorType.RAY, init=False)


VisualSensor = Union[CameraSensor, RaySensor]


@dataclass
class Sensor:
    """A named sensor mounted on a parent link."""

    name: str = ""
    parent_link_name: str = ""
    origin: Pose = field(default_factory=Pose)
    sensor: Optional[VisualSensor] = None


def _parse_uint(text: str, what: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ParseError(f"{what} [{text}] is not a valid int") from None
    if value < 0:
        raise ParseError(f"{what} [{text}] is not a valid int")
    return value


def _parse_float(text: str, what: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParseError(f"{what} [{text}] is not a valid float") from None


def _required(element: Element, key: str) -> str:
    text = element.get(key)
    if text is None:
        raise ParseError(f"Camera sensor needs an image {key} attribute")
    return text


def parse_camera_sensor(element: Element) -> CameraSensor:
    """Parse a camera element; its image child must give every property."""
    image = element.find("image")
    if image is None:
        raise ParseError("Camera sensor has no <image> element")
    return CameraSensor(
        width=_parse_uint(_required(image, "width"), "Camera image width"),
        height=_parse_uint(_required(image, "height"), "Camera image height"),
        format=_required(image, "format"),
        hfov=_parse_float(_required(image, "hfov"), "Camera image hfov"),
        near=_parse_float(_required(image, "near"), "Camera image near"),
        far=_parse_float(_required(image, "far"), "Camera image far"),
    )


def _parse_sweep(ray: RaySensor, element: Optional[Element], prefix: str) -> None:
    if element is None:
        return
    label = f"Ray {prefix}"
    samples = element.get("samples")
    if samples is not None:
        setattr(ray, f"{prefix}_samples", _parse_uint(samples, f"{label} samples"))
    for key in ("resolution", "min_angle", "max_angle"):
        text = element.get(key)
        if text is not None:
            setattr(ray, f"{prefix}_{key}", _parse_float(text, f"{label} {key}"))


def parse_ray(element: Element) -> RaySensor:
    """Parse a ray element; absent sweeps keep their defaults."""
    ray = RaySensor()
    _parse_sweep(ray, element.find("horizontal"), "horizontal")
    _parse_sweep(ray, element.find("vertical"), "vertical")
    return ray


def parse_visual_sensor(element: Element) -> Optional[VisualSensor]:
    """Parse the camera or ray child of a sensor element.

    Returns ``None`` when neither is present or the one present is malformed.
    """
    camera = element.find("camera")
    if camera is not None:
        try:
            return parse_camera_sensor(camera)
        except ParseError as exc:
            log_error(str(exc))
            return None
    ray = element.find("ray")
    if ray is not None:
        try:
            return parse_ray(ray)
        except ParseError as exc:
            log_error(str(exc))
            return None
    log_error("No know sensor types [camera|ray] defined in <sensor> block")
    return None


def parse_sensor(element: Element) -> Sensor:
    """Parse a sensor element: name, parent link, origin and visual sensor."""
    name = element.get("name")
    if name is None:
        raise ParseError("No name given for the sensor.")
    parent_link_name = element.get("parent_link_name")
    if parent_link_name is None:
        raise ParseError("No parent_link_name given for the sensor.")
    sensor = Sensor(name=name, parent_link_name=parent_link_name)
    origin = element.find("origin")
    if origin is not None:
        sensor.origin = parse_pose(origin)
    sensor.sensor = parse_visual_sensor(element)
    return sensor