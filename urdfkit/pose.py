"""Vectors, rotations, poses and twists, and their parsing from XML elements."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional
from xml.etree.ElementTree import Element

from .common import ParseError, lexical_cast

__all__ = [
    "Vector3",
    "Rotation",
    "Pose",
    "Twist",
    "parse_vector3",
    "parse_rotation",
    "parse_pose",
    "parse_twist",
]


@dataclass
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z)


@dataclass
class Rotation:
    """A rotation stored as a unit quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_rpy(cls, roll: float, pitch: float, yaw: float) -> "Rotation":
        """Build a rotation from roll, pitch and yaw angles in radians."""
        phi, the, psi = roll / 2.0, pitch / 2.0, yaw / 2.0
        sphi, cphi = math.sin(phi), math.cos(phi)
        sthe, cthe = math.sin(the), math.cos(the)
        spsi, cpsi = math.sin(psi), math.cos(psi)
        rotation = cls(
            x=sphi * cthe * cpsi - cphi * sthe * spsi,
            y=cphi * sthe * cpsi + sphi * cthe * spsi,
            z=cphi * cthe * spsi - sphi * sthe * cpsi,
            w=cphi * cthe * cpsi + sphi * sthe * spsi,
        )
        rotation.normalize()
        return rotation

    def normalize(self) -> None:
        """Scale to unit length, or reset to identity if the length is zero."""
        norm = math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)
        if norm == 0.0:
            self.x = self.y = self.z = 0.0
            self.w = 1.0
        else:
            self.x /= norm
            self.y /= norm
            self.z /= norm
            self.w /= norm

    def to_rpy(self) -> tuple[float, float, float]:
        """Return the (roll, pitch, yaw) angles of this rotation."""
        sqw, sqx, sqy, sqz = self.w ** 2, self.x ** 2, self.y ** 2, self.z ** 2
        roll = math.atan2(2.0 * (self.y * self.z + self.w * self.x), sqw - sqx - sqy + sqz)
        sarg = -2.0 * (self.x * self.z - self.w * self.y)
        if sarg <= -0.99999:
            pitch = -0.5 * math.pi
        elif sarg >= 0.99999:
            pitch = 0.5 * math.pi
        else:
            pitch = math.asin(sarg)
        yaw = math.atan2(2.0 * (self.x * self.y + self.w * self.z), sqw + sqx - sqy - sqz)
        return roll, pitch, yaw


@dataclass
class Pose:
    """A position and an orientation."""

    position: Vector3 = field(default_factory=Vector3)
    rotation: Rotation = field(default_factory=Rotation)


@dataclass
class Twist:
    """Linear and angular velocity."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


def parse_vector3(text: str) -> Vector3:
    """Parse three space-separated numbers into a vector."""
    values = [lexical_cast(piece) for piece in text.split(" ") if piece]
    if len(values) != 3:
        raise ParseError(
            f"Parser found {len(values)} elements but 3 expected while parsing vector [{text}]"
        )
    return Vector3(*values)


def parse_rotation(text: str) -> Rotation:
    """Parse a space-separated roll, pitch, yaw triple into a rotation."""
    return Rotation.from_rpy(*parse_vector3(text))


def parse_pose(element: Optional[Element]) -> Pose:
    """Read the ``xyz`` and ``rpy`` attributes of an origin element.

    A missing element or missing attributes leave the identity values.
    """
    pose = Pose()
    if element is None:
        return pose
    xyz = element.get("xyz")
    if xyz is not None:
        pose.position = parse_vector3(xyz)
    rpy = element.get("rpy")
    if rpy is not None:
        pose.rotation = parse_rotation(rpy)
    return pose


def parse_twist(element: Optional[Element]) -> Twist:
    """Read the ``linear`` and ``angular`` attributes of a twist element."""
    twist = Twist()
    if element is None:
        return twist
    linear = element.get("linear")
    if linear is not None:
        try:
            twist.linear = parse_vector3(linear)
        except ParseError as exc:
            raise ParseError(f"Malformed linear string [{linear}]: {exc}") from exc
    angular = element.get("angular")
    if angular is not None:
        try:
            twist.angular = parse_vector3(angular)
        except ParseError as exc:
            raise ParseError(f"Malformed angular [{angular}]: {exc}") from exc
    return twist