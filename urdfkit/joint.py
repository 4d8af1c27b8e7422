"""Joints and their optional properties, parsed from XML elements."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional
from xml.etree.ElementTree import Element

from .common import ParseError, lexical_cast, log_inform
from .pose import Pose, Vector3, parse_pose, parse_vector3

__all__ = [
    "JointType",
    "JointDynamics",
    "JointLimits",
    "JointSafety",
    "JointCalibration",
    "JointMimic",
    "Joint",
    "parse_joint_dynamics",
    "parse_joint_limits",
    "parse_joint_safety",
    "parse_joint_calibration",
    "parse_joint_mimic",
    "parse_joint",
]


class JointType(enum.Enum):
    """The kinds of joint a description can declare."""

    UNKNOWN = "unknown"
    REVOLUTE = "revolute"
    CONTINUOUS = "continuous"
    PRISMATIC = "prismatic"
    FLOATING = "floating"
    PLANAR = "planar"
    FIXED = "fixed"


@dataclass
class JointDynamics:
    """Damping and friction of a joint."""

    damping: float = 0.0
    friction: float = 0.0


@dataclass
class JointLimits:
    """Position, effort and velocity limits of a joint."""

    lower: float = 0.0
    upper: float = 0.0
    effort: float = 0.0
    velocity: float = 0.0


@dataclass
class JointSafety:
    """Soft limits and gains of a joint's safety controller."""

    soft_upper_limit: float = 0.0
    soft_lower_limit: float = 0.0
    k_position: float = 0.0
    k_velocity: float = 0.0


@dataclass
class JointCalibration:
    """Rising and falling edge positions used for calibration."""

    rising: Optional[float] = None
    falling: Optional[float] = None


@dataclass
class JointMimic:
    """A joint that follows another joint linearly."""

    joint_name: str = ""
    multiplier: float = 0.0
    offset: float = 0.0


@dataclass
class Joint:
    """A joint connecting a parent link to a child link."""

    name: str = ""
    type: JointType = JointType.UNKNOWN
    axis: Vector3 = field(default_factory=Vector3)
    child_link_name: str = ""
    parent_link_name: str = ""
    parent_to_joint_origin_transform: Pose = field(default_factory=Pose)
    dynamics: Optional[JointDynamics] = None
    limits: Optional[JointLimits] = None
    safety: Optional[JointSafety] = None
    calibration: Optional[JointCalibration] = None
    mimic: Optional[JointMimic] = None


def _number(element: Element, key: str, default: Optional[float]) -> Optional[float]:
    text = element.get(key)
    return default if text is None else lexical_cast(text)


def parse_joint_dynamics(element: Element) -> JointDynamics:
    """Parse a dynamics element; at least one of damping and friction is required."""
    damping = element.get("damping")
    friction = element.get("friction")
    if damping is None and friction is None:
        raise ParseError("joint dynamics element specified with no damping and no friction")
    return JointDynamics(
        damping=0.0 if damping is None else lexical_cast(damping),
        friction=0.0 if friction is None else lexical_cast(friction),
    )


def parse_joint_limits(element: Element) -> JointLimits:
    """Parse a limit element; effort and velocity are required."""
    limits = JointLimits(
        lower=_number(element, "lower", 0.0),
        upper=_number(element, "upper", 0.0),
    )
    effort = element.get("effort")
    if effort is None:
        raise ParseError("joint limit: no effort")
    limits.effort = lexical_cast(effort)
    velocity = element.get("velocity")
    if velocity is None:
        raise ParseError("joint limit: no velocity")
    limits.velocity = lexical_cast(velocity)
    return limits


def parse_joint_safety(element: Element) -> JointSafety:
    """Parse a safety_controller element; k_velocity is required."""
    safety = JointSafety(
        soft_lower_limit=_number(element, "soft_lower_limit", 0.0),
        soft_upper_limit=_number(element, "soft_upper_limit", 0.0),
        k_position=_number(element, "k_position", 0.0),
    )
    k_velocity = element.get("k_velocity")
    if k_velocity is None:
        raise ParseError("joint safety: no k_velocity")
    safety.k_velocity = lexical_cast(k_velocity)
    return safety


def parse_joint_calibration(element: Element) -> JointCalibration:
    """Parse a calibration element; missing edges stay unset."""
    return JointCalibration(
        rising=_number(element, "rising", None),
        falling=_number(element, "falling", None),
    )


def parse_joint_mimic(element: Element) -> JointMimic:
    """Parse a mimic element; the multiplier defaults to 1 and the offset to 0."""
    joint_name = element.get("joint")
    if joint_name is None:
        raise ParseError("joint mimic: no mimic joint specified")
    return JointMimic(
        joint_name=joint_name,
        multiplier=_number(element, "multiplier", 1.0),
        offset=_number(element, "offset", 0.0),
    )


def _optional_part(element: Element, tag: str, parser, what: str, joint_name: str):
    child = element.find(tag)
    if child is None:
        return None
    try:
        return parser(child)
    except ParseError as exc:
        raise ParseError(
            f"Could not parse {what} element for joint [{joint_name}]: {exc}"
        ) from exc


def parse_joint(element: Element) -> Joint:
    """Parse a joint element with its origin, links, type, axis and optional parts."""
    name = element.get("name")
    if name is None:
        raise ParseError("unnamed joint found")
    joint = Joint(name=name)

    origin = element.find("origin")
    if origin is not None:
        try:
            joint.parent_to_joint_origin_transform = parse_pose(origin)
        except ParseError as exc:
            raise ParseError(
                f"Malformed parent origin element for joint [{name}]: {exc}"
            ) from exc

    parent = element.find("parent")
    if parent is not None:
        parent_name = parent.get("link")
        if parent_name is None:
            log_inform(
                "no parent link name specified for Joint link. this might be the root?", name
            )
        else:
            joint.parent_link_name = parent_name

    child = element.find("child")
    if child is not None:
        child_name = child.get("link")
        if child_name is None:
            log_inform("no child link name specified for Joint link", name)
        else:
            joint.child_link_name = child_name

    type_text = element.get("type")
    if type_text is None:
        raise ParseError(f"joint [{name}] has no type, check to see if it's a reference.")
    try:
        joint.type = JointType(type_text)
    except ValueError:
        joint.type = JointType.UNKNOWN
    if joint.type is JointType.UNKNOWN:
        raise ParseError(f"Joint [{name}] has no known type [{type_text}]")

    if joint.type not in (JointType.FLOATING, JointType.FIXED):
        axis = element.find("axis")
        if axis is None:
            joint.axis = Vector3(1.0, 0.0, 0.0)
        else:
            xyz = axis.get("xyz")
            if xyz is not None:
                try:
                    joint.axis = parse_vector3(xyz)
                except ParseError as exc:
                    raise ParseError(
                        f"Malformed axis element for joint [{name}]: {exc}"
                    ) from exc

    joint.limits = _optional_part(element, "limit", parse_joint_limits, "limit", name)
    if joint.limits is None:
        if joint.type is JointType.REVOLUTE:
            raise ParseError(f"Joint [{name}] is of type REVOLUTE but it does not specify limits")
        if joint.type is JointType.PRISMATIC:
            raise ParseError(f"Joint [{name}] is of type PRISMATIC without limits")

    joint.safety = _optional_part(
        element, "safety_controller", parse_joint_safety, "safety", name
    )
    joint.calibration = _optional_part(
        element, "calibration", parse_joint_calibration, "calibration", name
    )
    joint.mimic = _optional_part(element, "mimic", parse_joint_mimic, "mimic", name)
    joint.dynamics = _optional_part(
        element, "dynamics", parse_joint_dynamics, "joint_dynamics", name
    )
    return joint