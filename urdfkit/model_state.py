"""Joint and model states read from XML elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from xml.etree.ElementTree import Element

from .common import ParseError, is_any_of, lexical_cast, split

__all__ = ["JointState", "ModelState", "parse_model_state"]


@dataclass
class JointState:
    """Position, velocity and effort values of one joint."""

    joint: str = ""
    position: list[float] = field(default_factory=list)
    velocity: list[float] = field(default_factory=list)
    effort: list[float] = field(default_factory=list)


@dataclass
class ModelState:
    """A named snapshot of joint states at a time in seconds."""

    name: str = ""
    time_stamp: float = 0.0
    joint_states: list[JointState] = field(default_factory=list)


def _parse_values(text: Optional[str]) -> list[float]:
    if text is None:
        return []
    return [lexical_cast(piece) for piece in split(text, is_any_of(" ")) if piece]


def parse_model_state(element: Element) -> ModelState:
    """Parse a model_state element and its first joint_state child."""
    name = element.get("name")
    if name is None:
        raise ParseError("No name given for the model_state.")
    state = ModelState(name=name)

    time_stamp = element.get("time_stamp")
    if time_stamp is not None:
        state.time_stamp = lexical_cast(time_stamp)

    joint_state_element = element.find("joint_state")
    if joint_state_element is not None:
        joint = joint_state_element.get("joint")
        if joint is None:
            raise ParseError("No joint name given for the model_state.")
        state.joint_states.append(
            JointState(
                joint=joint,
                position=_parse_values(joint_state_element.get("position")),
                velocity=_parse_values(joint_state_element.get("velocity")),
                effort=_parse_values(joint_state_element.get("effort")),
            )
        )
    return state