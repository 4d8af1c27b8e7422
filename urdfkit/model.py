"""Robot models: links, joints and materials assembled into a kinematic tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from xml.etree import ElementTree

from .common import ParseError
from .joint import Joint, parse_joint
from .link import Link, Material, parse_link, parse_material

__all__ = ["ModelInterface", "parse_urdf"]


@dataclass
class ModelInterface:
    """A parsed robot description."""

    name: str = ""
    links: dict[str, Link] = field(default_factory=dict)
    joints: dict[str, Joint] = field(default_factory=dict)
    materials: dict[str, Material] = field(default_factory=dict)
    root_link: Optional[Link] = None
    num_links: int = 0
    num_joints: int = 0

    def get_link(self, name: str) -> Optional[Link]:
        """Return the link of that name, or ``None``."""
        return self.links.get(name)

    def get_joint(self, name: str) -> Optional[Joint]:
        """Return the joint of that name, or ``None``."""
        return self.joints.get(name)

    def get_material(self, name: str) -> Optional[Material]:
        """Return the material of that name, or ``None``."""
        return self.materials.get(name)

    def init_tree(self) -> dict[str, str]:
        """Connect links through their joints.

        Returns the mapping from each child link name to its parent link name.
        """
        parent_link_tree: dict[str, str] = {}
        for joint in self.joints.values():
            parent_name = joint.parent_link_name
            child_name = joint.child_link_name
            if not parent_name or not child_name:
                raise ParseError(
                    f"Joint [{joint.name}] is missing a parent and/or child link specification."
                )
            child = self.get_link(child_name)
            if child is None:
                raise ParseError(f"child link [{child_name}] of joint [{joint.name}] not found")
            parent = self.get_link(parent_name)
            if parent is None:
                raise ParseError(
                    f"parent link [{parent_name}] of joint [{joint.name}] not found. "
                    "This is not valid according to the URDF spec. Every link you refer "
                    "to from a joint needs to be explicitly defined in the robot description."
                )
            child.parent_joint = joint
            child.parent_link = parent
            parent.child_joints.append(joint)
            parent.child_links.append(child)
            parent_link_tree[child_name] = parent_name
        return parent_link_tree

    def init_root(self, parent_link_tree: dict[str, str]) -> None:
        """Find the single link that has no parent and make it the root."""
        self.root_link = None
        for name in sorted(self.links):
            if name in parent_link_tree:
                continue
            if self.root_link is not None:
                raise ParseError(
                    f"Two root links found: [{self.root_link.name}] and [{name}]"
                )
            self.root_link = self.links[name]
        if self.root_link is None:
            raise ParseError("No root link found. The robot xml is not a valid tree.")


def _add_link(model: ModelInterface, link: Link) -> None:
    if model.get_link(link.name) is not None:
        raise ParseError(f"link '{link.name}' is not unique.")
    visual = link.visual
    if visual is not None and visual.material_name:
        known = model.get_material(visual.material_name)
        if known is not None:
            visual.material = known
        elif visual.material is not None:
            model.materials[visual.material.name] = visual.material
        else:
            raise ParseError(
                f"link '{link.name}' material '{visual.material_name}' undefined."
            )
    model.links[link.name] = link


def parse_urdf(xml_string: str) -> ModelInterface:
    """Parse a robot description document into a model with its tree built."""
    try:
        document = ElementTree.fromstring(xml_string)
    except ElementTree.ParseError as exc:
        raise ParseError(str(exc)) from exc
    robot = document if document.tag == "robot" else document.find("robot")
    if robot is None:
        raise ParseError("Could not find the 'robot' element in the xml file")

    name = robot.get("name")
    if name is None:
        raise ParseError("No name given for the robot.")
    model = ModelInterface(name=name)

    for element in robot.findall("material"):
        try:
            material = parse_material(element, False)
        except ParseError as exc:
            raise ParseError(f"material xml is not initialized correctly: {exc}") from exc
        if model.get_material(material.name) is not None:
            raise ParseError(f"material '{material.name}' is not unique.")
        model.materials[material.name] = material

    for element in robot.findall("link"):
        model.num_links += 1
        try:
            link = parse_link(element)
        except ParseError as exc:
            raise ParseError(f"link xml is not initialized correctly: {exc}") from exc
        _add_link(model, link)
    if not model.links:
        raise ParseError("No link elements found in urdf file")

    for element in robot.findall("joint"):
        model.num_joints += 1
        try:
            joint = parse_joint(element)
        except ParseError as exc:
            raise ParseError(f"joint xml is not initialized correctly: {exc}") from exc
        if model.get_joint(joint.name) is not None:
            raise ParseError(f"joint '{joint.name}' is not unique.")
        model.joints[joint.name] = joint

    try:
        parent_link_tree = model.init_tree()
    except ParseError as exc:
        raise ParseError(f"Failed to build tree: {exc}") from exc
    try:
        model.init_root(parent_link_tree)
    except ParseError as exc:
        raise ParseError(f"Failed to find root link: {exc}") from exc
    return model