"""Command that parses a robot description and prints its link tree."""

from __future__ import annotations

import argparse
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .common import ParseError
from .link import Link
from .model import parse_urdf

__all__ = ["format_tree", "main"]

_SAMPLE_LINKS = ("link1", "link2", "link3", "link4")
_SAMPLE_JOINTS = (
    ("joint1", "link1", "link2"),
    ("joint2", "link1", "link3"),
    ("joint3", "link3", "link4"),
)


def _sample_urdf() -> str:
    """Build a small built-in robot description with a branching tree."""
    robot = ET.Element("robot", name="test_robot")
    for name in _SAMPLE_LINKS:
        ET.SubElement(robot, "link", name=name)
    for name, parent, child in _SAMPLE_JOINTS:
        joint = ET.SubElement(robot, "joint", name=name, type="continuous")
        ET.SubElement(joint, "parent", link=parent)
        ET.SubElement(joint, "child", link=child)
    return ET.tostring(robot, encoding="unicode")


def _tree_lines(link: Link, level: int) -> Iterator[str]:
    level += 2
    for count, child in enumerate(link.child_links, start=1):
        yield f"{'  ' * level}child({count}):  {child.name}"
        yield from _tree_lines(child, level)


def format_tree(link: Link, level: int = 0) -> str:
    """Render the descendants of ``link`` as indented lines, one per link."""
    return "\n".join(_tree_lines(link, level))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse a description file (or a built-in sample) and print its tree."""
    parser = argparse.ArgumentParser(description="Check a robot description file.")
    parser.add_argument("file", nargs="?", help="robot description to check")
    args = parser.parse_args(argv)

    if args.file is None:
        print("No URDF file name provided, using a dummy test URDF", file=sys.stderr)
        xml_string = _sample_urdf()
    else:
        try:
            xml_string = Path(args.file).read_text()
        except OSError as exc:
            print(f"ERROR: could not read {args.file}: {exc}", file=sys.stderr)
            return -1

    try:
        robot = parse_urdf(xml_string)
    except ParseError as exc:
        print(f"ERROR: Model Parsing the xml failed: {exc}", file=sys.stderr)
        return -1
    print(f"robot name is: {robot.name}")
    print("---------- Successfully Parsed XML ---------------")
    root = robot.root_link
    if root is None:
        return -1
    print(f"root Link: {root.name} has {len(root.child_links)} child(ren)")
    tree = format_tree(root)
    if tree:
        print(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())