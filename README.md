# urdfkit

A pure-Python reader for URDF robot descriptions and for world files that
place several robots, static objects, lights and cameras in one scene. It
depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Parsing a robot

```python
from urdfkit.model import parse_urdf

with open("robot.urdf") as fh:
    model = parse_urdf(fh.read())

print(model.name)
root = model.root_link
for child in root.child_links:
    print(child.name)

joint = model.get_joint("joint1")
print(joint.type, joint.axis, joint.limits)
```

`parse_urdf` reads the `<robot>` element and its materials, links and
joints, connects each joint to its parent and child link (`ModelInterface.init_tree`)
and finds the single root link (`ModelInterface.init_root`). The result is a
`ModelInterface` with `links`, `joints` and `materials` dictionaries, the
lookups `get_link`, `get_joint` and `get_material`, `root_link`, and counts
`num_links` and `num_joints`.

Any malformed document raises `urdfkit.common.ParseError`: unreadable XML, a
missing `<robot>` element or name, duplicate link, joint or material names,
a link whose visual material is undefined, a revolute or prismatic joint
without limits, a joint that refers to an unknown link, or a tree with no
root or more than one root.

Numeric attributes are read leniently, in the way `urdfkit.common.lexical_cast`
does: leading whitespace is skipped, trailing text is ignored, and text that
does not start with a number reads as `0.0`.

## Parsing a world

```python
from urdfkit.world import parse_urdf_world, export_world

with open("world.urdf") as fh:
    world = parse_urdf_world(fh.read())

print(world.gravity)
robot = world.get_robot("arm")
print(robot.model_filename, robot.model_name, robot.origin)
print(world.graphics.get_camera("camera_fixed"))
print(world.graphics.get_light("light1"))
print(world.graphics.get_static_object("table"))
```

A world holds robots (each a reference to a model file, placed at an
origin), static objects with visual and collision shapes, lights and
cameras. `export_world` builds an `xml.etree.ElementTree.Element` from a
`World` that parses back into an equivalent world.

## Smaller pieces

Each element type has a parser that works on an
`xml.etree.ElementTree.Element`:

- `urdfkit.pose`: `parse_vector3`, `parse_rotation`, `parse_pose`,
  `parse_twist`; `Rotation` stores a quaternion and gives back angles with
  `Rotation.to_rpy()`.
- `urdfkit.link`: `parse_link`, `parse_visual`, `parse_collision`,
  `parse_inertial`, `parse_material`, `parse_geometry` and the shape parsers
  for spheres, boxes, cylinders and meshes.
- `urdfkit.joint`: `parse_joint` and the parsers for limits, safety
  controllers, calibration, mimic and dynamics elements.
- `urdfkit.sensor`: `parse_sensor`, with camera and ray sensors.
- `urdfkit.model_state`: `parse_model_state`, reading joint positions,
  velocities and efforts.

## Command line

`check-urdf` parses a URDF file and prints the robot's name, its root link
and the indented link tree:

```
check-urdf robot.urdf
```

Run without a file, it checks a small built-in example robot instead. It
exits with `-1` when the file cannot be read or parsed. The tree text is
also available as `urdfkit.check.format_tree(link)`.

## What it does not do

urdfkit only reads descriptions into Python objects. It does not simulate or
compute dynamics or kinematics, does not load the mesh or texture files a
description names, does not read the robot model files that a world refers
to, and writes XML back out only for worlds, not for robot models.