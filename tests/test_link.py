from xml.etree.ElementTree import fromstring

import pytest

from urdfkit.common import ParseError
from urdfkit.link import (
    Color,
    GeometryType,
    Link,
    parse_box,
    parse_collision,
    parse_color,
    parse_cylinder,
    parse_geometry,
    parse_inertial,
    parse_link,
    parse_material,
    parse_mesh,
    parse_sphere,
    parse_visual,
)
from urdfkit.pose import Vector3


def test_parse_color_reads_four_values():
    assert parse_color("0.5 0.25 0 1") == Color(0.5, 0.25, 0.0, 1.0)


@pytest.mark.parametrize("text", ["1 0 0", "1 0 0 1 0", ""])
def test_parse_color_wrong_count(text):
    with pytest.raises(ParseError):
        parse_color(text)


def test_parse_material_full():
    element = fromstring(
        '<material name="red"><texture filename="red.png"/><color rgba="1 0 0 1"/></material>'
    )
    material = parse_material(element, False)
    assert material.name == "red"
    assert material.texture_filename == "red.png"
    assert material.color == Color(1.0, 0.0, 0.0, 1.0)


def test_parse_material_requires_name():
    with pytest.raises(ParseError):
        parse_material(fromstring('<material><color rgba="1 0 0 1"/></material>'), True)


def test_parse_material_name_only():
    element = fromstring('<material name="blue"/>')
    with pytest.raises(ParseError):
        parse_material(element, False)
    material = parse_material(element, True)
    assert material.name == "blue"
    assert material.texture_filename == ""
    assert material.color == Color()


def test_parse_material_malformed_color_falls_back_to_texture():
    element = fromstring(
        '<material name="m"><texture filename="t.png"/><color rgba="1 0"/></material>'
    )
    material = parse_material(element, False)
    assert material.color == Color()
    assert material.texture_filename == "t.png"


def test_parse_material_malformed_color_without_texture_fails():
    element = fromstring('<material name="m"><color rgba="1 0"/></material>')
    with pytest.raises(ParseError):
        parse_material(element, False)


def test_parse_sphere():
    sphere = parse_sphere(fromstring('<sphere radius="0.5"/>'))
    assert sphere.radius == 0.5
    assert sphere.type is GeometryType.SPHERE
    with pytest.raises(ParseError):
        parse_sphere(fromstring("<sphere/>"))


def test_parse_box():
    box = parse_box(fromstring('<box size="1 2 3"/>'))
    assert box.dim == Vector3(1.0, 2.0, 3.0)
    assert box.type is GeometryType.BOX
    with pytest.raises(ParseError):
        parse_box(fromstring("<box/>"))
    with pytest.raises(ParseError):
        parse_box(fromstring('<box size="1 2"/>'))


def test_parse_cylinder():
    cylinder = parse_cylinder(fromstring('<cylinder length="2" radius="0.1"/>'))
    assert (cylinder.length, cylinder.radius) == (2.0, 0.1)
    assert cylinder.type is GeometryType.CYLINDER
    with pytest.raises(ParseError):
        parse_cylinder(fromstring('<cylinder length="2"/>'))
    with pytest.raises(ParseError):
        parse_cylinder(fromstring('<cylinder radius="2"/>'))


def test_parse_mesh_scale():
    default = parse_mesh(fromstring('<mesh filename="a.obj"/>'))
    assert default.filename == "a.obj"
    assert default.scale == Vector3(1.0, 1.0, 1.0)
    scaled = parse_mesh(fromstring('<mesh filename="a.obj" scale="2 3 4"/>'))
    assert scaled.scale == Vector3(2.0, 3.0, 4.0)
    with pytest.raises(ParseError):
        parse_mesh(fromstring('<mesh filename="a.obj" scale="2 3"/>'))
    with pytest.raises(ParseError):
        parse_mesh(fromstring("<mesh/>"))


def test_parse_geometry_dispatch():
    geometry = parse_geometry(fromstring('<geometry><box size="1 1 1"/></geometry>'))
    assert geometry.type is GeometryType.BOX
    geometry = parse_geometry(fromstring('<geometry><mesh filename="m.stl"/></geometry>'))
    assert geometry.type is GeometryType.MESH


@pytest.mark.parametrize(
    "xml",
    ["<geometry/>", '<geometry><cone radius="1"/></geometry>', "<geometry><sphere/></geometry>"],
)
def test_parse_geometry_errors(xml):
    with pytest.raises(ParseError):
        parse_geometry(fromstring(xml))


def test_parse_geometry_missing_element():
    with pytest.raises(ParseError):
        parse_geometry(None)


def test_parse_inertial():
    element = fromstring(
        '<inertial><origin xyz="0 0 0.5"/><mass value="2.5"/>'
        '<inertia ixx="1" ixy="0" ixz="0" iyy="2" iyz="0" izz="3"/></inertial>'
    )
    inertial = parse_inertial(element)
    assert inertial.mass == 2.5
    assert inertial.origin.position == Vector3(0.0, 0.0, 0.5)
    assert (inertial.ixx, inertial.iyy, inertial.izz) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "xml",
    [
        '<inertial><inertia ixx="1" ixy="0" ixz="0" iyy="1" iyz="0" izz="1"/></inertial>',
        '<inertial><mass/><inertia ixx="1" ixy="0" ixz="0" iyy="1" iyz="0" izz="1"/></inertial>',
        '<inertial><mass value="1"/></inertial>',
        '<inertial><mass value="1"/><inertia ixx="1" ixy="0" ixz="0" iyy="1" iyz="0"/></inertial>',
    ],
)
def test_parse_inertial_errors(xml):
    with pytest.raises(ParseError):
        parse_inertial(fromstring(xml))


def test_parse_visual_with_named_material():
    element = fromstring(
        '<visual name="v"><origin xyz="1 2 3"/>'
        '<geometry><sphere radius="1"/></geometry><material name="steel"/></visual>'
    )
    visual = parse_visual(element)
    assert visual.name == "v"
    assert visual.origin.position == Vector3(1.0, 2.0, 3.0)
    assert visual.geometry.type is GeometryType.SPHERE
    assert visual.material_name == "steel"
    assert visual.material.name == "steel"


def test_parse_visual_errors():
    with pytest.raises(ParseError):
        parse_visual(fromstring("<visual/>"))
    with pytest.raises(ParseError):
        parse_visual(
            fromstring('<visual><geometry><sphere radius="1"/></geometry><material/></visual>')
        )


def test_parse_collision():
    collision = parse_collision(
        fromstring('<collision name="c"><geometry><box size="1 1 1"/></geometry></collision>')
    )
    assert collision.name == "c"
    assert collision.geometry.dim == Vector3(1.0, 1.0, 1.0)
    with pytest.raises(ParseError):
        parse_collision(fromstring("<collision/>"))


def test_parse_link_first_visual_and_collision():
    element = fromstring(
        '<link name="arm">'
        '<visual name="a"><geometry><sphere radius="1"/></geometry></visual>'
        '<visual name="b"><geometry><sphere radius="2"/></geometry></visual>'
        '<collision name="c1"><geometry><sphere radius="1"/></geometry></collision>'
        '<collision name="c2"><geometry><sphere radius="2"/></geometry></collision>'
        "</link>"
    )
    link = parse_link(element)
    assert link.name == "arm"
    assert [v.name for v in link.visual_array] == ["a", "b"]
    assert link.visual is link.visual_array[0]
    assert [c.name for c in link.collision_array] == ["c1", "c2"]
    assert link.collision is link.collision_array[0]
    assert link.inertial is None


def test_parse_link_empty():
    link = parse_link(fromstring('<link name="base"/>'))
    assert link == Link(name="base")
    assert link.visual is None and link.collision is None


@pytest.mark.parametrize(
    "xml",
    [
        "<link/>",
        '<link name="l"><inertial/></link>',
        '<link name="l"><visual/></link>',
        '<link name="l"><collision><geometry/></collision></link>',
    ],
)
def test_parse_link_errors(xml):
    with pytest.raises(ParseError):
        parse_link(fromstring(xml))