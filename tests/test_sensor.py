import xml.etree.ElementTree as ET

import pytest

from urdfkit.common import ParseError
from urdfkit.sensor import (
    CameraSensor,
    RaySensor,
    SensorType,
    parse_camera_sensor,
    parse_ray,
    parse_sensor,
    parse_visual_sensor,
)

CAMERA = (
    '<camera><image width="640" height="480" format="RGB8" '
    'hfov="1.5" near="0.01" far="50.0"/></camera>'
)


def test_camera_values():
    camera = parse_camera_sensor(ET.fromstring(CAMERA))
    assert camera.width == 640
    assert camera.height == 480
    assert camera.format == "RGB8"
    assert camera.hfov == 1.5
    assert camera.near == 0.01
    assert camera.far == 50.0
    assert camera.type is SensorType.CAMERA


def test_camera_without_image():
    with pytest.raises(ParseError):
        parse_camera_sensor(ET.fromstring("<camera/>"))


@pytest.mark.parametrize("missing", ["width", "height", "format", "hfov", "near", "far"])
def test_camera_missing_attribute(missing):
    element = ET.fromstring(CAMERA)
    del element.find("image").attrib[missing]
    with pytest.raises(ParseError, match=missing):
        parse_camera_sensor(element)


def test_camera_bad_width():
    element = ET.fromstring(CAMERA)
    element.find("image").set("width", "wide")
    with pytest.raises(ParseError):
        parse_camera_sensor(element)


def test_camera_bad_hfov():
    element = ET.fromstring(CAMERA)
    element.find("image").set("hfov", "x")
    with pytest.raises(ParseError):
        parse_camera_sensor(element)


def test_ray_defaults_match_empty_element():
    assert parse_ray(ET.fromstring("<ray/>")) == RaySensor()


def test_ray_values():
    ray = parse_ray(
        ET.fromstring(
            '<ray><horizontal samples="100" resolution="0.5" min_angle="-1.0" max_angle="1.0"/>'
            '<vertical samples="10" max_angle="0.25"/></ray>'
        )
    )
    assert ray.horizontal_samples == 100
    assert ray.horizontal_resolution == 0.5
    assert ray.horizontal_min_angle == -1.0
    assert ray.horizontal_max_angle == 1.0
    assert ray.vertical_samples == 10
    assert ray.vertical_max_angle == 0.25
    assert ray.vertical_resolution == RaySensor().vertical_resolution
    assert ray.type is SensorType.RAY


def test_ray_bad_samples():
    with pytest.raises(ParseError):
        parse_ray(ET.fromstring('<ray><horizontal samples="many"/></ray>'))


def test_visual_sensor_camera():
    result = parse_visual_sensor(ET.fromstring(f"<sensor>{CAMERA}</sensor>"))
    assert isinstance(result, CameraSensor) and result.width == 640


def test_visual_sensor_ray():
    result = parse_visual_sensor(ET.fromstring('<sensor><ray><vertical samples="3"/></ray></sensor>'))
    assert isinstance(result, RaySensor) and result.vertical_samples == 3


def test_visual_sensor_unknown_is_none():
    assert parse_visual_sensor(ET.fromstring("<sensor><sonar/></sensor>")) is None


def test_visual_sensor_malformed_camera_is_none():
    assert parse_visual_sensor(ET.fromstring("<sensor><camera/></sensor>")) is None


def test_sensor_full():
    sensor = parse_sensor(
        ET.fromstring(
            f'<sensor name="cam" parent_link_name="head">'
            f'<origin xyz="1 2 3"/>{CAMERA}</sensor>'
        )
    )
    assert sensor.name == "cam"
    assert sensor.parent_link_name == "head"
    assert tuple(sensor.origin.position) == (1.0, 2.0, 3.0)
    assert sensor.sensor.format == "RGB8"


def test_sensor_without_name():
    with pytest.raises(ParseError, match="name"):
        parse_sensor(ET.fromstring('<sensor parent_link_name="head"/>'))


def test_sensor_without_parent():
    with pytest.raises(ParseError, match="parent_link_name"):
        parse_sensor(ET.fromstring('<sensor name="cam"/>'))


def test_sensor_without_visual_sensor():
    sensor = parse_sensor(ET.fromstring('<sensor name="cam" parent_link_name="head"/>'))
    assert sensor.sensor is None
    assert tuple(sensor.origin.position) == (0.0, 0.0, 0.0)