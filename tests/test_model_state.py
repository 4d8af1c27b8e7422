from xml.etree.ElementTree import fromstring

import pytest

from urdfkit.common import ParseError
from urdfkit.model_state import JointState, ModelState, parse_model_state


def test_parse_full_model_state():
    element = fromstring(
        '<model_state name="pose1" time_stamp="2.5">'
        '<joint_state joint="elbow" position="0.1  0.2" velocity="1" effort="3 4 5"/>'
        "</model_state>"
    )
    state = parse_model_state(element)
    assert state.name == "pose1"
    assert state.time_stamp == 2.5
    assert state.joint_states == [
        JointState(joint="elbow", position=[0.1, 0.2], velocity=[1.0], effort=[3.0, 4.0, 5.0])
    ]


def test_parse_model_state_without_joint_state():
    state = parse_model_state(fromstring('<model_state name="empty"/>'))
    assert state == ModelState(name="empty")
    assert state.joint_states == []


def test_only_first_joint_state_is_read():
    element = fromstring(
        '<model_state name="s">'
        '<joint_state joint="a" position="1"/><joint_state joint="b" position="2"/>'
        "</model_state>"
    )
    state = parse_model_state(element)
    assert [js.joint for js in state.joint_states] == ["a"]


def test_missing_attributes_give_empty_lists():
    state = parse_model_state(
        fromstring('<model_state name="s"><joint_state joint="j"/></model_state>')
    )
    joint_state = state.joint_states[0]
    assert (joint_state.position, joint_state.velocity, joint_state.effort) == ([], [], [])


def test_missing_name_raises():
    with pytest.raises(ParseError):
        parse_model_state(fromstring("<model_state/>"))


def test_missing_joint_name_raises():
    with pytest.raises(ParseError):
        parse_model_state(
            fromstring('<model_state name="s"><joint_state position="1"/></model_state>')
        )