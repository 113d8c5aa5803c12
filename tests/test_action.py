import dataclasses

import pytest

from ecsgame.action import Action


def test_defaults():
    action = Action()
    assert action.name == "NONE"
    assert action.type == "NONE"
    assert str(action) == "NONE NONE"


def test_str_joins_name_and_type():
    assert str(Action("UP", "START")) == "UP START"


def test_equality():
    assert Action("QUIT", "END") == Action("QUIT", "END")
    assert Action("QUIT", "END") != Action("QUIT", "START")


def test_immutable():
    action = Action("UP", "START")
    with pytest.raises(dataclasses.FrozenInstanceError):
        action.name = "DOWN"
    assert action.name == "UP"
    assert str(action) == "UP START"