import pytest

from tombgrid.enemies import (
    EnemyType,
    MovementPattern,
    enemy_type_from_string,
    movement_pattern_from_string,
)


@pytest.mark.parametrize("text, expected", [("saw", EnemyType.SAW), ("snake", EnemyType.SNAKE)])
def test_enemy_type_from_string(text, expected):
    assert enemy_type_from_string(text) is expected


@pytest.mark.parametrize("text", ["", "Saw", "spider"])
def test_enemy_type_unknown_raises(text):
    with pytest.raises(ValueError):
        enemy_type_from_string(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("forwardback", MovementPattern.FORWARD_BACK),
        ("leftright", MovementPattern.LEFT_RIGHT),
        ("forward", MovementPattern.FORWARD),
    ],
)
def test_movement_pattern_from_string(text, expected):
    assert movement_pattern_from_string(text) is expected


@pytest.mark.parametrize("text", ["", "backward", "left right"])
def test_movement_pattern_unknown_raises(text):
    with pytest.raises(ValueError):
        movement_pattern_from_string(text)