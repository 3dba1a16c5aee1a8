import random

import pytest

from enfrendados.dice import die_face, roll_six, roll_twelve


def test_roll_six_stays_in_range_and_covers_all_faces():
    rng = random.Random(1234)
    values = {roll_six(rng) for _ in range(600)}
    assert values == set(range(1, 7))


def test_roll_twelve_stays_in_range_and_covers_all_faces():
    rng = random.Random(99)
    values = {roll_twelve(rng) for _ in range(1200)}
    assert values == set(range(1, 13))


def test_rolls_are_repeatable_with_same_seed():
    first = [roll_six(random.Random(7)) for _ in range(5)]
    second = [roll_six(random.Random(7)) for _ in range(5)]
    assert first == second
    a, b = random.Random(42), random.Random(42)
    assert [roll_twelve(a) for _ in range(20)] == [roll_twelve(b) for _ in range(20)]


def test_rolls_without_generator_are_in_range():
    assert all(1 <= roll_six() <= 6 for _ in range(50))
    assert all(1 <= roll_twelve() <= 12 for _ in range(50))


def test_die_face_one_matches_picture():
    assert die_face(1) == ("-----", "|   |", "| o |", "|   |", "-----")


def test_die_face_six_matches_picture():
    assert die_face(6) == ("-----", "|o o|", "|o o|", "|o o|", "-----")


@pytest.mark.parametrize("value", range(1, 7))
def test_die_face_pip_count_equals_value(value):
    lines = die_face(value)
    assert len(lines) == 5
    assert all(len(line) == 5 for line in lines)
    assert sum(line.count("o") for line in lines) == value


def test_die_faces_are_all_distinct():
    faces = {die_face(v) for v in range(1, 7)}
    assert len(faces) == 6


@pytest.mark.parametrize("value", [0, 7, -1, 12, None])
def test_die_face_rejects_impossible_values(value):
    with pytest.raises(ValueError):
        die_face(value)