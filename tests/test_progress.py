import pytest

from services.progress import (
    clamp,
    goal_progress,
    percentage_of_target,
    progress_description,
    round_half_up,
)


@pytest.mark.parametrize(
    "current, expected",
    [("70", 0), ("65", 50), ("60", 100), ("58", 100), ("72", 0)],
)
def test_weight_goal_progress_runs_from_initial_to_target(current, expected):
    assert goal_progress(current, "60", "weight", "70") == expected


def test_weight_goal_without_initial_uses_larger_value_as_start():
    assert goal_progress("65", "60", "weight") == 0


def test_weight_goal_with_no_span_is_zero():
    assert goal_progress("60", "60", "weight", "60") == 0


def test_other_categories_use_ratio():
    assert goal_progress("4", "5", "exercise") == 80
    assert goal_progress("12000", "8000", "steps") == 100


@pytest.mark.parametrize(
    "current, target", [("abc", "5"), ("4", "abc"), ("4", "0"), (None, "5"), ("4", "")]
)
def test_unusable_values_give_zero_progress(current, target):
    assert goal_progress(current, target, "exercise") == 0


def test_percentage_of_target():
    assert percentage_of_target(1500, 2000) == 75
    assert percentage_of_target(3000, 2000) == 100
    assert percentage_of_target(5, 0) == 0
    assert percentage_of_target(5, None) == 0
    assert percentage_of_target(None, 10) == 0


def test_rounding_and_clamping():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert clamp(-5) == 0
    assert clamp(150) == 100
    assert clamp(float("nan")) == 0


@pytest.mark.parametrize(
    "progress, label",
    [(80, "Ahead of schedule"), (60, "On track"), (59, "Slightly behind"), (None, "Slightly behind")],
)
def test_progress_description(progress, label):
    assert progress_description(progress) == label
