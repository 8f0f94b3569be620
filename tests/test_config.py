import pytest

from engine import RunConfig, compute_delay
from engine.config import DEFAULT_ARRAY_SIZE, MIN_SPEED, MAX_SPEED


@pytest.mark.parametrize("value, expected", [(0, MIN_SPEED), (-5, MIN_SPEED), (1, 1), (37, 37), (50, 50), (99, MAX_SPEED)])
def test_set_speed_clamps(value, expected):
    config = RunConfig()
    assert config.set_speed(value) == expected
    assert config.delay_ms == compute_delay(expected)


def test_speed_changes_while_locked():
    config = RunConfig()
    config.lock()
    config.set_speed(40)
    assert config.speed == 40


def test_non_positive_size_falls_back_to_default():
    config = RunConfig(array_size=7)
    assert config.set_array_size(0)
    assert config.array_size == DEFAULT_ARRAY_SIZE
    assert config.set_array_size(-3)
    assert config.array_size == DEFAULT_ARRAY_SIZE
    assert config.set_array_size(12)
    assert config.array_size == 12


def test_select_algorithm():
    config = RunConfig()
    assert config.select_algorithm("quick")
    assert config.algorithm == "quick"
    assert not config.select_algorithm("bogo")
    assert config.algorithm == "quick"


def test_lock_rejects_size_and_algorithm():
    config = RunConfig()
    config.lock()
    assert not config.set_array_size(50)
    assert not config.select_algorithm("merge")
    assert (config.array_size, config.algorithm) == (DEFAULT_ARRAY_SIZE, "bubble")

    config.set_array_content("1, 2")      # text box stays live
    assert config.array_text == "1, 2"

    config.unlock()
    assert config.select_algorithm("merge")


def test_initial_values_prefers_text():
    config = RunConfig()
    config.set_array_content("  9, 2, x, 4 ")
    assert config.initial_values() == [9, 2, 4]


def test_initial_values_falls_back_to_random():
    config = RunConfig(array_size=15)
    values = config.initial_values()
    assert len(values) == 15
    assert all(20 <= v < 500 for v in values)

    config.set_array_content("nope, nan")
    assert len(config.initial_values()) == 15


def test_select_algorithm_rejects_non_string_names():
    config = RunConfig()
    assert not config.select_algorithm(["quick"])
    assert not config.select_algorithm(None)
    assert config.algorithm == "bubble"


def test_constructor_normalises_size_and_speed():
    config = RunConfig(speed=0, array_size=0)
    assert config.speed == MIN_SPEED
    assert config.array_size == DEFAULT_ARRAY_SIZE
    assert len(config.initial_values()) == DEFAULT_ARRAY_SIZE

    assert RunConfig(array_size=-4).array_size == DEFAULT_ARRAY_SIZE
