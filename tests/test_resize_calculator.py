import pytest

from image_filter.models.size_model import Size
from image_filter.services.resize_calculator import RESIZE_PERCENTAGES, ResizeCalculator


@pytest.fixture
def calculator():
    calc = ResizeCalculator()
    calc.set_original(Size(800, 600))
    return calc


def test_set_original_initialises_edited_size():
    calc = ResizeCalculator()
    calc.set_original(Size(640, 480))
    assert calc.original_size == Size(640, 480)
    assert calc.edited_size == Size(640, 480)


def test_set_original_again_starts_new_session(calculator):
    calculator.on_width_edited(400)
    calculator.set_original(Size(100, 50))
    assert calculator.original_size == Size(100, 50)
    assert calculator.edited_size == Size(100, 50)


def test_width_then_height_scenario(calculator):
    assert calculator.on_width_edited(400) == Size(400, 300)
    assert calculator.on_height_edited(150) == Size(200, 150)
    assert calculator.edited_size == Size(200, 150)


def test_round_trip_width_is_stable_under_fixed_ratio():
    calc = ResizeCalculator()
    calc.set_original(Size(1920, 1080))
    first = calc.on_width_edited(1000)
    second = calc.on_height_edited(first.height)
    assert second.width == pytest.approx(1000)


def test_edited_size_keeps_full_precision():
    calc = ResizeCalculator()
    calc.set_original(Size(1000, 333))
    size = calc.on_width_edited(100)
    assert size.height == pytest.approx(33.3)
    assert size.truncated() == (100, 33)


def test_unlocked_width_edit_changes_only_width(calculator):
    calculator.lock_aspect_ratio = False
    assert calculator.on_width_edited(500) == Size(500, 600)
    assert calculator.on_height_edited(100) == Size(500, 100)


def test_lock_defaults_to_true():
    assert ResizeCalculator().lock_aspect_ratio is True


@pytest.mark.parametrize("percentage", RESIZE_PERCENTAGES)
def test_resize_by_percentage(calculator, percentage):
    size = calculator.resize_by_percentage(percentage)
    width = 800 * percentage / 100
    assert size.width == pytest.approx(width)
    assert size.height == pytest.approx(width / (800 / 600))
    assert calculator.edited_size == size


def test_resize_by_100_percent_returns_original(calculator):
    calculator.on_width_edited(123)
    assert calculator.resize_by_percentage(100).truncated() == (800, 600)


def test_resize_by_percentage_ignores_unlocked_flag(calculator):
    calculator.lock_aspect_ratio = False
    assert calculator.resize_by_percentage(50) == Size(400, 300)
    assert calculator.lock_aspect_ratio is False


def test_resize_by_unsupported_percentage_is_noop(calculator):
    assert calculator.resize_by_percentage(33) is None
    assert calculator.edited_size == Size(800, 600)


def test_resize_by_percentage_label(calculator):
    assert calculator.resize_by_percentage_label("25%") == Size(200, 150)
    assert calculator.resize_by_percentage_label("abc") is None


def test_operations_before_original_are_noops():
    calc = ResizeCalculator()
    assert calc.on_width_edited(100) is None
    assert calc.on_height_edited(100) is None
    assert calc.resize_by_percentage(50) is None
    assert calc.original_size is None
    assert calc.edited_size is None


def test_zero_original_height_is_noop():
    calc = ResizeCalculator()
    calc.set_original(Size(100, 0))
    assert calc.on_width_edited(50) is None
    assert calc.on_height_edited(50) is None
    assert calc.resize_by_percentage(50) is None
    assert calc.edited_size == Size(100, 0)


def test_zero_original_height_unlocked_edits_one_side():
    calc = ResizeCalculator(lock_aspect_ratio=False)
    calc.set_original(Size(100, 0))
    assert calc.on_width_edited(50) == Size(50, 0)
    assert calc.on_height_edited(20) == Size(50, 20)


def test_zero_original_width_locked():
    calc = ResizeCalculator()
    calc.set_original(Size(0, 100))
    assert calc.on_width_edited(50) is None
    assert calc.resize_by_percentage(50) is None
    assert calc.edited_size == Size(0, 100)
    # height edits only divide by the original height
    assert calc.on_height_edited(50) == Size(0, 50)


def test_original_size_string():
    calc = ResizeCalculator()
    assert calc.original_size_string == "Original Image Size: -"
    calc.set_original(Size(800.9, 600.2))
    assert calc.original_size_string == "Original Image Size: 800 x 600"


def test_available_percentages():
    assert ResizeCalculator().available_percentages == ["100%", "75%", "60%", "50%", "25%", "10%"]


def test_reset_forgets_sizes(calculator):
    calculator.reset()
    assert calculator.original_size is None
    assert calculator.on_width_edited(10) is None
