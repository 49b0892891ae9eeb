from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest

pytest.importorskip("customtkinter")

from image_filter.controllers.app_controller import AppController  # noqa: E402
from image_filter.models.filters import ImageFilter  # noqa: E402
from image_filter.models.size_model import Size  # noqa: E402
from image_filter.ui.dialogs import ParameterChoice  # noqa: E402


@pytest.fixture
def controller():
    ctrl = AppController(viewer=MagicMock(), sidebar=MagicMock(), bottom=MagicMock(), window=MagicMock())
    ctrl.bind_events()
    yield ctrl
    ctrl.shutdown()


@pytest.fixture
def opened(controller, png_file):
    assert controller.open_image(png_file)
    return controller


def test_bind_events_wires_sidebar(controller):
    assert controller.sidebar.on_open_file == controller._handle_open_file
    assert controller.sidebar.on_filter_change == controller._handle_filter_change
    assert controller.sidebar.on_resize == controller._handle_resize


def test_open_image_updates_views(opened):
    opened.viewer.set_image.assert_called()
    opened.sidebar.set_image_info.assert_called_with("photo.png", "80 x 60")
    opened.bottom.set_image.assert_called_with("photo.png", "80 x 60")
    opened.sidebar.set_image_actions_enabled.assert_called_with(True)


def test_open_image_failure_shows_error(controller, tmp_path):
    controller._show_error = MagicMock()
    assert not controller.open_image(tmp_path / "missing.png")
    controller._show_error.assert_called_once()
    controller.viewer.clear.assert_called_once()


def test_filter_change_without_image_shows_alert(controller):
    controller._show_no_image_alert = MagicMock()
    controller._handle_filter_change("Mono")
    controller._show_no_image_alert.assert_called_once()
    controller.sidebar.reset_filter.assert_called_once()


def test_parameterless_filter_applies_immediately(opened):
    opened._ask_parameter = MagicMock()
    opened._handle_filter_change("Mono")
    opened._ask_parameter.assert_not_called()
    assert opened.session.applied_filter.selected_filter is ImageFilter.MONO
    assert opened.session.displayed_data != opened.session.original_data


def test_valid_parameter_is_forwarded(opened):
    opened._ask_parameter = MagicMock(return_value=(ParameterChoice.OK, 2.0))
    opened.session.apply_filter = MagicMock()
    opened._handle_filter_change("Blur")
    opened._ask_parameter.assert_called_once_with(("0.0", "100.0", "radius"))
    opened.session.apply_filter.assert_called_once_with({"radius": 2.0})


@pytest.mark.parametrize(
    "answer",
    [(ParameterChoice.OK, 5.0), (ParameterChoice.OK, None), (ParameterChoice.USE_DEFAULT, None)],
)
def test_invalid_or_default_parameter_falls_back_to_default(opened, answer):
    opened._ask_parameter = MagicMock(return_value=answer)
    opened.session.apply_filter = MagicMock()
    opened._handle_filter_change("Sepia")
    opened.session.apply_filter.assert_called_once_with(None)


def test_cancel_parameter_keeps_displayed_image(opened):
    opened._ask_parameter = MagicMock(return_value=(ParameterChoice.CANCEL, None))
    opened.session.apply_filter = MagicMock()
    opened._handle_filter_change("Blur")
    opened.session.apply_filter.assert_not_called()


def test_resize_runs_in_background_and_refreshes(opened):
    opened._ask_new_size = MagicMock(return_value=Size(40, 30))
    opened._handle_resize()

    calculator = opened._ask_new_size.call_args.args[0]
    assert calculator.original_size == Size(80, 60)
    opened.bottom.set_busy.assert_called_with(True)

    _delay, callback, future = opened.window.after.call_args.args
    future.result(timeout=5)
    callback(future)

    opened.bottom.set_busy.assert_called_with(False)
    opened.sidebar.set_image_info.assert_called_with("photo.png", "40 x 30")
    assert opened._pending_resize is None


def test_poll_reschedules_until_done(opened):
    future = Future()
    opened._poll_resize(future)
    opened.window.after.assert_called_with(50, opened._poll_resize, future)


def test_resize_cancelled(opened):
    opened._ask_new_size = MagicMock(return_value=None)
    opened.session.resize = MagicMock()
    opened._handle_resize()
    opened.session.resize.assert_not_called()


def test_clear_image_resets_views(opened):
    opened._handle_clear_image()
    assert not opened.session.has_image
    opened.viewer.clear.assert_called_once()
    opened.sidebar.set_image_actions_enabled.assert_called_with(False)


def test_save_writes_file(opened, tmp_path):
    target = tmp_path / "copy.png"
    opened._ask_save_path = MagicMock(return_value=str(target))
    opened._handle_save_file()
    assert target.read_bytes() == opened.session.displayed_data
    opened.bottom.set_message.assert_called_with("Сохранено: copy.png")


def test_save_failure_shows_error(opened, tmp_path):
    opened._ask_save_path = MagicMock(return_value=str(tmp_path / "no-dir" / "copy.png"))
    opened._show_error = MagicMock()
    opened._handle_save_file()
    opened._show_error.assert_called_once()


def test_aspect_lock_choice_is_remembered_between_dialogs(opened):
    def untick(calculator):
        calculator.lock_aspect_ratio = False
        return None

    opened._ask_new_size = MagicMock(side_effect=untick)
    opened._handle_resize()
    assert opened.session.applied_filter.lock_aspect_ratio is False

    opened._ask_new_size = MagicMock(return_value=None)
    opened._handle_resize()
    assert opened._ask_new_size.call_args.args[0].lock_aspect_ratio is False


def test_resize_finishing_after_another_open_keeps_new_image(gated_image_service, png_file, second_png_file):
    ctrl = AppController(
        viewer=MagicMock(), sidebar=MagicMock(), bottom=MagicMock(), window=MagicMock(),
        _image_service=gated_image_service,
    )
    try:
        assert ctrl.open_image(png_file)
        ctrl.start_resize(Size(40, 30))
        _delay, callback, future = ctrl.window.after.call_args.args

        assert ctrl.open_image(second_png_file)
        gated_image_service.gate.set()
        future.result(timeout=5)
        callback(future)

        assert ctrl.session.displayed_size == Size(30, 30)
        ctrl.sidebar.set_image_info.assert_called_with("other.png", "30 x 30")
        ctrl.bottom.set_busy.assert_called_with(False)
        assert ctrl._pending_resize is None
    finally:
        gated_image_service.gate.set()
        ctrl.shutdown()
