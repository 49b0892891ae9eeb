import pytest

from image_filter.errors import UnknownFilterError
from image_filter.models.filters import AppliedFilterState, FilterSpec, ImageFilter
from image_filter.services.filter_selector import FilterSelector


@pytest.fixture
def selector():
    return FilterSelector()


def test_blur_spec(selector):
    spec = selector.spec_for(ImageFilter.BLUR)
    assert spec.parameter_name == "radius"
    assert spec.parameter_range == (0.0, 100.0)
    assert spec.requires_parameter


def test_sepia_spec(selector):
    spec = selector.spec_for("sepia")
    assert spec.parameter_name == "intensity"
    assert spec.parameter_range == (0.0, 0.1)


@pytest.mark.parametrize("name", ["none", "mono", "comic"])
def test_parameterless_filters(selector, name):
    spec = selector.spec_for(name)
    assert not spec.requires_parameter
    assert spec.parameter_range is None
    assert spec.parameter_name is None
    assert not selector.requires_parameter(name)


def test_validate(selector):
    assert selector.validate("sepia", 0.05)
    assert not selector.validate("sepia", 0.2)
    assert selector.validate(ImageFilter.SEPIA, 0.0)
    assert selector.validate(ImageFilter.SEPIA, 0.1)
    assert selector.validate("blur", 100.0)
    assert not selector.validate("blur", -0.5)


@pytest.mark.parametrize("value", [-1.0, 0.0, 0.05, 50.0])
def test_validate_mono_is_always_false(selector, value):
    assert not selector.validate("mono", value)


def test_from_string_is_case_insensitive(selector):
    assert selector.from_string("Sepia") is ImageFilter.SEPIA
    assert selector.from_string(" BLUR ") is ImageFilter.BLUR


def test_unknown_filter_raises(selector):
    with pytest.raises(UnknownFilterError):
        selector.spec_for("vignette")
    with pytest.raises(LookupError):
        selector.from_string("")


def test_available_filters_in_declaration_order(selector):
    assert selector.available_filters() == ["None", "Sepia", "Mono", "Blur", "Comic"]


def test_parameters_for(selector):
    assert selector.parameters_for("blur", 12) == {"radius": 12.0}
    assert selector.parameters_for("blur", 500) is None
    assert selector.parameters_for("comic", 1) is None


def test_alert_values(selector):
    assert selector.alert_values("sepia") == ("0.0", "0.1", "intensity")
    assert selector.alert_values("mono") is None


def test_filter_spec_rejects_partial_metadata():
    with pytest.raises(ValueError):
        FilterSpec(requires_parameter=True)


def test_applied_filter_state_defaults():
    state = AppliedFilterState()
    assert state.selected_filter is ImageFilter.NONE
    assert state.lock_aspect_ratio is True


def test_default_values(selector):
    # the sepia default is the full tone even though user input is limited to 0.1
    assert selector.spec_for("sepia").default_value == 1.0
    assert not selector.validate("sepia", 1.0)
    assert selector.spec_for("blur").default_value == 8.0
