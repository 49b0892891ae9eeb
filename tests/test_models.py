from pathlib import Path

from image_filter.models.filters import ImageFilter
from image_filter.models.image_model import ImageInfo
from image_filter.models.size_model import Size, SizeModel


def test_size_display_truncates_toward_zero():
    size = Size(199.99, 150.5)
    assert size.truncated() == (199, 150)
    assert size.display() == "199 x 150"


def test_size_with_width_and_height_return_new_instances():
    size = Size(10, 20)
    assert size.with_width(5) == Size(5, 20)
    assert size.with_height(7) == Size(10, 7)
    assert size == Size(10, 20)


def test_size_model_starts_empty():
    model = SizeModel()
    assert model.original_size is None
    assert model.edited_size is None


def test_image_info_name_and_extension():
    info = ImageInfo(path=Path("/tmp/Holiday.JPG"))
    assert info.name == "Holiday.JPG"
    assert info.extension == "jpg"
    assert ImageInfo().name is None
    assert ImageInfo(path=Path("/tmp/README")).extension is None


def test_filter_display_names():
    assert [f.display_name for f in ImageFilter] == ["None", "Sepia", "Mono", "Blur", "Comic"]
