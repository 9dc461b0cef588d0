"""
Tests for image sources.
"""

import pytest
from PIL import Image

from responsive_images.errors import InvalidConfiguration
from responsive_images.io.sources import CloudinarySource, LocalImageSource, proportional_size
from responsive_images.models import SizeSpec


UPLOAD_URL = "https://res.cloudinary.com/demo/image/upload"


@pytest.fixture
def photo():
    """Landscape photo uploaded to Cloudinary."""
    return CloudinarySource("demo", "sample.jpg", original_size=(1000, 500))


@pytest.fixture
def local_image(tmp_path):
    """Create a local raster image for testing."""
    file_path = tmp_path / "hero.png"
    Image.new("RGB", (800, 400), color="white").save(file_path)
    return LocalImageSource(file_path, "https://example.com/img/hero.png")


def test_proportional_size():
    """Test fitting an original size into a box."""
    assert proportional_size((1000, 500), 400) == (400, 200)
    assert proportional_size((1000, 500), 300, 300) == (300, 150)
    assert proportional_size((500, 1000), 300, 300) == (150, 300)
    assert proportional_size((3, 1), 2) == (2, 1)


def test_cloudinary_fit(photo):
    """Test width-only variant keeping the aspect ratio."""
    src = photo.resolve(SizeSpec(400))

    assert src.url == f"{UPLOAD_URL}/c_fit,f_auto,q_auto:eco,w_400/sample.jpg"
    assert (src.width, src.height) == (400, 200)


def test_cloudinary_fill(photo):
    """Test cropped variant reporting the exact box."""
    src = photo.resolve(SizeSpec(300, 300))

    assert src.url == f"{UPLOAD_URL}/c_fill,f_auto,h_300,q_auto:eco,w_300/sample.jpg"
    assert (src.width, src.height) == (300, 300)


def test_cloudinary_fit_box(photo):
    """Test non-cropping variant fitted inside the box."""
    src = photo.resolve(SizeSpec(300, 300, "fit"))
    assert (src.width, src.height) == (300, 150)


def test_cloudinary_custom_transform():
    """Test size transforms over source defaults."""
    source = CloudinarySource("demo", "people/team.jpg", (1200, 800), defaults={"quality": 80})
    src = source.resolve(SizeSpec(200, 200, "thumb", {"gravity": "face"}))

    assert src.url == f"{UPLOAD_URL}/c_thumb,g_face,h_200,q_80,w_200/people/team.jpg"
    assert (src.width, src.height) == (200, 200)


def test_cloudinary_positional_crop(photo):
    """Test positional crops filled by the CDN."""
    src = photo.resolve(SizeSpec(300, 200, ("center", "top")))
    assert "c_fill" in src.url


def test_cloudinary_unknown_parameter(photo):
    """Test rejection of transform parameters without a URL key."""
    with pytest.raises(InvalidConfiguration):
        photo.resolve(SizeSpec(300, transform={"sparkle": True}))


def test_cloudinary_unknown_original_size():
    """Test dimensions reported without an original size."""
    source = CloudinarySource("demo", "sample.jpg")
    assert source.original_size() is None

    src = source.resolve(SizeSpec(400, 300, "fit"))
    assert (src.width, src.height) == (400, 300)


def test_cloudinary_svg():
    """Test that SVG uploads are served untransformed."""
    source = CloudinarySource("demo", "icons/logo.svg")

    assert source.is_svg
    assert source.single_resolution
    assert source.default_alt == "logo"

    src = source.resolve(SizeSpec(200))
    assert src.url == f"{UPLOAD_URL}/icons/logo.svg"
    assert (src.width, src.height) == (200, 200)


def test_cloudinary_is_callable(photo):
    """Test sources usable as plain resolver functions."""
    assert photo(SizeSpec(400)) == photo.resolve(SizeSpec(400))
    assert not photo.single_resolution
    assert photo.default_alt == "sample"


def test_local_image(local_image):
    """Test static image served at requested dimensions."""
    assert local_image.original_size() == (800, 400)
    assert local_image.single_resolution
    assert local_image.default_alt == "hero"

    src = local_image.resolve(SizeSpec(400))
    assert src.url == "https://example.com/img/hero.png"
    assert (src.width, src.height) == (400, 200)

    src = local_image.resolve(SizeSpec(400, 300))
    assert (src.width, src.height) == (400, 300)


def test_local_svg(tmp_path):
    """Test SVG files without an intrinsic raster size."""
    file_path = tmp_path / "icon.svg"
    file_path.write_text('<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"/>')
    source = LocalImageSource(file_path, "https://example.com/icon.svg")

    assert source.is_svg
    assert source.original_size() is None

    src = source.resolve(SizeSpec(100))
    assert (src.width, src.height) == (100, 100)


def test_local_image_missing(tmp_path):
    """Test missing image files."""
    source = LocalImageSource(tmp_path / "missing.jpg", "https://example.com/missing.jpg")
    with pytest.raises(FileNotFoundError):
        source.original_size()
