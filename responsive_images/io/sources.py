"""
Image sources resolving a SizeSpec into the URL and dimensions of a variant.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import quote

from PIL import Image

from responsive_images.config import DEFAULT_TRANSFORM
from responsive_images.errors import InvalidConfiguration
from responsive_images.models import ResolvedSource, SizeSpec


CLOUDINARY_BASE_URL = "https://res.cloudinary.com"

# Cloudinary URL keys of transform parameters
TRANSFORM_KEYS = {
    "angle": "a",
    "aspect_ratio": "ar",
    "background": "b",
    "crop": "c",
    "dpr": "dpr",
    "effect": "e",
    "fetch_format": "f",
    "gravity": "g",
    "height": "h",
    "opacity": "o",
    "quality": "q",
    "radius": "r",
    "width": "w",
    "x": "x",
    "y": "y",
    "zoom": "z",
}


def _round(value: float) -> int:
    return int(value + 0.5)


def proportional_size(original: Tuple[int, int], width: int, height: Optional[int] = None) -> Tuple[int, int]:
    """
    Scale an original size to fit within width x height, keeping its aspect ratio.

    Args:
        original: Original (width, height).
        width: Box width.
        height: Box height, None to constrain the width only.

    Returns:
        Scaled (width, height).
    """
    original_width, original_height = original
    scale = width / original_width
    if height is not None:
        scale = min(scale, height / original_height)
    return max(1, _round(original_width * scale)), max(1, _round(original_height * scale))


class ImageSource:
    """Base class for resolvable images."""

    url: str = ""

    @property
    def is_svg(self) -> bool:
        """Check if the image has an SVG extension."""
        return Path(self.url.split("?")[0]).suffix.lower() == ".svg"

    @property
    def single_resolution(self) -> bool:
        """Whether the image has one intrinsic resolution and no scaled variants."""
        return self.is_svg

    @property
    def default_alt(self) -> str:
        return Path(self.url.split("?")[0]).stem

    def original_size(self) -> Optional[Tuple[int, int]]:
        """Intrinsic (width, height), None when unknown."""
        return None

    def resolve(self, spec: SizeSpec) -> Optional[ResolvedSource]:
        raise NotImplementedError

    def __call__(self, spec: SizeSpec) -> Optional[ResolvedSource]:
        return self.resolve(spec)

    def _requested_size(self, spec: SizeSpec) -> Tuple[int, int]:
        """Requested dimensions, deriving a missing height from the original size."""
        width, height = spec.effective_width(), spec.effective_height()
        if height is not None:
            return width, height
        original = self.original_size()
        if original is None:
            return width, width
        return proportional_size(original, width)


class CloudinarySource(ImageSource):
    """Image stored on Cloudinary, resized and cropped by URL transformations."""

    def __init__(
        self,
        cloud_name: str,
        public_id: str,
        original_size: Optional[Tuple[int, int]] = None,
        defaults: Optional[Dict[str, Any]] = None,
        base_url: str = CLOUDINARY_BASE_URL
    ):
        """
        Initialize the source.

        Args:
            cloud_name: Cloudinary cloud name.
            public_id: Public ID of the uploaded image, with extension.
            original_size: Intrinsic (width, height) of the upload.
            defaults: Transform applied to every variant, DEFAULT_TRANSFORM if None.
            base_url: Delivery base URL.
        """
        self.cloud_name = cloud_name
        self.public_id = public_id.lstrip("/")
        self._original_size = original_size
        self.defaults = dict(DEFAULT_TRANSFORM) if defaults is None else dict(defaults)
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """URL of the untransformed original."""
        return f"{self.base_url}/{self.cloud_name}/image/upload/{quote(self.public_id)}"

    def original_size(self) -> Optional[Tuple[int, int]]:
        return self._original_size

    def transformation(self, params: Dict[str, Any]) -> str:
        """
        Encode transform parameters as a Cloudinary transformation component.

        Raises:
            InvalidConfiguration: On parameters without a URL key.
        """
        parts = []
        for name, value in params.items():
            if value is None:
                continue
            if name not in TRANSFORM_KEYS:
                raise InvalidConfiguration(f"Unknown Cloudinary transform parameter '{name}'")
            parts.append(f"{TRANSFORM_KEYS[name]}_{value}")
        return ",".join(sorted(parts))

    def resolve(self, spec: SizeSpec) -> ResolvedSource:
        if self.single_resolution:
            width, height = self._requested_size(spec)
            return ResolvedSource(url=self.url, width=width, height=height)

        params = spec.transform_params(self.defaults)
        transformation = self.transformation(params)
        url = f"{self.base_url}/{self.cloud_name}/image/upload/{transformation}/{quote(self.public_id)}"

        width, height = spec.effective_width(), spec.effective_height()
        if height is None or not spec.is_cropped():
            # non-cropping modes keep the original aspect ratio inside the box
            original = self.original_size()
            if original is not None:
                width, height = proportional_size(original, width, height)
            elif height is None:
                height = width
        return ResolvedSource(url=url, width=width, height=height)


class LocalImageSource(ImageSource):
    """Static image file served from a single URL, e.g. a theme asset."""

    def __init__(self, path: Union[str, Path], url: str):
        """
        Initialize the source.

        Args:
            path: Path of the image file on disk.
            url: Public URL of the same file.
        """
        self.path = Path(path)
        self.url = url
        self._original_size: Optional[Tuple[int, int]] = None

    @property
    def single_resolution(self) -> bool:
        return True

    def original_size(self) -> Optional[Tuple[int, int]]:
        """
        Read the intrinsic size from the image header.

        Returns:
            (width, height), None for SVG files.
        """
        if self.is_svg:
            return None
        if self._original_size is None:
            if not self.path.exists():
                raise FileNotFoundError(f"Image not found: {self.path}")
            with Image.open(self.path) as image:
                self._original_size = image.size
        return self._original_size

    def resolve(self, spec: SizeSpec) -> ResolvedSource:
        width, height = self._requested_size(spec)
        return ResolvedSource(url=self.url, width=width, height=height)
