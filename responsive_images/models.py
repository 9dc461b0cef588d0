"""
Value models for per-breakpoint image sizes and resolved image sources.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel

from responsive_images.errors import InvalidConfiguration


# Pass-through crop modes of a transforming CDN that crop as well as resize.
CROPPING_MODES = ("crop", "fill", "lfill", "fill_pad", "thumb")


class CropKind(str, Enum):
    """Normalized crop policies."""
    FIT = "fit"
    FILL = "fill"
    NAMED = "named"
    POSITION = "position"


@dataclass(frozen=True)
class Crop:
    """A crop policy, normalized from its legacy encodings."""
    kind: CropKind
    name: Optional[str] = None
    position: Optional[Tuple[Any, Any]] = None

    @classmethod
    def from_value(cls, value: Any, height: Optional[int] = None) -> "Crop":
        """
        Normalize a crop value.

        Args:
            value: One of None, a bool, a mode keyword, an (x, y) pair or a Crop.
                None means 'fill' when a height is given and 'fit' otherwise.
            height: Target height the crop applies to.

        Returns:
            Crop instance.
        """
        if isinstance(value, Crop):
            return value
        if value is None:
            return cls(CropKind.FIT) if height is None else cls(CropKind.FILL)
        if isinstance(value, bool):
            return cls(CropKind.FILL) if value else cls(CropKind.FIT)
        if isinstance(value, str):
            if not value:
                raise InvalidConfiguration("Crop mode must not be empty")
            if value == CropKind.FIT.value:
                return cls(CropKind.FIT)
            if value == CropKind.FILL.value:
                return cls(CropKind.FILL)
            return cls(CropKind.NAMED, name=value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(CropKind.POSITION, position=(value[0], value[1]))
        raise InvalidConfiguration(f"Unsupported crop value: {value!r}")

    @property
    def mode(self) -> str:
        """Crop keyword as understood by a transforming CDN."""
        if self.kind == CropKind.NAMED:
            return self.name
        if self.kind == CropKind.POSITION:
            # positioned crops are filled, the CDN picks its own focus
            return CropKind.FILL.value
        return self.kind.value


def _check_dimension(name: str, value: Optional[int], required: bool = False) -> None:
    if value is None and not required:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(f"{name} has to be a positive integer, {value!r} given")


@dataclass(frozen=True)
class SizeSpec:
    """
    Target size and transformation of an image for one breakpoint.

    Width and height are the requested target; max_width and max_height are
    optional clamps applied on top of it by effective_width()/effective_height().
    """
    width: int
    height: Optional[int] = None
    crop: Union[Crop, bool, str, Tuple[Any, Any], None] = None
    transform: Dict[str, Any] = field(default_factory=dict, hash=False)
    max_width: Optional[int] = None
    max_height: Optional[int] = None

    def __post_init__(self):
        _check_dimension("Image width", self.width, required=True)
        _check_dimension("Image height", self.height)
        _check_dimension("Maximal width", self.max_width)
        _check_dimension("Maximal height", self.max_height)
        object.__setattr__(self, "crop", Crop.from_value(self.crop, self.height))
        object.__setattr__(self, "transform", dict(self.transform or {}))

    def effective_width(self) -> int:
        """Target width limited by the width clamp."""
        if self.max_width is None:
            return self.width
        return min(self.width, self.max_width)

    def effective_height(self) -> Optional[int]:
        """Target height limited by the height clamp, None for proportional height."""
        if self.height is None or self.max_height is None:
            return self.height
        return min(self.height, self.max_height)

    def crop_mode(self) -> CropKind:
        return self.crop.kind

    def crop_type(self) -> str:
        return self.crop.mode

    def is_cropped(self) -> bool:
        """Whether the image gets cropped to the exact target box."""
        if self.crop.kind == CropKind.NAMED:
            return self.crop.name in CROPPING_MODES
        return self.crop.kind in (CropKind.FILL, CropKind.POSITION)

    def crop_or_position(self) -> Union[bool, Tuple[Any, Any]]:
        """Return the (x, y) crop position if set, otherwise whether to crop."""
        if self.crop.kind == CropKind.POSITION:
            return self.crop.position
        return self.is_cropped()

    def with_clamp(self, max_width: Optional[int] = None, max_height: Optional[int] = None) -> "SizeSpec":
        """
        Copy of this size limited by the given clamps.

        Clamps already present are kept when tighter than the new ones.
        """
        if max_width is not None and self.max_width is not None:
            max_width = min(max_width, self.max_width)
        if max_height is not None and self.max_height is not None:
            max_height = min(max_height, self.max_height)
        return replace(
            self,
            max_width=self.max_width if max_width is None else max_width,
            max_height=self.max_height if max_height is None else max_height,
        )

    def transform_params(self, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Parameters for a transforming CDN.

        Args:
            defaults: Parameters applied before the size's own transform.

        Returns:
            Merged transform with width, height and crop of this size.
        """
        params = dict(defaults or {})
        params.update(self.transform)
        params.update({
            "width": self.effective_width(),
            "height": self.effective_height(),
            "crop": self.crop_type(),
        })
        return params


class ResolvedSource(BaseModel):
    """Image variant actually produced for a size."""
    url: str
    width: int
    height: int
