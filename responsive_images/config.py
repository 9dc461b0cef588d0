"""
Grid system configuration.

Defaults follow the Bootstrap 5 grid ($grid-columns, $grid-gutter-width,
$grid-breakpoints and $container-max-widths).
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from responsive_images.errors import InvalidConfiguration


DEFAULT_COLUMNS = 12
DEFAULT_GUTTER = 24

BOOTSTRAP_BREAKPOINTS = {
    "xs": 0,
    "sm": 576,
    "md": 768,
    "lg": 992,
    "xl": 1200,
    "xxl": 1400,
}

# Outer container widths including side paddings; xs is fluid.
BOOTSTRAP_CONTAINERS = {
    "sm": 540,
    "md": 720,
    "lg": 960,
    "xl": 1140,
    "xxl": 1320,
}

DEFAULT_TRANSFORM = {
    "quality": "auto:eco",
    "fetch_format": "auto",
}

FLUID = "fluid"


class ColumnSpan(BaseModel):
    """Columns taken by an image at one breakpoint, plus its size overrides."""
    columns_taken: int = Field(gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    crop: Any = None
    transform: Dict[str, Any] = Field(default_factory=dict)


class GridConfig(BaseModel):
    """Column grid configuration resolved into per-breakpoint image sizes."""
    columns: int = Field(default=DEFAULT_COLUMNS, gt=0)
    gutter: int = Field(default=DEFAULT_GUTTER, ge=0)
    breakpoints: Dict[str, int] = Field(default_factory=lambda: dict(BOOTSTRAP_BREAKPOINTS))
    containers: Dict[str, Optional[int]] = Field(default_factory=lambda: dict(BOOTSTRAP_CONTAINERS))
    column_spans: Dict[str, ColumnSpan] = Field(default_factory=dict)
    default_transform: Dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_TRANSFORM))

    @field_validator("containers", mode="before")
    @classmethod
    def _fluid_containers(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {name: None if width == FLUID else width for name, width in value.items()}
        return value

    @field_validator("column_spans", mode="before")
    @classmethod
    def _column_shorthand(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                name: {"columns_taken": span} if isinstance(span, int) and not isinstance(span, bool) else span
                for name, span in value.items()
            }
        return value

    @model_validator(mode="after")
    def _default_containers(self) -> "GridConfig":
        # default containers only apply to breakpoints the grid declares
        if "containers" not in self.model_fields_set:
            self.containers = {
                name: width for name, width in self.containers.items() if name in self.breakpoints
            }
        return self

    def next_breakpoint(self, name: str) -> Optional[str]:
        """Name of the breakpoint declared after the given one, None for the last."""
        names = list(self.breakpoints)
        index = names.index(name) + 1
        return names[index] if index < len(names) else None


def load_grid_config(source: Union[GridConfig, Mapping[str, Any], str, Path, None] = None) -> GridConfig:
    """
    Load a grid configuration.

    Args:
        source: GridConfig, nested mapping, or path to a JSON file.
            None gives the default Bootstrap grid.

    Returns:
        Validated GridConfig.
    """
    if isinstance(source, GridConfig):
        return source
    if source is None:
        return GridConfig()

    if isinstance(source, (str, Path)):
        config_path = Path(source)
        if not config_path.exists():
            raise FileNotFoundError(f"Grid configuration not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        data = dict(source)

    try:
        return GridConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid grid configuration: {e}") from e
