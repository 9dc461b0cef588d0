"""
Resolve column grid layouts into per-breakpoint image sizes.

May be used with a grid system other than Bootstrap by passing a custom
GridConfig.
"""

from functools import reduce
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from responsive_images.config import ColumnSpan, GridConfig, load_grid_config
from responsive_images.errors import InvalidConfiguration
from responsive_images.models import SizeSpec
from responsive_images.sizes.size_list import SizeList
from responsive_images.utils.logger import get_logger


class GridResolver:
    """Computes image sizes from 'N of M columns at breakpoint B' settings."""

    def __init__(self, config: Union[GridConfig, Mapping[str, Any], None] = None):
        """
        Initialize the resolver.

        Args:
            config: Grid configuration, nested mapping, or None for the
                default Bootstrap grid.
        """
        self.config = load_grid_config(config).model_copy(deep=True)
        self.logger = get_logger()

    def col(
        self,
        breakpoint: str,
        cols: int,
        height: Optional[int] = None,
        crop: Any = None,
        transform: Optional[Dict[str, Any]] = None
    ) -> "GridResolver":
        """
        Set columns taken from the given breakpoint up.

        Args:
            breakpoint: Breakpoint name.
            cols: Number of columns taken.
            height: Image height at this breakpoint, None for proportional.
            crop: Crop value, see Crop.from_value().
            transform: Extra CDN transform parameters.

        Returns:
            self for chaining.
        """
        self._check_breakpoint(breakpoint)
        try:
            span = ColumnSpan(columns_taken=cols, height=height, crop=crop, transform=transform or {})
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid column span for '{breakpoint}': {e}") from e
        self._check_span(breakpoint, span)
        self.config.column_spans[breakpoint] = span
        return self

    def container(self, breakpoint: str, width: Optional[int], given_with_gutter: bool = True) -> "GridResolver":
        """
        Set container width for the given breakpoint.

        Args:
            breakpoint: Breakpoint name.
            width: Container width in px, None for a fluid (100% wide) container.
            given_with_gutter: False when width excludes the side paddings,
                the gutter is then added to it.

        Returns:
            self for chaining.
        """
        self._check_breakpoint(breakpoint)
        if width is not None and not given_with_gutter:
            width += self.config.gutter
        self.config.containers[breakpoint] = width
        return self

    def resolve(self) -> SizeList:
        """
        Get a mobile-first SizeList for the configured columns and containers.

        Raises:
            InvalidConfiguration: On unknown breakpoint names, unordered
                breakpoints or column spans wider than the grid.
        """
        self.validate()
        sizes = SizeList(mobile_first=True)

        for name, span in self._cascade_spans():
            min_width = self.config.breakpoints[name]
            image_width = self.image_width(name, span.columns_taken)
            if image_width is None:
                self.logger.debug("grid", "no container width", breakpoint=name)
                continue

            transform = dict(self.config.default_transform)
            transform.update(span.transform)
            sizes.append(min_width, SizeSpec(image_width, span.height, span.crop, transform))
            self.logger.debug(
                "grid", "resolved breakpoint",
                breakpoint=name, min_width=min_width, columns=span.columns_taken, width=image_width
            )

        return sizes

    def image_width(self, breakpoint: str, cols: int) -> Optional[int]:
        """Image width for a breakpoint and columns taken, None without a container width."""
        container_width = self.container_width(breakpoint)
        if container_width is None:
            return None
        # round half up, the way CSS grids compute column shares
        share = container_width / self.config.columns * cols
        return int(share + 0.5) - self.config.gutter

    def container_width(self, breakpoint: str) -> Optional[int]:
        """
        Outer container width for a breakpoint, including side paddings.

        A fluid container grows up to the next breakpoint, one pixel below
        its min-width. Fluid containers at the last breakpoint have no width.
        """
        width = self.config.containers.get(breakpoint)
        if width is not None:
            return width

        next_breakpoint = self.config.next_breakpoint(breakpoint)
        if next_breakpoint is None:
            return None
        return self.config.breakpoints[next_breakpoint] - 1

    def validate(self) -> None:
        """Check the configuration references and limits."""
        widths = list(self.config.breakpoints.values())
        if any(a >= b for a, b in zip(widths, widths[1:])):
            raise InvalidConfiguration(f"Breakpoints have to be strictly increasing, {self.config.breakpoints} given")

        for name in self.config.containers:
            self._check_breakpoint(name)
        for name, span in self.config.column_spans.items():
            self._check_breakpoint(name)
            self._check_span(name, span)

    def _cascade_spans(self) -> List[Tuple[str, ColumnSpan]]:
        """Pair each breakpoint with the span set at it or at the nearest smaller one."""
        full_width = ColumnSpan(columns_taken=self.config.columns)

        def carry(resolved: List[Tuple[str, ColumnSpan]], name: str) -> List[Tuple[str, ColumnSpan]]:
            last = resolved[-1][1] if resolved else full_width
            return resolved + [(name, self.config.column_spans.get(name, last))]

        return reduce(carry, self.config.breakpoints, [])

    def _check_breakpoint(self, breakpoint: str) -> None:
        if breakpoint not in self.config.breakpoints:
            raise InvalidConfiguration(f"Breakpoint '{breakpoint}' doesn't exist.")

    def _check_span(self, breakpoint: str, span: ColumnSpan) -> None:
        if span.columns_taken > self.config.columns:
            raise InvalidConfiguration(
                f"Number of columns taken at '{breakpoint}' has to be lower than or equal to "
                f"total columns of {self.config.columns}, {span.columns_taken} given."
            )


def resolve_grid(config: Union[GridConfig, Mapping[str, Any], None] = None) -> SizeList:
    """Resolve a grid configuration into a mobile-first SizeList."""
    return GridResolver(config).resolve()
