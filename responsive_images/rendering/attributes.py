"""
Build `sizes` and `srcset` attribute values from a SizeList.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from responsive_images.models import ResolvedSource, SizeSpec
from responsive_images.sizes.size_list import SizeList
from responsive_images.utils.logger import get_logger


SourceResolver = Callable[[SizeSpec], Optional[ResolvedSource]]


@dataclass
class SrcsetSizes:
    """Attribute values for a responsive <img>."""
    sizes: str
    srcset: str
    widest: Optional[ResolvedSource] = None


class AttributeBuilder:
    """Assembles media-conditioned `sizes` and width-described `srcset` values."""

    def __init__(self, resolver: SourceResolver):
        """
        Initialize the builder.

        Args:
            resolver: Returns the image variant produced for a size, or None
                when the variant is unavailable.
        """
        self.resolver = resolver
        self.logger = get_logger()

    def build(self, size_list: SizeList) -> SrcsetSizes:
        """
        Build attribute values for the given sizes.

        Breakpoints without a resolved source are left out of both attributes.
        The descriptor of the last walked breakpoint carries no media condition.

        Raises:
            EmptyCollection: When size_list is empty.
        """
        media = "min-width" if size_list.is_mobile_first else "max-width"
        sizes: List[str] = []
        srcsets: List[str] = []

        walk = size_list.walk()
        for trigger, spec in walk:
            src = self.resolver(spec)
            if src is None:
                self.logger.info("attributes", "source unavailable", trigger=trigger, width=spec.effective_width())
                continue

            if walk.is_last():
                sizes.append(f"{src.width}px")
            else:
                sizes.append(f"({media}: {trigger}px) {src.width}px")
            srcsets.append(f"{src.url} {src.width}w")
            self.logger.trace("attributes", "descriptor", trigger=trigger, url=src.url, width=src.width)

        return SrcsetSizes(
            sizes=", ".join(sizes),
            srcset=", ".join(srcsets),
            widest=self.resolver(size_list.widest()),
        )


def build_attributes(size_list: SizeList, resolver: SourceResolver) -> SrcsetSizes:
    """Build `sizes` and `srcset` values with the given source resolver."""
    return AttributeBuilder(resolver).build(size_list)
