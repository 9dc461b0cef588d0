"""
Per-breakpoint image size lists and grid system resolution.
"""

from responsive_images.sizes.grid import GridResolver, resolve_grid
from responsive_images.sizes.size_list import SizeList, SizeListTraversal

__all__ = [
    "GridResolver",
    "resolve_grid",
    "SizeList",
    "SizeListTraversal",
]
