"""
Attribute values and attribute sets for responsive <img> markup.
"""

from responsive_images.rendering.attributes import (
    AttributeBuilder,
    SrcsetSizes,
    build_attributes,
)
from responsive_images.rendering.image_tag import (
    aspect_ratio_style,
    img_attributes,
    preload_link_attributes,
    responsive_img_attributes,
)

__all__ = [
    "AttributeBuilder",
    "SrcsetSizes",
    "build_attributes",
    "aspect_ratio_style",
    "img_attributes",
    "preload_link_attributes",
    "responsive_img_attributes",
]
