"""
Attribute sets for <img> and preload <link> elements.

Values are returned unescaped; escaping belongs to whatever serializes the markup.
"""

from typing import Any, Dict, Optional

from responsive_images.io.sources import ImageSource
from responsive_images.models import SizeSpec
from responsive_images.rendering.attributes import AttributeBuilder
from responsive_images.sizes.size_list import SizeList


def img_attributes(source: ImageSource, spec: SizeSpec, attrs: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Get attributes of a single-size <img>.

    Args:
        source: Image to display.
        spec: Size to display the image at.
        attrs: Extra attributes. `src`, `width` and `height` are replaced
            by the resolved variant.

    Returns:
        Attribute dictionary.
    """
    attrs = dict(attrs or {})
    src = source.resolve(spec)
    if src is not None:
        attrs["src"] = src.url
        attrs["width"] = src.width
        attrs["height"] = src.height
    attrs.setdefault("alt", source.default_alt)
    return attrs


def responsive_img_attributes(
    source: ImageSource,
    sizes: SizeList,
    attrs: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Get attributes of an <img> with `sizes` and `srcset`.

    Single-resolution images (e.g. SVG) get the widest size only.

    Args:
        source: Image to display.
        sizes: Image sizes per breakpoint.
        attrs: Extra attributes. A given `width` keeps the given `height` too.

    Returns:
        Attribute dictionary.

    Raises:
        EmptyCollection: When sizes is empty.
    """
    widest = sizes.widest()
    if source.single_resolution:
        # the source derives a missing height from its intrinsic size
        spec = SizeSpec(widest.effective_width(), widest.effective_height())
        return img_attributes(source, spec, attrs)

    attrs = dict(attrs or {})
    built = AttributeBuilder(source.resolve).build(sizes)

    if built.widest is not None:
        attrs.update({
            "src": built.widest.url,
            "sizes": built.sizes,
            "srcset": built.srcset,
        })
        if "width" not in attrs:
            attrs["width"] = built.widest.width
            attrs["height"] = built.widest.height

    attrs.setdefault("alt", source.default_alt)
    return attrs


def preload_link_attributes(source: ImageSource, sizes: SizeList) -> Dict[str, Any]:
    """
    Get attributes of a <link rel="preload"> for a responsive image.

    Put the link into <head> for images rendered early on the page.
    """
    img = responsive_img_attributes(source, sizes)
    link = {
        "rel": "preload",
        "as": "image",
        "href": img.get("src", ""),
    }
    if "srcset" in img:
        link["imagesrcset"] = img["srcset"]
        link["imagesizes"] = img["sizes"]
    return link


def aspect_ratio_style(width: int, height: int, max_width: Optional[int] = None) -> str:
    """
    Inline style for a Bootstrap `.ratio` wrapper keeping the image aspect ratio.

    Args:
        width: Image width the ratio is computed from.
        height: Image height the ratio is computed from.
        max_width: Optional maximal width of the wrapper in px.

    Returns:
        Style attribute value.
    """
    if width <= 0:
        raise ValueError(f"Width has to be positive, {width} given")
    ratio = round(100 * height / width, 2)
    style = f"--bs-aspect-ratio:{ratio:g}%"
    if max_width is not None:
        style += f";--img-max-width:{max_width}px"
    return style
