"""
Responsive Image Sizing

Computes per-breakpoint image sizes from column grid layouts and assembles
the `sizes`/`srcset` attribute pair that lets browsers pick the right variant.
"""

__version__ = "0.1.0"
