"""Brandmark - Composite and vectorize brand logo marks.

Brandmark takes an icon-only logo raster (typically produced by an image
generation service) and turns it into a set of canonical logo layouts with
the company name set in the brand's header font. It also traces raster marks
into simple run-length SVG documents.

Example:
    $ brandmark compose icon.png "Acme Labs" --font Inter --color "#1E40AF"

This will create horizontal.png, vertical.png and icon-only.png next to the
current directory.
"""

__version__ = "0.1.0"
__author__ = "Brandmark Contributors"

__all__ = ["__author__", "__version__"]
