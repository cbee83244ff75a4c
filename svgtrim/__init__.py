"""
svgtrim: SVG minification that keeps the rendering.

Usage:
    python -m svgtrim icon.svg -o icon.min.svg
    python -m svgtrim icons/ --out-dir icons_min --recursive --stats

    >>> import svgtrim
    >>> svgtrim.minify('<svg xmlns="http://www.w3.org/2000/svg"><g><rect width="1" height="1"/></g></svg>')
    '<svg xmlns="http://www.w3.org/2000/svg"><rect height="1" width="1"/></svg>'
"""

from .document import Document
from .errors import InvalidPathData, MalformedMarkup, MinifyError
from .options import Options, load_options
from .parser import parse_svg
from .pipeline import PIPELINE, optimize
from .serializer import serialize


def minify_with_options(source: str | bytes, options: Options) -> str:
    """Parse, optimize and serialize ``source`` under ``options``."""
    document = parse_svg(source)
    optimize(document, options)
    return serialize(document)


def minify(source: str | bytes) -> str:
    """Minify ``source`` with the default options."""
    return minify_with_options(source, Options())


__all__ = [
    # Entry points
    "minify",
    "minify_with_options",
    # Options
    "Options",
    "load_options",
    # Stages
    "parse_svg",
    "optimize",
    "serialize",
    "PIPELINE",
    "Document",
    # Errors
    "MinifyError",
    "MalformedMarkup",
    "InvalidPathData",
]
