"""CLI entry point for the svgtrim package.

Usage:
    python -m svgtrim drawing.svg -o drawing.min.svg
    python -m svgtrim icons/ --out-dir icons_min --recursive
    cat drawing.svg | python -m svgtrim --stats > drawing.min.svg
"""

from .cli import main

if __name__ == "__main__":
    main()
