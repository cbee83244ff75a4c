"""Command-line interface: minify one file, a directory tree or stdin."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from . import minify_with_options
from .errors import MinifyError
from .options import PASS_TOGGLES, Options, load_options

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgtrim",
        description="Minify SVG files without changing how they render.",
    )
    parser.add_argument("input", nargs="?", default="-",
                        help="Input SVG file or directory ('-' reads stdin, the default)")
    parser.add_argument("-o", "--output", default="-",
                        help="Output SVG file for single-file input ('-' writes stdout, the default)")
    parser.add_argument("--out-dir", type=Path,
                        help="Output directory (for directory input, or to place a single minified file)")
    parser.add_argument("--recursive", action="store_true",
                        help="Recurse into subdirectories when input is a directory")
    parser.add_argument("-p", "--precision", type=int,
                        help="Decimal places kept for coordinates (default: 2)")
    parser.add_argument("--keep-comments", action="store_true", help="Keep comments")
    parser.add_argument("--keep-metadata", action="store_true",
                        help="Keep <metadata>, <title> and <desc>")
    parser.add_argument("--no-minify-paths", action="store_true", help="Leave path data alone")
    parser.add_argument("--no-minify-colors", action="store_true", help="Leave colors alone")
    parser.add_argument("--no-optimize", action="store_true",
                        help="Only parse and re-serialize; run no passes")
    parser.add_argument("--config", type=Path, help="YAML file with option values")
    parser.add_argument("-s", "--stats", action="store_true", help="Print size savings to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every pass")
    return parser


def build_options(args: argparse.Namespace) -> Options:
    """Options from ``--config`` (if any) with command-line flags layered on top."""
    overrides = {}
    if args.precision is not None:
        overrides["precision"] = args.precision
    if args.keep_comments:
        overrides["remove_comments"] = False
    if args.keep_metadata:
        overrides["remove_metadata"] = False
    if args.no_minify_paths:
        overrides["minify_paths"] = False
    if args.no_minify_colors:
        overrides["minify_colors"] = False
    if args.no_optimize:
        overrides.update({name: False for name in PASS_TOGGLES})
    if args.config:
        if not args.config.exists():
            raise FileNotFoundError(f"config file not found: {args.config}")
        return load_options(args.config, **overrides)
    return Options(**overrides)


def format_stats(label: str, size_in: int, size_out: int) -> str:
    saved = 100.0 * (size_in - size_out) / size_in if size_in else 0.0
    return f"{label}: {size_in} -> {size_out} bytes ({saved:.1f}% smaller)"


def minify_file(src: Path, dst: Path, options: Options) -> tuple[int, int]:
    data = src.read_bytes()
    out = minify_with_options(data, options).encode("utf-8")
    dst.parent.mkdir(parents=True, exist_ok=True)
    dst.write_bytes(out)
    return len(data), len(out)


def _minify_directory(inp: Path, args: argparse.Namespace, options: Options) -> int:
    out_base = args.out_dir if args.out_dir else inp.with_name(inp.name + "_min")
    svg_iter = sorted(inp.rglob("*.svg") if args.recursive else inp.glob("*.svg"))
    count = failed = 0
    total_in = total_out = 0
    for src in svg_iter:
        rel = src.relative_to(inp) if args.recursive else Path(src.name)
        try:
            size_in, size_out = minify_file(src, out_base / rel, options)
        except (MinifyError, OSError) as exc:
            sys.stderr.write(f"error: {src}: {exc}\n")
            failed += 1
            continue
        count += 1
        total_in += size_in
        total_out += size_out
        if args.stats:
            sys.stderr.write(format_stats(str(rel), size_in, size_out) + "\n")
    if args.stats and count:
        sys.stderr.write(format_stats("total", total_in, total_out) + "\n")
    sys.stderr.write(f"Processed {count} file(s) into {out_base}\n")
    return 1 if failed else 0


def cmd_minify(args: argparse.Namespace) -> int:
    try:
        options = build_options(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        # ValidationError is a ValueError
        sys.stderr.write(f"error: {exc}\n")
        return 1
    logger.debug("options: %s", options)

    if args.input == "-":
        data = sys.stdin.buffer.read()
        label = "<stdin>"
        inp = None
    else:
        inp = Path(args.input)
        if not inp.exists():
            sys.stderr.write(f"error: input not found: {inp}\n")
            return 1
        if inp.is_dir():
            return _minify_directory(inp, args, options)
        label = str(inp)

    try:
        if inp is not None:
            data = inp.read_bytes()
        out = minify_with_options(data, options)
        if args.out_dir:
            out_path = args.out_dir / (inp.name if inp is not None else "stdin.svg")
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(out, encoding="utf-8")
        elif args.output == "-":
            sys.stdout.write(out)
        else:
            Path(args.output).write_text(out, encoding="utf-8")
    except (MinifyError, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    if args.stats:
        sys.stderr.write(format_stats(label, len(data), len(out.encode("utf-8"))) + "\n")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(cmd_minify(args))


if __name__ == "__main__":
    main()
