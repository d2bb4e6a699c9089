#!/usr/bin/env python3
"""Solver status log plotter CLI."""

import argparse
import sys
from pathlib import Path

from .config import RenderConfig
from .errors import SolplotError
from .geometry import build_geometry
from .loader import load_status_file
from .render import OutputFormat, scatter_status
from .source import InputSource


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="solplot",
        description="Plot solver run status logs as a scatter chart",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ratios.csv -o ratios.png            # Raster chart
  %(prog)s ratios.csv -o ratios.svg            # Vector chart
  feasth run | %(prog)s -o ratios.png          # Read the log from stdin
  %(prog)s ratios.csv -o big.png -W 1280 -H 960 -r 3
  %(prog)s ratios.csv -o ratios.png --config render.yml

Input lines are "<ratio>,<status>" where status is empty (infeasible),
0 (linear), 1 (integer) or 2 (timeout).
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Usage ratio CSV file (reads standard input when omitted or '-')",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Output image, format is taken from the extension (png, svg)",
    )

    # Render options, None means "keep the configured/default value"
    render_group = parser.add_argument_group("render options")
    render_group.add_argument(
        "-W", "--width", type=int, metavar="PX", help="Image width (default: 640)"
    )
    render_group.add_argument(
        "-H", "--height", type=int, metavar="PX", help="Image height (default: 480)"
    )
    render_group.add_argument(
        "-m", "--margin", type=int, metavar="PX", help="Plot margin on every side (default: 15)"
    )
    render_group.add_argument(
        "-r", "--radius", type=int, metavar="PX", help="Scatter point radius (default: 2)"
    )
    render_group.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="YAML",
        help="YAML file with a 'render' section; command line options take precedence",
    )
    return parser


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Combine defaults, the optional YAML file and command line overrides."""
    config = RenderConfig.from_yaml(args.config) if args.config else RenderConfig()
    return config.with_overrides(
        width=args.width,
        height=args.height,
        margin=args.margin,
        radius=args.radius,
    )


def run_plot(args: argparse.Namespace) -> int:
    """Load the log and render it.

    Returns:
        Exit code (0 for success, including the empty log case).

    Raises:
        SolplotError: On any format, config, I/O, parse or render failure.
    """
    output_format = OutputFormat.from_path(args.output)
    config = build_config(args)
    source = InputSource.from_arg(args.input)

    data = load_status_file(source)
    if not data:
        print(f"WARNING: Given data log is empty: {source.describe()}")
        return 0

    geometry = build_geometry(data, config)
    scatter_status(geometry, args.output, config, output_format=output_format)
    return 0


def main() -> int:
    """Run the plotter."""
    args = build_parser().parse_args()

    try:
        return run_plot(args)
    except SolplotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
