"""
Scroll Selector CLI - Entry point

Inspect the selection ratio solver from the command line, or run the
interactive terminal demo.
"""

import argparse
import sys
from dataclasses import replace
from typing import Optional

from loguru import logger

from scroll_selector.core import config
from scroll_selector.core.console import get_console, numeric_table, print_error, print_success
from scroll_selector.core.output import setup_loguru
from scroll_selector.domain.selection import (
    Edge,
    ListDistanceMeasure,
    ListLayout,
    SelectionError,
    SelectionParams,
    compute_selection_ratio,
    curve,
    measure_for_params,
)


def parse_distance(value: str) -> Optional[float]:
    """Parse an edge distance argument; "none" (or "-") means unknown."""
    if value.lower() in ("none", "-", "unknown"):
        return None
    try:
        distance = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid distance: {value!r}")
    if distance < 0:
        raise argparse.ArgumentTypeError(f"Distance must not be negative: {value!r}")
    return distance


def parse_interval(value: str) -> tuple[float, float]:
    """Parse a "FROM,TO" interval argument."""
    try:
        ratio_from, ratio_to = (float(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Interval must look like FROM,TO: {value!r}")
    return ratio_from, ratio_to


def format_ratio(ratio: Optional[float]) -> str:
    return "none" if ratio is None else f"{ratio:.6f}"


def build_params(args: argparse.Namespace, cfg: config.Config) -> SelectionParams:
    """Build solver params from the config, overridden by command-line flags."""
    params = cfg.selection.to_params()
    overrides = {}
    if args.top_range is not None:
        overrides["top_perception_range"] = args.top_range
    if args.bottom_range is not None:
        overrides["bottom_perception_range"] = args.bottom_range
    if args.mid is not None:
        overrides["selection_y_mid"] = args.mid
    if args.stiffness is not None:
        overrides["stiffness"] = args.stiffness
    if args.interval is not None:
        overrides["remapped_interval"] = args.interval
    return replace(params, **overrides) if overrides else params


def run_ratio(args: argparse.Namespace, cfg: config.Config) -> int:
    params = build_params(args, cfg)
    ratio = compute_selection_ratio(params, args.top, args.bottom)
    logger.debug(f"ratio(top={args.top}, bottom={args.bottom}) = {ratio}")
    print(format_ratio(ratio))
    return 0


def run_sweep(args: argparse.Namespace, cfg: config.Config) -> int:
    """Scroll a uniform list from top to bottom and tabulate the ratio."""
    params = build_params(args, cfg)
    layout = ListLayout(
        item_heights=(args.item_height,) * args.items,
        viewport_height=args.viewport,
    )
    measure = ListDistanceMeasure(lambda: layout)

    table = numeric_table(
        "Selection ratio sweep", ["offset", "top", "bottom", "ratio", "item"]
    )

    while True:
        top = measure_for_params(measure, params, Edge.TOP)
        bottom = measure_for_params(measure, params, Edge.BOTTOM)
        ratio = compute_selection_ratio(params, top, bottom)
        item = layout.item_at_ratio(ratio)
        table.add_row(
            str(layout.scroll_offset),
            "none" if top is None else f"{top:.0f}",
            "none" if bottom is None else f"{bottom:.0f}",
            format_ratio(ratio),
            "-" if item is None else str(item),
        )
        layout, consumed = layout.scroll_by(args.step)
        if consumed == 0:
            break

    get_console().print(table)
    return 0


def run_curve(args: argparse.Namespace, cfg: config.Config) -> int:
    """Tabulate the easing curve at evenly spaced offsets."""
    curvature = 1.0 - args.stiffness
    table = numeric_table(
        f"Curve width={args.width} height={args.height} curvature={curvature:.3f}",
        ["x", "y"],
    )

    samples = max(2, args.samples)
    for i in range(samples):
        x = args.width * i / (samples - 1)
        table.add_row(f"{x:.2f}", format_ratio(curve(args.width, args.height, curvature, x)))

    get_console().print(table)
    return 0


def run_demo(args: argparse.Namespace, cfg: config.Config) -> int:
    from scroll_selector.ui.blessed.app import run_demo as run_blessed_demo

    run_blessed_demo(cfg)
    return 0


def run_init_config(args: argparse.Namespace, cfg: config.Config) -> int:
    path = config.save_default_config()
    print_success(f"Configuration file: {path}")
    return 0


def _add_param_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--top-range", type=float, help="Top perception range (px)")
    parser.add_argument("--bottom-range", type=float, help="Bottom perception range (px)")
    parser.add_argument("--mid", type=float, help="Selection ratio with no edge in range")
    parser.add_argument("--stiffness", type=float, help="0 = maximal curvature, 1 = straight line")
    parser.add_argument(
        "--interval", type=parse_interval, help="Remap the ratio into FROM,TO"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scroll-selector",
        description="Compute scroll-to-select ratios and run the terminal demo",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ratio = subparsers.add_parser("ratio", help="Compute a single selection ratio")
    ratio.add_argument("--top", type=parse_distance, default=None, help="Top edge distance or 'none'")
    ratio.add_argument(
        "--bottom", type=parse_distance, default=None, help="Bottom edge distance or 'none'"
    )
    _add_param_flags(ratio)
    ratio.set_defaults(handler=run_ratio)

    sweep = subparsers.add_parser("sweep", help="Tabulate the ratio while scrolling a list")
    sweep.add_argument("--items", type=int, default=100, help="Number of items")
    sweep.add_argument("--item-height", type=int, default=100, help="Item height (px)")
    sweep.add_argument("--viewport", type=int, default=1000, help="Viewport height (px)")
    sweep.add_argument("--step", type=int, default=500, help="Scroll step (px)")
    _add_param_flags(sweep)
    sweep.set_defaults(handler=run_sweep)

    curve_parser = subparsers.add_parser("curve", help="Tabulate the easing curve")
    curve_parser.add_argument("--width", type=float, default=2500.0)
    curve_parser.add_argument("--height", type=float, default=0.5)
    curve_parser.add_argument("--stiffness", type=float, default=0.6)
    curve_parser.add_argument("--samples", type=int, default=11)
    curve_parser.set_defaults(handler=run_curve)

    demo = subparsers.add_parser("demo", help="Run the interactive terminal demo")
    demo.set_defaults(handler=run_demo)

    init = subparsers.add_parser("init-config", help="Write the default configuration file")
    init.set_defaults(handler=run_init_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config.load_config()
    setup_loguru(config.get_log_file_path(cfg), cfg.logging.level)

    try:
        return args.handler(args, cfg)
    except SelectionError as e:
        logger.error(f"{args.command} failed: {e}")
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
