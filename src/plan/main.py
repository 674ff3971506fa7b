"""Main entry point for the plan layout demo."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import Plan, RuleSet, Viewport, aspect, center, pixel, pixel_gutter, relative
from .widgets import Canvas, Panel

logger = logging.getLogger(__name__)


def build_demo(plan: Plan, canvas: Canvas | None = None) -> Panel:
    """Populate a plan with the demo layout.

    A square panel centered horizontally, 20px from the top and a third of
    the viewport tall, holding an inset panel split into left and right halves.

    Returns:
        The outer panel
    """
    rules = (
        RuleSet()
        .add_x(center())
        .add_y(pixel(20))
        .add_width(aspect(1))
        .add_height(relative(0.33))
    )
    panel = Panel(rules, name="panel", canvas=canvas, colour=(0.133, 0.133, 0.133))
    plan.add_child(panel)

    inner = Panel(pixel_gutter(10), name="inner", canvas=canvas, colour=(0.25, 0.25, 0.3))
    panel.add_child(inner)
    # Parent() copies the parent's absolute x and y, so offset children pin
    # their positions explicitly.
    left = RuleSet(x=0, y=0, width=relative(0.5))
    right = RuleSet(x=relative(0.5), y=0, width=relative(0.5))
    inner.add_child(Panel(left, name="left", canvas=canvas, colour=(0.8, 0.4, 0.2)))
    inner.add_child(Panel(right, name="right", canvas=canvas, colour=(0.2, 0.5, 0.8)))
    return panel


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan - rule-based 2D layout demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        metavar="WxH",
        default="800x600",
        help="Viewport size (default: 800x600)",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Draw the layout to an image file",
    )
    parser.add_argument(
        "--at",
        metavar="X,Y",
        help="Report the container under a point",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every container as it is resolved",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the plan demo."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    viewport = Viewport.parse(args.size)
    canvas = Canvas(int(viewport.width), int(viewport.height)) if args.render else None

    plan = Plan(viewport)
    build_demo(plan, canvas)
    plan.refresh()

    print("Plan - rule-based 2D layout")
    print("=" * 40)
    print(f"Viewport {viewport.width:g}x{viewport.height:g}:")
    for node in plan.iter_nodes():
        indent = "  " * node.depth
        r = node.rect
        print(f"{indent}- {node.label}: x={r.x:g} y={r.y:g} w={r.width:g} h={r.height:g}")

    if args.at:
        px, py = (float(v) for v in args.at.split(","))
        hit = plan.find_at(px, py)
        print(f"\nAt ({px:g}, {py:g}): {hit.label if hit is not None else 'nothing'}")

    if canvas is not None:
        plan.draw()
        output_path = canvas.save(Path(args.render))
        logger.info("Saved render to %s", output_path)
        print(f"\nSaved render to {output_path}")


if __name__ == "__main__":
    main()
