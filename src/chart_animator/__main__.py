"""
__main__.py — Demo entry point for chart-animator
-------------------------------------------------

Drives an Animator from a real FrameTicker and prints the x/y phases as
progress bars until the animation settles.

    python -m chart_animator --x 1.0 --y 1.5 --easing ease-out-bounce
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from chart_animator.engine import Animator, FrameTicker
from chart_animator.managers import ConfigManager
from chart_animator.models.enums import EasingOption, LogCategory
from chart_animator.utils.enum_helper import EnumHelper
from chart_animator.utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

BAR_WIDTH = 30


class ConsoleChartView:
    """Stand-in renderer: draws one bar per axis on each update"""

    def __init__(self, stopped: asyncio.Event):
        self._stopped = stopped
        self.frames = 0

    def animator_updated(self, animator: Animator) -> None:
        self.frames += 1
        print(f"\r x {self._bar(animator.phase_x)}  y {self._bar(animator.phase_y)}", end="", flush=True)

    def animator_stopped(self, animator: Animator) -> None:
        print()
        self._stopped.set()

    @staticmethod
    def _bar(phase: float) -> str:
        filled = int(round(phase * BAR_WIDTH))
        return f"[{'#' * filled}{'.' * (BAR_WIDTH - filled)}] {phase:5.3f}"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a chart reveal animation in the terminal")
    parser.add_argument("--config", help="Path to animator YAML config")
    parser.add_argument("--x", type=float, default=None, help="x-axis duration in seconds")
    parser.add_argument("--y", type=float, default=None, help="y-axis duration in seconds")
    parser.add_argument(
        "--easing",
        default=None,
        help=f"Easing preset, one of: {', '.join(EnumHelper.list_names(EasingOption, lowercase=True))}",
    )
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    manager = ConfigManager(args.config)
    config = manager.load()
    manager.apply_logging()

    easing = EnumHelper.from_string(EasingOption, args.easing) if args.easing else config.default_easing
    x_duration = args.x if args.x is not None else config.default_duration
    y_duration = args.y if args.y is not None else config.default_duration

    ticker = FrameTicker(fps=config.fps)
    stopped = asyncio.Event()
    view = ConsoleChartView(stopped)

    with Animator(ticker, config=config) as animator:
        animator.observer = view
        animator.animate_xy(x_duration, y_duration, easing=easing)

        if animator.is_running:
            await stopped.wait()

    await ticker.close()
    log.info("Animation finished", frames=view.frames, easing=easing.name)
    return 0


def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        sys.exit(130)
    except ValueError as e:
        log.error(f"Invalid argument: {e}")
        sys.exit(2)


if __name__ == "__main__":
    run()
