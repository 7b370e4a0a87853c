"""
__main__.py — gauge_engine demo runner
--------------------------------------

Animates a gauge through a sequence of values on the asyncio event loop and
logs the derived outputs as they change.

    python -m gauge_engine 25 80 40 --config config/gauge.yaml --svg out.svg
    python -m gauge_engine 25 80 --no-animation --json state.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from gauge_engine.engine.frame_scheduler import AsyncioFrameScheduler
from gauge_engine.managers.config_manager import ConfigError, ConfigManager
from gauge_engine.models.enums import GaugeEventType, LogCategory, LogLevel
from gauge_engine.models.events import Event
from gauge_engine.renderers.svg_renderer import render_svg
from gauge_engine.services.event_bus import EventBus
from gauge_engine.services.gauge_state import GaugeState
from gauge_engine.services.middleware import log_middleware
from gauge_engine.utils.logger import configure_logger, get_logger
from gauge_engine.utils.serialization import Serializer

log = get_logger().for_category(LogCategory.SYSTEM)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gauge_engine", description="Animate an SVG gauge through values")
    parser.add_argument("values", nargs="+", type=float, help="Target values, applied in order")
    parser.add_argument("--config", type=Path, default=None, help="Gauge YAML file (default: factory defaults)")
    parser.add_argument("--no-animation", action="store_true", help="Jump straight to each value")
    parser.add_argument("--every", type=int, default=15, help="Log every Nth frame (default: 15)")
    parser.add_argument("--hold", type=float, default=0.25, help="Pause between values in seconds")
    parser.add_argument("--svg", type=Path, default=None, help="Write the final state as SVG")
    parser.add_argument("--json", type=Path, default=None, help="Write the final state as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return parser.parse_args(argv)


async def main(args: argparse.Namespace) -> int:
    configure_logger(
        min_level=LogLevel.DEBUG if args.debug else LogLevel.INFO,
        use_colors=not args.no_color,
    )

    config_manager = ConfigManager(args.config)
    try:
        config_manager.load()
        overrides = {"animation_enabled": False} if args.no_animation else None
        config = config_manager.build(overrides)
    except ConfigError as ex:
        log.error("Configuration unusable", error=str(ex))
        return 1

    bus = EventBus()
    bus.add_middleware(log_middleware)

    def on_outputs(event: Event):
        frame = event.frame
        if frame is None or frame % max(1, args.every) == 0:
            log.info(
                f"Frame {frame if frame is not None else '-'}",
                value=f"{event.current_value:.3f}",
                label=event.outputs.label_value,
                path=event.outputs.value_arc_path,
            )

    def on_animation_done(event: Event):
        log.info(f"Reached {event.end_value:g}", frames=event.frames)

    bus.subscribe(GaugeEventType.OUTPUTS_UPDATED, on_outputs)
    bus.subscribe(GaugeEventType.ANIMATION_COMPLETED, on_animation_done)

    scheduler = AsyncioFrameScheduler(fps=config_manager.fps)
    gauge = GaugeState(config, scheduler=scheduler, event_bus=bus)
    log.info("Gauge ready", dial=gauge.dial_arc_path)

    for value in args.values:
        gauge.set_value(value)
        await gauge.wait_for_idle()
        await asyncio.sleep(args.hold)

    if args.svg:
        args.svg.write_text(render_svg(gauge.outputs, gauge.config), encoding="utf-8")
        log.info(f"Wrote {args.svg}")

    if args.json:
        args.json.write_text(json.dumps(Serializer.gauge_to_dict(gauge), indent=2), encoding="utf-8")
        log.info(f"Wrote {args.json}")

    return 0


def run():
    """Console entry point"""
    if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
        sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

    exit_code = 0
    try:
        exit_code = asyncio.run(main(parse_args()))
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    sys.exit(exit_code)


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run()
