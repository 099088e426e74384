"""Console simulator for the microwave panel.

Commands (one per line): p=power, t=time, s=start/cancel, o=open door,
c=close door, q=quit.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Callable, Dict, Optional

import uvicorn

from .config import get_settings
from .logging_config import configure_logging
from .main import create_app
from .oven import POWER_BUTTON, START_CANCEL_BUTTON, TIME_BUTTON, Oven

log = logging.getLogger(__name__)

LOG_LEVELS = dict(debug="DEBUG", info="INFO", warn="WARNING", error="ERROR")


def command_table(oven: Oven) -> Dict[str, Callable[[], None]]:
    return {
        "p": lambda: oven.press(POWER_BUTTON),
        "t": lambda: oven.press(TIME_BUTTON),
        "s": lambda: oven.press(START_CANCEL_BUTTON),
        "o": oven.open_door,
        "c": oven.close_door,
    }


def dispatch(oven: Oven, line: str) -> bool:
    """Apply one console command. Returns False when the user asked to quit."""
    key = line.strip().lower()[:1]
    if key == "q":
        return False
    action = command_table(oven).get(key)
    if action is None:
        if key:
            print(f"Unknown command: {line.strip()!r} (p, t, s, o, c, q)")
        return True
    action()
    return True


async def run_console(oven: Oven) -> None:
    loop = asyncio.get_running_loop()
    print("Microwave panel: p=power t=time s=start/cancel o=open c=close q=quit")
    try:
        while True:
            # stdin is read off-loop; commands are applied on the loop thread
            line = await loop.run_in_executor(None, sys.stdin.readline)
            if not line:
                break
            if not dispatch(oven, line):
                break
    finally:
        oven.shutdown()


def parse(argv: Optional[list[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Microwave oven front panel simulator")
    ap.add_argument("--log", default=None, choices=list(LOG_LEVELS), help="Override the configured log level")
    ap.add_argument("--tick-seconds", type=float, default=None, help="Timer resolution (seconds per cook second)")
    ap.add_argument("--serve", action="store_true", help="Run the HTTP panel instead of the console")
    return ap.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse(argv)
    settings = get_settings()
    updates = {}
    if args.log:
        updates["log_level"] = LOG_LEVELS[args.log]
    if args.tick_seconds is not None:
        updates["cook"] = settings.cook.model_copy(update={"tick_seconds": args.tick_seconds})
    if updates:
        settings = settings.model_copy(update=updates)
    configure_logging(settings.log_level, settings.log_directory, settings.log_retention_days)

    if args.serve:
        uvicorn.run(create_app(settings), host=settings.panel_host, port=settings.panel_port)
        return

    try:
        asyncio.run(run_console(Oven(settings=settings)))
    except KeyboardInterrupt:
        log.info("Interrupted")


if __name__ == "__main__":
    main()
