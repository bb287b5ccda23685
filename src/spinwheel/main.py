"""
Entry point - runs the spin wheel in a desktop pygame window.
"""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from config.settings import Settings, get_settings
from spinwheel.app import SpinWheelApp
from spinwheel.simulator.window import WheelWindow, WindowConfig

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure console logging, plus a file when ``log_file`` is set."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")

    # Reduce per-frame noise
    logging.getLogger("spinwheel.animation").setLevel(logging.INFO)
    logging.getLogger("spinwheel.graphics").setLevel(logging.INFO)
    logging.getLogger("spinwheel.wheel").setLevel(logging.INFO)


async def run(settings: Settings) -> None:
    """Build the app and run the window until it closes."""
    app = SpinWheelApp(settings)
    window = WheelWindow(app, WindowConfig.from_settings(settings))

    logger.info(f"Starting spin wheel ({app.session.spin_count} spins so far)")
    await window.run()


def main() -> None:
    """Console entry point."""
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger.info("Controls:")
    logger.info("  SPACE/ENTER  - Spin / close result")
    logger.info("  Click hub    - Spin")
    logger.info("  ESC          - Close result (quit when none shown)")
    logger.info("  D            - Toggle debug overlay")
    logger.info("  S            - Screenshot")
    logger.info("  Q            - Quit")

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.exception(f"Spin wheel error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
