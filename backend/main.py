"""
Entry point for fancontrold.
Loads settings, claims the fan pin and runs the control loop until the
process is stopped. The fan is always left running on the way out.
"""

import argparse
import logging
import signal
import sys

from control import ControlLoop
from errors import ActuatorError, InvalidThresholdRange
from fan import fail_safe, open_fan
from settings import load_config

logger = logging.getLogger("fancontrold")

# ─────────────────────── Logging Setup ───────────────────────
def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )

# ─────────────────────── Signal Handling ───────────────────────
def _handle_sigterm(signum, frame):
    """Turn SIGTERM into a normal exit so cleanup runs."""
    logger.info("Received signal %s, shutting down...", signum)
    sys.exit(0)

# ─────────────────────── CLI Entrypoint ───────────────────────
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="fancontrold",
        description="Raspberry Pi CPU fan controller with hysteresis",
    )
    parser.add_argument("--env-file", default=None,
                        help="read settings from this .env file "
                             "(default: nearest .env from the working directory)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every temperature reading")
    args = parser.parse_args(argv)

    try:
        config = load_config(env_file=args.env_file)
    except InvalidThresholdRange as exc:
        setup_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1

    setup_logging("DEBUG" if args.verbose else config.log_level)
    logger.info(
        "Starting fancontrold: GPIO%s, every %ss, on > %.1f°C, off < %.1f°C, "
        "alert step %.1f°C, sensor '%s'",
        config.gpio_pin, config.interval_seconds, config.on_threshold,
        config.off_threshold, config.max_change, " ".join(config.temp_command),
    )

    try:
        fan = open_fan(config.gpio_pin)
    except ActuatorError as exc:
        logger.error("%s", exc)
        return 1

    signal.signal(signal.SIGTERM, _handle_sigterm)
    try:
        ControlLoop(config, fan).run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        fail_safe(fan)
    return 0


if __name__ == "__main__":
    sys.exit(main())
