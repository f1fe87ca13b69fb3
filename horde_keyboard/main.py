"""
Main entry point for Horde Keyboard.
Launches the main frame with all components.
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Hex-tile keyboard with a flocking swarm")
    parser.add_argument("--config", help="JSON settings file (overrides HORDE_KEYBOARD_CONFIG)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible swarm")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("--debug", action="store_true", help="Show debug messages on the console")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Initialize logger first
    from horde_keyboard.utils.logger import logger, set_log_level, LogLevel
    from horde_keyboard.config import load_config, ConfigError

    if args.debug:
        set_log_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    logger.info("=" * 40, component="APP")
    logger.info("Horde Keyboard starting", component="APP")
    logger.info("Esc: clear output | Backspace: delete | Space: space | Enter: new line", component="APP")
    logger.info("Ctrl+H haptics | Ctrl+C chorus | Ctrl++/- agents | Ctrl+D disperse", component="APP")
    logger.info("=" * 40, component="APP")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Invalid configuration", component="APP", details=str(e))
        return 2
    if args.seed is not None:
        config.seed = args.seed

    app = QApplication(sys.argv[:1])

    from horde_keyboard.gui.main_frame import MainFrame

    window = MainFrame(config)
    window.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
