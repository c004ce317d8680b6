#!/usr/bin/env python3
"""
fsbrowser - Linux File Explorer

This is the main entry point for fsbrowser.

Usage:
    fsbrowser [--config PATH] [START_DIRECTORY]
    fsbrowser --headless [--config PATH] [START_DIRECTORY]

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys
from typing import List, Optional, Tuple

from fsbrowser.core.config_loader import ConfigError, ConfigLoader, get_config
from fsbrowser.core.explorer import FileExplorer
from fsbrowser.exceptions import FileSystemException
from fsbrowser.logger import Logger, LogLevel, get_logger
from fsbrowser.shell.builtins import MenuCommands
from fsbrowser.shell.shell import Shell


DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')

USAGE = "usage: fsbrowser [--headless] [--config PATH] [START_DIRECTORY]"


def parse_args(argv: List[str]) -> Tuple[Optional[str], Optional[str], bool]:
    """
    Split the command line into (config path, start directory, headless).

    Raises:
        ValueError: On an unknown option or a missing option value
    """
    config_path = None
    start_directory = None
    headless = False

    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg == '--config':
            if not args:
                raise ValueError("--config requires a path")
            config_path = args.pop(0)
        elif arg == '--headless':
            headless = True
        elif arg.startswith('-'):
            raise ValueError(f"unknown option: {arg}")
        elif start_directory is None:
            start_directory = os.path.abspath(arg)
        else:
            raise ValueError(f"unexpected argument: {arg}")

    return config_path, start_directory, headless


def load_configuration(config_path: Optional[str]) -> Optional[str]:
    """
    Load the given config file, or the bundled one if it exists.

    Returns:
        The file that was loaded, or None when running on defaults
    """
    loader = ConfigLoader()
    if config_path is not None:
        loader.load(config_path)
        return config_path
    if os.path.exists(DEFAULT_CONFIG):
        loader.load(DEFAULT_CONFIG)
        return DEFAULT_CONFIG
    return None


def init_logging() -> None:
    """Initialize logging from the loaded configuration."""
    log_config = get_config().logging
    Logger.initialize(
        level=LogLevel.from_name(log_config.level),
        log_file=log_config.log_file,
        use_colors=log_config.use_colors,
        console_output=log_config.console_output,
    )


def run_headless(explorer: FileExplorer) -> int:
    """
    Print a detailed listing of the start directory and exit.

    Useful for scripting and for checking a configuration without
    entering the menu.
    """
    result = explorer.list(detailed=True)
    if not result.success:
        print(result.message, file=sys.stderr)
        return 1
    MenuCommands.render_listing(result)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for fsbrowser.

    Start sequence:
    1. Parse the command line
    2. Load configuration
    3. Initialize logging
    4. Create the explorer
    5. Run the shell (or the headless listing)
    """
    try:
        config_path, start_directory, headless = parse_args(
            sys.argv[1:] if argv is None else argv
        )
    except ValueError as e:
        print(f"fsbrowser: {e}\n{USAGE}", file=sys.stderr)
        return 2

    try:
        loaded_from = load_configuration(config_path)
    except ConfigError as e:
        print(f"fsbrowser: {e}", file=sys.stderr)
        return 1

    init_logging()
    get_logger('config').info(
        "Configuration loaded",
        context={'source': loaded_from or 'defaults'}
    )
    try:
        try:
            explorer = FileExplorer(start_directory)
        except FileSystemException as e:
            print(f"fsbrowser: cannot start: {e.message}", file=sys.stderr)
            return 1

        if headless:
            return run_headless(explorer)

        try:
            Shell(explorer).run()
        except KeyboardInterrupt:
            print("\n\nInterrupted")
        return 0
    finally:
        Logger.shutdown()


if __name__ == '__main__':
    sys.exit(main())
