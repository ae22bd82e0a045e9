from __future__ import annotations

import argparse
import logging
import os
import pathlib
import sys

from PySubclean.BatchProcessor import BatchProcessor
from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.Options import Options
from PySubclean.SettingsType import SettingsError
from PySubclean.SubtitleError import DenylistError, InvalidPathError, SubtitleError
from PySubclean.version import __version__

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2

def configure_logging(log_path : str|None = None, debug : bool = False) -> None:
    """
    Configure console logging, plus a log file if a path is given.
    The level can be set with the LOG_LEVEL environment variable unless debug is requested.
    """
    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.root.setLevel(logging_level)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setLevel(logging_level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logging.root.addHandler(console_handler)

    if debug:
        logging.debug("Debug logging enabled")

    if not log_path:
        return

    try:
        resolved_log_path = pathlib.Path(log_path).expanduser().resolve()
        resolved_log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(resolved_log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logging.root.addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")


def parse_args(argv : list[str]|None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Remove spam blocks from SubRip subtitles, tidy their typography and renumber them")
    parser.add_argument('path', help="A .srt file, or a directory to search recursively for .srt files")
    parser.add_argument('--denylist', dest='denylist_file', default=None, help="File listing text that marks a block as spam, one entry per line")
    parser.add_argument('--min-lines', dest='min_lines_per_block', type=int, default=None, help="Minimum number of lines for a block to be kept (default 3)")
    parser.add_argument('--preview', action='store_true', default=None, help="Report what would change without writing files")
    parser.add_argument('--validate', dest='validate_output', action='store_true', default=None, help="Warn if the cleaned output is not valid SubRip")
    parser.add_argument('--log-file', dest='log_path', default=None, help="Path to write a log file")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    parser.add_argument('--version', action='version', version=f"subclean {__version__}")
    return parser.parse_args(argv)


def build_options(args : argparse.Namespace) -> Options:
    """Combine command line arguments with environment and default settings."""
    return Options({
        'denylist_file': args.denylist_file,
        'min_lines_per_block': args.min_lines_per_block,
        'preview': args.preview,
        'validate_output': args.validate_output,
        'log_path': args.log_path,
    })


def main(argv : list[str]|None = None) -> int:
    """Entry point for command line execution."""
    args = parse_args(argv)
    options = build_options(args)
    configure_logging(options.log_path, args.debug)

    events = CleanerEvents()
    events.connect_default_loggers()

    try:
        processor = BatchProcessor(options, events=events)

    except DenylistError as e:
        logging.error(str(e))
        return EXIT_CONFIGURATION_ERROR

    except (SettingsError, ValueError) as e:
        logging.error(f"Invalid settings: {e}")
        return EXIT_CONFIGURATION_ERROR

    try:
        stats = processor.run(args.path)

    except InvalidPathError as e:
        logging.error(f"Error: {e}")
        return EXIT_FAILURE

    except SubtitleError as e:
        logging.error(f"Processing failed: {e}")
        return EXIT_FAILURE

    except KeyboardInterrupt:
        logging.warning("Processing interrupted by user")
        return 130

    return EXIT_SUCCESS if stats.failed_files == 0 else EXIT_FAILURE


if __name__ == '__main__':
    raise SystemExit(main())
