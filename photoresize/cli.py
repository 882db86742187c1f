"""Command line interface for the photo resize tool."""
import argparse
import logging
import sys
import traceback
from typing import Any, Dict, List, Optional

from . import __version__
from .base.exceptions import (ConfigurationError, DirectoryNotFoundError,
                              ValidationError)
from .factory import ResolverFactory
from .models.naming_policy import NamingPolicy
from .models.program_options import ProgramOptions
from .models.resize_spec import ResizeSpec
from .photo_batch_processor import PhotoBatchProcessor
from .services.config_manager import ConfigManager

logger = logging.getLogger(__name__)

USAGE_DESCRIPTION = (
    "Reduce the size of all the photos in the specified folder. "
    "If no source location is specified the photos must be in the current folder. "
    "A reduction size value must be specified, either by maximum width, maximum "
    "height or a percentage of the current size."
)

# Options a config file may set, by the kind of value they take
FLAG_OPTIONS = ('maintain_ratio', 'web_safe_name', 'jpg', 'png', 'overwrite',
                'display_resized', 'time_resize', 'no_progress')
SIZE_OPTIONS = ('max_width', 'max_height', 'scale_factor')
TEXT_OPTIONS = ('source_dir', 'save_dir', 'relocate_dir', 'extend_filename', 'on_conflict')
CONFIG_OPTIONS = FLAG_OPTIONS + SIZE_OPTIONS + TEXT_OPTIONS

def positive_int(value: str) -> int:
    """argparse type for sizes and percentages."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return number

def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the canonical flag set."""
    parser = argparse.ArgumentParser(prog='photo-resize', description=USAGE_DESCRIPTION)

    size = parser.add_argument_group('size')
    size.add_argument('--max-width', type=positive_int, metavar='PIXELS',
                      help='The maximum width of the resized photo')
    size.add_argument('--max-height', type=positive_int, metavar='PIXELS',
                      help='The maximum height of the resized photo')
    size.add_argument('--scale-factor', type=positive_int, metavar='PERCENT',
                      help='The new size of the photo as a percentage of the old size')
    size.add_argument('--maintain-ratio', action='store_true',
                      help='Maintain the current ratio of width to height')

    files = parser.add_argument_group('files')
    files.add_argument('--source-dir', metavar='DIR', help='Where to find the original photos')
    files.add_argument('--save-dir', metavar='DIR', help='Where to save the resized photos')
    files.add_argument('--relocate-dir', metavar='DIR',
                       help='Where to move the original photos after they are resized')
    files.add_argument('--extend-filename', metavar='TEXT',
                       help='Add the specified string to the resized photo name')
    files.add_argument('--web-safe-name', action='store_true',
                       help='Change all non alpha numeric characters in filename to underscore')
    files.add_argument('--jpg', '--all-jpg-files', dest='jpg', action='store_true',
                       help='Process all the JPEG format photos (default)')
    files.add_argument('--png', '--all-png-files', dest='png', action='store_true',
                       help='Process all the PNG format photos')
    files.add_argument('--overwrite', action='store_true',
                       help='Overwrite existing output files')
    files.add_argument('--on-conflict', choices=ResolverFactory.get_available_modes(),
                       default='skip',
                       help='What to do when a resized photo already exists (default: skip)')

    run = parser.add_argument_group('execution')
    run.add_argument('--display-resized', action='store_true', help='Show the resized photo')
    run.add_argument('--time-resize', action='store_true',
                     help='Time the resizing of the photos')
    run.add_argument('--no-progress', action='store_true', help='Hide the progress bar')
    run.add_argument('--config', '-c', metavar='FILE',
                     help='JSON file with default values for any of these options')
    run.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    run.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser

def check_config_values(config: Dict[str, Any]) -> Dict[str, Any]:
    """Type check config values the way the command line would.

    argparse only converts string defaults, so config values are checked here.
    """
    checked = {}
    for name, value in config.items():
        if name in FLAG_OPTIONS:
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be true or false, got {value!r}")
        elif name in SIZE_OPTIONS:
            if isinstance(value, bool) or not isinstance(value, (int, str)):
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
            try:
                value = positive_int(value)
            except argparse.ArgumentTypeError as e:
                raise ConfigurationError(f"{name}: {e}")
        elif value is not None and not isinstance(value, str):
            raise ConfigurationError(f"{name} must be text, got {value!r}")
        checked[name] = value
    return checked

def apply_config(parser: argparse.ArgumentParser, args: argparse.Namespace,
                 argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Re-parse the command line with config file values as defaults."""
    if not args.config:
        return args

    config = ConfigManager.load_config(args.config)
    if config is None:
        raise ConfigurationError(f"Could not load config file {args.config}")

    config = ConfigManager.validate_keys(config, CONFIG_OPTIONS)
    parser.set_defaults(**check_config_values(config))
    return parser.parse_args(argv)

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line, applying config file values as defaults."""
    parser = build_parser()
    return apply_config(parser, parser.parse_args(argv), argv)

def build_program_options(args: argparse.Namespace) -> ProgramOptions:
    """Turn parsed arguments into validated program options."""
    resize = ResizeSpec(
        max_width=args.max_width,
        max_height=args.max_height,
        scale_percent=args.scale_factor,
        maintain_ratio=args.maintain_ratio,
        display=args.display_resized,
    )
    resize.validate()

    if args.on_conflict not in ResolverFactory.get_available_modes():
        raise ConfigurationError(f"Unknown conflict mode: {args.on_conflict}")

    naming = NamingPolicy(
        web_safe_rename=args.web_safe_name,
        postfix=args.extend_filename or None,
        overwrite=args.overwrite,
    )

    # JPEG is on unless only PNG was asked for
    process_png = bool(args.png)
    process_jpg = bool(args.jpg) or not process_png

    return ProgramOptions(
        resize=resize,
        naming=naming,
        source_dir=args.source_dir,
        target_dir=args.save_dir,
        relocation_dir=args.relocate_dir,
        process_jpg=process_jpg,
        process_png=process_png,
        conflict_mode=args.on_conflict,
        time_execution=args.time_resize,
        show_progress=not args.no_progress,
        verbose=args.verbose,
    )

def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format='%(message)s')

def main(argv: Optional[List[str]] = None) -> int:
    """Run the tool. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        args = apply_config(parser, args, argv)
        options = build_program_options(args)
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1
    except ValidationError as e:
        logger.error(f"❌ {e}")
        return 2

    try:
        success = PhotoBatchProcessor(options).run()
    except DirectoryNotFoundError as e:
        logger.error(f"❌ {e}")
        return 1
    except ValidationError as e:
        logger.error(f"❌ {e}")
        return 2
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130
    except Exception as e:
        logger.error(f"Error: {e}")
        logger.debug(traceback.format_exc())
        return 1

    return 0 if success else 1

if __name__ == '__main__':
    sys.exit(main())
