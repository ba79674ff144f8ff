"""
Command Line Interface for image variant generation.
"""

import argparse
import logging
from typing import List, Optional

from .config import BuildConfig
from .orchestrator import VariantOrchestrator
from .paths import resolve_all
from .run_progress import RunProgress
from .runner import Runner
from .source_image import SourceImage
from .transcoder import Transcoder


def setup_logging(verbose: bool, level_name: str = 'INFO') -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    return logging.getLogger('variantgen')


def get_config(args: argparse.Namespace) -> BuildConfig:
    """Get configuration from environment and CLI overrides."""
    config = BuildConfig.from_env()

    if getattr(args, 'build_dir', None):
        config.build_dir = args.build_dir

    return config


def get_sources(args: argparse.Namespace) -> List[SourceImage]:
    """Build source images from positional paths."""
    if args.name and len(args.sources) > 1:
        raise ValueError("--name can only be used with a single source")
    return [SourceImage.from_file(path, args.map, args.name) for path in args.sources]


def _prepare(args: argparse.Namespace):
    """Shared setup for commands: config, logging and sources."""
    config = get_config(args)
    logger = setup_logging(args.verbose, config.log_level)

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return None

    try:
        sources = get_sources(args)
    except ValueError as e:
        logger.error(str(e))
        return None

    return config, logger, sources


def _run(args: argparse.Namespace, action: str) -> int:
    prepared = _prepare(args)
    if prepared is None:
        return 1
    config, logger, sources = prepared

    logger.info(f"Build directory: {config.build_dir}")
    logger.info(f"Map: {args.map}")

    try:
        orchestrator = VariantOrchestrator(
            build_dir=config.build_dir,
            transcoder=Transcoder(logger=logger),
            logger=logger
        )
        runner = Runner(orchestrator, dry_run=args.dry_run, logger=logger)

        progress = None
        if not args.quiet:
            progress = RunProgress(show_files=args.show_files, logger=logger)

        if action == 'generate':
            stats = runner.generate_all(sources, progress=progress)
        else:
            stats = runner.remove_all(sources, progress=progress)

        if not args.quiet:
            print()
            print(f"Processed: {stats.processed}")
            if action == 'generate':
                print(f"Files written: {stats.files_generated}")
            else:
                print(f"Files removed: {stats.files_removed}")
            print(f"Errors: {stats.errors}")
            print(f"Time: {stats.elapsed_seconds:.1f}s")

        return 0 if stats.errors == 0 else 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"{action.capitalize()} failed: {e}")
        return 1


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute generate command."""
    return _run(args, 'generate')


def cmd_remove(args: argparse.Namespace) -> int:
    """Execute remove command."""
    return _run(args, 'remove')


def cmd_paths(args: argparse.Namespace) -> int:
    """Print destination paths without touching the filesystem."""
    prepared = _prepare(args)
    if prepared is None:
        return 1
    config, _, sources = prepared

    for source in sources:
        for (encoding, variant), path in resolve_all(config.build_dir, source).items():
            print(f"{encoding.value:<5} {variant.value:<10} {path}")
    return 0


def add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Add source image and build root arguments to a parser."""
    parser.add_argument('sources', nargs='+', metavar='SOURCE', help='Source image file(s)')
    parser.add_argument('-m', '--map', required=True,
                        help='Grouping subdirectory for output (e.g. album name)')
    parser.add_argument('--name', help='Output name stem (default: source filename stem)')
    parser.add_argument('-b', '--build-dir', metavar='PATH',
                        help='Override VARIANTGEN_BUILD_DIR (default: build)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='variantgen',
        description='Responsive image variants (full, medium, thumbnail as JPG and WebP)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output layout under the build directory:
  full/<map>/<name>.jpg       webp/full/<map>/<name>.webp
  medium/<map>/<name>.jpg     webp/medium/<map>/<name>.webp
  thumbnail/<map>/<name>.jpg  webp/thumbnail/<map>/<name>.webp

Examples:
  python -m variantgen generate photos/sunset.png --map landscapes -b public
  python -m variantgen remove photos/sunset.png --map landscapes -b public
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    for name, help_text in (('generate', 'Generate all variants'), ('remove', 'Remove all variants')):
        sub = subparsers.add_parser(name, help=help_text)
        add_source_arguments(sub)
        sub.add_argument('-n', '--dry-run', action='store_true', help='Show what would be done')
        sub.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
        sub.add_argument('--show-files', action='store_true',
                         help='Print each source as processed with result')

    paths_parser = subparsers.add_parser('paths', help='Print destination paths for source(s)')
    add_source_arguments(paths_parser)

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'generate':
        return cmd_generate(parsed_args)
    elif parsed_args.command == 'remove':
        return cmd_remove(parsed_args)
    elif parsed_args.command == 'paths':
        return cmd_paths(parsed_args)

    return 1
