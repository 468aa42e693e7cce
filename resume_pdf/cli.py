"""
Command-line interface for resume-pdf.

Usage:
    resume-pdf build [data/resume.json] [resume.pdf] [--locale zh|en]
    resume-pdf images --input prompts.md --out generated/ [--dry-run]
    resume-pdf version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    DEFAULT_ASPECT,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_RESIZE,
    ExportSettings,
    ImageJobSettings,
    find_api_key,
)
from .engine import LOCALES, get_locale
from .exceptions import ConfigurationError, ResumePdfError
from .utils.logger import console, setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    settings = ExportSettings.from_env()
    parser = argparse.ArgumentParser(
        prog="resume-pdf",
        description="Render a JSON résumé to PDF and generate portfolio images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resume-pdf build
  resume-pdf build data/resume.en.json resume.en.pdf --locale en
  resume-pdf images --input prompts.md --only p1_ --limit 2 --dry-run
        """,
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser("build", help="Render the résumé PDF")
    build_parser.add_argument(
        "input", nargs="?", default=settings.input_path, type=Path,
        help=f"Résumé JSON (default: {settings.input_path})",
    )
    build_parser.add_argument(
        "output", nargs="?", default=settings.output_path, type=Path,
        help=f"Output PDF (default: {settings.output_path})",
    )
    build_parser.add_argument(
        "--locale", choices=sorted(LOCALES), default=settings.locale,
        help=f"Language of headings and labels (default: {settings.locale})",
    )

    defaults = ImageJobSettings()
    images_parser = subparsers.add_parser("images", help="Generate portfolio images from a prompt document")
    images_parser.add_argument("--input", type=Path, default=defaults.input_path, help="Prompt markdown document")
    images_parser.add_argument("--out", type=Path, default=defaults.output_dir, help="Output directory")
    images_parser.add_argument("--model", default=DEFAULT_IMAGE_MODEL, help=f"Image model (default: {DEFAULT_IMAGE_MODEL})")
    images_parser.add_argument("--size", default=DEFAULT_IMAGE_SIZE, help=f"Generated size WxH (default: {DEFAULT_IMAGE_SIZE})")
    images_parser.add_argument("--aspect", default=DEFAULT_ASPECT, help=f"Crop to aspect WxH, empty to skip (default: {DEFAULT_ASPECT})")
    images_parser.add_argument("--resize", default=DEFAULT_RESIZE, help=f"Final size WxH, empty to skip (default: {DEFAULT_RESIZE})")
    images_parser.add_argument("--only", help="Filename prefix or /regex/ to select items")
    images_parser.add_argument("--limit", type=int, help="Generate only the first N items")
    images_parser.add_argument("--skip-existing", action="store_true", help="Skip items whose file already exists")
    images_parser.add_argument("--dry-run", action="store_true", help="Parse and list items without generating")

    subparsers.add_parser("version", help="Show version information")

    return parser


def cmd_build(args) -> int:
    """Handle build command."""
    from .api import render_resume_pdf

    locale = get_locale(args.locale)
    logger.info(f"Reading {args.input}")
    output_path = render_resume_pdf(args.input, args.output, locale=locale)
    console.print(f"Generated: {output_path}", markup=False)
    return 0


def cmd_images(args) -> int:
    """Handle images command."""
    from .imagegen import ImageClient, ImageGenerationRun, parse_dimensions

    settings = ImageJobSettings(
        input_path=args.input,
        output_dir=args.out,
        model=args.model,
        size=parse_dimensions(args.size, "--size"),
        aspect=parse_dimensions(args.aspect, "--aspect"),
        resize=parse_dimensions(args.resize, "--resize"),
        only=args.only,
        limit=args.limit,
        skip_existing=args.skip_existing,
        dry_run=args.dry_run,
    )
    if settings.size is None:
        raise ConfigurationError("--size must not be empty")

    client = None
    if not settings.dry_run:
        prompts_dir = Path(settings.input_path).resolve().parent
        api_key = find_api_key([prompts_dir / ".env", prompts_dir.parent / ".env"])
        if not api_key:
            raise ConfigurationError(
                "OPENAI_API_KEY is not set",
                "export it or add OPENAI_API_KEY=... to a .env file next to the prompt document",
            )
        client = ImageClient(api_key)

    ImageGenerationRun(settings, client).run()
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    console.print(f"resume-pdf v{__version__}", markup=False)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    commands = {
        "build": cmd_build,
        "images": cmd_images,
        "version": cmd_version,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args)
    except KeyboardInterrupt:
        console.print("Cancelled by user", style="red")
        return 130
    except ResumePdfError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        console.print(f"Error: {type(e).__name__}: {e}", style="red", markup=False)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
