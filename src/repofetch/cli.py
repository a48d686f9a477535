import argparse
import logging
import sys
from pathlib import Path

import colorama
from pydantic import ValidationError

from .client import RepofetchClient
from .exceptions import RepofetchError
from .language import Language
from .logging import configure_logging
from .settings import RepofetchSettings
from .summary.models import InfoFields

INFO_FIELD_NAMES = [name.replace("_", "-") for name in InfoFields.model_fields]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="repofetch",
        description="Display information about a git repository next to its language logo.",
    )
    p.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Path to a git repository (default: current directory).",
    )
    p.add_argument(
        "-a",
        "--ascii-language",
        type=str,
        default="",
        help="Show the logo of this language instead of the dominant one.",
    )
    p.add_argument(
        "-c",
        "--ascii-colors",
        nargs="+",
        default=[],
        metavar="N",
        help="Terminal color numbers (0-15) overriding the logo colors in order.",
    )
    p.add_argument(
        "-d",
        "--disable-fields",
        nargs="+",
        default=[],
        choices=INFO_FIELD_NAMES,
        metavar="FIELD",
        help=f"Fields to hide: {', '.join(INFO_FIELD_NAMES)}.",
    )
    p.add_argument(
        "-A",
        "--authors-number",
        type=int,
        default=3,
        help="Number of authors to show (default: %(default)s).",
    )
    p.add_argument(
        "-e",
        "--exclude",
        nargs="+",
        default=[],
        metavar="PATTERN",
        help="Paths or globs to leave out of the language statistics.",
    )
    p.add_argument("--no-bold", action="store_true", help="Turn off bold labels and logo.")
    p.add_argument("--no-merges", action="store_true", help="Ignore merge commits.")
    p.add_argument("--no-color-blocks", action="store_true", help="Hide the color palette row.")
    p.add_argument("-l", "--languages", action="store_true", help="List supported languages and exit.")
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log git commands and probe timings to stderr.",
    )
    return p


def _settings_from_args(args: argparse.Namespace) -> RepofetchSettings:
    ascii_language = None
    if args.ascii_language:
        ascii_language = Language.from_name(args.ascii_language)
        if ascii_language is Language.UNKNOWN and args.ascii_language.strip().lower() != "unknown":
            raise ValueError(f"unsupported language: {args.ascii_language}")

    return RepofetchSettings(
        no_merges=args.no_merges,
        authors_count=args.authors_number,
        ignored_paths=tuple(args.exclude),
        ascii_language=ascii_language,
        ascii_colors=tuple(args.ascii_colors),
        disabled_fields=InfoFields.disabled(args.disable_fields),
        bold=not args.no_bold,
        no_color_blocks=args.no_color_blocks,
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = _build_parser()
    args = p.parse_args(argv)

    if args.languages:
        for language in Language:
            if language is not Language.UNKNOWN:
                print(language)
        return 0

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = _settings_from_args(args)
    except (ValueError, ValidationError) as exc:
        p.error(str(exc))

    colorama.just_fix_windows_console()
    client = RepofetchClient(settings=settings)
    try:
        print(client.fetch(args.path), end="")
    except RepofetchError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
