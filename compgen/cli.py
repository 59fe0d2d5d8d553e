"""Command-line entry point.

Usage::

    compgen "my button" --file-format paramCase --component-format pascalCase
    compgen Header -d layout --functional --test jest --css-extension scss
    python -m compgen Sidebar --type-check flow --no-semi
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError
from rich.markup import escape

from . import __version__
from .config import DEFAULT_CONFIG_FILE, Config
from .errors import CompgenError, ConfigError, InvalidTransformError
from .generator import ComponentGenerator
from .naming import ALLOWED_TRANSFORMS
from .reporter import print_report
from .utils import err_console, print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compgen",
        description="Generate a React component directory from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  compgen \"my button\" --file-format paramCase\n"
            "  compgen Header -d layout --functional --test jest\n"
            "  compgen Sidebar --css-extension .scss --no-semi\n"
            f"\nDefaults are read from ./{DEFAULT_CONFIG_FILE} when present.\n"
            "index.js re-exports ./<ComponentName>; it only resolves when\n"
            "--file-format and --component-format are the same.\n"
            f"Case formats: {', '.join(ALLOWED_TRANSFORMS)}\n"
        ),
    )

    parser.add_argument(
        "name",
        nargs="+",
        help="Component name; several words are joined with spaces",
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Directory under src/ to place the component in (default: components)",
    )
    # No argparse choices here: an unknown format is reported together with
    # the allowed list by the name transformer.
    parser.add_argument(
        "--file-format",
        default=None,
        help="Case format of the file name (default: pascalCase)",
    )
    parser.add_argument(
        "--component-format",
        default=None,
        help="Case format of the component name (default: pascalCase)",
    )
    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "--functional", "-f",
        dest="is_functional",
        action="store_const",
        const=True,
        default=None,
        help="Generate a stateless functional component",
    )
    style.add_argument(
        "--stateful",
        dest="is_functional",
        action="store_const",
        const=False,
        help="Generate a stateful class component (default)",
    )
    parser.add_argument(
        "--type-check",
        metavar="flow",
        default=None,
        help="Add a type-checker pragma to every script; other values add none",
    )
    parser.add_argument(
        "--test",
        metavar="jest",
        default=None,
        help="Also generate a test file for this framework; other values add none",
    )
    parser.add_argument(
        "--css-extension",
        default=None,
        help="Stylesheet extension, leading dot optional (default: css)",
    )
    parser.add_argument(
        "--semi",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="End generated statements with semicolons (default: on)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help=f"JSON file with option defaults (default: ./{DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def report_invalid_transform(exc: InvalidTransformError) -> None:
    print_error(f"Invalid {exc.key} name transform: {escape(exc.value)}")
    err_console.print("[red]  allowed transform functions are:[/red]")
    for name in exc.allowed:
        err_console.print(f"  - [cyan]{name}[/cyan]")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``compgen`` and ``python -m compgen``.

    Returns the process exit status: 0 on success, 1 on any failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.discover(args.config)
        request = config.to_request(
            " ".join(args.name),
            directory=args.directory,
            file_format=args.file_format,
            component_format=args.component_format,
            is_functional=args.is_functional,
            type_check=args.type_check,
            test=args.test,
            css_extension=args.css_extension,
            semi=args.semi,
        )
        result = ComponentGenerator(request).generate()
    except InvalidTransformError as exc:
        report_invalid_transform(exc)
        return 1
    except ConfigError as exc:
        print_error(f"Error: {escape(exc.message)}")
        return 1
    except CompgenError as exc:
        print_error(escape(exc.message))
        return 1
    except ValidationError as exc:
        print_error(f"Error: {escape(str(exc.errors()[0]['msg']))}")
        return 1
    except OSError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_report(result)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
