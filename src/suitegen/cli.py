"""Command line interface for the SuiteScript generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .catalog import API_VERSIONS, DEFAULT_API_VERSION, MODULES, SCRIPT_TYPES
from .config import SCRIPT_EXTENSION, GenerationRequest, GeneratorSettings
from .errors import GenerationError
from .scaffold import ScriptScaffolder

COPYRIGHT_EXTENSION = ".txt"

LOGGER = logging.getLogger(__name__)


def _script_filename(value: str) -> str:
    name = value.strip()
    if not name:
        raise argparse.ArgumentTypeError("file name must not be empty")
    suffix = Path(name).suffix
    if not suffix:
        raise argparse.ArgumentTypeError("file name missing extension")
    if suffix.lower() != SCRIPT_EXTENSION:
        raise argparse.ArgumentTypeError(
            f"invalid file type '{suffix}'. Expected a '{SCRIPT_EXTENSION}' file."
        )
    return name


def _copyright_path(value: str) -> Path:
    path = Path(value)
    if path.suffix.lower() != COPYRIGHT_EXTENSION:
        raise argparse.ArgumentTypeError(
            f"copyright file '{value}' must be a '{COPYRIGHT_EXTENSION}' file"
        )
    return path


def _catalog_listing(kind: str, *, include_legacy: bool = False) -> list[str]:
    if kind == "types":
        return [entry.display_name for entry in SCRIPT_TYPES.values()]
    if kind == "versions":
        return [
            entry.display_value
            for entry in API_VERSIONS.values()
            if include_legacy or not entry.legacy
        ]
    return [entry.path for entry in MODULES.values()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suitegen",
        description="Generate a skeleton SuiteScript file",
    )
    parser.add_argument(
        "-f",
        "--filename",
        type=_script_filename,
        help="The name of the JavaScript file to be created",
    )
    parser.add_argument(
        "-c",
        "--copyright",
        type=_copyright_path,
        help="Text file whose contents are placed in a comment at the top of the script",
    )
    parser.add_argument(
        "-s",
        "-t",
        "--scripttype",
        "--stype",
        dest="script_type",
        help="The type of SuiteScript to create (case insensitive)",
    )
    parser.add_argument(
        "-a",
        "-v",
        "--apiversion",
        "--version",
        dest="api_version",
        default=DEFAULT_API_VERSION,
        help="The SuiteScript API version to use (default: %(default)s)",
    )
    parser.add_argument(
        "-m",
        "--modules",
        nargs="+",
        action="extend",
        default=[],
        metavar="MODULE",
        help="The SuiteScript API modules (N/*) to import, in order",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the script is created",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing file instead of failing",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated script instead of writing it",
    )
    parser.add_argument(
        "--legacy-api",
        action="store_true",
        help="Also accept the deprecated API versions 1 and 2",
    )
    parser.add_argument(
        "--list",
        choices=["types", "versions", "modules"],
        help="Print the accepted values for an option and exit",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_copyright(path: Path | None) -> str | None:
    if path is None:
        return None
    if not path.is_file():
        raise FileNotFoundError(f"copyright file {path} does not exist")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"copyright file {path} is not valid UTF-8: {exc.reason}") from exc


def _handle_list(args: argparse.Namespace) -> int:
    for value in _catalog_listing(args.list, include_legacy=args.legacy_api):
        sys.stdout.write(f"{value}\n")
    return 0


def _handle_generate(args: argparse.Namespace) -> int:
    settings = GeneratorSettings(allow_legacy_api_versions=args.legacy_api)
    scaffolder = ScriptScaffolder(settings)
    request = GenerationRequest(
        filename=args.filename,
        copyright_text=_read_copyright(args.copyright),
        script_type=args.script_type,
        api_version=args.api_version,
        modules=tuple(args.modules),
    )

    if args.stdout:
        sys.stdout.write(scaffolder.generate(request).render())
        return 0

    path = scaffolder.create(request, args.directory, force=args.force)
    print(f"Script created at {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.list:
        return _handle_list(args)
    if args.filename is None:
        parser.error("the following arguments are required: -f/--filename")

    try:
        return _handle_generate(args)
    except ValidationError as exc:
        parser.error(str(exc))
    except (GenerationError, OSError, ValueError) as exc:
        LOGGER.debug("generation failed", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
