from __future__ import annotations

import argparse

from renls import __version__
from renls.container import build_services
from renls.domain.rename_logic import display_path

PROG = "renls"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Rename all files in a directory with a list of names from a file or stdin.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"{PROG} {__version__}"
    )
    parser.add_argument(
        "path",
        metavar="DIR_PATH",
        help="Path to directory with files to be renamed.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default="",
        help="Path to file with new name list (optional if piped through stdin).",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show rename proposal but do not apply.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    services = build_services(args.file or None)
    rename_service = services["rename_service"]
    try:
        names = rename_service.load_names(services["name_source"])
        pairs = rename_service.plan(args.path, names)
    except RuntimeError as exc:
        raise SystemExit(f"{PROG}: error: {exc}") from exc

    if args.dry_run:
        for line in rename_service.preview(pairs):
            print(line)
        return

    report = rename_service.apply(pairs)
    for failure in report.failures:
        print(f"{PROG}: error: unable to rename file \"{display_path(failure.pair.source)}\": {failure.reason}")
    if not report.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
