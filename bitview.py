import argparse
import os
import sys

from regdoc.errors import RegdocError, RegisterValidationError
from regdoc.loader import load_catalog, loader_registry
from regdoc.logger import get_logger, setup_logging
from regdoc.renderers import renderer_registry
from regdoc.validation import find_issues

log = get_logger("bitview")


def _load(args: argparse.Namespace):
    if not getattr(args, "file", None):
        sys.exit("Error: No file provided.")

    if not os.path.isfile(args.file):
        sys.exit(f"Error: File not found: {args.file}")

    try:
        return load_catalog(args.file, getattr(args, "loader", None))
    except RegdocError as exc:
        sys.exit(f"Error: {exc}")


def cmd_render(args: argparse.Namespace) -> int:
    """Render one register from FILE in the selected format.

    The register is picked with ``--register`` (default: the first one in
    the file).  The output format is selected with the global
    ``--format`` option through the renderer registry.
    """
    catalog = _load(args)
    renderer = renderer_registry.create(args.format)
    view = renderer.make_view(validate=not args.no_validate)

    try:
        definition = catalog.get(args.register) if args.register else catalog.first()
        view.load(definition)
    except RegisterValidationError as exc:
        for issue in exc.issues:
            log.error("%s: %s", exc.register, issue)
        sys.exit(f"Error: register '{exc.register}' has {len(exc.issues)} layout issue(s)")
    except RegdocError as exc:
        sys.exit(f"Error: {exc}")

    output = renderer.render_view(view)
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as fh:
                fh.write(output + "\n")
        except OSError as exc:
            sys.exit(f"Error: cannot write {args.output}: {exc.strerror or exc}")
        log.info("wrote %s", args.output)
    else:
        print(output)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Print the registers defined in FILE."""
    catalog = _load(args)
    for reg in catalog:
        print(f"{reg.name}\t{len(reg)} fields\t{reg.total_width()} bits")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Check the field geometry of every register in FILE."""
    catalog = _load(args)
    failed = 0
    for reg in catalog:
        issues = find_issues(reg.fields)
        if not issues:
            print(f"{reg.name}: ok")
            continue
        failed += 1
        print(f"{reg.name}: {len(issues)} issue(s)")
        for issue in issues:
            print(f"  {issue}")
    return 1 if failed else 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitview.py",
        description="Render register bit layouts and field tables.",
    )

    # Global options
    parser.add_argument(
        "--format",
        choices=renderer_registry.keys(),
        default="html",
        help="Output format (default: html).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors.",
    )

    subparsers = parser.add_subparsers(dest="command")

    def add_file_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "file",
            metavar="FILE",
            help="Register definition file.",
        )
        sub.add_argument(
            "--loader",
            choices=loader_registry.keys(),
            default=None,
            help="Definition loader (default: from the file suffix).",
        )

    # render subcommand
    render = subparsers.add_parser(
        "render",
        help="Render the layout and field tables of a register.",
    )
    add_file_arguments(render)
    render.add_argument(
        "--register",
        metavar="NAME",
        help="Register to render (default: first in FILE).",
    )
    render.add_argument(
        "--no-validate",
        action="store_true",
        help="Draw the register even if its fields overlap or do not fill it.",
    )
    render.add_argument(
        "-o", "--output",
        metavar="OUT",
        help="Write to OUT instead of stdout.",
    )
    render.set_defaults(func=cmd_render)

    # list subcommand
    list_cmd = subparsers.add_parser(
        "list",
        help="List the registers defined in a file.",
    )
    add_file_arguments(list_cmd)
    list_cmd.set_defaults(func=cmd_list)

    # validate subcommand
    validate = subparsers.add_parser(
        "validate",
        help="Check the field geometry of every register in a file.",
    )
    add_file_arguments(validate)
    validate.set_defaults(func=cmd_validate)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.quiet)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
