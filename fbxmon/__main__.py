"""Entry point — python -m fbxmon, or a freebox_<family> plugin symlink."""

from __future__ import annotations

import argparse
import logging
import sys

DESCRIBE_MODES = ("config", "describe")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fbxmon",
        description="Freebox status page monitoring plugin",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        help="config or describe: print graph metadata instead of values",
    )
    parser.add_argument(
        "-f", "--family",
        help="Metric family (default: suffix of the program name)",
        default=None,
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration YAML file",
        default=None,
    )
    parser.add_argument(
        "--host",
        help="Freebox host name or address",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: list[str] | None = None, program: str | None = None) -> int:
    args = build_parser().parse_args(argv)

    from fbxmon.app import Application, EXIT_FAILURE, family_from_program
    from fbxmon.config.settings import Settings, load_config
    from fbxmon.errors import ConfigError
    from fbxmon.ui.logging_handler import setup_logging

    if args.mode is not None and args.mode not in DESCRIBE_MODES:
        print(f"Unknown mode '{args.mode}', expected one of: "
              f"{', '.join(DESCRIBE_MODES)}", file=sys.stderr)
        return EXIT_FAILURE
    describe_mode = args.mode is not None

    # graph metadata is static, a broken config must not hide it
    if describe_mode:
        settings = Settings()
    else:
        try:
            settings = load_config(args.config)
        except ConfigError as exc:
            print(exc, file=sys.stderr)
            return EXIT_FAILURE

    if args.host:
        settings.freebox.host = args.host
    setup_logging(logging.DEBUG if args.verbose else settings.logging.level)

    family = args.family or family_from_program(program or sys.argv[0])
    app = Application(settings=settings)
    return app.run(family, describe_mode=describe_mode)


if __name__ == "__main__":
    sys.exit(main())
