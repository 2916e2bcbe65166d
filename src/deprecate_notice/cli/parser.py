from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deprecate-notice")
    sub = parser.add_subparsers(dest="command", required=True)

    flags_parser = sub.add_parser(
        "flags",
        help="Show effective deprecation notice flags",
    )
    flags_parser.add_argument("--config", required=False)

    config_parser = sub.add_parser("config", help="Notice config operations")
    config_sub = config_parser.add_subparsers(dest="config_command", required=True)
    config_validate = config_sub.add_parser("validate", help="Validate notice config")
    config_validate.add_argument("--config", required=True)

    return parser
