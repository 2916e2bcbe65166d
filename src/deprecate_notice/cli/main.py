from __future__ import annotations

import sys

from deprecate_notice.cli.handlers import handle_config_validate, handle_flags
from deprecate_notice.cli.parser import build_parser
from deprecate_notice.errors import ConfigValidationError, DeprecateNoticeError

_EXIT_GENERIC = 1
_EXIT_CONFIG = 2


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "flags":
            return handle_flags(args)
        if args.command == "config" and args.config_command == "validate":
            return handle_config_validate(args)
    except ConfigValidationError as exc:
        print(str(exc), file=sys.stderr)
        return _EXIT_CONFIG
    except DeprecateNoticeError as exc:
        print(str(exc), file=sys.stderr)
        return _EXIT_GENERIC

    parser.error("unhandled command")
    return _EXIT_GENERIC


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
