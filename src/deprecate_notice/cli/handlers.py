from __future__ import annotations

import argparse
import json
from pathlib import Path

from deprecate_notice.config import (
    ENV_FLAG_NAMES,
    NoticeConfig,
    environment_flags,
    load_notice_config,
)

_EXIT_OK = 0


def handle_flags(args: argparse.Namespace) -> int:
    if args.config:
        config = load_notice_config(args.config)
        source = str(Path(args.config).expanduser().resolve())
    else:
        config = NoticeConfig(flags=environment_flags())
        source = "environment"
    payload = {
        "source": source,
        "tag": config.tag,
        "flags": config.flags.model_dump(mode="json"),
        "environment_variables": dict(ENV_FLAG_NAMES),
    }
    print(json.dumps(payload, indent=2, sort_keys=True))
    return _EXIT_OK


def handle_config_validate(args: argparse.Namespace) -> int:
    config = load_notice_config(args.config)
    print(json.dumps(config.model_dump(mode="json"), indent=2, sort_keys=True))
    return _EXIT_OK
