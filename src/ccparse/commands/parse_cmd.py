"""
ccparse.commands.parse_cmd - Parse a commit message file and print JSON.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ccparse.config import load_config, validate_config
from ccparse.core.parser import parse_message
from ccparse.serialize import to_json


def read_message(source: str) -> str:
    """Read message text from a path, or from stdin when source is "-".

    Line endings are left untouched; the parser normalizes them.
    """
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    return Path(source).read_bytes().decode("utf-8")


def run(args: argparse.Namespace) -> int:
    """Run the parse command.

    Errors propagate to ``cli.main``, which reports them and picks the
    exit code.
    """
    config = load_config(getattr(args, "config", None))
    output = config["output"]
    if getattr(args, "field_case", None):
        output["field_case"] = args.field_case
    if getattr(args, "indent", None) is not None:
        output["indent"] = args.indent
    validate_config(config)

    message = parse_message(read_message(args.message_file))
    print(to_json(message, field_case=output["field_case"], indent=output["indent"]))
    return 0
