# detect_hostname/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from detect_hostname.config import load_settings
from detect_hostname.exceptions import CapabilityError
from detect_hostname.resolve import (
    HostCapabilities,
    ResolutionOutcome,
    detect,
    resolve_from,
    system_capabilities,
)


def _print_human(outcome: ResolutionOutcome, out: TextIO, err: TextIO) -> None:
    if outcome.ok:
        out.write(f"{outcome.hostname}\n")
        return

    err.write(f"no usable hostname found starting from {outcome.start!r}\n")
    if not outcome.attempts:
        err.write("  (no candidates tried)\n")
        return
    for a in outcome.attempts:
        line = f"  - {a.candidate}: {a.reason}"
        if a.detail:
            line += f" ({a.detail})"
        err.write(line + "\n")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="detect-hostname",
        description="Print the hostname other nodes should use to reach this machine.",
    )
    ap.add_argument(
        "--from",
        dest="start",
        default=None,
        help="Start from this name instead of the override and OS hostname",
    )
    ap.add_argument("--json", action="store_true", help="Output JSON instead of human text")
    ap.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: HOSTNAME_LOG_LEVEL or WARNING)",
    )
    return ap


def main(
    argv: Sequence[str] | None = None,
    caps: HostCapabilities | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        err.write(f"configuration error: {e}\n")
        return 2

    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=err,
    )

    caps = caps or system_capabilities(settings)
    try:
        if args.start is not None:
            outcome = resolve_from(args.start, caps, settings)
        else:
            outcome = detect(caps, settings)
    except CapabilityError as e:
        if args.json:
            out.write(json.dumps({"hostname": None, "error": str(e)}, ensure_ascii=False) + "\n")
        else:
            err.write(f"error: {e}\n")
        return 1

    if args.json:
        out.write(json.dumps(outcome.to_dict(), ensure_ascii=False) + "\n")
    else:
        _print_human(outcome, out, err)

    return 0 if outcome.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
