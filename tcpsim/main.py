"""Application entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from fsmengine.api.errors import ActionFailedError
from fsmengine.api.logging import get_logger, shutdown_logging
from fsmengine.diagnostics.trace import TransitionTrace
from fsmengine.runtime.debug_config import load_debug_config
from tcpsim.app.connection import TcpConnection
from tcpsim.app.session import run_session
from tcpsim.app.tokens import EventTokenMap, iter_tokens
from tcpsim.core.protocol import ALL_EVENTS
from tcpsim.infra.config import load_default_env_files
from tcpsim.infra.logging import setup_logging

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcpsim",
        description="Feed TCP lifecycle events into a table-driven state machine.",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Read event tokens from this file instead of stdin.",
    )
    parser.add_argument(
        "--trace-export",
        default=None,
        help="Write the transition trace as JSON lines to this path.",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Only print per-event output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one simulator session and return the process exit code."""
    args = _build_parser().parse_args(argv)
    load_default_env_files()
    setup_logging()
    debug = load_debug_config()
    export_path = args.trace_export or debug.trace_export_path
    trace = TransitionTrace(debug.trace_capacity) if (debug.trace_enabled or export_path) else None

    connection = TcpConnection(trace=trace)
    token_map = EventTokenMap.from_events(ALL_EVENTS)
    try:
        if args.input:
            with Path(args.input).open("r", encoding="utf-8") as stream:
                summary = run_session(iter_tokens(stream), connection, token_map, banner=not args.no_banner)
        else:
            summary = run_session(iter_tokens(sys.stdin), connection, token_map, banner=not args.no_banner)
        logger.debug("session_summary %s", summary)
    except ActionFailedError:
        logger.exception("session_aborted state=%s", connection.current_state_name())
        return 2
    finally:
        if trace is not None and export_path:
            written = trace.export_jsonl(export_path)
            logger.info("trace_exported path=%s entries=%d", written, trace.size)
        shutdown_logging()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
