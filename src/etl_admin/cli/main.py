# src/etl_admin/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads tasks from a JSON document and
writes the rendered task table to stdout or a file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import get_settings
from ..logging_setup import setup_logging
from .bootstrap import build_task_table, create_initial_state, open_task_source

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="etl-admin",
        description="Render the ETL task list as an HTML table fragment.",
    )
    parser.add_argument("tasks", type=Path, help="JSON file with the task records to list")
    parser.add_argument("-o", "--output", type=Path, default=None, help="write HTML here instead of stdout")
    parser.add_argument("--table-id", default=None, help="explicit table id (default: generated)")
    return parser


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "etl-admin"))

    try:
        state = create_initial_state(settings=settings)
        source = open_task_source(state, args.tasks)
        renderer = build_task_table(state, table_id=args.table_id)
        output = renderer.render(source.list_tasks())
    except Exception:
        logger.exception("Failed to render task list from %s", args.tasks)
        return 1

    if args.output is None:
        sys.stdout.write(output + "\n")
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output + "\n", "utf-8")
        logger.info("Wrote task table to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
