"""Generate a data-access module from a SQL script.

Usage:
    python generate_module.py schema.sql --all
    python generate_module.py schema.sql --tables usuarios pedidos --database demo -o acceso.py
"""

import argparse
import sys
from pathlib import Path

from GYSQL.orchestration import run_pipeline
from GYSQL.utils.error_handling import PipelineError, handle_pipeline_error
from GYSQL.utils.logging import get_logger, setup_logging_from_config

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a Python data-access module from CREATE TABLE statements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("sql_file", type=str, help="Path to the SQL script")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--tables",
        nargs="+",
        default=None,
        help="Tables to generate (default: none, use --all for every table)",
    )
    selection.add_argument("--all", action="store_true", help="Generate every parsed table")
    parser.add_argument(
        "--database",
        type=str,
        default=None,
        help="Database name override (default: CREATE DATABASE in the script, else config fallback)",
    )
    parser.add_argument(
        "--split-mode",
        choices=["legacy", "depth_aware"],
        default=None,
        help="How CREATE TABLE bodies are split (default: parser.split_mode from config.yaml)",
    )
    parser.add_argument("-o", "--output", type=str, default=None, help="Write the module here instead of stdout")
    parser.add_argument("--log-level", type=str, default=None, help="Override logging level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging_from_config({"level": args.log_level})

    sql_path = Path(args.sql_file)
    if not sql_path.exists():
        logger.error(f"SQL file not found: {sql_path}")
        return 1
    sql_text = sql_path.read_text(encoding="utf-8")

    try:
        result = run_pipeline(
            sql_text,
            selected=args.tables,
            select_all=args.all,
            database_name=args.database,
            split_mode=args.split_mode,
        )
    except PipelineError as error:
        handle_pipeline_error(error, log_level="warning")
        print(f"Error: {error.message}", file=sys.stderr)
        return 1

    if not result.output.generated:
        found = ", ".join(result.registry.table_names()) or "none"
        print(f"Nothing to generate: select tables with --tables or --all (found: {found})", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result.module_text, encoding="utf-8")
        logger.info(f"Module written to {args.output}")
    else:
        sys.stdout.write(result.module_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
