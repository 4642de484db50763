"""
Render a typed SQL template from the command line.

Usage:
    # Inline parameters (each parsed as YAML)
    python -m typed_sql.cli prepare "SELECT * FROM ?t WHERE id IN ?a" -p users -p "[1, 2]"

    # Parameters from a file, PostgreSQL formatting, table prefix
    python -m typed_sql.cli prepare --file query.sql --params-file params.yml \\
        --driver pgsql --prefix shop

Rendering is offline: string literals are quoted with the driver's
standard escaping rules, no database connection is opened.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from typed_sql.cli.params import load_params_file, parse_values
from typed_sql.config import get_settings
from typed_sql.sql.dialects.drivers import Driver
from typed_sql.sql.errors import SqlTemplateError
from typed_sql.sql.preparer import QueryPreparer
from typed_sql.sql.quoting import quoter_for_driver
from typed_sql.utils.logging import bind_context

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_TEMPLATE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typed_sql.cli prepare",
        description="Substitute typed placeholders in a SQL template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Placeholders:
  ?s string   ?i integer   ?f float    ?a IN-list     ?A SET-list
  ?M rows     ?t table     ?c column   ?l LIKE        ?d date   ?r raw

Examples:
  python -m typed_sql.cli prepare "SELECT * FROM ?t WHERE name LIKE ?l" -p users -p "50% off"
  python -m typed_sql.cli prepare --file update.sql --params-file params.yml --driver pgsql
        """,
    )
    parser.add_argument("template", nargs="?", help="SQL template text")
    parser.add_argument("--file", type=Path, help="Read the SQL template from a file")

    params = parser.add_mutually_exclusive_group()
    params.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        help="Parameter value as YAML; repeat once per placeholder",
    )
    params.add_argument(
        "--params-file", type=Path, help="YAML/JSON file holding a list of parameters"
    )

    parser.add_argument(
        "--driver",
        choices=[driver.value for driver in Driver],
        help="Driver whose formatting rules apply (default: TSQL_DRIVER or mysql)",
    )
    parser.add_argument(
        "--prefix",
        help="Table prefix for ?t placeholders (default: TSQL_TABLE_PREFIX)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for ``prepare``.

    Returns:
        0 on success, 2 for template or parameter errors, 1 otherwise
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.template is None) == (args.file is None):
        parser.error("provide either a template argument or --file")

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    driver = Driver.resolve(args.driver or settings.driver)
    prefix = settings.table_prefix if args.prefix is None else args.prefix
    logger = bind_context(command="prepare", driver=driver.value)

    try:
        template = (
            args.file.read_text(encoding="utf-8") if args.file else args.template
        )
        if args.params_file:
            params = load_params_file(args.params_file)
        else:
            params = parse_values(args.param)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("cli.input_error", error=str(e), error_type=type(e).__name__)
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_TEMPLATE_ERROR

    try:
        preparer = QueryPreparer(quoter_for_driver(driver), prefix=prefix)
        sql = preparer.prepare(template, *params)
    except SqlTemplateError as e:
        logger.error("sql.prepare_failed", **e.to_dict())
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TEMPLATE_ERROR

    logger.debug("sql.prepared", parameter_count=len(params))
    print(sql)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
