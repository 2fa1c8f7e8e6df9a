#!/usr/bin/env python
# ============================================================================
# MAPPING DDL GENERATOR - COMMAND LINE
# ============================================================================
# STATUS: Entry point - Generate DDL from a mapping file
# PURPOSE: Load mapping YAML, build schema, write DDL for a dialect
# CREATED: 16 OCT 2026
# USAGE:
#   python main.py mappings/shop.yaml                       # Generic SQL to stdout
#   python main.py mappings/shop.yaml --dialect postgresql  # PostgreSQL
#   python main.py mappings/shop.yaml -o schema.sql         # Write to file
# ============================================================================

import argparse
import dataclasses
import os
import sys
from typing import List, Optional

from __version__ import __version__
from core.config import get_defaults
from core.errors import GeneratorError
from core.logging import ComponentType, configure_logging, get_logger, log_context
from dialects import list_dialects
from generator import create_generator
from services import MappingService

logger = get_logger(__name__, ComponentType.CLI)

# Flag name -> GenerationToggles field
TOGGLE_FLAGS = {
    "schema": "schema",
    "drop": "drop",
    "create": "create",
    "primary-key": "primary_key",
    "foreign-key": "foreign_key",
    "index": "index",
    "key-generator": "key_generator",
}


def build_parser() -> argparse.ArgumentParser:
    dialect_names = ", ".join(d["name"] for d in list_dialects())
    parser = argparse.ArgumentParser(
        prog="ddlgen",
        description="Generate a DDL creation script from an object-to-table mapping",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  python main.py mappings/shop.yaml                        # Standard SQL to stdout
  python main.py mappings/shop.yaml --dialect postgresql   # PostgreSQL DDL
  python main.py mappings/shop.yaml --group-by ddltype     # All drops, then all creates, ...
  python main.py mappings/shop.yaml --no-drop -o shop.sql  # Skip DROP statements

Dialects: {dialect_names}

Environment Variables:
  DDLGEN_DIALECT        Dialect (default: generic)
  DDLGEN_GROUP_BY       table | ddltype (default: table)
  DDLGEN_DELIMITER      Statement delimiter (default: ;)
  DDLGEN_SCHEMA_NAME    PostgreSQL schema name
  DDLGEN_MYSQL_ENGINE   MySQL storage engine, e.g. InnoDB
  DDLGEN_GENERATE_*     Per statement kind toggles (SCHEMA, DROP, CREATE,
                        PRIMARY_KEY, FOREIGN_KEY, INDEX, KEY_GENERATOR)
  LOG_LEVEL             Log level (default: WARNING)
  LOG_FORMAT            json for structured logs
        """
    )
    parser.add_argument("mapping", help="Mapping YAML file")
    parser.add_argument("--dialect", "-d", help="Target dialect (overrides DDLGEN_DIALECT)")
    parser.add_argument(
        "--group-by",
        help="Statement order: table or ddltype (overrides DDLGEN_GROUP_BY)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--schema-name", help="PostgreSQL schema name")
    parser.add_argument("--delimiter", help="Statement delimiter")
    parser.add_argument("--engine", help="MySQL storage engine")
    for flag in TOGGLE_FLAGS:
        parser.add_argument(
            f"--no-{flag}",
            action="store_true",
            help=f"Do not emit {flag.replace('-', ' ')} statements"
        )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace):
    """Environment defaults with command line overrides applied."""
    config = get_defaults()
    overrides = {}
    if args.dialect:
        overrides["dialect"] = args.dialect
    if args.group_by:
        overrides["group_by"] = args.group_by
    if args.schema_name is not None:
        overrides["schema_name"] = args.schema_name
    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
    if args.engine is not None:
        overrides["mysql_engine"] = args.engine

    disabled = {
        field: False
        for flag, field in TOGGLE_FLAGS.items()
        if getattr(args, f"no_{flag.replace('-', '_')}")
    }
    if disabled:
        overrides["toggles"] = dataclasses.replace(config.toggles, **disabled)

    return dataclasses.replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else os.environ.get("LOG_LEVEL", "WARNING"),
        json_output=args.json_logs,
    )

    try:
        config = resolve_config(args)
        with log_context(mapping=args.mapping):
            document = MappingService().load(args.mapping)
            generator = create_generator(config=config)

            if args.output:
                text = generator.generate_ddl_string(document)
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(text)
                logger.info(f"Wrote DDL to {args.output}")
            else:
                generator.generate_ddl(document, sys.stdout)
    except GeneratorError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        target = args.output or "stdout"
        logger.error(f"Cannot write {target}: {e}")
        print(f"error: cannot write {target}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
