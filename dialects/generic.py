# ============================================================================
# GENERIC DIALECT
# ============================================================================
# STATUS: Dialects - Standard SQL rendering
# PURPOSE: JDBC-style type map and the base schema factory registration
# CREATED: 16 OCT 2026
# EXPORTS: GenericTypeMapper, GenericFactory
# ============================================================================
"""
Generic Dialect

Renders standard SQL without identifier quoting. Used when no
database-specific dialect is configured, and as the base type map the
other dialects extend.
"""

from core.contracts import ParamStyle
from core.schema.factory import SchemaFactory
from core.schema.types import TypeMapper
from dialects.registry import register_dialect


class GenericTypeMapper(TypeMapper):
    """JDBC type names plus Java/Python-style aliases."""

    TYPES = {
        "bit": ("BIT", ParamStyle.NONE),
        "tinyint": ("TINYINT", ParamStyle.NONE),
        "smallint": ("SMALLINT", ParamStyle.NONE),
        "integer": ("INTEGER", ParamStyle.NONE),
        "bigint": ("BIGINT", ParamStyle.NONE),
        "float": ("FLOAT", ParamStyle.PRECISION),
        "double": ("DOUBLE PRECISION", ParamStyle.NONE),
        "real": ("REAL", ParamStyle.NONE),
        "numeric": ("NUMERIC", ParamStyle.PRECISION_DECIMALS),
        "decimal": ("DECIMAL", ParamStyle.PRECISION_DECIMALS),
        "char": ("CHAR", ParamStyle.LENGTH),
        "varchar": ("VARCHAR", ParamStyle.LENGTH),
        "longvarchar": ("VARCHAR", ParamStyle.LENGTH),
        "date": ("DATE", ParamStyle.NONE),
        "time": ("TIME", ParamStyle.NONE),
        "timestamp": ("TIMESTAMP", ParamStyle.NONE),
        "binary": ("BINARY", ParamStyle.LENGTH),
        "varbinary": ("VARBINARY", ParamStyle.LENGTH),
        "longvarbinary": ("VARBINARY", ParamStyle.LENGTH),
        "blob": ("BLOB", ParamStyle.NONE),
        "clob": ("CLOB", ParamStyle.NONE),
        "boolean": ("BOOLEAN", ParamStyle.NONE),
    }

    ALIASES = {
        "int": "integer",
        "long": "bigint",
        "short": "smallint",
        "byte": "tinyint",
        "string": "varchar",
        "str": "varchar",
        "bool": "boolean",
        "big-decimal": "numeric",
        "datetime": "timestamp",
    }


@register_dialect("generic", aliases=("sql92",), description="Standard SQL, unquoted identifiers")
class GenericFactory(SchemaFactory):
    """Standard SQL schema objects."""

    title = "Standard SQL"
    type_mapper_class = GenericTypeMapper


__all__ = ["GenericTypeMapper", "GenericFactory"]
