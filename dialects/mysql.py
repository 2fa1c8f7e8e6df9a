# ============================================================================
# MYSQL DIALECT
# ============================================================================
# STATUS: Dialects - MySQL rendering
# PURPOSE: MySQL type map and schema object variants
# CREATED: 16 OCT 2026
# EXPORTS: MysqlTypeMapper, MysqlFactory
# ============================================================================
"""
MySQL Dialect

Differences from standard SQL:
- Identifiers are back-quoted
- CREATE TABLE carries an optional ENGINE clause (mysql_engine)
- IDENTITY key generators render as AUTO_INCREMENT; the primary key
  of such a table is declared inside CREATE TABLE
- Tables are dropped with IF EXISTS
- SEQUENCE key generators are not supported
"""

from typing import List

from core.contracts import KeyGeneratorStrategy, ParamStyle
from core.schema.factory import SchemaFactory
from core.schema.objects import Field, ForeignKey, Index, PrimaryKey, Table
from dialects.generic import GenericTypeMapper
from dialects.registry import register_dialect


class MysqlTypeMapper(GenericTypeMapper):
    """MySQL column types."""

    TYPES = {
        **GenericTypeMapper.TYPES,
        "integer": ("INT", ParamStyle.NONE),
        "float": ("FLOAT", ParamStyle.NONE),
        "double": ("DOUBLE", ParamStyle.NONE),
        "real": ("DOUBLE", ParamStyle.NONE),
        "longvarchar": ("LONGTEXT", ParamStyle.NONE),
        "text": ("TEXT", ParamStyle.NONE),
        "timestamp": ("DATETIME", ParamStyle.NONE),
        "longvarbinary": ("LONGBLOB", ParamStyle.NONE),
        "blob": ("LONGBLOB", ParamStyle.NONE),
        "clob": ("LONGTEXT", ParamStyle.NONE),
        "boolean": ("TINYINT(1)", ParamStyle.NONE),
        "json": ("JSON", ParamStyle.NONE),
    }


class MysqlQuoting:
    """Back-quoted identifiers."""

    def quote(self, identifier: str) -> str:
        return "`{0}`".format(identifier.replace("`", "``"))


class MysqlField(MysqlQuoting, Field):

    def to_ddl(self) -> str:
        parts = [self.quote(self.name), self.type_info.to_ddl()]
        if self.not_null:
            parts.append("NOT NULL")
        if self.is_generated_identity:
            parts.append("AUTO_INCREMENT")
        return " ".join(parts)


class MysqlTable(MysqlQuoting, Table):

    @property
    def has_inline_primary_key(self) -> bool:
        """True if the primary key is declared inside CREATE TABLE."""
        return bool(self.primary_key) and any(f.is_generated_identity for f in self.fields)

    def column_definitions(self) -> List[str]:
        columns = super().column_definitions()
        if self.has_inline_primary_key:
            columns.append("PRIMARY KEY ({0})".format(self.quote_all(self.primary_key.field_names)))
        return columns

    def to_create_ddl(self, writer) -> None:
        writer.println("CREATE TABLE {0} (", self.quote(self.name))
        columns = self.column_definitions()
        if columns:
            writer.println(",\n".join(writer.indent + c for c in columns))
        engine = self.config.mysql_engine
        if engine:
            writer.print(") ENGINE={0}", engine)
        else:
            writer.print(")")
        writer.end_statement()

    def to_drop_ddl(self, writer) -> None:
        writer.print("DROP TABLE IF EXISTS {0}", self.quote(self.name))
        writer.end_statement()


class MysqlPrimaryKey(MysqlQuoting, PrimaryKey):

    def to_create_ddl(self, writer) -> None:
        if self.table is not None and self.table.has_inline_primary_key:
            return
        super().to_create_ddl(writer)


class MysqlForeignKey(MysqlQuoting, ForeignKey):
    pass


class MysqlIndex(MysqlQuoting, Index):
    pass


@register_dialect("mysql", aliases=("mariadb",), description="MySQL 5.7+, back-quoted identifiers")
class MysqlFactory(SchemaFactory):
    """MySQL schema objects."""

    title = "MySQL"
    comment_prefix = "#"

    table_class = MysqlTable
    field_class = MysqlField
    primary_key_class = MysqlPrimaryKey
    foreign_key_class = MysqlForeignKey
    index_class = MysqlIndex
    type_mapper_class = MysqlTypeMapper

    supported_strategies = frozenset({
        KeyGeneratorStrategy.MAX,
        KeyGeneratorStrategy.HIGH_LOW,
        KeyGeneratorStrategy.UUID,
        KeyGeneratorStrategy.IDENTITY,
    })


__all__ = ["MysqlTypeMapper", "MysqlFactory"]
