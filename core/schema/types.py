# ============================================================================
# COLUMN TYPE RESOLUTION
# ============================================================================
# STATUS: Core - Abstract type name to dialect column type lookup
# PURPOSE: TypeInfo value object and the per-dialect TypeMapper base
# CREATED: 16 OCT 2026
# EXPORTS: TypeInfo, TypeMapper, parse_type_name
# ============================================================================
"""
Column Type Resolution

A TypeMapper answers one question: which dialect column type does an
abstract type name (e.g. "integer", "varchar[64]", "string") stand for?
It returns None for names it does not know, which the schema builder
treats as a reference to another persistent class.

Dialects subclass TypeMapper and fill TYPES / ALIASES:

    class MyTypeMapper(TypeMapper):
        TYPES = {"integer": ("INT", ParamStyle.NONE), ...}
        ALIASES = {"int": "integer"}
"""

import re
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from core.config.defaults import TypeDefaults
from core.contracts import ParamStyle


# "numeric[12,2]", "varchar(64)", "integer"
_TYPE_PATTERN = re.compile(r"^\s*([A-Za-z_][\w\- ]*?)\s*(?:[\[\(]\s*([\d\s,]*)\s*[\]\)])?\s*$")


def parse_type_name(type_name: str) -> Tuple[Optional[str], List[int]]:
    """
    Split a type name into its lower-cased base name and numeric parameters.

    Returns:
        (base, params) - base is None when the name is not a type expression
    """
    match = _TYPE_PATTERN.match(type_name or "")
    if not match:
        return None, []
    base = match.group(1).strip().lower()
    raw = match.group(2)
    params = [int(p) for p in raw.split(",") if p.strip()] if raw else []
    return base, params


@dataclass(frozen=True)
class TypeInfo:
    """
    Resolved column type.

    Immutable; parameterized variants are derived with with_params().
    """
    name: str
    sql_type: str
    param_style: ParamStyle = ParamStyle.NONE
    length: Optional[int] = None
    precision: Optional[int] = None
    decimals: Optional[int] = None

    def with_params(self, params: List[int]) -> "TypeInfo":
        """Apply explicit parameters; extra parameters are ignored."""
        if not params or self.param_style == ParamStyle.NONE:
            return self
        if self.param_style == ParamStyle.LENGTH:
            return replace(self, length=params[0])
        if self.param_style == ParamStyle.PRECISION:
            return replace(self, precision=params[0])
        decimals = params[1] if len(params) > 1 else self.decimals
        return replace(self, precision=params[0], decimals=decimals)

    def to_ddl(self) -> str:
        """Render the column type, e.g. VARCHAR(255) or NUMERIC(10,2)."""
        if self.param_style == ParamStyle.LENGTH and self.length is not None:
            return f"{self.sql_type}({self.length})"
        if self.param_style == ParamStyle.PRECISION and self.precision is not None:
            return f"{self.sql_type}({self.precision})"
        if self.param_style == ParamStyle.PRECISION_DECIMALS and self.precision is not None:
            return f"{self.sql_type}({self.precision},{self.decimals or 0})"
        return self.sql_type


class TypeMapper:
    """
    Base type mapper.

    TYPES maps abstract (JDBC-style) names to (sql_type, param_style).
    ALIASES maps convenience names (Python/Java style) onto TYPES keys.
    """

    TYPES: Dict[str, Tuple[str, ParamStyle]] = {}
    ALIASES: Dict[str, str] = {}

    def __init__(self, defaults: Optional[TypeDefaults] = None):
        self.defaults = defaults or TypeDefaults()
        self._types: Dict[str, TypeInfo] = {}
        self._initialize()

    def _initialize(self) -> None:
        for name, (sql_type, style) in self.TYPES.items():
            self.add(name, sql_type, style)
        for alias, target in self.ALIASES.items():
            info = self._types.get(target)
            if info is not None:
                self._types[alias] = info

    def _default_params(self, name: str, style: ParamStyle) -> Dict[str, int]:
        d = self.defaults
        if style == ParamStyle.LENGTH:
            if name == "char":
                return {"length": d.char_length}
            if "binary" in name:
                return {"length": d.binary_length}
            return {"length": d.varchar_length}
        if style == ParamStyle.PRECISION:
            return {"precision": d.float_precision}
        if style == ParamStyle.PRECISION_DECIMALS:
            return {"precision": d.numeric_precision, "decimals": d.numeric_decimals}
        return {}

    def add(self, name: str, sql_type: str, style: ParamStyle = ParamStyle.NONE) -> TypeInfo:
        """Register (or replace) a type under a lower-cased name."""
        key = name.lower()
        info = TypeInfo(name=key, sql_type=sql_type, param_style=style,
                        **self._default_params(key, style))
        self._types[key] = info
        return info

    def get_type(self, type_name: Optional[str]) -> Optional[TypeInfo]:
        """
        Look up a type name.

        Args:
            type_name: e.g. "integer", "VARCHAR", "char[16]", "numeric(12,2)"

        Returns:
            TypeInfo, or None if the name is not a known column type
        """
        if not type_name:
            return None
        base, params = parse_type_name(type_name)
        if base is None:
            return None
        info = self._types.get(base)
        if info is None:
            return None
        return info.with_params(params)

    def __contains__(self, type_name: str) -> bool:
        return self.get_type(type_name) is not None

    @property
    def type_names(self) -> List[str]:
        return sorted(self._types)


__all__ = ["TypeInfo", "TypeMapper", "parse_type_name"]
