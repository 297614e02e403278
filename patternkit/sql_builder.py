"""Fluent builder for SELECT statements."""

from __future__ import annotations


class SQLBuilder:
    """Collects the clauses of a SELECT query and renders them in order."""

    def __init__(self) -> None:
        self._columns: list[str] = []
        self._table = ""
        self._joins: list[str] = []
        self._filters: list[str] = []
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._limit: int | None = None
        self._offset = 0

    def select(self, *args: str) -> SQLBuilder:
        self._columns.extend(args)
        return self

    def from_(self, table: str) -> SQLBuilder:
        self._table = table
        return self

    def join(self, clause: str) -> SQLBuilder:
        self._joins.append(clause)
        return self

    def where(self, condition: str) -> SQLBuilder:
        self._filters.append(condition)
        return self

    def group_by(self, *args: str) -> SQLBuilder:
        self._group_by.extend(args)
        return self

    def order_by(self, clause: str) -> SQLBuilder:
        self._order_by.append(clause)
        return self

    def limit(self, n: int) -> SQLBuilder:
        if n < 0:
            raise ValueError("limit must be >= 0")
        self._limit = n
        return self

    def offset(self, n: int) -> SQLBuilder:
        if n < 0:
            raise ValueError("offset must be >= 0")
        self._offset = n
        return self

    def build(self) -> str:
        if not self._table:
            raise ValueError("FROM table not specified")
        parts = ["SELECT", ", ".join(self._columns), "FROM", self._table, *self._joins]
        if self._filters:
            parts.append("WHERE " + " AND ".join(self._filters))
        if self._group_by:
            parts.append("GROUP BY " + ", ".join(self._group_by))
        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        if self._offset > 0:
            parts.append(f"OFFSET {self._offset}")
        return " ".join(parts)