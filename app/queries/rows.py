"""Decode query result rows into typed records by column name."""

from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Column, Result

R = TypeVar("R", bound=BaseModel)


class RowMapper(Generic[R]):
    """
    Binds the columns a statement selects (or returns) to the record built from each row.

    The same column tuple must be used in the statement text and here; construction
    fails if the columns and the record's fields disagree, so the two cannot drift apart.
    """

    def __init__(self, columns: Sequence[Column], record: type[R]) -> None:
        keys = [column.key for column in columns]
        fields = list(record.model_fields)
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate columns for {record.__name__}: {keys}")
        if set(keys) != set(fields):
            missing = sorted(set(fields) - set(keys))
            extra = sorted(set(keys) - set(fields))
            raise ValueError(
                f"Columns do not match {record.__name__} fields "
                f"(missing={missing}, unexpected={extra})"
            )
        self.columns = tuple(columns)
        self.record = record

    def decode(self, mapping: dict) -> R:
        return self.record.model_validate(mapping)

    def one(self, result: Result) -> R | None:
        """First row as a record, or None when the statement produced no rows."""
        row = result.first()
        if row is None:
            return None
        return self.decode(dict(row._mapping))

    def all(self, result: Result) -> list[R]:
        """Every row as a record; an empty list when there are none."""
        return [self.decode(dict(row._mapping)) for row in result]
