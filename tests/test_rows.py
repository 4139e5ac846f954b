"""Unit tests for app.queries.rows: named-column decoding and column/record agreement."""

import unittest
from decimal import Decimal

from pydantic import BaseModel, ValidationError
from sqlalchemy import Column, Integer, MetaData, String, Table, select

from app.queries.beans import BEAN_COLUMNS, bean_rows
from app.queries.rows import RowMapper
from app.queries.users import USER_COLUMNS, user_rows
from app.schemas.beans import Bean, BeanCreate
from tests.support import make_database

widgets = Table(
    "widgets",
    MetaData(),
    Column("widget_id", Integer, primary_key=True),
    Column("label", String(50)),
)


class Widget(BaseModel):
    widget_id: int
    label: str | None = None


class TestRowMapperConstruction(unittest.TestCase):
    """RowMapper refuses column tuples that do not match the record."""

    def test_matching_columns_accepted(self) -> None:
        mapper = RowMapper((widgets.c.widget_id, widgets.c.label), Widget)
        self.assertEqual(len(mapper.columns), 2)

    def test_missing_column_rejected(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            RowMapper((widgets.c.widget_id,), Widget)
        self.assertIn("label", str(ctx.exception))

    def test_duplicate_column_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RowMapper((widgets.c.widget_id, widgets.c.label, widgets.c.label), Widget)

    def test_column_order_is_irrelevant(self) -> None:
        mapper = RowMapper((widgets.c.label, widgets.c.widget_id), Widget)
        self.assertIs(mapper.record, Widget)

    def test_entity_mappers_cover_all_columns(self) -> None:
        self.assertEqual(bean_rows.columns, BEAN_COLUMNS)
        self.assertEqual(user_rows.columns, USER_COLUMNS)


class TestRowMapperDecoding(unittest.TestCase):
    """one() and all() against a real result set."""

    def setUp(self) -> None:
        self.database = make_database()
        widgets.metadata.create_all(self.database.engine)
        self.mapper = RowMapper((widgets.c.label, widgets.c.widget_id), Widget)
        self.db = self.database.session()

    def tearDown(self) -> None:
        self.db.close()
        self.database.dispose()

    def test_one_returns_none_for_no_rows(self) -> None:
        result = self.db.execute(select(*self.mapper.columns))
        self.assertIsNone(self.mapper.one(result))

    def test_all_returns_empty_list_for_no_rows(self) -> None:
        result = self.db.execute(select(*self.mapper.columns))
        self.assertEqual(self.mapper.all(result), [])

    def test_decodes_by_name_not_position(self) -> None:
        self.db.execute(widgets.insert().values(widget_id=9, label="grinder"))
        self.db.commit()
        result = self.db.execute(select(*self.mapper.columns))
        self.assertEqual(self.mapper.all(result), [Widget(widget_id=9, label="grinder")])


class TestBeanCreatePrice(unittest.TestCase):
    """BeanCreate rewrites prices into the two-decimal form the column returns."""

    def test_prices_are_canonicalised(self) -> None:
        cases = {"12.5": "12.50", "0012.50": "12.50", "12": "12.00", "7.05": "7.05"}
        for submitted, stored in cases.items():
            self.assertEqual(BeanCreate(name="Huila", price_per_kg=submitted).price_per_kg, stored)

    def test_no_price_stays_none(self) -> None:
        self.assertIsNone(BeanCreate(name="Huila").price_per_kg)

    def test_invalid_price_rejected(self) -> None:
        for price in ("twelve", "1.234", "-3.00", "123456789.00"):
            with self.assertRaises(ValidationError):
                BeanCreate(name="Huila", price_per_kg=price)


class TestBeanRecord(unittest.TestCase):
    """Bean carries price_per_kg as a string."""

    def test_decimal_price_becomes_string(self) -> None:
        bean = Bean.model_validate(
            {"bean_id": 1, "name": "Huila", "price_per_kg": Decimal("18.00")}
        )
        self.assertEqual(bean.price_per_kg, "18.00")

    def test_null_price_stays_none(self) -> None:
        bean = Bean.model_validate({"bean_id": 1, "name": "Huila", "price_per_kg": None})
        self.assertIsNone(bean.price_per_kg)


if __name__ == "__main__":
    unittest.main()
