from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect, select

from pragmaticon.adapters.sqlalchemy import reset_all_tables, start_mappers
from pragmaticon.adapters.sqlalchemy.mappings import feature_table, phrase_table, unit_table
from pragmaticon.domain.model import Unit

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session


def test_start_mappers_is_idempotent() -> None:
    # First invocation happens in the sqlite_engine fixture; calling again should be harmless.
    start_mappers()
    start_mappers()


def test_feature_uniqueness_spans_field_and_value(sqlite_engine: Engine) -> None:
    constraints = inspect(sqlite_engine).get_unique_constraints("features")

    assert [sorted(c["column_names"]) for c in constraints] == [["field", "value"]]


def test_unit_foreign_keys(sqlite_engine: Engine) -> None:
    foreign_keys = inspect(sqlite_engine).get_foreign_keys("units")

    referred = {(fk["constrained_columns"][0], fk["referred_table"]) for fk in foreign_keys}
    assert referred == {
        ("phrase_id", "phrases"),
        ("intonation", "features"),
        ("style", "features"),
    }


def test_unit_mapping_defaults(sqlite_session: Session) -> None:
    sqlite_session.execute(phrase_table.insert().values(expr_ids="[1]"))
    sqlite_session.add(Unit(phrase_id=1))
    sqlite_session.commit()

    row = sqlite_session.execute(select(unit_table)).one()

    assert row.extrequired is False
    assert row.parts is False
    assert row.semantics == []
    assert row.intonation is None


def test_reset_all_tables_empties_registries(
    sqlite_engine: Engine, sqlite_session: Session
) -> None:
    sqlite_session.execute(feature_table.insert().values(field="gest", value="кивок"))
    sqlite_session.commit()
    sqlite_session.close()

    reset_all_tables(sqlite_engine)

    assert sqlite_session.execute(select(feature_table)).all() == []
