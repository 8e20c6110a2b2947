from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from pragmaticon.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCorpusUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from pragmaticon.domain.model import Unit

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def _memory_engine() -> Engine:
    return create_engine("sqlite+pysqlite:///:memory:", future=True, poolclass=StaticPool)


def test_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyCorpusUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = _memory_engine()
    engine_b = _memory_engine()

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b
    assert is_started()


def test_startup_creates_every_table() -> None:
    engine = startup(engine=_memory_engine())

    tables = set(inspect(engine).get_table_names())

    assert tables == {"tokens", "exprs", "phrases", "features", "translations", "units"}


def test_reset_startup_drops_previous_data() -> None:
    engine = _memory_engine()
    startup(engine=engine)
    with SqlAlchemyCorpusUnitOfWork() as uow:
        uow.repositories.registries.insert_token("ну")

    startup(engine=engine, reset=True, force=True)

    with SqlAlchemyCorpusUnitOfWork() as uow:
        assert uow.repositories.registries.insert_token("ну") == 1


def test_unit_of_work_persists_units(started_engine: Engine) -> None:
    assert configured_engine() is started_engine

    with SqlAlchemyCorpusUnitOfWork() as uow:
        registries = uow.repositories.registries
        expression = registries.insert_expression([registries.insert_token("ну")])
        phrase = registries.insert_phrase([expression])
        uow.repositories.units.add(Unit(phrase_id=phrase))
        uow.commit()

    with SqlAlchemyCorpusUnitOfWork() as uow:
        assert uow.repositories.units.count() == 1


def test_repositories_unavailable_outside_context(started_engine: Engine) -> None:
    uow = SqlAlchemyCorpusUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.repositories


def test_shutdown_leaves_caller_engine_usable() -> None:
    engine = _memory_engine()
    startup(engine=engine)

    shutdown()

    assert not is_started()
    assert "tokens" in inspect(engine).get_table_names()
