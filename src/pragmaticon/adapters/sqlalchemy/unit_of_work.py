"""SQLAlchemy-backed unit of work for corpus ingestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from pragmaticon.adapters.sqlalchemy.mappings import (
    create_all_tables,
    reset_all_tables,
    start_mappers,
)
from pragmaticon.adapters.sqlalchemy.repositories import (
    SqlAlchemyRegistryStore,
    SqlAlchemyUnitRepository,
)
from pragmaticon.config import get_database_config
from pragmaticon.domain.ports import CorpusRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


class StartupError(RuntimeError):
    """Raised when a SQLAlchemy unit of work is used before initialisation."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None
    owns_engine: bool = False

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call pragmaticon.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    reset: bool = False,
    force: bool = False,
) -> Engine:
    """Initialise the SQLAlchemy engine, metadata, and session factory.

    With ``reset=True`` every table is dropped and recreated first, which is
    how a full corpus reload starts. An engine passed in by the caller stays
    the caller's: ``shutdown`` forgets it but does not dispose it.
    """

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    resolved_engine = engine or create_engine(
        database_uri or get_database_config().uri, future=True
    )
    start_mappers()
    if reset:
        reset_all_tables(resolved_engine)
    else:
        create_all_tables(resolved_engine)

    previous = _STATE.engine
    if previous is not None and _STATE.owns_engine and previous is not resolved_engine:
        previous.dispose()
    _STATE.engine = resolved_engine
    _STATE.owns_engine = engine is None
    return resolved_engine


def configured_engine() -> Engine | None:
    """Return the engine currently managed by the adapter (if any)."""

    return _STATE.engine


def is_started() -> bool:
    """Return whether the adapter has been initialised."""

    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the engine created by ``startup`` (if any) and reset state."""

    if _STATE.engine is not None and _STATE.owns_engine:
        _STATE.engine.dispose()
    _STATE.engine = None
    _STATE.owns_engine = False


class SqlAlchemyCorpusUnitOfWork:
    """Unit of work holding the single session used for a whole ingest run."""

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None
        self._repositories: CorpusRepositories | None = None

    def __enter__(self) -> SqlAlchemyCorpusUnitOfWork:
        self.session = self.session_factory()
        self._repositories = CorpusRepositories(
            registries=SqlAlchemyRegistryStore(self.session),
            units=SqlAlchemyUnitRepository(self.session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        self._repositories = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> CorpusRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


if TYPE_CHECKING:
    from pragmaticon.domain.ports import CorpusUnitOfWork

    _uow_check: CorpusUnitOfWork = SqlAlchemyCorpusUnitOfWork()
