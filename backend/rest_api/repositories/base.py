"""
Entity Repository implementation.
One parameterized SQL statement per operation against the entity table.

Reads outer-join the display targets so a row survives a dangling foreign
key. Writes commit through safe_commit; store faults are re-raised as-is
(SQLAlchemyError) and translated by the business layer.
"""

from typing import TYPE_CHECKING, Any, Callable, Sequence

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.engine import CursorResult, RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.infrastructure.db import safe_commit
from rest_api.models.base import Base

if TYPE_CHECKING:
    from rest_api.services.crud.descriptor import DisplayJoin


class EntityRepository:
    """
    Data access for one entity table.

    Usage:
        repo = EntityRepository(Branch, db, joins=BRANCH.display_joins)
        rows = repo.find_all_active()
        new_id = repo.insert({"name": "HQ", "company_id": 1, "active": True})
    """

    def __init__(
        self,
        model: type[Base],
        db: Session,
        joins: Sequence["DisplayJoin"] = (),
    ):
        self._db = db
        self._table = model.__table__
        self._joins = tuple(joins)

    @property
    def table_name(self) -> str:
        return self._table.name

    def _base_query(self) -> Select:
        """Entity columns plus one labelled column per display join."""
        table = self._table
        columns: list[Any] = [table]
        source = table

        for join in self._joins:
            target = join.target.__table__.alias()
            source = source.outerjoin(target, table.c[join.foreign_key] == target.c.id)
            columns.append(target.c[join.column].label(join.label))

        return select(*columns).select_from(source)

    # =========================================================================
    # Reads
    # =========================================================================

    def find_all_active(self) -> Sequence[RowMapping]:
        """All rows with active = true, ordered by id."""
        query = (
            self._base_query()
            .where(self._table.c.active.is_(True))
            .order_by(self._table.c.id)
        )
        return self._db.execute(query).mappings().all()

    def find_by_id(self, entity_id: int) -> RowMapping | None:
        """Row by primary key, regardless of its active flag."""
        query = self._base_query().where(self._table.c.id == entity_id)
        return self._db.execute(query).mappings().first()

    # =========================================================================
    # Writes
    # =========================================================================

    def insert(self, values: dict[str, Any]) -> int:
        """Insert one row and return the generated id."""
        return self._execute(
            insert(self._table).values(**values),
            lambda result: result.inserted_primary_key[0],
        )

    def update(self, entity_id: int, values: dict[str, Any]) -> bool:
        """Overwrite the row's columns. True when a row was affected."""
        statement = (
            update(self._table)
            .where(self._table.c.id == entity_id)
            .values(**values)
        )
        return self._execute(statement, _affected)

    def deactivate(self, entity_id: int) -> bool:
        """Set active = false on a currently active row."""
        statement = (
            update(self._table)
            .where(self._table.c.id == entity_id, self._table.c.active.is_(True))
            .values(active=False)
        )
        return self._execute(statement, _affected)

    def delete(self, entity_id: int) -> bool:
        """Physically remove the row."""
        statement = delete(self._table).where(self._table.c.id == entity_id)
        return self._execute(statement, _affected)

    def _execute(self, statement: Any, read: Callable[[CursorResult], Any]) -> Any:
        """
        Run a write statement, read its outcome and commit.

        The outcome is read before the commit, while the cursor is still open.
        """
        try:
            outcome = read(self._db.execute(statement))
        except SQLAlchemyError:
            self._db.rollback()
            raise
        safe_commit(self._db)
        return outcome


def _affected(result: CursorResult) -> bool:
    return result.rowcount > 0
