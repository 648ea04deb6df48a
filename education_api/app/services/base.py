"""
Shared policy for the entity services.

Every entity follows the same steps on a mutating call: locate the
existing record (or fail with not-found), resolve the parent reference
when the entity has one, persist, return.  ``EntityService`` holds
those steps once; subclasses only declare their repository, their
mutable fields, the parent link and the child tables that block a
delete.

All methods open their own connection.  Mutations run inside
``core.db.transaction`` so that the parent check and the write are
committed together, and a failing batch item leaves nothing behind.
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from pydantic import BaseModel

from ..core.db import get_connection, transaction
from ..core.exceptions import ConflictError, InvalidArgumentError, ResourceNotFoundError
from ..repositories.base import BaseRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParentLink:
    """How an entity points at its parent.

    ``field`` is the attribute on the request payload holding the
    reference, ``column`` the foreign key column it is stored in.
    """

    field: str
    column: str
    repository: Type[BaseRepository]


@dataclass(frozen=True)
class ChildLink:
    """A table whose rows reference this entity and block its deletion."""

    repository: Type[BaseRepository]
    column: str
    plural: str


class EntityService:
    """Generic create/read/update/patch/delete policy for one entity."""

    repository: Type[BaseRepository]
    fields: Tuple[str, ...] = ()
    parent: Optional[ParentLink] = None
    children: Tuple[ChildLink, ...] = ()

    @classmethod
    def _label(cls) -> str:
        return cls.repository.label

    # Reads

    @classmethod
    async def list_all(cls) -> List[BaseModel]:
        logger.debug("Fetching all %s records", cls._label())
        conn = get_connection()
        try:
            return cls.repository(conn).find_all()
        finally:
            conn.close()

    @classmethod
    async def get_by_id(cls, record_id: int) -> BaseModel:
        logger.debug("Fetching %s by ID: %s", cls._label(), record_id)
        conn = get_connection()
        try:
            return cls._locate(conn, record_id)
        finally:
            conn.close()

    @classmethod
    async def _get_one_by(cls, column: str, value: Any) -> BaseModel:
        logger.debug("Fetching %s by %s: %s", cls._label(), column, value)
        conn = get_connection()
        try:
            record = cls.repository(conn).find_one_by(column, value)
        finally:
            conn.close()
        if record is None:
            logger.warning("%s not found with %s: %s", cls._label(), column, value)
            raise ResourceNotFoundError(f"{cls._label()} not found with {column}: {value}")
        return record

    @classmethod
    async def _list_by(cls, column: str, value: Any) -> List[BaseModel]:
        logger.debug("Fetching %s records by %s: %s", cls._label(), column, value)
        conn = get_connection()
        try:
            records = cls.repository(conn).find_many_by(column, value)
        finally:
            conn.close()
        if not records:
            logger.info("No %s records found for %s: %s", cls._label(), column, value)
        return records

    # Mutations

    @classmethod
    async def create(cls, data: BaseModel) -> BaseModel:
        logger.info("Saving single %s: %s", cls._label(), getattr(data, "name", None))
        with transaction() as conn:
            values = cls._scalar_values(data)
            values.update(
                cls._resolve_parent(
                    conn,
                    data,
                    missing=f"{cls._label()} must be associated with a valid {cls._parent_label()} ID.",
                    context=f"for {cls._label().lower()} {getattr(data, 'name', '')}",
                )
            )
            return cls.repository(conn).save(values)

    @classmethod
    async def create_batch(cls, items: Sequence[BaseModel]) -> List[BaseModel]:
        """Persist every item or none of them.

        All parent references are resolved before the first insert; the
        first failure aborts the transaction.
        """
        logger.info("Saving multiple %s records. Count: %s", cls._label(), len(items))
        with transaction() as conn:
            records = []
            for data in items:
                values = cls._scalar_values(data)
                values.update(
                    cls._resolve_parent(
                        conn,
                        data,
                        missing=(
                            f"Each {cls._label().lower()} in the list must be associated "
                            f"with a valid {cls._parent_label()} ID."
                        ),
                        context=f"for {cls._label().lower()} {getattr(data, 'name', '')}",
                    )
                )
                records.append(values)
            return cls.repository(conn).save_all(records)

    @classmethod
    async def update(cls, record_id: int, data: BaseModel) -> BaseModel:
        """Replace every mutable field, the parent reference included."""
        logger.info("Updating %s with ID: %s", cls._label(), record_id)
        with transaction() as conn:
            cls._locate(conn, record_id, action="update")
            values = cls._scalar_values(data)
            values.update(
                cls._resolve_parent(
                    conn,
                    data,
                    missing=(
                        f"{cls._label()} must be associated with a valid "
                        f"{cls._parent_label()} ID during update."
                    ),
                    context=f"for {cls._label().lower()} update.",
                )
            )
            return cls.repository(conn).update(record_id, values)

    @classmethod
    async def patch(cls, record_id: int, data: BaseModel) -> BaseModel:
        """Apply only the non-empty fields of ``data``.

        The parent association changes only when a reference with an id
        is supplied; otherwise it is left as stored.
        """
        logger.info("Patching %s with ID: %s", cls._label(), record_id)
        with transaction() as conn:
            cls._locate(conn, record_id, action="patch")
            values = {
                field: value
                for field, value in cls._scalar_values(data).items()
                if value is not None and value != ""
            }
            values.update(
                cls._resolve_parent(
                    conn,
                    data,
                    missing=None,
                    context=f"for {cls._label().lower()} patch.",
                )
            )
            return cls.repository(conn).update(record_id, values)

    @classmethod
    async def delete(cls, record_id: int) -> BaseModel:
        """Delete a record and return it as it was before removal."""
        logger.info("Deleting %s with ID: %s", cls._label(), record_id)
        with transaction() as conn:
            existing = cls._locate(conn, record_id, action="deletion")
            for child in cls.children:
                count = child.repository(conn).count_by(child.column, record_id)
                if count:
                    logger.warning(
                        "Refusing to delete %s %s: %s %s still reference it",
                        cls._label(), record_id, count, child.plural,
                    )
                    raise ConflictError(
                        f"{cls._label()} with ID: {record_id} cannot be deleted "
                        f"while {count} {child.plural} reference it"
                    )
            cls.repository(conn).delete(record_id)
        logger.info("Successfully deleted %s with ID: %s", cls._label(), record_id)
        return existing

    # Helpers

    @classmethod
    def _locate(cls, conn: sqlite3.Connection, record_id: int, action: Optional[str] = None) -> BaseModel:
        record = cls.repository(conn).find_by_id(record_id)
        if record is None:
            if action:
                logger.warning("%s not found for %s with ID: %s", cls._label(), action, record_id)
            else:
                logger.warning("%s not found with ID: %s", cls._label(), record_id)
            raise ResourceNotFoundError(f"{cls._label()} not found with ID: {record_id}")
        return record

    @classmethod
    def _scalar_values(cls, data: BaseModel) -> Dict[str, Any]:
        return {field: getattr(data, field) for field in cls.fields}

    @classmethod
    def _parent_label(cls) -> str:
        return cls.parent.repository.label if cls.parent else ""

    @classmethod
    def _resolve_parent(
        cls,
        conn: sqlite3.Connection,
        data: BaseModel,
        missing: Optional[str],
        context: str,
    ) -> Dict[str, Any]:
        """Turn the payload's parent reference into a foreign key value.

        Only the reference's id is trusted; the parent is looked up in
        its own table.  ``missing`` is the invalid-argument message used
        when the reference or its id is absent; ``None`` means the
        reference is optional and an absent one resolves to no change.
        """
        if cls.parent is None:
            return {}
        reference = getattr(data, cls.parent.field, None)
        parent_id = getattr(reference, "id", None)
        if parent_id is None:
            if missing is None:
                return {}
            raise InvalidArgumentError(missing)
        parent = cls.parent.repository(conn).find_by_id(parent_id)
        if parent is None:
            raise ResourceNotFoundError(
                f"{cls._parent_label()} not found with ID: {parent_id} {context}"
            )
        return {cls.parent.column: parent.id}
