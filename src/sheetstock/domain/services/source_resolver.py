"""Source resolution across the sheet, scrap and leftover collections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..entities import Sheet, SourceItem
from ..exceptions import RecordNotFoundError, SourceNotFoundError
from ..value_objects import MaterialKind

if TYPE_CHECKING:
    from sheetstock.contracts import InventoryStore

__all__ = ["SourceResolver"]

logger = logging.getLogger(__name__)


class SourceResolver:
    """Looks up the concrete record a cut will be taken from."""

    def __init__(self, store: InventoryStore) -> None:
        self.store = store

    def resolve(self, kind: MaterialKind | str, source_id: str) -> SourceItem:
        """Resolve a source by kind and id.

        Args:
            kind: Which collection to search (sheet, scrap or leftover).
            source_id: Identifier of the record.

        Returns:
            A SourceItem view of the record.

        Raises:
            SourceNotFoundError: If no record has that id in the collection
                implied by ``kind``, if ``kind`` is not a cut source, or if
                the record is a sheet with no units left.
        """
        kind = MaterialKind(kind)
        if not kind.is_source:
            raise SourceNotFoundError(f"{kind.value} records cannot be cut from")

        try:
            record = self.store.get(kind, source_id)
        except RecordNotFoundError as e:
            logger.debug(f"No {kind.value} with id {source_id!r}")
            raise SourceNotFoundError(
                f"No {kind.value} with id {source_id!r}"
            ) from e

        if isinstance(record, Sheet) and record.is_depleted:
            logger.debug(f"Sheet {source_id!r} is depleted")
            raise SourceNotFoundError(f"Sheet {source_id!r} has no units left")

        return SourceItem.from_record(kind, record)

    def list_selectable(self, kind: MaterialKind | str) -> list[SourceItem]:
        """List the records of a kind that can currently be cut from."""
        kind = MaterialKind(kind)
        if not kind.is_source:
            return []
        return [
            SourceItem.from_record(kind, record)
            for record in self.store.list(kind)
            if not (isinstance(record, Sheet) and record.is_depleted)
        ]
