"""
Persisted Record Collections

A RecordCollection is the authoritative in-memory list of one record type,
mirrored to a key-value store under a single key.

GUARANTEES:
- Memory is the source of truth. Every mutation is applied in memory first,
  then the WHOLE collection is written back.
- A failed write is logged and otherwise ignored. Nothing is rolled back.
- Loading never fails. Missing, empty, undecodable or invalid data falls
  back to the seed records.
- Ids come from an IdSequence seeded above every loaded id, so they are
  unique, increasing and never reused.
"""

from typing import Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from shopledger.logs import get_logger
from shopledger.models.records import Vendor, VendorDraft
from shopledger.services.storage import KeyValueStoreInterface, StorageError
from shopledger.store.ids import Clock, IdSequence


logger = get_logger(__name__)

DraftT = TypeVar("DraftT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordCollection(Generic[DraftT, RecordT]):
    """
    One record type (sales, expenses, ...) persisted under one key.

    Subclasses only change how delete behaves.
    """

    def __init__(
        self,
        key: str,
        record_type: type[RecordT],
        kv_store: KeyValueStoreInterface,
        clock: Clock,
        seed: Sequence[RecordT] = (),
    ):
        """
        Args:
            key: Storage key for the whole collection (e.g. "app-sales")
            record_type: Model class of stored records (must have an int id)
            kv_store: Where the collection is persisted
            clock: Source of "now" for id generation
            seed: Records used when storage has nothing usable
        """
        self._key = key
        self._record_type = record_type
        self._kv_store = kv_store
        self._seed = tuple(seed)
        self._records: list[RecordT] = self._load()
        self._ids = IdSequence(clock)
        for record in self._records:
            self._ids.observe(record.id)

    @property
    def key(self) -> str:
        return self._key

    # -------------------------
    # Loading / persisting
    # -------------------------
    def _load(self) -> list[RecordT]:
        """Read the collection from storage, falling back to the seed."""
        try:
            raw = self._kv_store.get(self._key)
        except StorageError as e:
            return self._fall_back_to_seed("unreadable", error=str(e))

        if raw is None:
            return self._fall_back_to_seed("missing")
        if not isinstance(raw, list):
            return self._fall_back_to_seed(
                "not_a_list", found=type(raw).__name__
            )
        if not raw:
            return self._fall_back_to_seed("empty")

        try:
            records = [self._record_type.model_validate(item) for item in raw]
        except ValidationError as e:
            return self._fall_back_to_seed(
                "invalid_record", error_count=e.error_count(), error=str(e)
            )

        logger.debug("collection_loaded", key=self._key, count=len(records))
        return records

    def _fall_back_to_seed(self, reason: str, **context) -> list[RecordT]:
        logger.warning(
            "seed_fallback",
            key=self._key,
            reason=reason,
            seed_count=len(self._seed),
            **context,
        )
        return list(self._seed)

    def _persist(self) -> bool:
        """
        Write the whole collection. Best-effort.

        Returns True if the store accepted the write.
        """
        payload = [
            record.model_dump(mode="json", by_alias=True, exclude_none=True)
            for record in self._records
        ]
        try:
            saved = self._kv_store.set(self._key, payload)
        except StorageError as e:
            logger.error(
                "persist_failed",
                key=self._key,
                count=len(payload),
                error=str(e),
            )
            return False

        if not saved:
            logger.error(
                "persist_failed",
                key=self._key,
                count=len(payload),
                error="store rejected the write",
            )
        return saved

    # -------------------------
    # Read helpers
    # -------------------------
    def list_all(self) -> list[RecordT]:
        """All records in insertion order (a copy)."""
        return list(self._records)

    def get(self, record_id: int) -> Optional[RecordT]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, record_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    # -------------------------
    # Mutations
    # -------------------------
    def add(self, draft: DraftT) -> RecordT:
        """Store a new record and return it with its assigned id."""
        values = draft.model_dump()
        values["id"] = self._ids.next_id()
        record = self._record_type.model_validate(values)

        self._records.append(record)
        logger.info("record_added", key=self._key, record_id=record.id)
        self._persist()
        return record

    def update(self, record: RecordT) -> bool:
        """
        Replace the stored record that has the same id.

        An unknown id changes nothing. Returns True if a record was replaced.
        """
        index = self._index_of(record.id)
        if index is None:
            logger.info("update_skipped", key=self._key, record_id=record.id)
            return False

        self._records[index] = record
        logger.info("record_updated", key=self._key, record_id=record.id)
        self._persist()
        return True

    def delete(self, record_id: int) -> bool:
        """
        Remove a record for good.

        An unknown id changes nothing. Returns True if a record was removed.
        """
        index = self._index_of(record_id)
        if index is None:
            logger.info("delete_skipped", key=self._key, record_id=record_id)
            return False

        del self._records[index]
        logger.info("record_deleted", key=self._key, record_id=record_id)
        self._persist()
        return True


class VendorCollection(RecordCollection[VendorDraft, Vendor]):
    """
    Vendors are soft-deleted only.

    Sales keep pointing at a vendor forever, so deleting just marks it
    inactive and restore marks it active again. id, name and contact are
    never touched by either.
    """

    def delete(self, record_id: int) -> bool:
        return self._set_active(record_id, False)

    def restore(self, record_id: int) -> bool:
        return self._set_active(record_id, True)

    def list_active(self) -> list[Vendor]:
        return [vendor for vendor in self._records if vendor.is_active]

    def list_inactive(self) -> list[Vendor]:
        return [vendor for vendor in self._records if not vendor.is_active]

    def _set_active(self, record_id: int, is_active: bool) -> bool:
        index = self._index_of(record_id)
        if index is None:
            logger.info(
                "vendor_status_skipped",
                key=self._key,
                record_id=record_id,
                is_active=is_active,
            )
            return False

        self._records[index] = self._records[index].model_copy(
            update={"is_active": is_active}
        )
        logger.info(
            "vendor_status_changed",
            key=self._key,
            record_id=record_id,
            is_active=is_active,
        )
        self._persist()
        return True
