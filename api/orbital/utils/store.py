"""
In-Memory Entity Store & Request Dependency

Each record type gets its own collection with a private id counter and lock.
Ids start at 1 and are never reused. Callers always receive deep copies, so
mutating a returned record never changes stored state; the only way to
change a stored record is `update`.
"""
from copy import deepcopy
from dataclasses import fields, replace
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar
from uuid import uuid4
import logging
import threading

from fastapi import Request

from orbital.errors import ConflictError, InvalidArgumentError
from orbital.models import Accommodation, Booking, Destination, Package, Testimonial, User

logger = logging.getLogger(__name__)

T = TypeVar("T")

MODELS = (User, Destination, Package, Accommodation, Testimonial, Booking)


class _Collection(Generic[T]):
    """Records of one type keyed by id, in insertion order"""

    def __init__(self, model: Type[T]):
        self.model = model
        self.field_names = frozenset(f.name for f in fields(model))
        self.records: Dict[int, T] = {}
        self.next_id = 1
        self.lock = threading.Lock()

    def check_field(self, name: str):
        if name not in self.field_names:
            raise InvalidArgumentError(
                name, f"{self.model.__name__} has no field '{name}'"
            )


class EntityStore:
    """
    Process-local storage for every record type.

    Constructed once per application (see `init_store`) and handed to
    services explicitly; there is no module-level instance.
    """

    def __init__(self, models: Iterable[type] = MODELS):
        # Distinguishes this store from earlier ones, e.g. in shared cache keys
        self.generation = uuid4().hex
        self._collections: Dict[type, _Collection] = {
            model: _Collection(model) for model in models
        }

    def _collection(self, model: Type[T]) -> _Collection[T]:
        try:
            return self._collections[model]
        except KeyError:
            raise InvalidArgumentError("model", f"Unknown record type {model.__name__}")

    def _insert(self, collection: _Collection[T], values: Dict[str, Any]) -> T:
        # Caller holds collection.lock
        record = collection.model(id=collection.next_id, **values)
        collection.records[record.id] = record
        collection.next_id += 1
        logger.debug(f"Stored {record!r}")
        return deepcopy(record)

    def create(self, model: Type[T], **values: Any) -> T:
        """Assign the next id, store the record and return a copy of it"""
        collection = self._collection(model)
        with collection.lock:
            return self._insert(collection, deepcopy(values))

    def create_unique(self, model: Type[T], unique_fields: Iterable[str], **values: Any) -> T:
        """
        Like `create`, but first rejects the record if any of `unique_fields`
        matches an existing record. Check and insert happen under one lock.
        """
        collection = self._collection(model)
        unique_fields = list(unique_fields)
        for name in unique_fields:
            collection.check_field(name)

        with collection.lock:
            for name in unique_fields:
                value = values.get(name)
                if any(getattr(r, name) == value for r in collection.records.values()):
                    raise ConflictError(
                        name, f"{model.__name__} with {name} '{value}' already exists"
                    )
            return self._insert(collection, deepcopy(values))

    def get_by_id(self, model: Type[T], record_id: int) -> Optional[T]:
        collection = self._collection(model)
        record = collection.records.get(record_id)
        return deepcopy(record) if record is not None else None

    def list(self, model: Type[T]) -> List[T]:
        collection = self._collection(model)
        with collection.lock:
            return [deepcopy(r) for r in collection.records.values()]

    def find_by_field(self, model: Type[T], field_name: str, value: Any) -> List[T]:
        """Linear scan for records whose `field_name` equals `value`"""
        collection = self._collection(model)
        collection.check_field(field_name)
        with collection.lock:
            return [
                deepcopy(r) for r in collection.records.values()
                if getattr(r, field_name) == value
            ]

    def update(
        self,
        model: Type[T],
        record_id: int,
        precondition: Optional[Callable[[T], None]] = None,
        **changes: Any,
    ) -> Optional[T]:
        """
        Atomically replace fields of a stored record; None if it does not exist.

        `precondition` is called with the current record while the lock is
        held and may raise to abort the update.
        """
        collection = self._collection(model)
        for name in changes:
            if name == "id":
                raise InvalidArgumentError("id", "Record ids cannot be changed")
            collection.check_field(name)

        with collection.lock:
            current = collection.records.get(record_id)
            if current is None:
                return None
            if precondition is not None:
                precondition(deepcopy(current))
            updated = replace(current, **deepcopy(changes))
            collection.records[record_id] = updated
            return deepcopy(updated)

    def count(self, model: Type[T]) -> int:
        return len(self._collection(model).records)

    def counts(self) -> Dict[str, int]:
        """Record count per type, keyed by type name"""
        return {model.__name__: len(c.records) for model, c in self._collections.items()}


def init_store() -> EntityStore:
    """Create an empty store for a new application instance"""
    logger.info("Initializing in-memory entity store...")
    store = EntityStore()
    logger.info("Entity store ready")
    return store


def close_store(store: EntityStore):
    """Log what is discarded at shutdown"""
    logger.info(f"Discarding entity store: {store.counts()}")


def get_store(request: Request) -> EntityStore:
    """
    Dependency that provides the application's entity store
    Usage: store: EntityStore = Depends(get_store)
    """
    return request.app.state.store
