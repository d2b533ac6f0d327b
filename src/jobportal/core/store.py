"""Volatile in-memory entity store."""

from __future__ import annotations

import threading
from typing import Any, Generic, Iterable, Literal, Mapping, TypeVar

import structlog
from pydantic import BaseModel

from ..schemas import CandidateProfile, JobPosting
from ..seed import DEFAULT_JOBS, DEFAULT_PROFILES

ModelT = TypeVar("ModelT", bound=BaseModel)
IdPolicy = Literal["max_plus_one", "monotonic"]
Record = dict[str, Any]


class EntityCollection(Generic[ModelT]):
    """Ordered collection of validated records with store-assigned ids.

    With the ``max_plus_one`` policy a new id is ``max(existing) + 1`` (or 1
    when empty), so deleting the highest record frees its id for reuse. The
    ``monotonic`` policy never hands out an id at or below one it has seen.
    Callers only ever receive copies of the stored records.
    """

    def __init__(
        self,
        name: str,
        model: type[ModelT],
        *,
        id_policy: IdPolicy = "max_plus_one",
    ) -> None:
        if id_policy not in ("max_plus_one", "monotonic"):
            raise ValueError(f"Unknown id policy: {id_policy!r}")
        self._name = name
        self._model = model
        self._id_policy = id_policy
        self._records: list[ModelT] = []
        self._high_water = 0
        self._lock = threading.RLock()
        self._logger = structlog.get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def id_policy(self) -> IdPolicy:
        return self._id_policy

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def allocate_id(self) -> int:
        with self._lock:
            current_max = max((record.id for record in self._records), default=0)
            if self._id_policy == "monotonic":
                current_max = max(current_max, self._high_water)
            return current_max + 1

    def load(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Append records that already carry an id (seed data)."""
        with self._lock:
            for raw in records:
                record = self._model.model_validate(raw)
                if any(existing.id == record.id for existing in self._records):
                    raise ValueError(f"Duplicate {self._name} id {record.id}")
                self._records.append(record)
                self._high_water = max(self._high_water, record.id)

    def insert(self, payload: BaseModel | Mapping[str, Any]) -> Record:
        data = (
            payload.model_dump(mode="json", by_alias=True, exclude_none=True)
            if isinstance(payload, BaseModel)
            else dict(payload)
        )
        data.pop("id", None)
        with self._lock:
            new_id = self.allocate_id()
            record = self._model.model_validate({"id": new_id, **data})
            self._records.append(record)
            self._high_water = max(self._high_water, new_id)
        self._logger.debug("store.inserted", collection=self._name, id=new_id)
        return self._dump(record)

    def delete(self, record_id: int) -> Record | None:
        """Remove the first record with ``record_id``; ``None`` when absent."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    del self._records[index]
                    break
            else:
                return None
        self._logger.debug("store.deleted", collection=self._name, id=record_id)
        return self._dump(record)

    def get(self, record_id: int) -> Record | None:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return self._dump(record)
        return None

    def list(self) -> list[Record]:
        with self._lock:
            return [self._dump(record) for record in self._records]

    def ids(self) -> list[int]:
        with self._lock:
            return [record.id for record in self._records]

    @staticmethod
    def _dump(record: BaseModel) -> Record:
        return record.model_dump(mode="json", by_alias=True, exclude_none=True)


class EntityStore:
    """Owns the profile and job collections."""

    def __init__(
        self,
        *,
        profiles: EntityCollection[CandidateProfile] | None = None,
        jobs: EntityCollection[JobPosting] | None = None,
    ) -> None:
        if profiles is None:
            profiles = EntityCollection("profile", CandidateProfile)
        if jobs is None:
            jobs = EntityCollection("job", JobPosting)
        self.profiles = profiles
        self.jobs = jobs


def build_store(*, seed: str = "default", id_policy: IdPolicy = "max_plus_one") -> EntityStore:
    """Create a store, optionally preloaded with the bundled sample records."""
    store = EntityStore(
        profiles=EntityCollection("profile", CandidateProfile, id_policy=id_policy),
        jobs=EntityCollection("job", JobPosting, id_policy=id_policy),
    )
    if seed == "default":
        store.profiles.load(DEFAULT_PROFILES)
        store.jobs.load(DEFAULT_JOBS)
    elif seed != "empty":
        raise ValueError(f"Unknown seed: {seed!r}")
    return store


__all__ = ["EntityCollection", "EntityStore", "IdPolicy", "Record", "build_store"]
