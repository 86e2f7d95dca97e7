"""Populate a repository from a record source through a record factory."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Generic, TypeVar

from .result import LoadResult

if TYPE_CHECKING:
    from orderdesk.domain.ports import RecordFactory, RecordSource, Repository


log = getLogger(__name__)

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


@dataclass(slots=True)
class IngestionPipeline(Generic[TEntity, TId]):
    """One-shot loader for a single entity type.

    Records the factory rejects are logged and dropped. A missing source is an
    empty load. Any other failure is logged and ends the pass; entities stored
    before the failure stay in the repository.
    """

    factory: RecordFactory[TEntity]
    repository: Repository[TEntity, TId]

    def load(self, source: RecordSource) -> LoadResult:
        result = LoadResult(source=source.location)
        try:
            for record in source.read():
                result.read += 1
                entity = self.factory.create(record)
                if entity is None:
                    log.info("Dropping record from %s: %s", source.location, record)
                    result.dropped += 1
                    continue
                self.repository.save(entity)
                result.stored += 1
        except FileNotFoundError:
            log.warning("Source not found: %s", source.location)
            result.missing = True
        except Exception as exc:
            log.exception("Failed to load %s", source.location)
            result.error = str(exc)

        log.debug(
            "Loaded %s: read=%s, stored=%s, dropped=%s",
            source.location,
            result.read,
            result.stored,
            result.dropped,
        )
        return result
