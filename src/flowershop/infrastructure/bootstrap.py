"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.service.replenishment import ReplenishmentPolicy
from flowershop.infrastructure.persistence.json_store import (
    JsonDataFile,
    JsonUnitOfWork,
)
from flowershop.infrastructure.settings import Settings


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings()


@lru_cache(maxsize=None)
def _data_file(path: Path) -> JsonDataFile:
    # One instance (and one lock) per store file for the whole process.
    return JsonDataFile(path)


def unit_of_work_factory(store_path: Path | None = None) -> UnitOfWorkFactory:
    data_file = _data_file((store_path or settings().store_path).resolve())
    return lambda: JsonUnitOfWork(data_file)


def replenishment_policy() -> ReplenishmentPolicy:
    return ReplenishmentPolicy.seeded(settings().replenishment_seed)
