"""Per-invocation state shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from shopadmin.domain.repository.shop_repository import ShopRepository
from shopadmin.infrastructure import bootstrap
from shopadmin.infrastructure.config import Settings


@dataclass
class AppContext:
    """Holds the settings and a lazily built repository.

    Tests hand in a ready-made ``repository`` through ``CliRunner.invoke(obj=...)``.
    """

    settings: Settings
    repository: ShopRepository | None = None

    def shop_repository(self) -> ShopRepository:
        if self.repository is None:
            self.repository = bootstrap.shop_repository(self.settings)
        return self.repository

    def close(self) -> None:
        close = getattr(self.repository, "close", None)
        if close is not None:
            close()
