from dataclasses import dataclass

from src.bookshelf.core.services import DbSessionService
from src.bookshelf.core.storage import LocalAssetStore


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    asset_store: LocalAssetStore
