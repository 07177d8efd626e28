"""Cover image storage backends."""

from .asset_store import AssetStore, LocalAssetStore

__all__ = ["AssetStore", "LocalAssetStore"]
