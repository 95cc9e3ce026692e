"""로컬 저장 모듈."""

from pinned_showcase.storage.assets import AssetFetcher

__all__ = ["AssetFetcher"]
