"""In-memory store of loaded assets keyed by handle."""

from __future__ import annotations

from typing import ClassVar, TypeVar

from .asset import Asset, AssetError
from .ids import UUID

__all__ = ["AssetDatabase"]

A = TypeVar("A", bound=Asset)


class AssetDatabase:
    """Maps asset handles to loaded asset objects."""

    _instance: ClassVar[AssetDatabase | None] = None

    def __init__(self) -> None:
        self._assets: dict[UUID, Asset] = {}

    @classmethod
    def instance(cls) -> AssetDatabase:
        """Return the process-wide asset database."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add(self, asset: Asset) -> UUID:
        """Store an asset, giving it a fresh handle if it has none; return the handle."""
        if not asset.handle.is_valid():
            handle = UUID()
            while handle in self._assets:
                handle = UUID()
            asset.handle = handle
        elif asset.handle in self._assets:
            raise AssetError(f"Asset handle already exists: {asset.handle}")

        self._assets[asset.handle] = asset
        return asset.handle

    def get(self, handle: UUID, asset_class: type[A] = Asset) -> A | None:  # type: ignore[assignment]
        """Return the asset if it is an instance of asset_class, else None."""
        if not handle.is_valid():
            raise AssetError("Failed to get asset: invalid handle")
        try:
            asset = self._assets[handle]
        except KeyError:
            raise AssetError(f"Failed to get asset: {handle}") from None
        return asset if isinstance(asset, asset_class) else None

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, UUID) and handle.is_valid() and handle in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def clear(self) -> None:
        self._assets.clear()