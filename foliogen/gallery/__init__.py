"""Gallery page maintenance."""

from __future__ import annotations

from .updater import AnchorNotFoundError, GalleryUpdater, SpliceResult

__all__ = ["AnchorNotFoundError", "GalleryUpdater", "SpliceResult"]
