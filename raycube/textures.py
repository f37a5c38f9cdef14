"""Texture registry indexed by numeric id or by map character."""

from __future__ import annotations

from typing import Optional

from raycube.images import Image

DEFAULT_MAX_TEXTURES = 64


class TextureAtlas:
    """Holds textures by id and textures linked to a map character."""

    def __init__(self, max_textures: int = DEFAULT_MAX_TEXTURES) -> None:
        self.max_textures = max_textures
        self._atlas: dict[int, Image] = {}
        self.links: list[tuple[str, Optional[Image]]] = []
        self.loaded = 0

    def add_asset(self, texture_id: int, image: Image) -> None:
        """Store ``image`` under ``texture_id``; ids past the capacity are ignored."""
        if 0 <= texture_id < self.max_textures:
            self._atlas[texture_id] = image
            self.loaded += 1

    def add_link(self, link: str, image: Optional[Image]) -> None:
        """Link ``image`` to the map character ``link`` while room remains."""
        if len(self.links) + 1 < self.max_textures:
            self.links.append((link, image))

    def get(self, texture_id: int) -> Optional[Image]:
        """Texture stored under ``texture_id``, or ``None`` when none was added."""
        if not 0 <= texture_id < self.max_textures:
            raise IndexError(f"texture id {texture_id} out of range")
        return self._atlas.get(texture_id)

    def get_linked(self, link: str) -> Optional[Image]:
        """First texture linked to ``link``, or ``None``."""
        for char, image in self.links:
            if image is None:
                break
            if char == link:
                return image
        return None