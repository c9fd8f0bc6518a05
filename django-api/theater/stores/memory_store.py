"""In-memory PlayCatalog over a caller-supplied mapping."""

from collections.abc import Mapping

from theater.domain import Play
from theater.stores.interfaces import PlayCatalog


class InMemoryPlayCatalog(PlayCatalog):
    """Catalog backed by a mapping of play ID to Play.

    The mapping is referenced, not copied.
    """

    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._plays = plays

    def get_play(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)

    def list_plays(self) -> list[Play]:
        return [self._plays[key] for key in sorted(self._plays)]
