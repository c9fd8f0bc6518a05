"""Django ORM implementation of the PlayCatalog."""

from theater import models
from theater.domain import Play, PlayId
from theater.stores.interfaces import PlayCatalog


def _to_domain(row: models.Play) -> Play:
    return Play(id=PlayId(row.id), name=row.name, type=row.type)


class DjangoPlayCatalog(PlayCatalog):
    """Database-backed play catalog using Django ORM."""

    def get_play(self, play_id: str) -> Play | None:
        row = models.Play.objects.filter(pk=play_id).first()
        if row is None:
            return None
        return _to_domain(row)

    def list_plays(self) -> list[Play]:
        return [_to_domain(row) for row in models.Play.objects.order_by("id")]
