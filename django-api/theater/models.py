"""Django ORM models (persistence layer).

Only the play catalog is stored. Domain logic lives in domain/.
"""

from django.db import models


class Play(models.Model):
    """Persistence model for catalog plays."""

    id = models.CharField(primary_key=True, max_length=100)
    name = models.CharField(max_length=255)
    type = models.CharField(max_length=50)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
