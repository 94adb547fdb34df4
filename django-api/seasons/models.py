"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models


class Season(models.Model):
    """Persistence model for a host's season in one year."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    host_id = models.CharField(max_length=128)
    season_id = models.CharField(max_length=255)
    year = models.PositiveIntegerField()
    name = models.CharField(max_length=255)
    color = models.CharField(max_length=7)
    date_ranges = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["year", "season_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["host_id", "season_id"], name="unique_season_per_host"
            ),
        ]
        indexes = [
            models.Index(fields=["host_id", "year"], name="season_host_year_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.host_id} - {self.season_id}"
