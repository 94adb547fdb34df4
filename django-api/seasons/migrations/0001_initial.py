import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Season",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("host_id", models.CharField(max_length=128)),
                ("season_id", models.CharField(max_length=255)),
                ("year", models.PositiveIntegerField()),
                ("name", models.CharField(max_length=255)),
                ("color", models.CharField(max_length=7)),
                ("date_ranges", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["year", "season_id"],
                "indexes": [
                    models.Index(
                        fields=["host_id", "year"], name="season_host_year_idx"
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("host_id", "season_id"), name="unique_season_per_host"
                    )
                ],
            },
        ),
    ]
