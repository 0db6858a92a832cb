import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Dream",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(default="anonymous", max_length=255)),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField()),
                ("is_anonymous", models.BooleanField(default=False)),
                ("sentiment_score", models.FloatField(blank=True, null=True)),
                (
                    "sentiment_label",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("very_negative", "Very negative"),
                            ("negative", "Negative"),
                            ("neutral", "Neutral"),
                            ("positive", "Positive"),
                            ("very_positive", "Very positive"),
                        ],
                        max_length=32,
                        null=True,
                    ),
                ),
                ("emotions", models.JSONField(blank=True, default=list)),
                ("categories", models.JSONField(blank=True, default=list)),
                ("symbolism", models.JSONField(blank=True, default=list)),
                ("mental_health_indicators", models.JSONField(blank=True, default=list)),
                ("global_trends_correlation", models.JSONField(blank=True, default=list)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["created_at"], name="dream_created_at_idx"),
                    models.Index(fields=["sentiment_label"], name="dream_sentiment_label_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="GlobalTrend",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("event_name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("event_type", models.CharField(max_length=64)),
                ("sentiment_impact", models.FloatField(default=0)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
