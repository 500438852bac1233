import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ReviewProgress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("ease_factor", models.FloatField(default=2.5)),
                ("repetitions", models.PositiveIntegerField(default=0)),
                ("interval", models.PositiveIntegerField(default=0)),
                ("last_reviewed", models.DateTimeField(blank=True, null=True)),
                ("next_review_date", models.DateTimeField(blank=True, null=True)),
                ("version", models.PositiveIntegerField(default=0)),
                ("card", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_progress", to="catalog.flashcard")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_progress", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [models.Index(fields=["user", "next_review_date"], name="progress_user_due_idx")],
                "constraints": [models.UniqueConstraint(fields=("user", "card"), name="unique_progress_user_card")],
            },
        ),
        migrations.CreateModel(
            name="ReviewLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quality", models.SmallIntegerField()),
                ("idempotency_key", models.CharField(blank=True, max_length=64, null=True)),
                ("reviewed_at", models.DateTimeField()),
                ("ease_factor", models.FloatField()),
                ("repetitions", models.PositiveIntegerField()),
                ("interval", models.PositiveIntegerField()),
                ("next_review_date", models.DateTimeField()),
                ("card", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_logs", to="catalog.flashcard")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="review_logs", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [models.Index(fields=["user", "card", "reviewed_at"], name="reviewlog_user_card_idx")],
                "constraints": [models.UniqueConstraint(fields=("user", "card", "idempotency_key"), name="unique_review_idempotency")],
            },
        ),
    ]
