from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("pets", "0001_initial"),
        ("triage", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SharedRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("share_token", models.CharField(editable=False, max_length=64, unique=True)),
                ("care_notes", models.TextField(blank=True)),
                ("vet_name", models.CharField(blank=True, max_length=120)),
                ("vet_email", models.EmailField(blank=True, max_length=254)),
                ("view_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("expires_at", models.DateTimeField()),
                ("checks", models.ManyToManyField(blank=True, related_name="shared_records", to="triage.symptomcheck")),
                ("owner", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="shared_records",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("pet", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="shared_records",
                    to="pets.pet",
                )),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["owner", "created_at"], name="records_owner_created_idx"),
                    models.Index(fields=["expires_at"], name="records_expires_idx"),
                ],
            },
        ),
    ]
