from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("pets", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ErrorLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(max_length=32)),
                ("message", models.CharField(blank=True, max_length=256)),
                ("payload", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
        ),
        migrations.CreateModel(
            name="SymptomCheck",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("symptoms", models.TextField()),
                ("possible_causes", models.JSONField(blank=True, default=list)),
                ("severity_category", models.CharField(
                    choices=[
                        ("Emergency", "Emergency"),
                        ("Urgent", "Urgent"),
                        ("Non-Urgent", "Non-Urgent"),
                        ("Monitor", "Monitor"),
                    ],
                    max_length=16,
                )),
                ("recommendations", models.JSONField(blank=True, default=list)),
                ("when_to_visit_vet", models.TextField(blank=True)),
                ("disclaimer", models.TextField(blank=True)),
                ("media_count", models.PositiveSmallIntegerField(default=0)),
                ("model_trace", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("pet", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="symptom_checks",
                    to="pets.pet",
                )),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["pet", "created_at"], name="triage_pet_created_idx")],
            },
        ),
    ]
