import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="School",
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
                ("school_name", models.CharField(max_length=200)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Pre-Primary", "Pre-Primary"),
                            ("Lower Primary", "Lower Primary"),
                            ("Primary", "Primary"),
                        ],
                        max_length=50,
                    ),
                ),
                ("teacher_name", models.CharField(max_length=100)),
                ("phone_number", models.CharField(max_length=20)),
                ("total_items", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="Item",
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
                (
                    "item_type",
                    models.CharField(
                        choices=[
                            ("Dramatized Singing Games", "Dramatized Singing Games"),
                            ("Dramatized Verse (Solo)", "Dramatized Verse (Solo)"),
                            ("Dramatized Verse (Choral)", "Dramatized Verse (Choral)"),
                            ("Dramatized Solo Verse", "Dramatized Solo Verse"),
                            ("Film for Early Years", "Film for Early Years"),
                            ("Play", "Play"),
                            ("Cultural Creative Dance", "Cultural Creative Dance"),
                            ("Modern Creative Dance", "Modern Creative Dance"),
                            ("Narrative", "Narrative"),
                            ("Film", "Film"),
                            (
                                "Play in Kenyan Sign Language",
                                "Play in Kenyan Sign Language",
                            ),
                            (
                                "Dramatized Dance for Special Needs (Mentally Handicapped)",
                                "Dramatized Dance for Special Needs (Mentally Handicapped)",
                            ),
                            (
                                "Dramatized Dance for Special Needs (Physically Handicapped)",
                                "Dramatized Dance for Special Needs (Physically Handicapped)",
                            ),
                        ],
                        max_length=100,
                    ),
                ),
                (
                    "item_code",
                    models.CharField(blank=True, max_length=20, unique=True),
                ),
                (
                    "language",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("English", "English"),
                            ("French", "French"),
                            ("German", "German"),
                        ],
                        max_length=20,
                        null=True,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Registered", "Registered"),
                            ("Files Submitted", "Files Submitted"),
                            ("Under Review", "Under Review"),
                            ("Adjudicated", "Adjudicated"),
                        ],
                        default="Registered",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "school",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="program.school",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at", "item_code"],
                "indexes": [
                    models.Index(fields=["school"], name="program_ite_school__idx"),
                    models.Index(fields=["created_at"], name="program_ite_created_idx"),
                ],
            },
        ),
        migrations.AddConstraint(
            model_name="school",
            constraint=models.UniqueConstraint(
                fields=("school_name", "category"),
                name="unique_school_per_category",
            ),
        ),
    ]
