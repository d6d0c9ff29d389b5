from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0002_teacher_assignments"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="LogbookEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "day_of_week",
                    models.CharField(
                        choices=[
                            ("Monday", "Monday"),
                            ("Tuesday", "Tuesday"),
                            ("Wednesday", "Wednesday"),
                            ("Thursday", "Thursday"),
                            ("Friday", "Friday"),
                            ("Saturday", "Saturday"),
                            ("Sunday", "Sunday"),
                        ],
                        max_length=9,
                    ),
                ),
                ("time_slot", models.CharField(max_length=11)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Lecture Held", "Lecture Held"),
                            ("Cancelled", "Cancelled"),
                            ("Postponed", "Postponed"),
                            ("Other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                ("remarks", models.TextField(blank=True, default="")),
                (
                    "review_status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Approved", "Approved"),
                            ("Needs Correction", "Needs Correction"),
                        ],
                        default="Pending",
                        max_length=20,
                    ),
                ),
                ("review_remarks", models.TextField(blank=True, default="")),
                ("review_timestamp", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=models.CASCADE, related_name="logbook_entries", to="courses.course"
                    ),
                ),
                (
                    "covered_subtopics",
                    models.ManyToManyField(blank=True, related_name="logbook_entries", to="courses.subtopic"),
                ),
                (
                    "delegate",
                    models.ForeignKey(
                        on_delete=models.CASCADE,
                        related_name="logbook_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "reviewed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=models.SET_NULL,
                        related_name="reviewed_logbook_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "timetable_entry",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=models.SET_NULL,
                        related_name="logbook_entries",
                        to="courses.timetableentry",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Logbook entries",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(
                        fields=["delegate", "course", "day_of_week", "time_slot"], name="logbook_delegate_slot_idx"
                    ),
                    models.Index(fields=["course", "review_status"], name="logbook_course_review_idx"),
                ],
            },
        ),
    ]
