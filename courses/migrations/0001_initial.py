from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Department",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150, unique=True)),
                ("code", models.CharField(blank=True, max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name_plural": "Departments",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Hall",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120, unique=True)),
            ],
            options={
                "verbose_name_plural": "Halls",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("code", models.CharField(max_length=30, unique=True)),
                (
                    "level",
                    models.PositiveSmallIntegerField(
                        choices=[(200, "200"), (300, "300"), (400, "400"), (500, "500"), (600, "600")]
                    ),
                ),
                ("description", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[("Active", "Active"), ("Inactive", "Inactive")], default="Active", max_length=10
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "department",
                    models.ForeignKey(
                        on_delete=models.CASCADE, related_name="courses", to="courses.department"
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Courses",
                "ordering": ["code"],
                "indexes": [models.Index(fields=["department", "level"], name="course_dept_level_idx")],
            },
        ),
        migrations.CreateModel(
            name="ScheduleEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("semester", models.CharField(choices=[("1st", "1st"), ("2nd", "2nd")], max_length=5)),
                (
                    "day",
                    models.CharField(
                        choices=[
                            ("MON", "Monday"),
                            ("TUE", "Tuesday"),
                            ("WED", "Wednesday"),
                            ("THU", "Thursday"),
                            ("FRI", "Friday"),
                            ("SAT", "Saturday"),
                        ],
                        max_length=3,
                    ),
                ),
                (
                    "time_slot",
                    models.CharField(
                        choices=[
                            ("07:00-09:00", "07:00-09:00"),
                            ("09:00-11:00", "09:00-11:00"),
                            ("11:00-13:00", "11:00-13:00"),
                            ("13:00-15:00", "13:00-15:00"),
                            ("15:00-17:00", "15:00-17:00"),
                            ("17:00-19:00", "17:00-19:00"),
                        ],
                        max_length=11,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=models.CASCADE, related_name="schedule_entries", to="courses.course"
                    ),
                ),
                (
                    "hall",
                    models.ForeignKey(
                        on_delete=models.PROTECT, related_name="schedule_entries", to="courses.hall"
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Schedule entries",
                "ordering": ["day", "time_slot"],
                "indexes": [models.Index(fields=["day", "time_slot"], name="schedule_day_slot_idx")],
            },
        ),
        migrations.CreateModel(
            name="TimetableEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "day",
                    models.CharField(
                        choices=[
                            ("MON", "Monday"),
                            ("TUE", "Tuesday"),
                            ("WED", "Wednesday"),
                            ("THU", "Thursday"),
                            ("FRI", "Friday"),
                            ("SAT", "Saturday"),
                            ("SUN", "Sunday"),
                        ],
                        max_length=3,
                    ),
                ),
                ("time_slot", models.CharField(max_length=11)),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField()),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=models.CASCADE, related_name="timetable_entries", to="courses.course"
                    ),
                ),
                (
                    "hall",
                    models.ForeignKey(
                        on_delete=models.PROTECT, related_name="timetable_entries", to="courses.hall"
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Timetable entries",
                "ordering": ["start_time"],
            },
        ),
        migrations.CreateModel(
            name="Module",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("order", models.PositiveIntegerField()),
                (
                    "status",
                    models.CharField(
                        choices=[("Pending", "Pending"), ("Ongoing", "Ongoing"), ("Completed", "Completed")],
                        default="Pending",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "course",
                    models.ForeignKey(on_delete=models.CASCADE, related_name="modules", to="courses.course"),
                ),
            ],
            options={
                "verbose_name_plural": "Modules",
                "ordering": ["order", "id"],
                "indexes": [models.Index(fields=["course", "order"], name="module_course_order_idx")],
            },
        ),
        migrations.CreateModel(
            name="Chapter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, default="")),
                ("order", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "module",
                    models.ForeignKey(on_delete=models.CASCADE, related_name="chapters", to="courses.module"),
                ),
            ],
            options={
                "verbose_name_plural": "Chapters",
                "ordering": ["order", "id"],
                "indexes": [models.Index(fields=["module", "order"], name="chapter_module_order_idx")],
            },
        ),
        migrations.CreateModel(
            name="Subtopic",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, default="")),
                ("order", models.PositiveIntegerField()),
                ("completed", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "chapter",
                    models.ForeignKey(on_delete=models.CASCADE, related_name="subtopics", to="courses.chapter"),
                ),
            ],
            options={
                "verbose_name_plural": "Subtopics",
                "ordering": ["order", "id"],
                "indexes": [models.Index(fields=["chapter", "order"], name="subtopic_chapter_order_idx")],
            },
        ),
    ]
