from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("courses", "0002_teacher_assignments"),
        ("logbook", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="logbookentry",
            name="timetable_entry",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=models.PROTECT,
                related_name="logbook_entries",
                to="courses.timetableentry",
            ),
        ),
        migrations.AddConstraint(
            model_name="logbookentry",
            constraint=models.UniqueConstraint(
                condition=models.Q(timetable_entry__isnull=True),
                fields=("delegate", "course", "day_of_week", "time_slot"),
                name="logbook_unique_slot_entry",
            ),
        ),
    ]
