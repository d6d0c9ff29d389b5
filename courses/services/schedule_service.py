import logging

from django.utils import timezone

from ..choices import DAY_NAME_TO_ABBREVIATION, WEEKDAY_ABBREVIATIONS
from ..models import Course, ScheduleEntry, TimetableEntry
from logbook_project.exceptions import MissingFieldError, ValidationError

logger = logging.getLogger(__name__)


def courses_for_teacher(teacher):
    """Distinct courses the teacher is assigned to through the schedule."""
    return Course.objects.filter(schedule_entries__teacher=teacher).distinct()


def course_ids_for_teacher(teacher):
    return set(
        ScheduleEntry.objects.filter(teacher=teacher).values_list("course_id", flat=True)
    )


def courses_for_slot(delegate, day_name, time_slot):
    """
    Courses of the delegate's department scheduled on ``day_name`` (e.g. "Monday")
    in ``time_slot`` (e.g. "09:00-11:00").
    """
    if not day_name or not time_slot:
        raise MissingFieldError("Day and time query parameters are required.")
    if not delegate.department_id:
        raise ValidationError("User department not found.")

    day = DAY_NAME_TO_ABBREVIATION.get(day_name)
    if not day:
        raise ValidationError(
            "Invalid day name provided.", details={"field": "day", "value": day_name}
        )

    courses = (
        Course.objects.filter(
            department_id=delegate.department_id,
            schedule_entries__day=day,
            schedule_entries__time_slot=time_slot,
        )
        .distinct()
        .order_by("code")
    )
    logger.info(
        f"Delegate {delegate.pk}: {courses.count()} courses for {day} {time_slot} "
        f"in department {delegate.department_id}"
    )
    return courses


def timetable_for_today(delegate, now=None):
    """
    Today's timetabled sessions for the courses of the delegate's department
    and level, earliest first. The ids returned here are what
    ``submit_timetabled_entry`` expects.
    """
    if not delegate.department_id:
        raise ValidationError("User department not found.")

    now = timezone.localtime(now or timezone.now())
    day = WEEKDAY_ABBREVIATIONS[now.weekday()]

    entries = (
        TimetableEntry.objects.select_related("course", "teacher", "hall")
        .filter(
            day=day,
            course__department_id=delegate.department_id,
            course__level=delegate.level,
        )
        .order_by("start_time", "id")
    )
    logger.info(
        f"Delegate {delegate.pk}: {entries.count()} timetable entries on {day} "
        f"for department {delegate.department_id}, level {delegate.level}"
    )
    return entries
