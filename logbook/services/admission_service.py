"""
Admission control for new logbook entries.

Two entry points, each with its own rule:

- ``submit_slot_entry``: keyed by (course, day of week, time slot); rejects a
  second entry for the same delegate and slot.
- ``submit_timetabled_entry``: keyed by a dated timetable entry; only open
  from the session start until ``LOGBOOK_GRACE_MINUTES`` after its end.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from courses.choices import DAY_ABBREVIATION_TO_NAME
from courses.models import Course, Subtopic, TimetableEntry
from logbook_project.exceptions import (
    CourseNotFoundError,
    DuplicateEntryError,
    MissingFieldError,
    NotFoundError,
    ValidationError,
    WindowClosedError,
)
from logbook_project.utils import parse_id, parse_id_list

from ..models import LogbookEntry

logger = logging.getLogger(__name__)

SESSION_STATUSES = set(LogbookEntry.SessionStatus.values)
DAYS_OF_WEEK = set(LogbookEntry.DayOfWeek.values)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _require(**fields):
    missing = [name for name, value in fields.items() if value in (None, "")]
    if missing:
        raise MissingFieldError(
            f"Missing required fields ({', '.join(missing)}).",
            details={"missing": missing},
        )


def _get_course(course_id):
    course = Course.objects.filter(pk=parse_id(course_id, "courseId")).first()
    if course is None:
        raise CourseNotFoundError()
    return course


def validate_session_status(status):
    if not isinstance(status, str) or status not in SESSION_STATUSES:
        raise ValidationError(
            "Invalid session status.",
            details={"field": "status", "allowed": sorted(SESSION_STATUSES)},
        )
    return status


def validate_day_of_week(day_of_week):
    if not isinstance(day_of_week, str) or day_of_week not in DAYS_OF_WEEK:
        raise ValidationError(
            "Invalid day of week.",
            details={"field": "day_of_week", "value": day_of_week},
        )
    return day_of_week


def resolve_covered_subtopics(course_id, subtopic_ids):
    """
    Subtopics of the course's outline matching ``subtopic_ids``.
    Any id that does not resolve within that outline is a validation error.
    """
    ids = set(parse_id_list(subtopic_ids, "coveredSubtopics") or [])
    if not ids:
        return []
    subtopics = list(
        Subtopic.objects.filter(pk__in=ids, chapter__module__course_id=course_id)
    )
    unknown = ids - {subtopic.pk for subtopic in subtopics}
    if unknown:
        raise ValidationError(
            "Some covered subtopics do not belong to this course.",
            details={"field": "covered_subtopics", "invalid_ids": sorted(unknown)},
        )
    return subtopics


def _create_entry(delegate, course, subtopics, **fields):
    with transaction.atomic():
        entry = LogbookEntry.objects.create(
            course=course,
            delegate=delegate,
            review_status=LogbookEntry.ReviewStatus.PENDING,
            **fields,
        )
        if subtopics:
            entry.covered_subtopics.set(subtopics)
    return entry


# ---------------------------------------------------------------------------
# Slot-based submission
# ---------------------------------------------------------------------------

def slot_taken(delegate, course, day_of_week, time_slot):
    return LogbookEntry.objects.filter(
        delegate=delegate,
        course=course,
        day_of_week=day_of_week,
        time_slot=time_slot,
    ).exists()


def _log_duplicate(delegate, course, day_of_week, time_slot):
    logger.warning(
        f"Duplicate entry attempt for delegate {delegate.pk}, course {course.pk}, "
        f"slot {day_of_week} {time_slot}"
    )


def submit_slot_entry(delegate, course_id, day_of_week, time_slot, status,
                      remarks="", covered_subtopics=None):
    _require(courseId=course_id, dayOfWeek=day_of_week, timeSlot=time_slot, status=status)
    course = _get_course(course_id)
    validate_day_of_week(day_of_week)
    validate_session_status(status)

    if slot_taken(delegate, course, day_of_week, time_slot):
        _log_duplicate(delegate, course, day_of_week, time_slot)
        raise DuplicateEntryError()

    subtopics = resolve_covered_subtopics(course.pk, covered_subtopics)
    try:
        entry = _create_entry(
            delegate,
            course,
            subtopics,
            day_of_week=day_of_week,
            time_slot=time_slot,
            status=status,
            remarks=remarks or "",
        )
    except IntegrityError:
        # A concurrent submission for the same slot won the insert.
        _log_duplicate(delegate, course, day_of_week, time_slot)
        raise DuplicateEntryError()
    logger.info(
        f"Logbook entry {entry.pk} submitted by delegate {delegate.pk} for {course.code} "
        f"({day_of_week} {time_slot}, {len(subtopics)} subtopics)"
    )
    return entry


# ---------------------------------------------------------------------------
# Timetabled (time-boxed) submission
# ---------------------------------------------------------------------------

def submission_window(timetable_entry, grace_minutes=None):
    """(allowed_start, allowed_end) for a timetable entry, grace included."""
    if grace_minutes is None:
        grace_minutes = settings.LOGBOOK_GRACE_MINUTES
    return (
        timetable_entry.start_time,
        timetable_entry.end_time + timedelta(minutes=grace_minutes),
    )


def submit_timetabled_entry(delegate, timetable_entry_id, status, remarks="",
                            covered_subtopics=None, course_id=None, now=None):
    """
    Submit against a dated timetable entry. Day and slot are taken from the
    timetable entry; ``course_id`` defaults to its course and must match it.
    """
    _require(timetableEntryId=timetable_entry_id, status=status)
    timetable_entry = (
        TimetableEntry.objects.select_related("course")
        .filter(pk=parse_id(timetable_entry_id, "timetableEntryId"))
        .first()
    )
    if timetable_entry is None:
        raise NotFoundError("Timetable entry not found")

    course = _get_course(course_id if course_id not in (None, "") else timetable_entry.course_id)
    if course.pk != timetable_entry.course_id:
        raise ValidationError(
            "Course does not match the timetable entry.",
            details={"field": "courseId"},
        )
    validate_session_status(status)

    now = now or timezone.now()
    allowed_start, allowed_end = submission_window(timetable_entry)
    if not (allowed_start <= now <= allowed_end):
        logger.info(
            f"Window closed for timetable entry {timetable_entry.pk}: "
            f"now={now.isoformat()} window=[{allowed_start.isoformat()}, {allowed_end.isoformat()}]"
        )
        raise WindowClosedError(details={
            "current_time": now.isoformat(),
            "allowed_start": allowed_start.isoformat(),
            "allowed_end": allowed_end.isoformat(),
        })

    subtopics = resolve_covered_subtopics(course.pk, covered_subtopics)
    entry = _create_entry(
        delegate,
        course,
        subtopics,
        timetable_entry=timetable_entry,
        day_of_week=DAY_ABBREVIATION_TO_NAME[timetable_entry.day],
        time_slot=timetable_entry.time_slot,
        status=status,
        remarks=remarks or "",
    )
    logger.info(
        f"Logbook entry {entry.pk} submitted by delegate {delegate.pk} "
        f"for timetable entry {timetable_entry.pk}"
    )
    return entry
