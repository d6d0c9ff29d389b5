import logging

from django.db.models import Count, Q

from ..models import Course, Module, Subtopic
from .schedule_service import courses_for_teacher

logger = logging.getLogger(__name__)

EMPTY_PROGRESS = {"completed": 0, "total": 0, "percentage": 0}


def aggregate_module_status(chapter_flags):
    """
    Compute a module status from the completion flags of its chapters.

    ``chapter_flags`` is an iterable with one entry per chapter, each entry an
    iterable of that chapter's ``Subtopic.completed`` values.

    - Completed: every chapter is complete (a chapter with no subtopics is
      vacuously complete, so is a module with no chapters)
    - Ongoing: not all complete, but at least one subtopic is completed
    - Pending: nothing under the module is completed
    """
    all_complete = True
    any_started = False
    for flags in chapter_flags:
        flags = list(flags)
        if not all(flags):
            all_complete = False
        if any(flags):
            any_started = True

    if all_complete:
        return Module.Status.COMPLETED
    if any_started:
        return Module.Status.ONGOING
    return Module.Status.PENDING


def module_status(chapters):
    """Status for model chapters; prefetch ``subtopics`` to avoid a query per chapter."""
    return aggregate_module_status(
        [subtopic.completed for subtopic in chapter.subtopics.all()]
        for chapter in chapters
    )


def progress_percentage(completed, total):
    """round(100 * completed / total) with halves rounded up, 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def calculate_progress(course_id):
    """
    Course-wide delivery progress, recomputed from the subtopics every call.

    Never raises: progress is advisory, so any read failure is logged and
    reported as zero progress.
    """
    try:
        counts = Subtopic.objects.filter(chapter__module__course_id=course_id).aggregate(
            total=Count("id"),
            completed=Count("id", filter=Q(completed=True)),
        )
    except Exception:
        logger.exception(f"Failed to calculate progress for course {course_id}")
        return dict(EMPTY_PROGRESS)

    total = counts.get("total") or 0
    if total == 0:
        return dict(EMPTY_PROGRESS)

    completed = counts.get("completed") or 0
    progress = {
        "completed": completed,
        "total": total,
        "percentage": progress_percentage(completed, total),
    }
    logger.debug(f"Progress for course {course_id}: {progress}")
    return progress


def _course_progress_row(course):
    return {
        "id": course.id,
        "title": course.title,
        "code": course.code,
        "description": course.description,
        "status": course.status,
        "level": course.level,
        "department": course.department.name if course.department_id else None,
        "progress": calculate_progress(course.id),
    }


def courses_with_progress(queryset=None):
    """
    Progress report rows for every course (or the given queryset), ordered by code.
    A failure on one course only zeroes that course's progress.
    """
    courses = queryset if queryset is not None else Course.objects.all()
    courses = courses.select_related("department").order_by("code")
    rows = [_course_progress_row(course) for course in courses]
    logger.info(f"Computed progress for {len(rows)} courses")
    return rows


def teacher_courses_with_progress(teacher):
    return courses_with_progress(courses_for_teacher(teacher))
