"""
Teacher review of logbook entries and delegate corrections.

Approving an entry marks every subtopic it covers as completed. This only
happens on the way into Approved; approving an already approved entry does
not touch the outline again, and neither a later "Needs Correction" verdict
nor a delegate edit ever un-completes a subtopic.
"""
import logging

from django.db import transaction
from django.utils import timezone

from courses.services.access_service import ensure_teacher_assigned
from courses.services.outline_service import set_subtopics_completed
from courses.services.schedule_service import course_ids_for_teacher
from logbook_project.exceptions import NotFoundError
from logbook_project.utils import parse_id

from .. import state_machine
from ..models import LogbookEntry
from .admission_service import resolve_covered_subtopics, validate_session_status

logger = logging.getLogger(__name__)

NOT_AUTHORIZED_TO_REVIEW = "Not authorized to review this entry"
NOT_OWNED = "Logbook entry not found or you do not own this entry."


def _entries():
    return (
        LogbookEntry.objects.select_related("course", "delegate", "reviewed_by")
        .prefetch_related("covered_subtopics")
    )


# ---------------------------------------------------------------------------
# Teacher side
# ---------------------------------------------------------------------------

def pending_entries_for_teacher(teacher):
    """Pending entries for every course the teacher is scheduled on, newest first."""
    course_ids = course_ids_for_teacher(teacher)
    if not course_ids:
        logger.info(f"Teacher {teacher.pk} has no schedule entries; no pending entries")
        return LogbookEntry.objects.none()
    return _entries().filter(
        course_id__in=course_ids,
        review_status=LogbookEntry.ReviewStatus.PENDING,
    ).order_by("-created_at", "-id")


def history_for_teacher(teacher):
    """Every entry, in any review state, for the teacher's courses."""
    course_ids = course_ids_for_teacher(teacher)
    if not course_ids:
        return LogbookEntry.objects.none()
    return _entries().filter(course_id__in=course_ids).order_by("-created_at", "-id")


def all_history():
    return _entries().order_by("-created_at", "-id")


def entry_for_review(entry_id, teacher):
    entry = _entries().filter(pk=parse_id(entry_id, "entryId")).first()
    if entry is None:
        raise NotFoundError("Logbook entry not found")
    ensure_teacher_assigned(teacher, entry.course_id, NOT_AUTHORIZED_TO_REVIEW)
    return entry


def review_entry(entry_id, teacher, review_status, review_remarks=""):
    """
    Record a teacher's verdict on an entry.

    Returns the updated entry. When the entry moves into Approved, its
    covered subtopics are bulk-completed in the same transaction.
    """
    entry_id = parse_id(entry_id, "entryId")
    with transaction.atomic():
        entry = (
            LogbookEntry.objects.select_for_update()
            .filter(pk=entry_id)
            .first()
        )
        if entry is None:
            raise NotFoundError("Logbook entry not found")
        ensure_teacher_assigned(teacher, entry.course_id, NOT_AUTHORIZED_TO_REVIEW)

        previous = entry.review_status
        target = state_machine.check_review_transition(previous, review_status)

        entry.review_status = target
        entry.review_remarks = review_remarks or ""
        entry.reviewed_by = teacher
        entry.review_timestamp = timezone.now()
        entry.save(update_fields=[
            "review_status", "review_remarks", "reviewed_by", "review_timestamp", "updated_at",
        ])
        logger.info(f"Logbook entry {entry.pk} review status {previous} -> {target} by teacher {teacher.pk}")

        if state_machine.is_approval_edge(previous, target):
            subtopic_ids = list(entry.covered_subtopics.values_list("id", flat=True))
            completed = set_subtopics_completed(subtopic_ids)
            logger.info(
                f"Approval of entry {entry.pk} completed {completed} of {len(subtopic_ids)} covered subtopics"
            )

    return _entries().get(pk=entry.pk)


# ---------------------------------------------------------------------------
# Delegate side
# ---------------------------------------------------------------------------

def entries_for_delegate(delegate):
    return _entries().filter(delegate=delegate).order_by("-created_at", "-id")


def corrections_for_delegate(delegate):
    """Entries sent back for correction, most recently reviewed first."""
    return _entries().filter(
        delegate=delegate,
        review_status=LogbookEntry.ReviewStatus.NEEDS_CORRECTION,
    ).order_by("-review_timestamp", "-id")


def entry_for_delegate(entry_id, delegate):
    entry = _entries().filter(pk=parse_id(entry_id, "entryId"), delegate=delegate).first()
    if entry is None:
        raise NotFoundError(NOT_OWNED)
    return entry


def delegate_edit_entry(entry_id, delegate, status=None, remarks=None, covered_subtopics=None):
    """
    Update the delegate's own entry and send it back for review.

    Fields left as ``None`` are unchanged; ``covered_subtopics=[]`` clears the
    list. The review fields are always cleared.
    """
    entry_id = parse_id(entry_id, "entryId")
    with transaction.atomic():
        entry = (
            LogbookEntry.objects.select_for_update()
            .filter(pk=entry_id, delegate=delegate)
            .first()
        )
        if entry is None:
            raise NotFoundError(NOT_OWNED)

        previous = entry.review_status
        if previous != LogbookEntry.ReviewStatus.NEEDS_CORRECTION:
            logger.warning(f"Delegate {delegate.pk} editing entry {entry.pk} which is {previous}")

        if status is not None:
            entry.status = validate_session_status(status)
        if remarks is not None:
            entry.remarks = remarks
        subtopics = None
        if covered_subtopics is not None:
            subtopics = resolve_covered_subtopics(entry.course_id, covered_subtopics)

        entry.review_status = state_machine.edit_target(previous)
        entry.review_remarks = ""
        entry.reviewed_by = None
        entry.review_timestamp = None
        entry.save()

        if subtopics is not None:
            entry.covered_subtopics.set(subtopics)

    logger.info(f"Delegate {delegate.pk} updated entry {entry.pk}; review reset from {previous}")
    return _entries().get(pk=entry.pk)
