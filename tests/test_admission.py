"""
Tests for logbook submission: slot-based and timetabled paths.
"""
import datetime
from unittest import mock

import pytest
from django.db import IntegrityError, transaction

from courses.models import Subtopic
from logbook.models import LogbookEntry
from logbook.services.admission_service import submit_slot_entry, submit_timetabled_entry
from logbook_project.exceptions import (
    CourseNotFoundError,
    DuplicateEntryError,
    MissingFieldError,
    NotFoundError,
    ValidationError,
    WindowClosedError,
)

pytestmark = pytest.mark.django_db


def _slot_entry(delegate, course, **overrides):
    fields = {
        "course_id": course.id,
        "day_of_week": "Monday",
        "time_slot": "09:00-11:00",
        "status": "Lecture Held",
    }
    fields.update(overrides)
    return submit_slot_entry(delegate, **fields)


class TestSlotSubmission:
    """Slot-based admission"""

    def test_creates_pending_entry(self, delegate, course, make_outline):
        make_outline(course, [[[False, False]]])
        ids = list(Subtopic.objects.values_list("id", flat=True))

        entry = _slot_entry(delegate, course, remarks="Covered loops", covered_subtopics=ids)

        assert entry.review_status == LogbookEntry.ReviewStatus.PENDING
        assert entry.delegate_id == delegate.id
        assert entry.timetable_entry_id is None
        assert sorted(entry.covered_subtopics.values_list("id", flat=True)) == sorted(ids)

    def test_submission_does_not_complete_subtopics(self, delegate, course, make_outline):
        make_outline(course, [[[False]]])
        ids = list(Subtopic.objects.values_list("id", flat=True))

        _slot_entry(delegate, course, covered_subtopics=ids)

        assert not Subtopic.objects.filter(completed=True).exists()

    def test_duplicate_slot_rejected(self, delegate, course):
        _slot_entry(delegate, course)

        with pytest.raises(DuplicateEntryError):
            _slot_entry(delegate, course, status="Cancelled")

        assert LogbookEntry.objects.count() == 1

    def test_same_slot_other_delegate_allowed(self, delegate, other_delegate, course):
        _slot_entry(delegate, course)
        _slot_entry(other_delegate, course)

        assert LogbookEntry.objects.count() == 2

    def test_same_course_other_slot_allowed(self, delegate, course):
        _slot_entry(delegate, course)
        _slot_entry(delegate, course, time_slot="11:00-13:00")

        assert LogbookEntry.objects.count() == 2

    @pytest.mark.parametrize("missing", ["course_id", "day_of_week", "time_slot", "status"])
    def test_missing_fields(self, delegate, course, missing):
        with pytest.raises(MissingFieldError):
            _slot_entry(delegate, course, **{missing: None})

    def test_unknown_course(self, delegate, course):
        with pytest.raises(CourseNotFoundError):
            _slot_entry(delegate, course, course_id=999999)

    def test_invalid_status(self, delegate, course):
        with pytest.raises(ValidationError):
            _slot_entry(delegate, course, status="Skipped")

    def test_invalid_day(self, delegate, course):
        with pytest.raises(ValidationError):
            _slot_entry(delegate, course, day_of_week="Funday")

    def test_unknown_subtopic(self, delegate, course):
        with pytest.raises(ValidationError) as exc_info:
            _slot_entry(delegate, course, covered_subtopics=[999999])
        assert exc_info.value.details["invalid_ids"] == [999999]
        assert LogbookEntry.objects.count() == 0

    def test_string_ids_accepted(self, delegate, course, make_outline):
        make_outline(course, [[[False, False]]])
        ids = list(Subtopic.objects.values_list("id", flat=True))

        entry = _slot_entry(
            delegate, course, course_id=str(course.id), covered_subtopics=[str(pk) for pk in ids]
        )

        assert sorted(entry.covered_subtopics.values_list("id", flat=True)) == sorted(ids)

    def test_non_numeric_subtopic_id(self, delegate, course):
        with pytest.raises(ValidationError):
            _slot_entry(delegate, course, covered_subtopics=["abc"])

    def test_database_rejects_second_slot_entry(self, delegate, course):
        first = _slot_entry(delegate, course)

        with pytest.raises(IntegrityError), transaction.atomic():
            LogbookEntry.objects.create(
                course=course,
                delegate=delegate,
                day_of_week=first.day_of_week,
                time_slot=first.time_slot,
                status="Cancelled",
            )

        assert LogbookEntry.objects.count() == 1

    def test_concurrent_insert_reported_as_duplicate(self, delegate, course):
        _slot_entry(delegate, course)

        # The other request passed the existence check before this row landed.
        with mock.patch("logbook.services.admission_service.slot_taken", return_value=False):
            with pytest.raises(DuplicateEntryError):
                _slot_entry(delegate, course, status="Cancelled")

        assert LogbookEntry.objects.count() == 1

    def test_timetabled_entries_do_not_block_each_other(self, delegate, timetable_entry):
        submit_timetabled_entry(delegate, timetable_entry.id, status="Lecture Held", now=timetable_entry.start_time)
        submit_timetabled_entry(delegate, timetable_entry.id, status="Postponed", now=timetable_entry.start_time)

        assert LogbookEntry.objects.filter(timetable_entry=timetable_entry).count() == 2

    def test_subtopic_of_another_course(self, delegate, course, other_course, make_outline):
        make_outline(other_course, [[[False]]])
        foreign = Subtopic.objects.get()

        with pytest.raises(ValidationError):
            _slot_entry(delegate, course, covered_subtopics=[foreign.id])


class TestTimetabledSubmission:
    """Time-boxed admission against a timetable entry"""

    @pytest.fixture(autouse=True)
    def _grace(self, settings):
        settings.LOGBOOK_GRACE_MINUTES = 60

    def test_accepted_inside_grace(self, delegate, timetable_entry):
        now = timetable_entry.end_time + datetime.timedelta(minutes=59)

        entry = submit_timetabled_entry(delegate, timetable_entry.id, status="Lecture Held", now=now)

        assert entry.timetable_entry_id == timetable_entry.id
        assert entry.course_id == timetable_entry.course_id
        assert entry.day_of_week == "Monday"
        assert entry.time_slot == timetable_entry.time_slot

    def test_accepted_at_start(self, delegate, timetable_entry):
        entry = submit_timetabled_entry(
            delegate, timetable_entry.id, status="Lecture Held", now=timetable_entry.start_time
        )
        assert entry.pk is not None

    def test_rejected_after_grace(self, delegate, timetable_entry):
        now = timetable_entry.end_time + datetime.timedelta(minutes=61)

        with pytest.raises(WindowClosedError) as exc_info:
            submit_timetabled_entry(delegate, timetable_entry.id, status="Lecture Held", now=now)

        details = exc_info.value.details
        assert details["current_time"] == now.isoformat()
        assert details["allowed_start"] == timetable_entry.start_time.isoformat()
        assert details["allowed_end"] == (
            timetable_entry.end_time + datetime.timedelta(minutes=60)
        ).isoformat()
        assert LogbookEntry.objects.count() == 0

    def test_rejected_before_start(self, delegate, timetable_entry):
        now = timetable_entry.start_time - datetime.timedelta(minutes=1)

        with pytest.raises(WindowClosedError):
            submit_timetabled_entry(delegate, timetable_entry.id, status="Lecture Held", now=now)

    def test_grace_is_configurable(self, settings, delegate, timetable_entry):
        settings.LOGBOOK_GRACE_MINUTES = 0
        now = timetable_entry.end_time + datetime.timedelta(minutes=1)

        with pytest.raises(WindowClosedError):
            submit_timetabled_entry(delegate, timetable_entry.id, status="Lecture Held", now=now)

    def test_unknown_timetable_entry(self, delegate):
        with pytest.raises(NotFoundError):
            submit_timetabled_entry(delegate, 999999, status="Lecture Held")

    def test_course_must_match(self, delegate, timetable_entry, other_course):
        with pytest.raises(ValidationError):
            submit_timetabled_entry(
                delegate,
                timetable_entry.id,
                status="Lecture Held",
                course_id=other_course.id,
                now=timetable_entry.start_time,
            )

    def test_missing_status(self, delegate, timetable_entry):
        with pytest.raises(MissingFieldError):
            submit_timetabled_entry(delegate, timetable_entry.id, status="")
