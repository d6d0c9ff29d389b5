"""
Tests for the delegate's daily timetable and the teacher's course details.
"""
import datetime

import pytest

from courses.models import Course, Module, TimetableEntry
from courses.services.outline_service import course_details_for_teacher
from courses.services.schedule_service import timetable_for_today
from logbook_project.exceptions import NotAuthorizedError, ValidationError

pytestmark = pytest.mark.django_db

# A Monday.
MONDAY_MORNING = datetime.datetime(2026, 10, 19, 8, 0, tzinfo=datetime.timezone.utc)


def _session(course, teacher, hall, day, hour):
    start = MONDAY_MORNING.replace(hour=hour)
    return TimetableEntry.objects.create(
        course=course,
        teacher=teacher,
        hall=hall,
        day=day,
        time_slot=f"{hour:02d}:00-{hour + 2:02d}:00",
        start_time=start,
        end_time=start + datetime.timedelta(hours=2),
    )


class TestTimetableForToday:
    """Today's sessions for a delegate"""

    def test_filters_by_day_department_and_level(
        self, delegate, course, other_course, teacher, hall
    ):
        senior = Course.objects.create(
            title="Compilers", code="CSC1000", department=course.department, level=400, description="Senior"
        )
        late = _session(course, teacher, hall, "MON", 11)
        early = _session(course, teacher, hall, "MON", 9)
        _session(course, teacher, hall, "TUE", 9)
        _session(other_course, teacher, hall, "MON", 9)
        _session(senior, teacher, hall, "MON", 9)

        entries = timetable_for_today(delegate, now=MONDAY_MORNING)

        assert [e.id for e in entries] == [early.id, late.id]

    def test_nothing_scheduled(self, delegate, course, teacher, hall):
        _session(course, teacher, hall, "TUE", 9)

        assert list(timetable_for_today(delegate, now=MONDAY_MORNING)) == []

    def test_delegate_without_department(self, delegate):
        delegate.department = None
        delegate.save()

        with pytest.raises(ValidationError):
            timetable_for_today(delegate, now=MONDAY_MORNING)


class TestCourseDetailsForTeacher:
    """Course plus its modules for a scheduled teacher"""

    def test_course_and_ordered_modules(self, teacher, course, schedule_entry):
        second = Module.objects.create(course=course, title="Second", description="d", order=2)
        first = Module.objects.create(course=course, title="First", description="d", order=1)

        found, modules = course_details_for_teacher(teacher, course.id)

        assert found.id == course.id
        assert [m.id for m in modules] == [first.id, second.id]

    def test_unscheduled_teacher(self, other_teacher, course, schedule_entry):
        with pytest.raises(NotAuthorizedError):
            course_details_for_teacher(other_teacher, course.id)
