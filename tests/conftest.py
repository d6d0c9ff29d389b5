"""
Course Logbook - Test Configuration and Fixtures
"""
import datetime

import pytest
from django.utils import timezone
from faker import Faker
from rest_framework.test import APIClient

from courses.models import Chapter, Course, Department, Hall, Module, ScheduleEntry, Subtopic, TimetableEntry
from user_managment.models import User

fake = Faker()


def _make_user(role, department=None, **extra):
    return User.objects.create_user(
        email=fake.unique.email(),
        first_name=fake.first_name(),
        last_name=fake.last_name(),
        password="testpassword123",
        role=role,
        department=department,
        **extra,
    )


@pytest.fixture
def department(db):
    return Department.objects.create(name=fake.unique.company(), code="CS")


@pytest.fixture
def other_department(db):
    return Department.objects.create(name=fake.unique.company(), code="EE")


@pytest.fixture
def hall(db):
    return Hall.objects.create(name=f"Hall {fake.unique.random_int(min=1, max=9999)}")


@pytest.fixture
def course(department):
    return Course.objects.create(
        title=fake.catch_phrase(),
        code=f"CSC{fake.unique.random_int(min=100, max=999)}",
        department=department,
        level=300,
        description=fake.sentence(),
    )


@pytest.fixture
def other_course(other_department):
    return Course.objects.create(
        title=fake.catch_phrase(),
        code=f"EEE{fake.unique.random_int(min=100, max=999)}",
        department=other_department,
        level=300,
        description=fake.sentence(),
    )


@pytest.fixture
def teacher(db):
    return _make_user(User.Role.TEACHER)


@pytest.fixture
def other_teacher(db):
    return _make_user(User.Role.TEACHER)


@pytest.fixture
def delegate(department):
    return _make_user(User.Role.DELEGATE, department=department, level=300)


@pytest.fixture
def other_delegate(department):
    return _make_user(User.Role.DELEGATE, department=department, level=300)


@pytest.fixture
def admin_user(db):
    return _make_user(User.Role.ADMIN, is_staff=True)


@pytest.fixture
def schedule_entry(course, teacher, hall):
    """Assigns ``teacher`` to ``course`` on Monday 09:00-11:00."""
    return ScheduleEntry.objects.create(
        semester="1st",
        course=course,
        day="MON",
        time_slot="09:00-11:00",
        hall=hall,
        teacher=teacher,
    )


@pytest.fixture
def timetable_entry(course, teacher, hall):
    # Ended half an hour ago.
    start = timezone.now().replace(microsecond=0) - datetime.timedelta(minutes=150)
    return TimetableEntry.objects.create(
        course=course,
        teacher=teacher,
        hall=hall,
        day="MON",
        time_slot="09:00-11:00",
        start_time=start,
        end_time=start + datetime.timedelta(hours=2),
    )


@pytest.fixture
def make_outline():
    """
    Build an outline from a nested list of completion flags:
    ``make_outline(course, [[[True, False], []]])`` creates one module with two
    chapters, the first holding two subtopics (one completed), the second empty.
    Returns the created modules.
    """
    def _make(course, shape):
        modules = []
        for m_index, chapters in enumerate(shape):
            module = Module.objects.create(
                course=course, title=f"Module {m_index + 1}", description=fake.sentence(), order=m_index + 1
            )
            for c_index, flags in enumerate(chapters):
                chapter = Chapter.objects.create(module=module, title=f"Chapter {c_index + 1}", order=c_index + 1)
                for s_index, completed in enumerate(flags):
                    Subtopic.objects.create(
                        chapter=chapter, title=f"Subtopic {s_index + 1}", order=s_index + 1, completed=completed
                    )
            modules.append(module)
        return modules
    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for(api_client):
    """An API client authenticated as the given user."""
    def _client(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _client
