"""
Tests for the course outline store: CRUD, toggling and bulk completion.
"""
import pytest

from courses.models import Chapter, Module, Subtopic
from courses.services import outline_service
from courses.services.access_service import ensure_outline_access, is_teacher_assigned
from courses.services.progress_service import calculate_progress
from logbook_project.exceptions import (
    CourseNotFoundError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

pytestmark = pytest.mark.django_db


class TestCreate:
    """Creating modules, chapters and subtopics"""

    def test_create_module(self, course):
        module = outline_service.create_module(course.id, title=" Intro ", description="Basics", order="1")

        assert module.title == "Intro"
        assert module.order == 1
        assert module.status == Module.Status.PENDING
        assert module.course_id == course.id

    def test_create_module_unknown_course(self):
        with pytest.raises(CourseNotFoundError):
            outline_service.create_module(999999, title="Intro", description="Basics", order=1)

    def test_create_module_requires_description(self, course):
        with pytest.raises(ValidationError) as exc_info:
            outline_service.create_module(course.id, title="Intro", description="  ", order=1)
        assert exc_info.value.details["field"] == "description"

    @pytest.mark.parametrize("order", [None, "", "first", -1])
    def test_create_module_rejects_bad_order(self, course, order):
        with pytest.raises(ValidationError):
            outline_service.create_module(course.id, title="Intro", description="Basics", order=order)

    def test_create_chapter_unknown_module(self):
        with pytest.raises(NotFoundError):
            outline_service.create_chapter(999999, title="Chapter", order=1)

    def test_create_chapter_requires_title(self, course, make_outline):
        module, = make_outline(course, [[]])
        with pytest.raises(ValidationError):
            outline_service.create_chapter(module.id, title="", order=1)

    def test_create_subtopic_starts_incomplete(self, course, make_outline):
        module, = make_outline(course, [[[]]])
        chapter = module.chapters.get()

        subtopic = outline_service.create_subtopic(chapter.id, title="Loops", order=3)

        assert subtopic.completed is False
        assert subtopic.chapter_id == chapter.id

    def test_create_subtopic_unknown_chapter(self):
        with pytest.raises(NotFoundError):
            outline_service.create_subtopic(999999, title="Loops", order=1)


class TestGetOutline:
    """Reading the nested outline"""

    def test_empty_course(self, course):
        assert outline_service.get_outline(course.id) == []

    def test_every_level_sorted_by_order(self, course):
        late = Module.objects.create(course=course, title="Late", description="d", order=5)
        early = Module.objects.create(course=course, title="Early", description="d", order=1)
        second = Chapter.objects.create(module=early, title="Second", order=2)
        first = Chapter.objects.create(module=early, title="First", order=1)
        Subtopic.objects.create(chapter=first, title="b", order=2)
        Subtopic.objects.create(chapter=first, title="a", order=1)

        outline = outline_service.get_outline(course.id)

        assert [m.id for m in outline] == [early.id, late.id]
        chapters = list(outline[0].chapters.all())
        assert [c.id for c in chapters] == [first.id, second.id]
        assert [s.title for s in chapters[0].subtopics.all()] == ["a", "b"]

    def test_owning_course_id(self, course, make_outline):
        module, = make_outline(course, [[[False]]])
        chapter = module.chapters.get()
        subtopic = chapter.subtopics.get()

        assert outline_service.owning_course_id("module", module.id) == course.id
        assert outline_service.owning_course_id("chapter", chapter.id) == course.id
        assert outline_service.owning_course_id("subtopic", subtopic.id) == course.id

    def test_owning_course_id_unknown(self):
        with pytest.raises(NotFoundError):
            outline_service.owning_course_id("chapter", 999999)


class TestUpdateDelete:
    """Editing and deleting outline items"""

    def test_update_module_partial(self, course, make_outline):
        module, = make_outline(course, [[]])

        updated = outline_service.update_module(module.id, title="Renamed")

        assert updated.title == "Renamed"
        assert updated.order == module.order

    def test_update_subtopic_does_not_touch_completion(self, course, make_outline):
        module, = make_outline(course, [[[True]]])
        subtopic = Subtopic.objects.get(chapter__module=module)

        outline_service.update_subtopic(subtopic.id, title="New title", order=7)

        subtopic.refresh_from_db()
        assert subtopic.completed is True
        assert subtopic.order == 7

    def test_update_unknown_chapter(self):
        with pytest.raises(NotFoundError):
            outline_service.update_chapter(999999, title="x")

    def test_delete_module_cascades(self, course, make_outline):
        module, = make_outline(course, [[[False, True], [False]]])

        outline_service.delete_module(module.id)

        assert not Module.objects.filter(pk=module.id).exists()
        assert not Chapter.objects.filter(module_id=module.id).exists()
        assert not Subtopic.objects.filter(chapter__module_id=module.id).exists()

    def test_delete_chapter_cascades_and_keeps_module_status(self, course, make_outline):
        module, = make_outline(course, [[[True], [False]]])
        outline_service.refresh_module_status(module.id)
        pending_chapter = module.chapters.get(title="Chapter 2")

        outline_service.delete_chapter(pending_chapter.id)

        module.refresh_from_db()
        assert module.chapters.count() == 1
        assert not Subtopic.objects.filter(chapter_id=pending_chapter.id).exists()
        # Cached status is not recomputed after a delete.
        assert module.status == Module.Status.ONGOING

    def test_delete_unknown_subtopic(self):
        with pytest.raises(NotFoundError):
            outline_service.delete_subtopic(999999)


class TestToggle:
    """Interactive completion toggling"""

    def test_one_of_four_makes_module_ongoing(self, course, make_outline):
        module, = make_outline(course, [[[False, False, False, False]]])
        subtopic = Subtopic.objects.filter(chapter__module=module).first()

        outline_service.toggle_subtopic(subtopic.id)

        module.refresh_from_db()
        assert module.status == Module.Status.ONGOING
        assert calculate_progress(course.id) == {"completed": 1, "total": 4, "percentage": 25}

    def test_toggle_twice_restores_state(self, course, make_outline):
        module, = make_outline(course, [[[False, True]]])
        outline_service.refresh_module_status(module.id)
        module.refresh_from_db()
        status_before = module.status
        subtopic = Subtopic.objects.get(chapter__module=module, completed=False)

        outline_service.toggle_subtopic(subtopic.id)
        outline_service.toggle_subtopic(subtopic.id)

        subtopic.refresh_from_db()
        module.refresh_from_db()
        assert subtopic.completed is False
        assert module.status == status_before

    def test_completing_last_subtopic_completes_module(self, course, make_outline):
        module, = make_outline(course, [[[True, False], []]])
        subtopic = Subtopic.objects.get(chapter__module=module, completed=False)

        result = outline_service.toggle_subtopic(subtopic.id)

        module.refresh_from_db()
        assert result.completed is True
        assert module.status == Module.Status.COMPLETED

    def test_untoggle_back_to_pending(self, course, make_outline):
        module, = make_outline(course, [[[False]]])
        subtopic = Subtopic.objects.get(chapter__module=module)

        outline_service.toggle_subtopic(subtopic.id)
        outline_service.toggle_subtopic(subtopic.id)

        module.refresh_from_db()
        assert module.status == Module.Status.PENDING

    def test_unknown_subtopic(self):
        with pytest.raises(NotFoundError):
            outline_service.toggle_subtopic(999999)


class TestSetSubtopicsCompleted:
    """Bulk completion used on approval"""

    def test_marks_and_counts(self, course, make_outline):
        make_outline(course, [[[False, False, True]]])
        ids = list(Subtopic.objects.values_list("id", flat=True))

        assert outline_service.set_subtopics_completed(ids) == 2
        assert Subtopic.objects.filter(completed=False).count() == 0

    def test_idempotent(self, course, make_outline):
        make_outline(course, [[[False, False]]])
        ids = list(Subtopic.objects.values_list("id", flat=True))

        outline_service.set_subtopics_completed(ids)

        assert outline_service.set_subtopics_completed(ids) == 0

    def test_empty_input(self):
        assert outline_service.set_subtopics_completed([]) == 0
        assert outline_service.set_subtopics_completed(None) == 0

    def test_does_not_refresh_module_status(self, course, make_outline):
        module, = make_outline(course, [[[False, False]]])
        ids = list(Subtopic.objects.values_list("id", flat=True))

        outline_service.set_subtopics_completed(ids)

        module.refresh_from_db()
        assert module.status == Module.Status.PENDING
        assert calculate_progress(course.id)["percentage"] == 100


class TestOutlineAccess:
    """Who may read and edit an outline"""

    def test_scheduled_teacher_is_assigned(self, teacher, course, schedule_entry):
        assert is_teacher_assigned(teacher, course.id) is True
        ensure_outline_access(teacher, course.id)

    def test_unscheduled_teacher_is_rejected(self, other_teacher, course, schedule_entry):
        with pytest.raises(NotAuthorizedError):
            ensure_outline_access(other_teacher, course.id)

    def test_delegate_is_never_assigned(self, delegate, course, schedule_entry):
        assert is_teacher_assigned(delegate, course.id) is False

    def test_admin_reaches_any_course(self, admin_user, course):
        ensure_outline_access(admin_user, course.id)

    def test_admin_unknown_course(self, admin_user):
        with pytest.raises(CourseNotFoundError):
            ensure_outline_access(admin_user, 999999)

    def test_delegate_outline_own_department(self, delegate, course, make_outline):
        make_outline(course, [[[False]]])
        assert len(outline_service.outline_for_delegate(delegate, course.id)) == 1

    def test_delegate_outline_other_department(self, delegate, other_course):
        with pytest.raises(NotAuthorizedError):
            outline_service.outline_for_delegate(delegate, other_course.id)
