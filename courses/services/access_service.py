import logging

from ..models import Course, ScheduleEntry
from logbook_project.exceptions import CourseNotFoundError, NotAuthorizedError

logger = logging.getLogger(__name__)


def is_teacher_assigned(teacher, course_id):
    """A teacher may act on a course once any schedule entry assigns them to it."""
    if teacher is None or not teacher.is_authenticated or not teacher.is_teacher:
        return False
    return ScheduleEntry.objects.filter(teacher=teacher, course_id=course_id).exists()


def ensure_teacher_assigned(teacher, course_id, message="You are not assigned to teach this course."):
    if not is_teacher_assigned(teacher, course_id):
        logger.warning(f"Teacher {getattr(teacher, 'pk', None)} NOT authorized for course {course_id}")
        raise NotAuthorizedError(message)


def ensure_outline_access(user, course_id):
    """Admins manage every outline; teachers only the outlines of their courses."""
    if user.is_admin_role:
        if not Course.objects.filter(pk=course_id).exists():
            raise CourseNotFoundError()
        return
    ensure_teacher_assigned(user, course_id)


def get_course_for_delegate(delegate, course_id):
    """
    The course, if it belongs to the delegate's department.

    Missing courses and courses of another department are reported the same
    way so a delegate cannot probe other departments.
    """
    course = Course.objects.filter(pk=course_id, department_id=delegate.department_id).first()
    if course is None or delegate.department_id is None:
        raise NotAuthorizedError(
            "Course not found or you are not authorized for this course department."
        )
    return course
