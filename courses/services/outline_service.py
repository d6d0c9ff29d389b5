"""
Course outline store: Module -> Chapter -> Subtopic.

Subtopic completion is the only authoritative state. ``toggle_subtopic`` keeps
the owning module's cached status in step; ``set_subtopics_completed`` does
not, so a module's status can lag behind until the next toggle. Progress
figures never read the cached status (see ``progress_service``).
"""
import logging

from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone

from ..models import Chapter, Course, Module, Subtopic
from .access_service import ensure_teacher_assigned, get_course_for_delegate
from .progress_service import module_status
from logbook_project.exceptions import CourseNotFoundError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "order")


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _clean_title(title):
    title = str(title).strip() if title is not None else ""
    if not title:
        raise ValidationError("Title is required.", details={"field": "title"})
    return title


def _clean_order(order):
    if order is None or order == "":
        raise ValidationError("Order is required.", details={"field": "order"})
    try:
        order = int(order)
    except (TypeError, ValueError):
        raise ValidationError("Order must be a whole number.", details={"field": "order"})
    if order < 0:
        raise ValidationError("Order cannot be negative.", details={"field": "order"})
    return order


def _clean_description(description, required=False):
    description = str(description or "").strip()
    if required and not description:
        raise ValidationError("Description is required.", details={"field": "description"})
    return description


def _apply_updates(instance, fields, description_required=False):
    changed = []
    for name in EDITABLE_FIELDS:
        if name not in fields or fields[name] is None:
            continue
        value = fields[name]
        if name == "title":
            value = _clean_title(value)
        elif name == "order":
            value = _clean_order(value)
        else:
            value = _clean_description(value, required=description_required)
        setattr(instance, name, value)
        changed.append(name)
    if changed:
        instance.save(update_fields=changed + ["updated_at"])
    return instance


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def outline_queryset(course_id):
    subtopics = Subtopic.objects.order_by("order", "id")
    chapters = Chapter.objects.order_by("order", "id").prefetch_related(
        Prefetch("subtopics", queryset=subtopics)
    )
    return (
        Module.objects.filter(course_id=course_id)
        .order_by("order", "id")
        .prefetch_related(Prefetch("chapters", queryset=chapters))
    )


def get_outline(course_id):
    """Modules of the course with nested chapters and subtopics, each level sorted by order."""
    return list(outline_queryset(course_id))


def outline_for_delegate(delegate, course_id):
    course = get_course_for_delegate(delegate, course_id)
    return get_outline(course.id)


def course_details_for_teacher(teacher, course_id):
    """The course and its modules in order, for a teacher scheduled on it."""
    ensure_teacher_assigned(teacher, course_id)
    course = Course.objects.select_related("department").filter(pk=course_id).first()
    if course is None:
        raise CourseNotFoundError()
    modules = list(Module.objects.filter(course_id=course.id).order_by("order", "id"))
    logger.info(f"Teacher {teacher.pk}: course {course.code} with {len(modules)} modules")
    return course, modules


def owning_course_id(kind, pk):
    """Course id that owns the given outline item, or NotFoundError."""
    lookups = {
        "module": (Module, "course_id", "Module not found"),
        "chapter": (Chapter, "module__course_id", "Chapter not found"),
        "subtopic": (Subtopic, "chapter__module__course_id", "Subtopic not found"),
    }
    model, path, message = lookups[kind]
    course_id = model.objects.filter(pk=pk).values_list(path, flat=True).first()
    if course_id is None:
        raise NotFoundError(message)
    return course_id


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

def create_module(course_id, title, description, order):
    if not Course.objects.filter(pk=course_id).exists():
        raise CourseNotFoundError()
    module = Module.objects.create(
        course_id=course_id,
        title=_clean_title(title),
        description=_clean_description(description, required=True),
        order=_clean_order(order),
        status=Module.Status.PENDING,
    )
    logger.info(f"Created module {module.pk} for course {course_id}")
    return module


def create_chapter(module_id, title, order, description=""):
    if not Module.objects.filter(pk=module_id).exists():
        raise NotFoundError("Module not found")
    chapter = Chapter.objects.create(
        module_id=module_id,
        title=_clean_title(title),
        description=_clean_description(description),
        order=_clean_order(order),
    )
    logger.info(f"Created chapter {chapter.pk} in module {module_id}")
    return chapter


def create_subtopic(chapter_id, title, order, description=""):
    if not Chapter.objects.filter(pk=chapter_id).exists():
        raise NotFoundError("Chapter not found")
    subtopic = Subtopic.objects.create(
        chapter_id=chapter_id,
        title=_clean_title(title),
        description=_clean_description(description),
        order=_clean_order(order),
        completed=False,
    )
    logger.info(f"Created subtopic {subtopic.pk} in chapter {chapter_id}")
    return subtopic


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

def update_module(module_id, **fields):
    module = Module.objects.filter(pk=module_id).first()
    if module is None:
        raise NotFoundError("Module not found")
    return _apply_updates(module, fields, description_required=True)


def update_chapter(chapter_id, **fields):
    chapter = Chapter.objects.filter(pk=chapter_id).first()
    if chapter is None:
        raise NotFoundError("Chapter not found")
    return _apply_updates(chapter, fields)


def update_subtopic(subtopic_id, **fields):
    """Updates text fields and order only; completion goes through the toggle."""
    subtopic = Subtopic.objects.filter(pk=subtopic_id).first()
    if subtopic is None:
        raise NotFoundError("Subtopic not found")
    return _apply_updates(subtopic, fields)


# ---------------------------------------------------------------------------
# Delete (cascades through foreign keys; module status is not recomputed)
# ---------------------------------------------------------------------------

def delete_module(module_id):
    module = Module.objects.filter(pk=module_id).first()
    if module is None:
        raise NotFoundError("Module not found")
    deleted, per_model = module.delete()
    logger.info(f"Deleted module {module_id} and its contents: {per_model}")
    return deleted


def delete_chapter(chapter_id):
    chapter = Chapter.objects.filter(pk=chapter_id).first()
    if chapter is None:
        raise NotFoundError("Chapter not found")
    deleted, per_model = chapter.delete()
    logger.info(f"Deleted chapter {chapter_id} and its subtopics: {per_model}")
    return deleted


def delete_subtopic(subtopic_id):
    subtopic = Subtopic.objects.filter(pk=subtopic_id).first()
    if subtopic is None:
        raise NotFoundError("Subtopic not found")
    deleted, _ = subtopic.delete()
    logger.info(f"Deleted subtopic {subtopic_id}")
    return deleted


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------

def refresh_module_status(module_id):
    """Recompute and persist a module's cached status from its current subtopics."""
    module = Module.objects.prefetch_related("chapters__subtopics").get(pk=module_id)
    new_status = module_status(module.chapters.all())
    if module.status != new_status:
        logger.info(f"Module {module_id} status {module.status} -> {new_status}")
        module.status = new_status
        module.save(update_fields=["status", "updated_at"])
    return module


def toggle_subtopic(subtopic_id):
    """
    Flip a subtopic's completion and refresh its module's cached status.

    The row is locked for the flip; the status refresh runs after that write
    has committed and reads the subtopics afresh.
    """
    with transaction.atomic():
        subtopic = (
            Subtopic.objects.select_for_update()
            .filter(pk=subtopic_id)
            .first()
        )
        if subtopic is None:
            raise NotFoundError("Subtopic not found")
        subtopic.completed = not subtopic.completed
        subtopic.save(update_fields=["completed", "updated_at"])

    logger.info(f"Subtopic {subtopic_id} completed={subtopic.completed}")
    refresh_module_status(subtopic.chapter.module_id)
    return subtopic


def set_subtopics_completed(subtopic_ids):
    """
    Mark the given subtopics completed and return how many rows changed.

    Already-completed subtopics are not written again. Module statuses are
    left untouched.
    """
    ids = {int(pk) for pk in subtopic_ids or ()}
    if not ids:
        return 0
    updated = Subtopic.objects.filter(pk__in=ids, completed=False).update(
        completed=True, updated_at=timezone.now()
    )
    logger.info(f"Marked {updated} of {len(ids)} subtopics completed")
    return updated
