from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from courses.serializers import (
    ChapterSerializer,
    ModuleOutlineSerializer,
    ModuleSerializer,
    SubtopicSerializer,
)
from courses.services import outline_service
from courses.services.access_service import ensure_outline_access
from logbook_project.exceptions import LogbookError
from logbook_project.utils import error_response, parse_id
from user_managment.permissions import IsDelegate, IsTeacherOrAdmin


def _editable_fields(data):
    return {name: data.get(name) for name in outline_service.EDITABLE_FIELDS if name in data}


# ---------------------------------------------------------------------------
# Outline reads
# ---------------------------------------------------------------------------

@api_view(['GET'])
@permission_classes([IsTeacherOrAdmin])
def get_course_outline_view(request, course_id):
    """
    Full outline of a course (Modules -> Chapters -> Subtopics), every level
    sorted by order. Teachers must be scheduled on the course.
    """
    try:
        ensure_outline_access(request.user, course_id)
        outline = outline_service.get_outline(course_id)
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": ModuleOutlineSerializer(outline, many=True).data,
        "message": "Course outline retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsDelegate])
def get_delegate_course_outline_view(request, course_id):
    """Outline for a course in the delegate's own department."""
    try:
        outline = outline_service.outline_for_delegate(request.user, course_id)
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": ModuleOutlineSerializer(outline, many=True).data,
        "message": "Course outline retrieved successfully."
    }, status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

@api_view(['POST'])
@permission_classes([IsTeacherOrAdmin])
def create_module_view(request):
    try:
        course_id = parse_id(request.data.get("course_id") or request.data.get("courseId"), "courseId")
        ensure_outline_access(request.user, course_id)
        module = outline_service.create_module(
            course_id,
            title=request.data.get('title'),
            description=request.data.get('description'),
            order=request.data.get('order'),
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": ModuleSerializer(module).data,
        "message": "Module created successfully."
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsTeacherOrAdmin])
def create_chapter_view(request):
    try:
        module_id = parse_id(request.data.get("module_id") or request.data.get("moduleId"), "moduleId")
        ensure_outline_access(request.user, outline_service.owning_course_id("module", module_id))
        chapter = outline_service.create_chapter(
            module_id,
            title=request.data.get('title'),
            order=request.data.get('order'),
            description=request.data.get('description', ''),
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": ChapterSerializer(chapter).data,
        "message": "Chapter created successfully."
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsTeacherOrAdmin])
def create_subtopic_view(request):
    try:
        chapter_id = parse_id(request.data.get("chapter_id") or request.data.get("chapterId"), "chapterId")
        ensure_outline_access(request.user, outline_service.owning_course_id("chapter", chapter_id))
        subtopic = outline_service.create_subtopic(
            chapter_id,
            title=request.data.get('title'),
            order=request.data.get('order'),
            description=request.data.get('description', ''),
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": SubtopicSerializer(subtopic).data,
        "message": "Subtopic created successfully."
    }, status=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------------
# Update / delete
# ---------------------------------------------------------------------------

@api_view(['PATCH', 'DELETE'])
@permission_classes([IsTeacherOrAdmin])
def module_detail_view(request, module_id):
    try:
        ensure_outline_access(request.user, outline_service.owning_course_id("module", module_id))
        if request.method == 'DELETE':
            outline_service.delete_module(module_id)
            return Response({
                "success": True,
                "message": "Module and its contents deleted successfully."
            }, status=status.HTTP_200_OK)
        module = outline_service.update_module(module_id, **_editable_fields(request.data))
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": ModuleSerializer(module).data,
        "message": "Module updated successfully."
    }, status=status.HTTP_200_OK)


@api_view(['PATCH', 'DELETE'])
@permission_classes([IsTeacherOrAdmin])
def chapter_detail_view(request, chapter_id):
    try:
        ensure_outline_access(request.user, outline_service.owning_course_id("chapter", chapter_id))
        if request.method == 'DELETE':
            outline_service.delete_chapter(chapter_id)
            return Response({
                "success": True,
                "message": "Chapter and its subtopics deleted successfully."
            }, status=status.HTTP_200_OK)
        chapter = outline_service.update_chapter(chapter_id, **_editable_fields(request.data))
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": ChapterSerializer(chapter).data,
        "message": "Chapter updated successfully."
    }, status=status.HTTP_200_OK)


@api_view(['PATCH', 'DELETE'])
@permission_classes([IsTeacherOrAdmin])
def subtopic_detail_view(request, subtopic_id):
    try:
        ensure_outline_access(request.user, outline_service.owning_course_id("subtopic", subtopic_id))
        if request.method == 'DELETE':
            outline_service.delete_subtopic(subtopic_id)
            return Response({
                "success": True,
                "message": "Subtopic deleted successfully."
            }, status=status.HTTP_200_OK)
        subtopic = outline_service.update_subtopic(subtopic_id, **_editable_fields(request.data))
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": SubtopicSerializer(subtopic).data,
        "message": "Subtopic updated successfully."
    }, status=status.HTTP_200_OK)


@api_view(['PATCH'])
@permission_classes([IsTeacherOrAdmin])
def toggle_subtopic_view(request, subtopic_id):
    """Flip a subtopic's completion; the owning module's status is refreshed."""
    try:
        ensure_outline_access(request.user, outline_service.owning_course_id("subtopic", subtopic_id))
        subtopic = outline_service.toggle_subtopic(subtopic_id)
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": SubtopicSerializer(subtopic).data,
        "message": "Subtopic completion updated."
    }, status=status.HTTP_200_OK)
