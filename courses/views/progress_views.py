from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from courses.services.progress_service import courses_with_progress, teacher_courses_with_progress
from user_managment.permissions import IsAdminRole, IsTeacher


@api_view(['GET'])
@permission_classes([IsTeacher])
def get_teacher_courses_progress_view(request):
    """Progress for every course the teacher is scheduled on."""
    return Response({
        "success": True,
        "data": teacher_courses_with_progress(request.user),
        "message": "Course progress retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAdminRole])
def get_courses_progress_report_view(request):
    """
    Progress report across all courses, ordered by course code.
    Each row carries {completed, total, percentage} computed from the subtopics.
    """
    return Response({
        "success": True,
        "data": courses_with_progress(),
        "message": "Course progress report retrieved successfully."
    }, status=status.HTTP_200_OK)
