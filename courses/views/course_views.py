from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from courses.serializers import CourseSerializer, CourseSummarySerializer, ModuleSerializer, TimetableEntrySerializer
from courses.services.outline_service import course_details_for_teacher
from courses.services.schedule_service import courses_for_slot, courses_for_teacher, timetable_for_today
from logbook_project.exceptions import LogbookError
from logbook_project.utils import error_response
from user_managment.permissions import IsDelegate, IsTeacher


@api_view(['GET'])
@permission_classes([IsTeacher])
def get_teacher_courses_view(request):
    """Courses assigned to the teacher through the schedule."""
    courses = courses_for_teacher(request.user).select_related("department").order_by("code")
    return Response({
        "success": True,
        "data": CourseSerializer(courses, many=True).data,
        "message": "Teacher courses retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsDelegate])
def get_courses_by_time_view(request):
    """
    Courses of the delegate's department scheduled in a slot.
    Query params: day (e.g. "Monday"), time (e.g. "09:00-11:00").
    """
    try:
        courses = courses_for_slot(
            request.user,
            request.query_params.get('day'),
            request.query_params.get('time'),
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": CourseSummarySerializer(courses, many=True).data,
        "message": "Courses retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsDelegate])
def get_today_schedule_view(request):
    """Today's timetable for the delegate's department and level."""
    try:
        entries = timetable_for_today(request.user)
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": TimetableEntrySerializer(entries, many=True).data,
        "message": "Today's schedule retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsTeacher])
def get_teacher_course_details_view(request, course_id):
    """A course the teacher is scheduled on, with its modules sorted by order."""
    try:
        course, modules = course_details_for_teacher(request.user, course_id)
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": {
            "course": CourseSerializer(course).data,
            "modules": ModuleSerializer(modules, many=True).data,
        },
        "message": "Course details retrieved successfully."
    }, status=status.HTTP_200_OK)
