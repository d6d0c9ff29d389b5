from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from courses.services.pagination import paginate_queryset_or_list
from logbook_project.exceptions import LogbookError
from logbook_project.utils import error_response, parse_id_list
from user_managment.permissions import IsAdminRole, IsDelegate, IsTeacher

from .serializers import LogbookEntrySerializer
from .services import admission_service, review_service


def _first(data, *names):
    """Value of the first of ``names`` present in the request body."""
    for name in names:
        if name in data:
            return data.get(name)
    return None


def _covered_subtopics(data):
    return parse_id_list(_first(data, "covered_subtopics", "coveredSubtopics"), "coveredSubtopics")


# ---------------------------------------------------------------------------
# Delegate: submissions
# ---------------------------------------------------------------------------

@api_view(['POST'])
@permission_classes([IsDelegate])
def create_logbook_entry_view(request):
    """
    Submit a logbook entry for a scheduled slot.
    Body: courseId, dayOfWeek, timeSlot, status, remarks?, coveredSubtopics?
    """
    data = request.data
    try:
        entry = admission_service.submit_slot_entry(
            request.user,
            course_id=_first(data, "course_id", "courseId"),
            day_of_week=_first(data, "day_of_week", "dayOfWeek"),
            time_slot=_first(data, "time_slot", "timeSlot"),
            status=data.get("status"),
            remarks=data.get("remarks", ""),
            covered_subtopics=_covered_subtopics(data),
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entry).data,
        "message": "Logbook entry created successfully!"
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsDelegate])
def create_timetabled_logbook_entry_view(request):
    """
    Submit a logbook entry against a timetable entry while its window is open.
    Body: timetableEntryId, status, courseId?, remarks?, coveredSubtopics?
    """
    data = request.data
    try:
        entry = admission_service.submit_timetabled_entry(
            request.user,
            timetable_entry_id=_first(data, "timetable_entry_id", "timetableEntryId"),
            status=data.get("status"),
            remarks=data.get("remarks", ""),
            covered_subtopics=_covered_subtopics(data),
            course_id=_first(data, "course_id", "courseId"),
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entry).data,
        "message": "Logbook entry created successfully"
    }, status=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------------
# Delegate: own entries
# ---------------------------------------------------------------------------

@api_view(['GET'])
@permission_classes([IsDelegate])
def get_my_logbook_entries_view(request):
    return paginate_queryset_or_list(
        request,
        review_service.entries_for_delegate(request.user),
        serializer_class=LogbookEntrySerializer,
        message="Logbook entries retrieved successfully.",
    )


@api_view(['GET'])
@permission_classes([IsDelegate])
def get_logbook_corrections_view(request):
    entries = review_service.corrections_for_delegate(request.user)
    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entries, many=True).data,
        "message": "Entries needing correction retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET', 'PUT'])
@permission_classes([IsDelegate])
def delegate_logbook_entry_view(request, entry_id):
    """
    GET: one of the delegate's entries.
    PUT: edit status, remarks or coveredSubtopics; the entry goes back to Pending.
    """
    try:
        if request.method == 'GET':
            entry = review_service.entry_for_delegate(entry_id, request.user)
            message = "Logbook entry retrieved successfully."
        else:
            data = request.data
            entry = review_service.delegate_edit_entry(
                entry_id,
                request.user,
                status=data.get("status"),
                remarks=data.get("remarks"),
                covered_subtopics=_covered_subtopics(data),
            )
            message = "Logbook entry updated successfully!"
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entry).data,
        "message": message
    }, status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Teacher: review
# ---------------------------------------------------------------------------

@api_view(['GET'])
@permission_classes([IsTeacher])
def get_pending_logbook_entries_view(request):
    entries = review_service.pending_entries_for_teacher(request.user)
    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entries, many=True).data,
        "message": "Pending logbook entries retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsTeacher])
def get_logbook_entry_for_review_view(request, entry_id):
    try:
        entry = review_service.entry_for_review(entry_id, request.user)
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entry).data,
        "message": "Logbook entry retrieved successfully."
    }, status=status.HTTP_200_OK)


@api_view(['PATCH', 'POST'])
@permission_classes([IsTeacher])
def review_logbook_entry_view(request, entry_id):
    """Body: reviewStatus ("Approved" | "Needs Correction"), reviewRemarks?"""
    data = request.data
    try:
        entry = review_service.review_entry(
            entry_id,
            request.user,
            review_status=_first(data, "review_status", "reviewStatus"),
            review_remarks=_first(data, "review_remarks", "reviewRemarks") or "",
        )
    except LogbookError as exc:
        return error_response(exc)

    return Response({
        "success": True,
        "data": LogbookEntrySerializer(entry).data,
        "message": f"Logbook entry marked as {entry.review_status}."
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsTeacher])
def get_teacher_logbook_history_view(request):
    return paginate_queryset_or_list(
        request,
        review_service.history_for_teacher(request.user),
        serializer_class=LogbookEntrySerializer,
        message="Logbook history retrieved successfully.",
    )


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

@api_view(['GET'])
@permission_classes([IsAdminRole])
def get_all_logbook_history_view(request):
    return paginate_queryset_or_list(
        request,
        review_service.all_history(),
        serializer_class=LogbookEntrySerializer,
        message="Logbook history retrieved successfully.",
    )
