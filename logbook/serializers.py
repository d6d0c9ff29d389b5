from rest_framework import serializers

from courses.serializers import CourseSummarySerializer, SubtopicTitleSerializer
from user_managment.serializers import UserSummarySerializer

from .models import LogbookEntry


class LogbookEntrySerializer(serializers.ModelSerializer):
    course = CourseSummarySerializer(read_only=True)
    delegate = UserSummarySerializer(read_only=True)
    reviewed_by = UserSummarySerializer(read_only=True)
    covered_subtopics = SubtopicTitleSerializer(many=True, read_only=True)

    class Meta:
        model = LogbookEntry
        fields = [
            "id",
            "course",
            "delegate",
            "timetable_entry",
            "day_of_week",
            "time_slot",
            "status",
            "remarks",
            "covered_subtopics",
            "review_status",
            "review_remarks",
            "reviewed_by",
            "review_timestamp",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
