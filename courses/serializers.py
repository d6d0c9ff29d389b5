from rest_framework import serializers

from courses.models import Chapter, Course, Module, Subtopic, TimetableEntry


# ----------------- COURSES -----------------
class CourseSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Course
        fields = ["id", "title", "code"]


class CourseSerializer(serializers.ModelSerializer):
    department_name = serializers.CharField(source="department.name", read_only=True)

    class Meta:
        model = Course
        fields = ["id", "title", "code", "description", "status", "level", "department", "department_name"]


class TimetableEntrySerializer(serializers.ModelSerializer):
    course = CourseSummarySerializer(read_only=True)
    teacher_name = serializers.SerializerMethodField()
    hall_name = serializers.CharField(source="hall.name", read_only=True)

    class Meta:
        model = TimetableEntry
        fields = ["id", "course", "teacher", "teacher_name", "hall", "hall_name", "day", "time_slot",
                  "start_time", "end_time"]

    def get_teacher_name(self, obj):
        return obj.teacher.get_full_name()


# ----------------- OUTLINE -----------------
class SubtopicSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subtopic
        fields = ["id", "chapter", "title", "description", "order", "completed", "updated_at"]


class SubtopicTitleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subtopic
        fields = ["id", "title"]


class ChapterSerializer(serializers.ModelSerializer):
    class Meta:
        model = Chapter
        fields = ["id", "module", "title", "description", "order"]


class ChapterOutlineSerializer(serializers.ModelSerializer):
    subtopics = SubtopicSerializer(many=True, read_only=True)
    is_complete = serializers.BooleanField(read_only=True)

    class Meta:
        model = Chapter
        fields = ["id", "module", "title", "description", "order", "is_complete", "subtopics"]


class ModuleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Module
        fields = ["id", "course", "title", "description", "order", "status"]


class ModuleOutlineSerializer(serializers.ModelSerializer):
    """Module with nested chapters and subtopics; expects the prefetches of ``outline_queryset``."""
    chapters = ChapterOutlineSerializer(many=True, read_only=True)

    class Meta:
        model = Module
        fields = ["id", "course", "title", "description", "order", "status", "chapters"]
