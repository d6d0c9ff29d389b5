# models.py
"""
Domain models for the courses application.

The file is organised in thematic sections:

1.  Institution (departments, courses, halls)
2.  Scheduling (recurring schedule entries and dated timetable entries)
3.  Course outline (modules, chapters and subtopics)

Only the outline carries real state. ``Subtopic.completed`` is the single
source of truth for delivery progress; ``Module.status`` is a cached
projection of it that is refreshed when a subtopic is toggled.
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from .choices import (
    COURSE_LEVEL_CHOICES,
    COURSE_STATUS_CHOICES,
    SCHEDULE_DAY_CHOICES,
    SEMESTER_CHOICES,
    TIME_SLOT_CHOICES,
    TIMETABLE_DAY_CHOICES,
)

# ---------------------------------------------------------------------------
# Institution
# ---------------------------------------------------------------------------


class Department(models.Model):
    name = models.CharField(max_length=150, unique=True)
    code = models.CharField(max_length=20, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "Departments"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Course(models.Model):
    title = models.CharField(max_length=200)
    code = models.CharField(max_length=30, unique=True)
    department = models.ForeignKey(Department, on_delete=models.CASCADE, related_name="courses")
    level = models.PositiveSmallIntegerField(choices=COURSE_LEVEL_CHOICES)
    description = models.TextField()
    status = models.CharField(max_length=10, choices=COURSE_STATUS_CHOICES, default="Active")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "Courses"
        ordering = ["code"]
        indexes = [
            models.Index(fields=["department", "level"], name="course_dept_level_idx"),
        ]

    def __str__(self):
        return f"{self.code} - {self.title}"


class Hall(models.Model):
    name = models.CharField(max_length=120, unique=True)

    class Meta:
        verbose_name_plural = "Halls"
        ordering = ["name"]

    def __str__(self):
        return self.name


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------


class ScheduleEntry(models.Model):
    """
    Recurring weekly slot for a course.

    A teacher is authorized for a course when at least one schedule entry
    assigns them to it.
    """
    semester = models.CharField(max_length=5, choices=SEMESTER_CHOICES)
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="schedule_entries")
    day = models.CharField(max_length=3, choices=SCHEDULE_DAY_CHOICES)
    time_slot = models.CharField(max_length=11, choices=TIME_SLOT_CHOICES)
    hall = models.ForeignKey(Hall, on_delete=models.PROTECT, related_name="schedule_entries")
    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="schedule_entries",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "Schedule entries"
        ordering = ["day", "time_slot"]
        indexes = [
            models.Index(fields=["teacher", "course"], name="schedule_teacher_course_idx"),
            models.Index(fields=["day", "time_slot"], name="schedule_day_slot_idx"),
        ]

    def __str__(self):
        return f"{self.course.code} {self.day} {self.time_slot}"


class TimetableEntry(models.Model):
    """A single dated occurrence of a course, with concrete start and end instants."""
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="timetable_entries")
    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="timetable_entries"
    )
    hall = models.ForeignKey(Hall, on_delete=models.PROTECT, related_name="timetable_entries")
    day = models.CharField(max_length=3, choices=TIMETABLE_DAY_CHOICES)
    time_slot = models.CharField(max_length=11)
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()

    class Meta:
        verbose_name_plural = "Timetable entries"
        ordering = ["start_time"]

    def clean(self):
        super().clean()
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValidationError({"end_time": "End time must be after start time."})

    def __str__(self):
        return f"{self.course.code} {self.day} {self.time_slot}"


# ---------------------------------------------------------------------------
# Course Outline
# ---------------------------------------------------------------------------


class Module(models.Model):
    """Top level of a course outline. ``status`` is cached, see module docstring."""

    class Status(models.TextChoices):
        PENDING = "Pending", "Pending"
        ONGOING = "Ongoing", "Ongoing"
        COMPLETED = "Completed", "Completed"

    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="modules")
    title = models.CharField(max_length=200)
    description = models.TextField()
    order = models.PositiveIntegerField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "Modules"
        ordering = ["order", "id"]
        indexes = [
            models.Index(fields=["course", "order"], name="module_course_order_idx"),
        ]

    def __str__(self):
        return f"{self.course.code} - {self.title}"


class Chapter(models.Model):
    module = models.ForeignKey(Module, on_delete=models.CASCADE, related_name="chapters")
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    order = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "Chapters"
        ordering = ["order", "id"]
        indexes = [
            models.Index(fields=["module", "order"], name="chapter_module_order_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def is_complete(self):
        # A chapter without subtopics counts as complete.
        return all(subtopic.completed for subtopic in self.subtopics.all())


class Subtopic(models.Model):
    chapter = models.ForeignKey(Chapter, on_delete=models.CASCADE, related_name="subtopics")
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    order = models.PositiveIntegerField()
    completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "Subtopics"
        ordering = ["order", "id"]
        indexes = [
            models.Index(fields=["chapter", "order"], name="subtopic_chapter_order_idx"),
        ]

    def __str__(self):
        return self.title
