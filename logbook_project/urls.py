from django.contrib import admin
from django.urls import path, re_path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from user_managment.views import *
from courses.views import (
    # Courses
    get_teacher_courses_view,
    get_courses_by_time_view,
    get_today_schedule_view,
    get_teacher_course_details_view,
    # Progress
    get_teacher_courses_progress_view,
    get_courses_progress_report_view,
    # Outline
    get_course_outline_view,
    get_delegate_course_outline_view,
    create_module_view,
    create_chapter_view,
    create_subtopic_view,
    module_detail_view,
    chapter_detail_view,
    subtopic_detail_view,
    toggle_subtopic_view,
)
from logbook.views import (
    create_logbook_entry_view,
    create_timetabled_logbook_entry_view,
    get_my_logbook_entries_view,
    get_logbook_corrections_view,
    delegate_logbook_entry_view,
    get_pending_logbook_entries_view,
    get_logbook_entry_for_review_view,
    review_logbook_entry_view,
    get_teacher_logbook_history_view,
    get_all_logbook_history_view,
)

urlpatterns = [
    path('api/admin/', admin.site.urls),
    re_path(r'^api/token/?$', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    re_path(r'^api/token/refresh/?$', TokenRefreshView.as_view(), name='token_refresh'),
    re_path(r'^api/token/check/?$', TokenCheckView.as_view(), name='token_check'),
    re_path(r'^api/login/?$', UserLogin.as_view(), name='login'),
    re_path(r'^api/logout/?$', UserLogout.as_view(), name='logout'),
    re_path(r'^api/me/?$', UserView.as_view(), name='me'),

    # Teacher: courses and progress
    re_path(r'^api/teacher/my-courses/?$', get_teacher_courses_view, name='teacher_my_courses'),
    re_path(r'^api/teacher/courses/progress/?$', get_teacher_courses_progress_view, name='teacher_courses_progress'),
    re_path(r'^api/teacher/courses/(?P<course_id>\d+)/details/?$', get_teacher_course_details_view, name='teacher_course_details'),

    # Teacher: logbook review
    re_path(r'^api/teacher/review/pending/?$', get_pending_logbook_entries_view, name='teacher_pending_entries'),
    re_path(r'^api/teacher/logbook/(?P<entry_id>\d+)/?$', get_logbook_entry_for_review_view, name='teacher_logbook_entry'),
    re_path(r'^api/teacher/logbook/(?P<entry_id>\d+)/review/?$', review_logbook_entry_view, name='teacher_review_entry'),
    re_path(r'^api/teacher/logbooks/history/?$', get_teacher_logbook_history_view, name='teacher_logbook_history'),

    # Teacher/admin: course outline
    re_path(r'^api/teacher/outline/course/(?P<course_id>\d+)/?$', get_course_outline_view, name='course_outline'),
    re_path(r'^api/teacher/outline/modules/?$', create_module_view, name='create_module'),
    re_path(r'^api/teacher/outline/modules/(?P<module_id>\d+)/?$', module_detail_view, name='module_detail'),
    re_path(r'^api/teacher/outline/chapters/?$', create_chapter_view, name='create_chapter'),
    re_path(r'^api/teacher/outline/chapters/(?P<chapter_id>\d+)/?$', chapter_detail_view, name='chapter_detail'),
    re_path(r'^api/teacher/outline/subtopics/?$', create_subtopic_view, name='create_subtopic'),
    re_path(r'^api/teacher/outline/subtopics/(?P<subtopic_id>\d+)/?$', subtopic_detail_view, name='subtopic_detail'),
    re_path(r'^api/teacher/outline/subtopics/(?P<subtopic_id>\d+)/toggle/?$', toggle_subtopic_view, name='toggle_subtopic'),

    # Delegate
    re_path(r'^api/delegate/dashboard/today/?$', get_today_schedule_view, name='delegate_today_schedule'),
    re_path(r'^api/delegate/courses/by-time/?$', get_courses_by_time_view, name='delegate_courses_by_time'),
    re_path(r'^api/delegate/outline/course/(?P<course_id>\d+)/?$', get_delegate_course_outline_view, name='delegate_course_outline'),
    re_path(r'^api/delegate/logbook/new/?$', create_logbook_entry_view, name='delegate_create_entry'),
    re_path(r'^api/delegate/logbook/timetabled/?$', create_timetabled_logbook_entry_view, name='delegate_create_timetabled_entry'),
    re_path(r'^api/delegate/logbooks/my-entries/?$', get_my_logbook_entries_view, name='delegate_my_entries'),
    re_path(r'^api/delegate/logbooks/corrections/?$', get_logbook_corrections_view, name='delegate_corrections'),
    re_path(r'^api/delegate/logbooks/(?P<entry_id>\d+)/?$', delegate_logbook_entry_view, name='delegate_entry'),

    # Admin panel
    re_path(r'^api/admin-panel/logbooks/history/?$', get_all_logbook_history_view, name='admin_logbook_history'),
    re_path(r'^api/admin-panel/courses/progress/?$', get_courses_progress_report_view, name='admin_courses_progress'),
]
