from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'first_name', 'last_name', 'role', 'department', 'level', 'status')
    list_filter = ('role', 'status', 'department')
    search_fields = ('email', 'first_name', 'last_name')
    ordering = ('email',)
    exclude = ('password', 'user_permissions', 'groups', 'last_login')
