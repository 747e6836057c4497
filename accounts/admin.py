from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class CareDataUserAdmin(UserAdmin):
    list_display = ['username', 'email', 'full_name', 'entry_type', 'is_active', 'created_at']
    list_filter = ['entry_type', 'is_active', 'is_staff']
    search_fields = ['username', 'email', 'full_name']
    fieldsets = UserAdmin.fieldsets + (
        ('CareData', {'fields': ('full_name', 'entry_type', 'image', 'doctor_details')}),
    )
