from django.contrib import admin
from .models import DoctorDetails


@admin.register(DoctorDetails)
class DoctorDetailsAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'specialization', 'experience_years', 'hospital', 'updated_at']
    list_filter = ['specialization']
