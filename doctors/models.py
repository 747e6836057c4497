from django.db import models


class DoctorDetails(models.Model):
    """Doctor-specific details linked one-to-one from a doctor's User"""

    SPECIALIZATION_CHOICES = [
        ('CARDIOLOGY', 'Cardiology'),
        ('DERMATOLOGY', 'Dermatology'),
        ('NEUROLOGY', 'Neurology'),
        ('ORTHOPEDICS', 'Orthopedics'),
        ('PEDIATRICS', 'Pediatrics'),
        ('PSYCHIATRY', 'Psychiatry'),
        ('SURGERY', 'Surgery'),
        ('GENERAL', 'General Medicine'),
        ('ONCOLOGY', 'Oncology'),
        ('GYNECOLOGY', 'Gynecology'),
    ]

    specialization = models.CharField(max_length=50, choices=SPECIALIZATION_CHOICES, default='GENERAL')
    qualification = models.CharField(max_length=200)
    experience_years = models.PositiveIntegerField(default=0)
    hospital = models.CharField(max_length=200, blank=True)
    consultation_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    phone_number = models.CharField(max_length=15, blank=True)
    bio = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'doctor_details'
        verbose_name = 'Doctor Details'
        verbose_name_plural = 'Doctor Details'

    def __str__(self):
        return f"{self.get_specialization_display()} - {self.qualification}"
