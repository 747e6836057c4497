from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """CareData user: a patient or a doctor"""

    # Override email to be unique so it can identify an account
    email = models.EmailField(unique=True)

    ENTRY_TYPE_CHOICES = [
        ('PATIENT', 'Patient'),
        ('DOCTOR', 'Doctor'),
    ]

    full_name = models.CharField(max_length=150, blank=True)
    entry_type = models.CharField(max_length=20, choices=ENTRY_TYPE_CHOICES, default='PATIENT')
    image = models.ImageField(upload_to='user_images/', blank=True, null=True)
    doctor_details = models.OneToOneField(
        'doctors.DoctorDetails',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owner'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.username} ({self.get_entry_type_display()})"

    def is_doctor(self):
        return self.entry_type == 'DOCTOR'

    @property
    def display_name(self):
        return self.full_name or self.username
