"""
Profile store.

Reads and writes a user's profile together with the documents linked to it.
Related rows are fetched with explicit joins and handed back as a ``Profile``
value instead of lazily-loaded attributes.
"""
import logging
from dataclasses import dataclass, field

from django.db import transaction
from django.shortcuts import get_object_or_404

from accounts.models import User
from doctors.models import DoctorDetails
from documents.models import UploadedFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Profile:
    user: User
    doctor_details: DoctorDetails | None = None
    files: list = field(default_factory=list)

    @property
    def is_doctor(self):
        return self.user.is_doctor()


def get_profile(user_id, with_files=True):
    """Return the profile of ``user_id``; 404 when there is no such user."""
    user = get_object_or_404(User.objects.select_related('doctor_details'), pk=user_id)
    files = list(UploadedFile.objects.filter(user=user).order_by('-created_at')) if with_files else []
    return Profile(user=user, doctor_details=user.doctor_details, files=files)


def list_doctors():
    users = (
        User.objects.filter(entry_type='DOCTOR', is_active=True)
        .select_related('doctor_details')
        .order_by('full_name', 'username')
    )
    return [Profile(user=u, doctor_details=u.doctor_details) for u in users]


def update_user(user, form):
    """Apply a validated profile edit form to ``user``."""
    user = form.save()
    logger.info('Profile updated for user %s', user.pk)
    return user


def save_doctor_details(user, form):
    """Save a validated DoctorDetailsForm and link it to ``user``.

    Existing details are updated in place so a DoctorDetails row is never
    shared or left orphaned.
    """
    with transaction.atomic():
        details = form.save()
        if user.doctor_details_id != details.pk:
            user.doctor_details = details
            user.save(update_fields=['doctor_details', 'updated_at'])
    logger.info('Doctor details saved for user %s', user.pk)
    return details


def add_file(user, form):
    uploaded = form.save(commit=False)
    uploaded.user = user
    uploaded.save()
    logger.info('User %s uploaded file %s', user.pk, uploaded.pk)
    return uploaded


def get_file(user, file_id):
    return get_object_or_404(UploadedFile, pk=file_id, user=user)
