"""
Credential store.

Registers users with a hashed password and verifies username/password pairs.
Hashing and the constant-time comparison are delegated to
``django.contrib.auth``; this module only adds the duplicate checks and maps
failures onto ``DuplicateIdentity`` / ``InvalidCredentials``.
"""
import logging

from django.contrib.auth import authenticate as auth_authenticate
from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from .exceptions import DuplicateIdentity, InvalidCredentials
from .models import User

logger = logging.getLogger(__name__)

ENTRY_TYPES = {choice for choice, _ in User.ENTRY_TYPE_CHOICES}


def register(username, email, password, *, full_name='', entry_type='PATIENT', image=None):
    """Create a user and store the hashed password.

    Raises ``ValidationError`` for malformed input and ``DuplicateIdentity``
    when the username or email is already taken.
    """
    username = (username or '').strip()
    email = User.objects.normalize_email((email or '').strip())
    errors = {}
    if not username:
        errors['username'] = 'Username is required.'
    else:
        try:
            User.username_validator(username)
        except ValidationError as exc:
            errors['username'] = exc.messages
    if not email:
        errors['email'] = 'Email is required.'
    else:
        try:
            validate_email(email)
        except ValidationError as exc:
            errors['email'] = exc.messages
    if not password:
        errors['password'] = 'Password is required.'
    if entry_type not in ENTRY_TYPES:
        errors['entry_type'] = 'Please select patient or doctor.'
    if errors:
        raise ValidationError(errors)

    if User.objects.filter(username__iexact=username).exists():
        raise DuplicateIdentity('A user with the given username is already registered.')
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateIdentity('A user with the given email is already registered.')

    user = User(username=username, email=email, full_name=full_name, entry_type=entry_type)
    password_validation.validate_password(password, user)
    user.set_password(password)
    if image:
        user.image = image

    try:
        with transaction.atomic():
            user.save()
    except IntegrityError as exc:
        # Lost a race against a concurrent registration
        raise DuplicateIdentity() from exc

    logger.info('Registered %s user %s (id=%s)', entry_type.lower(), username, user.pk)
    return user


def authenticate(username, password, request=None):
    """Return the user for a username/password pair or raise ``InvalidCredentials``."""
    user = auth_authenticate(request, username=(username or '').strip(), password=password)
    if user is None:
        logger.warning('Failed login attempt for %s', username)
        raise InvalidCredentials()
    return user
