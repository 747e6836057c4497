"""
Session lifecycle on top of ``django.contrib.sessions``.

A session is issued at login with an absolute expiry of
``SESSION_COOKIE_AGE`` seconds. Later requests never push the expiry forward;
once it passes the session backend stops loading the row and the request is
anonymous again.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import login, logout
from django.utils import timezone

logger = logging.getLogger(__name__)


def session_ttl():
    return timedelta(seconds=settings.SESSION_COOKIE_AGE)


def start_session(request, user):
    """Attach ``user`` to the request's session and pin its expiry.

    ``login`` rotates the session key, so a pre-login key never carries the
    authenticated identity.
    """
    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    expires_at = timezone.now() + session_ttl()
    request.session.set_expiry(expires_at)
    logger.info('Session started for user %s (expires %s)', user.pk, expires_at.isoformat())
    return expires_at


def end_session(request):
    user_id = getattr(request.user, 'pk', None)
    logout(request)
    if user_id is not None:
        logger.info('Session ended for user %s', user_id)


def session_expiry(request):
    """Expiry of the current authenticated session, or None when anonymous."""
    if not request.user.is_authenticated:
        return None
    return request.session.get_expiry_date()
