"""Template context processors - safe profile image URL for the navbar."""

def profile_image_url(request):
    """Provide profile_image_url for base template (avoids ValueError when no file)."""
    url = None
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated and getattr(user, 'image', None):
        try:
            url = user.image.url
        except (ValueError, AttributeError):
            url = None
    return {'profile_image_url': url}
