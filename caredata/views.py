import logging

from django.shortcuts import render

logger = logging.getLogger(__name__)


def home(request):
    return render(request, 'home/index.html')


def page_not_found(request, exception=None):
    logger.info('404 %s %s', request.method, request.path)
    return render(request, 'error/error.html', {
        'status': 404,
        'message': 'Page Not Found!',
    }, status=404)


def server_error(request):
    # Standalone template: the layout needs the session, which may be what failed.
    # The traceback is logged by django.request before this handler runs.
    return render(request, 'error/500.html', {
        'status': 500,
        'message': 'Something Went Wrong!',
    }, status=500)
