"""
URL configuration for CareData.

Routes are declared without trailing slashes. Unmatched paths of any verb
fall through to ``handler404``.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

from . import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('caredata', views.home, name='home'),
    path('', include('accounts.urls')),
    path('', include('doctors.urls')),
    path('', include('profiles.urls')),
    path('', include('documents.urls')),
]

# Only profile images are served straight from storage; uploads go through
# the owner-checked download view.
if settings.DEBUG:
    urlpatterns += static(
        f'{settings.MEDIA_URL}user_images/',
        document_root=settings.MEDIA_ROOT / 'user_images',
    )

handler404 = 'caredata.views.page_not_found'
handler500 = 'caredata.views.server_error'
