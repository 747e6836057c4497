from django.urls import path
from . import views

app_name = 'documents'

urlpatterns = [
    path('caredata/users/<int:pk>/upload', views.UploadView.as_view(), name='upload'),
    path('caredata/users/<int:pk>/upload/<int:file_id>', views.FileDetailView.as_view(), name='file_detail'),
    path(
        'caredata/users/<int:pk>/upload/<int:file_id>/download',
        views.FileDownloadView.as_view(),
        name='file_download',
    ),
    path('caredata/users/<int:pk>/files', views.FileListView.as_view(), name='file_list'),
]
