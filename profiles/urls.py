from django.urls import path
from . import views

app_name = 'profiles'

urlpatterns = [
    path('caredata/users/<int:pk>', views.ProfileView.as_view(), name='profile'),
    path('caredata/users/<int:pk>/edit', views.ProfileEditView.as_view(), name='edit'),
]
