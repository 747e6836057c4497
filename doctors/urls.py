from django.urls import path
from . import views

app_name = 'doctors'

urlpatterns = [
    path('doctorsProfile', views.DoctorsProfileView.as_view(), name='doctors_profile'),
    path('caredata/doctors', views.DoctorListView.as_view(), name='doctor_list'),
    path('caredata/users/<int:pk>/adddetails', views.AddDoctorDetailsView.as_view(), name='add_details'),
]
