from django.contrib import messages
from django.shortcuts import render, redirect
from django.views.generic import TemplateView
from django.views import View

from accounts.mixins import DoctorRequiredMixin
from profiles import store
from .forms import DoctorDetailsForm


class DoctorsProfileView(TemplateView):
    """Landing page describing doctor profiles"""
    template_name = 'doctors/doctor_profile.html'


class DoctorListView(TemplateView):
    """All registered doctors with their details"""
    template_name = 'doctors/find_doctors.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['doctors'] = store.list_doctors()
        return context


class AddDoctorDetailsView(DoctorRequiredMixin, View):
    """Create or update the doctor details of the signed-in doctor"""
    template_name = 'doctors/add_doctor_details.html'

    def get(self, request, pk):
        profile = store.get_profile(pk, with_files=False)
        form = DoctorDetailsForm(instance=profile.doctor_details)
        return render(request, self.template_name, {'profile': profile, 'form': form})

    def post(self, request, pk):
        profile = store.get_profile(pk, with_files=False)
        form = DoctorDetailsForm(request.POST, instance=profile.doctor_details)
        if not form.is_valid():
            messages.error(request, "Can't add the details :(")
            return render(request, self.template_name, {'profile': profile, 'form': form})
        store.save_doctor_details(profile.user, form)
        messages.success(request, 'Your details has been added :)')
        return redirect('profiles:profile', pk=pk)
