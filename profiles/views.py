from django.contrib import messages
from django.http import QueryDict
from django.shortcuts import render, redirect
from django.views import View

from accounts.mixins import SessionRequiredMixin, ProfileOwnerRequiredMixin
from accounts.sessions import session_expiry
from . import store
from .forms import ProfileEditForm


def _submitted_data(request):
    """Form data of a PUT, whether tunnelled through POST or sent directly."""
    if request.POST:
        return request.POST
    if request.content_type == 'application/x-www-form-urlencoded':
        return QueryDict(request.body, encoding=request.encoding)
    return QueryDict()


class ProfileView(SessionRequiredMixin, View):
    """Profile page of a user with doctor details and uploaded files"""
    template_name = 'profiles/profile.html'

    def get(self, request, pk):
        profile = store.get_profile(pk)
        return render(request, self.template_name, {
            'profile': profile,
            'is_owner': request.user.pk == profile.user.pk,
            'session_expires_at': session_expiry(request),
        })

    def put(self, request, pk):
        return ProfileEditView.as_view()(request, pk=pk)


class ProfileEditView(ProfileOwnerRequiredMixin, View):
    """Edit form; PUT applies the changes"""
    template_name = 'profiles/edit.html'

    def get(self, request, pk):
        profile = store.get_profile(pk, with_files=False)
        form = ProfileEditForm(instance=profile.user)
        return render(request, self.template_name, {'profile': profile, 'form': form})

    def put(self, request, pk):
        profile = store.get_profile(pk, with_files=False)
        form = ProfileEditForm(_submitted_data(request), request.FILES, instance=profile.user)
        if not form.is_valid():
            return render(request, self.template_name, {'profile': profile, 'form': form})
        store.update_user(profile.user, form)
        messages.success(request, 'Profile updated successfully.')
        return redirect('profiles:profile', pk=pk)
