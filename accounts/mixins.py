from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import redirect


class SessionRequiredMixin(LoginRequiredMixin):
    """Mixin to require an authenticated session; anonymous requests go to /login"""

    def handle_no_permission(self):
        if not self.request.user.is_authenticated:
            messages.error(self.request, 'You must be signed in first!')
        return super().handle_no_permission()


class ProfileOwnerRequiredMixin(SessionRequiredMixin):
    """Mixin to allow only the owner of /caredata/users/<pk> to change it"""

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return self.handle_no_permission()

        if request.user.pk != kwargs.get('pk'):
            messages.error(request, "You don't have permission to do that.")
            return redirect('profiles:profile', pk=request.user.pk)

        return super().dispatch(request, *args, **kwargs)


class DoctorRequiredMixin(ProfileOwnerRequiredMixin):
    """Mixin to require the owner to be registered as a doctor"""

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and request.user.pk == kwargs.get('pk') and not request.user.is_doctor():
            messages.error(request, 'Only doctors can add doctor details.')
            return redirect('profiles:profile', pk=request.user.pk)
        return super().dispatch(request, *args, **kwargs)
