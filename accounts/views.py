import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.shortcuts import render, redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme, urlencode
from django.views.decorators.http import require_POST
from django.views.generic import FormView

from . import credentials
from .exceptions import DuplicateIdentity, InvalidCredentials
from .forms import RegistrationForm, LoginForm
from .sessions import start_session, end_session

logger = logging.getLogger(__name__)


class RegisterView(FormView):
    """User registration view; a successful registration also signs the user in"""
    form_class = RegistrationForm
    template_name = 'accounts/register.html'

    def form_valid(self, form):
        data = form.cleaned_data
        try:
            user = credentials.register(
                data['username'],
                data['email'],
                data['password'],
                full_name=data['full_name'],
                entry_type=data['entry_type'],
                image=data.get('image'),
            )
        except DuplicateIdentity as exc:
            messages.error(self.request, exc.message)
            return redirect('accounts:register')
        except ValidationError as exc:
            form.add_error(None, exc)
            return self.form_invalid(form)

        start_session(self.request, user)
        messages.success(self.request, 'Welcome to CareData')
        return redirect('profiles:profile', pk=user.pk)


def login_view(request):
    """Username/password login"""
    if request.user.is_authenticated:
        return redirect('home')

    next_url = request.POST.get('next') or request.GET.get('next', '')

    if request.method == 'POST':
        form = LoginForm(request.POST)
        if form.is_valid():
            try:
                user = credentials.authenticate(
                    form.cleaned_data['username'],
                    form.cleaned_data['password'],
                    request=request,
                )
            except InvalidCredentials as exc:
                messages.error(request, exc.message)
                if next_url:
                    return redirect(f"{reverse('accounts:login')}?{urlencode({'next': next_url})}")
                return redirect('accounts:login')

            start_session(request, user)
            messages.success(request, 'Welcome back to CareData :)')
            if next_url and url_has_allowed_host_and_scheme(
                next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
            ):
                return redirect(next_url)
            return redirect('home')
    else:
        form = LoginForm()

    return render(request, 'accounts/login.html', {'form': form, 'next': next_url})


@require_POST
def logout_view(request):
    end_session(request)
    messages.success(request, "You're Logged Out Now!")
    return redirect('home')
