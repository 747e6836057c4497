from django import forms
from django.conf import settings

from .models import User


class RegistrationForm(forms.Form):
    """Registration form with patient/doctor selection"""

    ENTRY_TYPE_CHOICES = [('', 'Register as')] + User.ENTRY_TYPE_CHOICES

    full_name = forms.CharField(
        max_length=150,
        required=True,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Full Name'
        })
    )
    username = forms.CharField(
        max_length=150,
        required=True,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Username'
        })
    )
    email = forms.EmailField(
        required=True,
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'Email address'
        })
    )
    entry_type = forms.ChoiceField(
        choices=ENTRY_TYPE_CHOICES,
        required=True,
        widget=forms.Select(attrs={
            'class': 'form-control'
        })
    )
    image = forms.ImageField(
        required=False,
        widget=forms.FileInput(attrs={
            'class': 'form-control',
            'accept': 'image/*'
        })
    )
    password = forms.CharField(
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': 'Password'
        })
    )
    confirm_password = forms.CharField(
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': 'Confirm Password'
        })
    )

    def clean_image(self):
        return validate_upload_size(self.cleaned_data.get('image'))

    def clean(self):
        cleaned_data = super().clean()
        password = cleaned_data.get('password')
        confirm = cleaned_data.get('confirm_password')
        if password and confirm and password != confirm:
            raise forms.ValidationError({'confirm_password': "The two password fields didn't match."})
        return cleaned_data


class LoginForm(forms.Form):
    """Login with username and password"""

    username = forms.CharField(
        max_length=150,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Username'
        })
    )
    password = forms.CharField(
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': 'Password'
        })
    )


def validate_upload_size(upload):
    if upload and upload.size > settings.UPLOAD_MAX_MB * 1024 * 1024:
        raise forms.ValidationError(f'File is too large (max {settings.UPLOAD_MAX_MB} MB).')
    return upload
