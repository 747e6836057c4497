from django import forms
from django.contrib.auth import get_user_model

from accounts.forms import validate_upload_size

User = get_user_model()


class ProfileEditForm(forms.ModelForm):
    """Form for editing the display name, email and image of a user"""
    full_name = forms.CharField(max_length=150, required=True)

    class Meta:
        model = User
        fields = ['full_name', 'email', 'image']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields:
            if hasattr(self.fields[field], 'widget') and 'class' not in self.fields[field].widget.attrs:
                self.fields[field].widget.attrs['class'] = 'form-control'

    def clean_email(self):
        email = self.cleaned_data.get('email', '').strip()
        if User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise forms.ValidationError('A user with the given email is already registered.')
        return email

    def clean_image(self):
        return validate_upload_size(self.cleaned_data.get('image'))
