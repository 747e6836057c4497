from django import forms

from accounts.forms import validate_upload_size
from .models import UploadedFile


class UploadFileForm(forms.ModelForm):
    """Upload a file to the signed-in user's profile"""

    class Meta:
        model = UploadedFile
        fields = ['title', 'description', 'file']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Title'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'file': forms.FileInput(attrs={
                'class': 'form-control',
                'accept': '.pdf,.doc,.docx,.jpg,.jpeg,.png'
            }),
        }

    def clean_file(self):
        return validate_upload_size(self.cleaned_data.get('file'))
