from django import forms

from .models import DoctorDetails


class DoctorDetailsForm(forms.ModelForm):
    """Form for the 'add details' page of a doctor"""

    class Meta:
        model = DoctorDetails
        fields = [
            'specialization', 'qualification', 'experience_years',
            'hospital', 'consultation_fee', 'phone_number', 'bio'
        ]
        widgets = {
            'bio': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields:
            if 'class' not in self.fields[field].widget.attrs:
                self.fields[field].widget.attrs['class'] = 'form-control'

    def clean_experience_years(self):
        years = self.cleaned_data.get('experience_years')
        if years is not None and years > 80:
            raise forms.ValidationError('Please enter a realistic number of years.')
        return years

    def clean_consultation_fee(self):
        fee = self.cleaned_data.get('consultation_fee')
        if fee is not None and fee < 0:
            raise forms.ValidationError('Consultation fee cannot be negative.')
        return fee
