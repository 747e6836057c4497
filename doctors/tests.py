from decimal import Decimal

from django.test import TestCase, Client
from django.urls import reverse

from accounts.models import User
from profiles import store
from .models import DoctorDetails


DETAILS = {
    'specialization': 'CARDIOLOGY',
    'qualification': 'MBBS, MD',
    'experience_years': 12,
    'hospital': 'City Heart Clinic',
    'consultation_fee': '45.50',
    'phone_number': '555-0101',
    'bio': 'Interventional cardiologist.',
}


class AddDoctorDetailsTests(TestCase):
    """Doctor details round-trip and who may write them."""

    def setUp(self):
        self.client = Client()
        self.doctor = User.objects.create_user(
            username='doctor1', email='doctor@test.com', password='pass', entry_type='DOCTOR',
        )
        self.url = reverse('doctors:add_details', kwargs={'pk': self.doctor.pk})

    def test_anonymous_redirects_to_login_and_creates_nothing(self):
        response = self.client.post(self.url, data=DETAILS)
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))
        self.assertFalse(DoctorDetails.objects.exists())

    def test_form_renders_for_owner(self):
        self.client.force_login(self.doctor)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)

    def test_details_round_trip(self):
        self.client.force_login(self.doctor)
        response = self.client.post(self.url, data=DETAILS)
        self.assertRedirects(response, reverse('profiles:profile', kwargs={'pk': self.doctor.pk}))

        details = store.get_profile(self.doctor.pk).doctor_details
        self.assertIsNotNone(details)
        self.assertEqual(details.specialization, 'CARDIOLOGY')
        self.assertEqual(details.qualification, 'MBBS, MD')
        self.assertEqual(details.experience_years, 12)
        self.assertEqual(details.hospital, 'City Heart Clinic')
        self.assertEqual(details.consultation_fee, Decimal('45.50'))
        self.assertEqual(details.phone_number, '555-0101')
        self.assertEqual(details.bio, 'Interventional cardiologist.')

    def test_resubmitting_updates_in_place(self):
        self.client.force_login(self.doctor)
        self.client.post(self.url, data=DETAILS)
        first_id = store.get_profile(self.doctor.pk).doctor_details.pk

        self.client.post(self.url, data={**DETAILS, 'experience_years': 13})
        details = store.get_profile(self.doctor.pk).doctor_details
        self.assertEqual(details.pk, first_id)
        self.assertEqual(details.experience_years, 13)
        self.assertEqual(DoctorDetails.objects.count(), 1)

    def test_invalid_details_rerender_form(self):
        self.client.force_login(self.doctor)
        response = self.client.post(self.url, data={**DETAILS, 'qualification': '', 'consultation_fee': '-1'})
        self.assertEqual(response.status_code, 200)
        self.assertIn('qualification', response.context['form'].errors)
        self.assertIn('consultation_fee', response.context['form'].errors)
        self.assertFalse(DoctorDetails.objects.exists())

    def test_other_doctor_cannot_write_details(self):
        other = User.objects.create_user(
            username='doctor2', email='doctor2@test.com', password='pass', entry_type='DOCTOR',
        )
        self.client.force_login(other)
        response = self.client.post(self.url, data=DETAILS)
        self.assertEqual(response.status_code, 302)
        self.assertFalse(DoctorDetails.objects.exists())
        self.doctor.refresh_from_db()
        self.assertIsNone(self.doctor.doctor_details)

    def test_patient_cannot_add_details(self):
        patient = User.objects.create_user(
            username='patient1', email='patient@test.com', password='pass', entry_type='PATIENT',
        )
        self.client.force_login(patient)
        response = self.client.post(reverse('doctors:add_details', kwargs={'pk': patient.pk}), data=DETAILS)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('profiles:profile', kwargs={'pk': patient.pk}))
        self.assertFalse(DoctorDetails.objects.exists())


class DoctorListTests(TestCase):

    def test_lists_only_doctors_with_details(self):
        details = DoctorDetails.objects.create(specialization='PEDIATRICS', qualification='MD')
        User.objects.create_user(
            username='doc', email='doc@test.com', password='pass', entry_type='DOCTOR',
            full_name='Dr. Doc', doctor_details=details,
        )
        User.objects.create_user(username='pat', email='pat@test.com', password='pass', full_name='Pat')

        response = self.client.get(reverse('doctors:doctor_list'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([p.user.username for p in response.context['doctors']], ['doc'])
        self.assertContains(response, 'Pediatrics')

    def test_doctors_profile_page_is_public(self):
        response = self.client.get(reverse('doctors:doctors_profile'))
        self.assertEqual(response.status_code, 200)
