from django.test import TestCase, Client
from django.urls import reverse

from accounts.models import User
from doctors.models import DoctorDetails
from . import store


class ProfileAccessTests(TestCase):
    """Profile routes are gated: reads need a session, writes need ownership."""

    def setUp(self):
        self.client = Client()
        self.alice = User.objects.create_user(
            username='alice', email='alice@test.com', password='pass', full_name='Alice',
        )
        self.bob = User.objects.create_user(
            username='bob', email='bob@test.com', password='pass', full_name='Bob',
        )
        self.profile_url = reverse('profiles:profile', kwargs={'pk': self.alice.pk})
        self.edit_url = reverse('profiles:edit', kwargs={'pk': self.alice.pk})

    def test_anonymous_profile_view_redirects_to_login(self):
        response = self.client.get(self.profile_url)
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))
        self.assertIn('next=', response.url)

    def test_anonymous_edit_form_redirects_to_login(self):
        response = self.client.get(self.edit_url)
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))

    def test_anonymous_put_does_not_mutate(self):
        response = self.client.post(self.profile_url, data={
            '_method': 'PUT', 'full_name': 'Hacked', 'email': 'alice@test.com',
        })
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, 'Alice')

    def test_signed_in_user_can_view_other_profile(self):
        self.client.force_login(self.bob)
        response = self.client.get(self.profile_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['profile'].user, self.alice)
        self.assertFalse(response.context['is_owner'])

    def test_other_user_cannot_edit(self):
        self.client.force_login(self.bob)
        response = self.client.get(self.edit_url)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('profiles:profile', kwargs={'pk': self.bob.pk}))

        response = self.client.post(self.profile_url, data={
            '_method': 'PUT', 'full_name': 'Hacked', 'email': 'alice@test.com',
        })
        self.assertEqual(response.status_code, 302)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, 'Alice')

    def test_missing_user_is_404(self):
        self.client.force_login(self.alice)
        response = self.client.get(reverse('profiles:profile', kwargs={'pk': 9999}))
        self.assertEqual(response.status_code, 404)


class ProfileEditTests(TestCase):

    def setUp(self):
        self.client = Client()
        self.alice = User.objects.create_user(
            username='alice', email='alice@test.com', password='pass', full_name='Alice',
        )
        self.client.force_login(self.alice)
        self.profile_url = reverse('profiles:profile', kwargs={'pk': self.alice.pk})
        self.edit_url = reverse('profiles:edit', kwargs={'pk': self.alice.pk})

    def test_edit_form_renders(self):
        response = self.client.get(self.edit_url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'name="_method" value="PUT"')

    def test_method_override_put_updates_profile(self):
        response = self.client.post(self.profile_url, data={
            '_method': 'PUT', 'full_name': 'Alice Adams', 'email': 'adams@test.com',
        })
        self.assertRedirects(response, self.profile_url)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, 'Alice Adams')
        self.assertEqual(self.alice.email, 'adams@test.com')

    def test_direct_put_on_edit_route(self):
        response = self.client.put(
            self.edit_url,
            data='full_name=Alice+Direct&email=alice%40test.com',
            content_type='application/x-www-form-urlencoded',
        )
        self.assertEqual(response.status_code, 302)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, 'Alice Direct')

    def test_email_taken_by_other_user_is_rejected(self):
        User.objects.create_user(username='bob', email='bob@test.com', password='pass')
        response = self.client.post(self.profile_url, data={
            '_method': 'PUT', 'full_name': 'Alice', 'email': 'BOB@test.com',
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn('email', response.context['form'].errors)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.email, 'alice@test.com')

    def test_owner_sees_session_expiry(self):
        response = self.client.get(self.profile_url)
        self.assertTrue(response.context['is_owner'])
        self.assertEqual(response.context['session_expires_at'], self.client.session.get_expiry_date())

    def test_plain_post_is_not_allowed(self):
        response = self.client.post(self.profile_url, data={'full_name': 'X', 'email': 'alice@test.com'})
        self.assertEqual(response.status_code, 405)


class ProfileStoreTests(TestCase):

    def test_profile_joins_details_and_files(self):
        doctor = User.objects.create_user(
            username='doc', email='doc@test.com', password='pass', entry_type='DOCTOR',
        )
        details = DoctorDetails.objects.create(specialization='NEUROLOGY', qualification='MD', experience_years=4)
        doctor.doctor_details = details
        doctor.save()

        profile = store.get_profile(doctor.pk)
        self.assertEqual(profile.user, doctor)
        self.assertEqual(profile.doctor_details, details)
        self.assertEqual(profile.files, [])
        self.assertTrue(profile.is_doctor)

    def test_list_doctors_excludes_patients_and_inactive(self):
        User.objects.create_user(username='pat', email='pat@test.com', password='pass')
        User.objects.create_user(
            username='gone', email='gone@test.com', password='pass', entry_type='DOCTOR', is_active=False,
        )
        active = User.objects.create_user(
            username='doc', email='doc@test.com', password='pass', entry_type='DOCTOR',
        )
        self.assertEqual([p.user for p in store.list_doctors()], [active])
