import shutil
import tempfile
from datetime import timedelta
from io import StringIO

from django.contrib.messages import get_messages
from django.contrib.sessions.models import Session
from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.test import TestCase, Client, override_settings
from django.urls import reverse
from django.utils import timezone
from django.utils.http import urlencode

from . import credentials
from .exceptions import DuplicateIdentity, InvalidCredentials
from .models import User

PASSWORD = 'Care-Data-2024!'

TINY_GIF = (
    b'GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00'
    b',\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;'
)


class CredentialStoreTests(TestCase):
    """register/authenticate against the hashed password store."""

    def test_register_hashes_password(self):
        user = credentials.register('alice', 'alice@test.com', PASSWORD, full_name='Alice A')
        self.assertNotEqual(user.password, PASSWORD)
        self.assertTrue(user.check_password(PASSWORD))
        self.assertEqual(user.entry_type, 'PATIENT')

    def test_duplicate_username_fails_and_first_user_stays_valid(self):
        first = credentials.register('alice', 'alice@test.com', PASSWORD)
        with self.assertRaises(DuplicateIdentity):
            credentials.register('alice', 'other@test.com', 'Another-Secret-77')
        self.assertEqual(User.objects.filter(username='alice').count(), 1)
        self.assertEqual(credentials.authenticate('alice', PASSWORD), first)

    def test_duplicate_email_is_case_insensitive(self):
        credentials.register('alice', 'alice@test.com', PASSWORD)
        with self.assertRaises(DuplicateIdentity):
            credentials.register('alice2', 'ALICE@test.com', PASSWORD)

    def test_duplicate_username_is_case_insensitive(self):
        credentials.register('alice', 'alice@test.com', PASSWORD)
        with self.assertRaises(DuplicateIdentity):
            credentials.register('Alice', 'alice2@test.com', PASSWORD)

    def test_malformed_input_raises_validation_error(self):
        with self.assertRaises(ValidationError):
            credentials.register('', 'alice@test.com', PASSWORD)
        with self.assertRaises(ValidationError):
            credentials.register('bob', 'bob@test.com', PASSWORD, entry_type='NURSE')
        with self.assertRaises(ValidationError):
            credentials.register('carol', 'carol@test.com', '123')
        self.assertFalse(User.objects.exists())

    def test_malformed_username_and_email_are_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            credentials.register('bad name <x>', 'ok@test.com', PASSWORD)
        self.assertIn('username', ctx.exception.message_dict)
        with self.assertRaises(ValidationError) as ctx:
            credentials.register('gooduser', 'not-an-email', PASSWORD)
        self.assertIn('email', ctx.exception.message_dict)
        self.assertFalse(User.objects.exists())

    def test_wrong_password_never_returns_user(self):
        credentials.register('alice', 'alice@test.com', PASSWORD)
        for attempt in ('wrong', '', PASSWORD.upper(), PASSWORD + ' '):
            with self.assertRaises(InvalidCredentials):
                credentials.authenticate('alice', attempt)

    def test_unknown_user_is_invalid_credentials(self):
        with self.assertRaises(InvalidCredentials):
            credentials.authenticate('ghost', PASSWORD)

    def test_inactive_user_cannot_authenticate(self):
        user = credentials.register('alice', 'alice@test.com', PASSWORD)
        user.is_active = False
        user.save()
        with self.assertRaises(InvalidCredentials):
            credentials.authenticate('alice', PASSWORD)


class RegisterViewTests(TestCase):

    def setUp(self):
        self.client = Client()

    def _payload(self, **overrides):
        data = {
            'full_name': 'Alice Adams',
            'username': 'alice',
            'email': 'alice@test.com',
            'entry_type': 'PATIENT',
            'password': PASSWORD,
            'confirm_password': PASSWORD,
        }
        data.update(overrides)
        return data

    def test_register_page_renders(self):
        response = self.client.get(reverse('accounts:register'))
        self.assertEqual(response.status_code, 200)

    def test_register_signs_in_and_redirects_to_profile(self):
        response = self.client.post(reverse('accounts:register'), data=self._payload())
        user = User.objects.get(username='alice')
        self.assertRedirects(response, reverse('profiles:profile', kwargs={'pk': user.pk}))
        self.assertEqual(int(self.client.session['_auth_user_id']), user.pk)
        self.assertEqual(user.full_name, 'Alice Adams')
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertIn('Welcome to CareData', messages)

    def test_duplicate_registration_redirects_back_to_form(self):
        self.client.post(reverse('accounts:register'), data=self._payload())
        other = Client()
        response = other.post(reverse('accounts:register'), data=self._payload(email='new@test.com'))
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('accounts:register'))
        self.assertEqual(User.objects.count(), 1)
        self.assertNotIn('_auth_user_id', other.session)

    def test_password_mismatch_rerenders_form(self):
        response = self.client.post(
            reverse('accounts:register'),
            data=self._payload(confirm_password='Something-Else-1'),
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context['form'].errors)
        self.assertFalse(User.objects.exists())

    def test_weak_password_rerenders_form(self):
        response = self.client.post(
            reverse('accounts:register'),
            data=self._payload(password='12345', confirm_password='12345'),
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context['form'].non_field_errors())
        self.assertFalse(User.objects.exists())

    def test_malformed_username_rerenders_form(self):
        response = self.client.post(reverse('accounts:register'), data=self._payload(username='bad name <x>'))
        self.assertEqual(response.status_code, 200)
        self.assertIn('username', response.context['form'].errors)
        self.assertFalse(User.objects.exists())

    def test_register_doctor_with_profile_image(self):
        media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, media_root, ignore_errors=True)
        image = SimpleUploadedFile('me.gif', TINY_GIF, content_type='image/gif')
        with override_settings(MEDIA_ROOT=media_root):
            response = self.client.post(
                reverse('accounts:register'),
                data=self._payload(entry_type='DOCTOR', image=image),
            )
        self.assertEqual(response.status_code, 302)
        user = User.objects.get(username='alice')
        self.assertTrue(user.is_doctor())
        self.assertTrue(user.image.name.startswith('user_images/'))


class LoginSessionTests(TestCase):
    """Session issued at login: stable identity, fixed 7 day expiry, logout."""

    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(
            username='patient1', email='patient@test.com', password=PASSWORD, entry_type='PATIENT',
        )
        self.profile_url = reverse('profiles:profile', kwargs={'pk': self.user.pk})

    def _login(self, **extra):
        data = {'username': 'patient1', 'password': PASSWORD}
        data.update(extra)
        return self.client.post(reverse('accounts:login'), data=data)

    def test_login_redirects_home(self):
        response = self._login()
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('home'))

    def test_session_resolves_to_same_user_on_every_request(self):
        self._login()
        for _ in range(3):
            response = self.client.get(self.profile_url)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.wsgi_request.user.pk, self.user.pk)

    def test_session_cookie_is_named_session_and_http_only(self):
        self._login()
        cookie = self.client.cookies['session']
        self.assertTrue(cookie.value)
        self.assertTrue(cookie['httponly'])

    def test_expiry_is_fixed_seven_days_from_login(self):
        self._login()
        expiry = self.client.session.get_expiry_date()
        remaining = (expiry - timezone.now()).total_seconds()
        self.assertAlmostEqual(remaining, 7 * 24 * 60 * 60, delta=60)

        self.client.get(self.profile_url)
        self.client.get(reverse('home'))
        self.assertEqual(self.client.session.get_expiry_date(), expiry)

    def test_expired_session_is_anonymous(self):
        self._login()
        key = self.client.cookies['session'].value
        Session.objects.filter(session_key=key).update(expire_date=timezone.now() - timedelta(seconds=1))
        response = self.client.get(self.profile_url)
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))

    def test_login_rotates_session_key(self):
        self.client.get(reverse('accounts:login'))
        self.client.session.save()
        before = self.client.cookies['session'].value
        self._login()
        self.assertNotEqual(self.client.cookies['session'].value, before)

    def test_wrong_password_redirects_to_login(self):
        response = self._login(password='not-the-password')
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('accounts:login'))
        self.assertNotIn('_auth_user_id', self.client.session)

    def test_wrong_password_keeps_next(self):
        target = reverse('documents:file_list', kwargs={'pk': self.user.pk})
        response = self._login(password='not-the-password', next=target)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, f"{reverse('accounts:login')}?{urlencode({'next': target})}")
        response = self.client.get(response.url)
        self.assertEqual(response.context['next'], target)

    def test_login_follows_safe_next(self):
        target = reverse('documents:file_list', kwargs={'pk': self.user.pk})
        response = self._login(next=target)
        self.assertEqual(response.url, target)

    def test_login_ignores_external_next(self):
        response = self._login(next='https://evil.example.com/')
        self.assertEqual(response.url, reverse('home'))

    def test_authenticated_user_visiting_login_goes_home(self):
        self.client.force_login(self.user)
        response = self.client.get(reverse('accounts:login'))
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('home'))

    def test_logout_ends_session(self):
        self._login()
        response = self.client.post(reverse('accounts:logout'))
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('home'))
        self.assertNotIn('_auth_user_id', self.client.session)
        response = self.client.get(self.profile_url)
        self.assertEqual(response.status_code, 302)

    def test_logout_requires_post(self):
        self._login()
        response = self.client.get(reverse('accounts:logout'))
        self.assertEqual(response.status_code, 405)
        self.assertIn('_auth_user_id', self.client.session)


class CreateAdminCommandTests(TestCase):

    def test_creates_superuser_once(self):
        out = StringIO()
        call_command('createadmin', '--password', PASSWORD, stdout=out)
        admin = User.objects.get(username='admin')
        self.assertTrue(admin.is_superuser)
        self.assertTrue(admin.check_password(PASSWORD))

        call_command('createadmin', '--password', PASSWORD, stdout=out)
        self.assertEqual(User.objects.filter(username='admin').count(), 1)
        self.assertIn('already exists', out.getvalue())
