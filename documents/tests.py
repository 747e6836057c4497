import shutil
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, Client, override_settings
from django.urls import reverse

from accounts.models import User
from .models import UploadedFile

MEDIA_ROOT = tempfile.mkdtemp()


def pdf(name='report.pdf'):
    return SimpleUploadedFile(name, b'%PDF-1.4 lab results', content_type='application/pdf')


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class UploadTests(TestCase):
    """Patients upload files to their own profile and nobody else's."""

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        self.client = Client()
        self.patient = User.objects.create_user(
            username='patient1', email='patient@test.com', password='pass',
        )
        self.other = User.objects.create_user(
            username='patient2', email='patient2@test.com', password='pass',
        )
        self.upload_url = reverse('documents:upload', kwargs={'pk': self.patient.pk})
        self.list_url = reverse('documents:file_list', kwargs={'pk': self.patient.pk})

    def test_anonymous_upload_redirects_to_login(self):
        response = self.client.post(self.upload_url, data={'title': 'Blood test', 'file': pdf()})
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))
        self.assertFalse(UploadedFile.objects.exists())

    def test_upload_page_renders_for_owner(self):
        self.client.force_login(self.patient)
        response = self.client.get(self.upload_url)
        self.assertEqual(response.status_code, 200)
        self.assertIn('today', response.context)

    def test_upload_then_list_and_show(self):
        self.client.force_login(self.patient)
        response = self.client.post(self.upload_url, data={
            'title': 'Blood test', 'description': 'March panel', 'file': pdf(),
        })
        self.assertRedirects(response, self.list_url)

        uploaded = UploadedFile.objects.get()
        self.assertEqual(uploaded.user, self.patient)
        self.assertTrue(uploaded.filename.endswith('.pdf'))

        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['profile'].files, [uploaded])

        detail_url = reverse('documents:file_detail', kwargs={'pk': self.patient.pk, 'file_id': uploaded.pk})
        response = self.client.get(detail_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['uploaded'], uploaded)

    def test_upload_without_file_rerenders_form(self):
        self.client.force_login(self.patient)
        response = self.client.post(self.upload_url, data={'title': 'Nothing attached'})
        self.assertEqual(response.status_code, 200)
        self.assertIn('file', response.context['form'].errors)
        self.assertFalse(UploadedFile.objects.exists())

    @override_settings(UPLOAD_MAX_MB=0)
    def test_oversized_upload_is_rejected(self):
        self.client.force_login(self.patient)
        response = self.client.post(self.upload_url, data={'title': 'Too big', 'file': pdf()})
        self.assertEqual(response.status_code, 200)
        self.assertIn('file', response.context['form'].errors)
        self.assertFalse(UploadedFile.objects.exists())

    def test_other_user_cannot_upload_or_list(self):
        self.client.force_login(self.other)
        response = self.client.post(self.upload_url, data={'title': 'Sneaky', 'file': pdf()})
        self.assertEqual(response.status_code, 302)
        self.assertFalse(UploadedFile.objects.exists())

        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('profiles:profile', kwargs={'pk': self.other.pk}))

    def test_file_of_another_user_is_404(self):
        foreign = UploadedFile.objects.create(user=self.other, title='Theirs', file=pdf('theirs.pdf'))
        self.client.force_login(self.patient)
        response = self.client.get(
            reverse('documents:file_detail', kwargs={'pk': self.patient.pk, 'file_id': foreign.pk})
        )
        self.assertEqual(response.status_code, 404)

    def _download_url(self, uploaded):
        return reverse('documents:file_download', kwargs={'pk': self.patient.pk, 'file_id': uploaded.pk})

    def test_owner_downloads_file_through_view(self):
        uploaded = UploadedFile.objects.create(user=self.patient, title='Blood test', file=pdf('lab.pdf'))
        self.client.force_login(self.patient)

        detail = self.client.get(
            reverse('documents:file_detail', kwargs={'pk': self.patient.pk, 'file_id': uploaded.pk})
        )
        self.assertContains(detail, self._download_url(uploaded))
        self.assertNotContains(detail, uploaded.file.url)

        response = self.client.get(self._download_url(uploaded))
        self.assertEqual(response.status_code, 200)
        self.assertIn('attachment', response['Content-Disposition'])
        self.assertEqual(b''.join(response.streaming_content), b'%PDF-1.4 lab results')
        response.close()

    def test_anonymous_download_redirects_to_login(self):
        uploaded = UploadedFile.objects.create(user=self.patient, title='Blood test', file=pdf('lab.pdf'))
        response = self.client.get(self._download_url(uploaded))
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse('accounts:login')))

    def test_other_user_cannot_download(self):
        uploaded = UploadedFile.objects.create(user=self.patient, title='Blood test', file=pdf('lab.pdf'))
        self.client.force_login(self.other)
        response = self.client.get(self._download_url(uploaded))
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('profiles:profile', kwargs={'pk': self.other.pk}))

    def test_file_missing_from_storage(self):
        uploaded = UploadedFile.objects.create(user=self.patient, title='Blood test', file=pdf('lab.pdf'))
        uploaded.file.storage.delete(uploaded.file.name)
        self.client.force_login(self.patient)

        response = self.client.get(
            reverse('documents:file_detail', kwargs={'pk': self.patient.pk, 'file_id': uploaded.pk})
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(uploaded.file_size, '')

        response = self.client.get(self._download_url(uploaded))
        self.assertEqual(response.status_code, 404)
