from django.test import TestCase, Client, RequestFactory, SimpleTestCase
from django.urls import reverse

from .middleware import MethodOverrideMiddleware
from .views import server_error


class FallbackTests(TestCase):
    """Unmatched routes render the 404 page for every verb."""

    def setUp(self):
        self.client = Client()

    def test_unmatched_path_is_404_for_every_verb(self):
        for method in ('get', 'post', 'put', 'patch', 'delete'):
            response = getattr(self.client, method)('/nonexistent')
            self.assertEqual(response.status_code, 404, method)
            self.assertTemplateUsed(response, 'error/error.html')
            self.assertContains(response, 'Page Not Found!', status_code=404)

    def test_trailing_slash_variant_is_not_routed(self):
        response = self.client.get('/caredata/')
        self.assertEqual(response.status_code, 404)

    def test_home_page(self):
        response = self.client.get(reverse('home'))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'home/index.html')


class ServerErrorTests(SimpleTestCase):

    def test_server_error_renders_500_page(self):
        request = RequestFactory().get('/caredata')
        response = server_error(request)
        self.assertEqual(response.status_code, 500)
        self.assertIn(b'Something Went Wrong!', response.content)


class MethodOverrideMiddlewareTests(SimpleTestCase):

    def setUp(self):
        self.factory = RequestFactory()
        self.middleware = MethodOverrideMiddleware(lambda request: None)

    def test_post_with_method_field_becomes_put(self):
        request = self.factory.post('/caredata/users/1', {'_method': 'put', 'full_name': 'A'})
        self.middleware.process_view(request, None, (), {})
        self.assertEqual(request.method, 'PUT')
        self.assertEqual(request.POST['full_name'], 'A')

    def test_unknown_override_is_ignored(self):
        request = self.factory.post('/caredata/users/1', {'_method': 'TRACE'})
        self.middleware.process_view(request, None, (), {})
        self.assertEqual(request.method, 'POST')

    def test_get_is_never_overridden(self):
        request = self.factory.get('/caredata/users/1', {'_method': 'DELETE'})
        self.middleware.process_view(request, None, (), {})
        self.assertEqual(request.method, 'GET')
