"""
Tests for the edge middleware chain.
Runs against the real URL configuration, so each test sees the full
settings.MIDDLEWARE pipeline.
"""
from django.test import SimpleTestCase, override_settings


class CorsMiddlewareTest(SimpleTestCase):
    origin = 'http://localhost:5173'

    def test_headers_on_cross_origin_response(self):
        response = self.client.get('/health', HTTP_ORIGIN=self.origin)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], '*')

    def test_same_origin_request_has_no_cors_headers(self):
        response = self.client.get('/health')
        self.assertNotIn('Access-Control-Allow-Origin', response)

    def test_preflight_answered_without_view(self):
        response = self.client.options(
            '/todos/anything/toggle',
            HTTP_ORIGIN=self.origin,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], '*')
        self.assertIn('DELETE', response['Access-Control-Allow-Methods'])
        allowed_headers = response['Access-Control-Allow-Headers'].lower()
        self.assertIn('content-type', allowed_headers)
        self.assertIn('x-request-start', allowed_headers)

    @override_settings(
        CORS_ALLOW_ALL_ORIGINS=False,
        CORS_ALLOWED_ORIGINS=['https://todo.example.com'],
    )
    def test_configured_origins(self):
        response = self.client.get('/health', HTTP_ORIGIN='https://todo.example.com')
        self.assertEqual(response['Access-Control-Allow-Origin'], 'https://todo.example.com')

        response = self.client.get('/health', HTTP_ORIGIN='https://elsewhere.example.com')
        self.assertNotIn('Access-Control-Allow-Origin', response)


class JsonErrorMiddlewareTest(SimpleTestCase):
    def test_unknown_path_gets_json_error(self):
        response = self.client.get('/nope')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "not found"})

    def test_method_not_allowed_keeps_allow_header(self):
        response = self.client.put('/todos')
        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json(), {"error": "method not allowed"})
        self.assertEqual(response['Allow'], 'GET, POST')


class RequestLogMiddlewareTest(SimpleTestCase):
    def test_request_is_logged(self):
        with self.assertLogs('apps.core.middleware', level='INFO') as logs:
            self.client.get('/health')
        self.assertTrue(any('GET /health 200' in line for line in logs.output))
