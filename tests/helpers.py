EXPECTED_CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "authorization, x-client-info, apikey, content-type",
    "access-control-allow-methods": "POST, OPTIONS",
}

def assert_cors_headers(response):
    """Assert that the response carries the full CORS header set."""
    for name, value in EXPECTED_CORS_HEADERS.items():
        assert response.headers.get(name) == value, f"Header '{name}' missing or wrong in {dict(response.headers)}"

def assert_error_response(response, status_code, message):
    """Assert a JSON error body with the given status."""
    assert response.status_code == status_code, response.text
    assert response.json() == {"error": message}
    assert_cors_headers(response)
