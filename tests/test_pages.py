"""
Tests for the upload page
"""


class TestPages:
    """Upload form and language redirect"""

    def test_root_redirects_to_language(self, client):
        response = client.get("/", headers={"Accept-Language": "ru"})

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/ru/")

    def test_index_renders_form(self, client):
        response = client.get("/en/")

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "Upload Image" in html
        assert 'action="/api/upload-image"' in html
        assert 'name="image"' in html

    def test_index_sets_language_cookie(self, client):
        response = client.get("/ru/")

        assert "site_lang=ru" in response.headers.get("Set-Cookie", "")
        assert "Загрузить" in response.get_data(as_text=True)

    def test_unknown_language(self, client):
        assert client.get("/de/").status_code == 404
