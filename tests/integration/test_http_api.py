"""End-to-end HTTP tests — upload, fetch, list, health via TestClient."""

from __future__ import annotations

from fastapi.testclient import TestClient

from mdpublish.api.app import create_app
from mdpublish.config import AppConfig


def _upload(client: TestClient, content: bytes, filename="hello.md", content_type="text/markdown"):
    return client.post("/upload", files={"file": (filename, content, content_type)})


def _path_of(url: str) -> str:
    return "/" + url.rsplit("/", 1)[1]


class TestUpload:
    def test_hello_world_scenario(self, client: TestClient):
        response = _upload(client, b"# Hello\n\nWorld")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "File uploaded and converted successfully"
        assert body["url"].endswith(".html")

        page = client.get(_path_of(body["url"]))
        assert page.status_code == 200
        assert page.headers["content-type"].startswith("text/html")
        assert "<h1>Hello</h1>" in page.text
        assert "<p>World</p>" in page.text

    def test_url_points_at_this_server_by_default(self, client: TestClient):
        url = _upload(client, b"# x").json()["url"]
        assert url.startswith("http://testserver/")

    def test_configured_public_base_url(self, app_config: AppConfig):
        cfg = app_config.model_copy(update={"public_base_url": "https://pages.example.com"})
        client = TestClient(create_app(cfg))
        url = _upload(client, b"# x").json()["url"]
        assert url.startswith("https://pages.example.com/")

    def test_unsupported_type_rejected(self, client: TestClient):
        before = len(client.get("/files").json()["files"])
        response = _upload(client, b"hello", filename="notes.txt", content_type="text/plain")
        assert response.status_code == 400
        assert response.json()["code"] == "UnsupportedFileType"
        assert "error" in response.json()
        assert len(client.get("/files").json()["files"]) == before

    def test_empty_body_is_missing_file(self, client: TestClient):
        response = _upload(client, b"")
        assert response.status_code == 400
        assert response.json()["code"] == "MissingFile"

    def test_no_file_field_is_missing_file(self, client: TestClient):
        response = client.post("/upload", data={"other": "value"})
        assert response.status_code == 400
        assert response.json()["code"] == "MissingFile"

    def test_text_field_instead_of_file_is_missing_file(self, client: TestClient):
        response = client.post("/upload", data={"file": "# not a file"})
        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded", "code": "MissingFile"}
        assert client.get("/files").json()["files"] == []

    def test_openapi_documents_file_part(self, client: TestClient):
        schema = client.get("/openapi.json").json()
        body = schema["paths"]["/upload"]["post"]["requestBody"]
        assert "multipart/form-data" in body["content"]

    def test_md_extension_with_generic_type(self, client: TestClient):
        response = _upload(client, b"# x", content_type="application/octet-stream")
        assert response.status_code == 200

    def test_conversion_failure_is_500(self, client: TestClient, monkeypatch):
        from mdpublish.core import identifiers
        from mdpublish.core.errors import AllocatorUnavailableError

        def _no_entropy() -> str:
            raise AllocatorUnavailableError("no entropy")

        monkeypatch.setattr(identifiers, "allocate", _no_entropy)
        response = _upload(client, b"# x")
        assert response.status_code == 500
        assert response.json() == {
            "error": "Error processing the file",
            "code": "ConversionFailed",
        }
        assert client.get("/files").json()["files"] == []


class TestFiles:
    def test_empty_listing(self, client: TestClient):
        assert client.get("/files").json() == {"files": []}

    def test_listing_after_uploads(self, client: TestClient):
        urls = [_upload(client, f"# Doc {i}".encode()).json()["url"] for i in range(3)]
        files = client.get("/files").json()["files"]
        assert len(files) == 3
        assert {f["url"] for f in files} == set(urls)
        for entry in files:
            assert set(entry) == {"id", "createdAt", "size", "url"}
            page = client.get(_path_of(entry["url"]))
            assert entry["size"] == len(page.content)

    def test_store_unavailable_is_503(self, client: TestClient, app_config: AppConfig):
        app_config.pages_path.rmdir()
        response = client.get("/files")
        assert response.status_code == 503
        assert response.json()["code"] == "StoreUnavailable"


class TestPageRetrieval:
    def test_unknown_page_404(self, client: TestClient):
        response = client.get("/6f9619ff-8b86-4d01-b42d-00cf4fc964ff.html")
        assert response.status_code == 404
        assert response.json()["code"] == "NotFound"

    def test_malformed_id_404(self, client: TestClient):
        assert client.get("/not-a-page.html").status_code == 404

    def test_repeated_fetch_identical(self, client: TestClient):
        path = _path_of(_upload(client, b"# same").json()["url"])
        first = client.get(path).content
        assert all(client.get(path).content == first for _ in range(3))


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"
