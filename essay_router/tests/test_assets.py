from fastapi.testclient import TestClient

from essay_router.api.app import create_app
from essay_router.api.assets import StaticAssets
from essay_router.api.chat import ChatHandler
from essay_router.tests.fakes import TEST_CONFIG, FakeInference


def _client(directory):
    handler = ChatHandler(FakeInference(), TEST_CONFIG)
    return TestClient(create_app(chat_handler=handler, assets=StaticAssets(str(directory))))


def test_static_index_and_files(tmp_path):
    (tmp_path / "index.html").write_text("<h1>essay</h1>", encoding="utf-8")
    (tmp_path / "chat.js").write_text("console.log(1)", encoding="utf-8")
    client = _client(tmp_path)

    root = client.get("/")
    assert root.status_code == 200
    assert root.text == "<h1>essay</h1>"

    js = client.get("/chat.js")
    assert js.status_code == 200
    assert js.text == "console.log(1)"


def test_static_missing_file(tmp_path):
    client = _client(tmp_path)
    assert client.get("/missing.txt").status_code == 404


def test_static_rejects_post(tmp_path):
    (tmp_path / "index.html").write_text("x", encoding="utf-8")
    client = _client(tmp_path)
    assert client.post("/index.html").status_code == 405
