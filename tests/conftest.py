import pytest, requests

from config import Config
from context import AppContext


class FakeResponse:
    def __init__(self, content=b"", status_code=200, json_data=None):
        self.content = content
        self.status_code = status_code
        self._json = json_data if json_data is not None else {"ok": True}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self._json


class FakeChat:
    def __init__(self):
        self.texts = []
        self.videos = []

    async def reply_text(self, text):
        self.texts.append(text)

    async def reply_video(self, path):
        with open(path, "rb") as f:
            self.videos.append((path, f.read()))


@pytest.fixture
def upload_dir(tmp_path):
    d = tmp_path / "uploads"
    d.mkdir()
    return d


@pytest.fixture
def ctx(upload_dir):
    return AppContext(Config(
        bot_token="123:abc",
        rapidapi_key="secret-key",
        upload_dir=str(upload_dir),
        fetch_timeout=5,
    ))


class PostRecorder:
    def __init__(self):
        self.calls = []
        self.responses = [FakeResponse(b"video-bytes")]

    def respond_with(self, *responses):
        # consumed in order, the last one repeats
        self.responses = list(responses)

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        result = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_post(monkeypatch):
    recorder = PostRecorder()
    monkeypatch.setattr(requests, "post", recorder)
    return recorder


@pytest.fixture
def chat():
    return FakeChat()
