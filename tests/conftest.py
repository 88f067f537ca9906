import importlib
import json

import pytest
import requests


class FakeResponse:
    """Minimal stand-in for a streamed :class:`requests.Response`."""

    def __init__(self, status_code=200, body=b"", read_error=None):
        self.status_code = status_code
        self._body = body if isinstance(body, bytes) else body.encode()
        self._read_error = read_error
        self.content_reads = 0
        self.closed = False

    @property
    def content(self):
        self.content_reads += 1
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def json(self, **kwargs):
        return json.loads(self.content, **kwargs)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


def payload(*records):
    return json.dumps({"Records": list(records)})


@pytest.fixture
def fake_get(monkeypatch):
    """Patch ``requests.get`` to return a queued response and record calls."""
    state = {"calls": [], "response": FakeResponse(body=payload({}))}

    def _get(url, *a, **kw):
        state["calls"].append({"url": url, **kw})
        return state["response"]

    monkeypatch.setattr(requests, "get", _get)
    return state


@pytest.fixture
def main_module():
    import main

    return importlib.reload(main)
