"""Root conftest: shared fakes and environment isolation."""

from __future__ import annotations

from typing import Any

import pytest

from core.config import SdkSettings


class FakeRest:
    """In-memory `RestTransport`: canned responses keyed by URL, records calls."""

    def __init__(self, responses: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.responses = responses or {}
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.user_agent: str | None = None

    def perform_call(self, url, hashed_key, payload=None, *, method=None):
        self.calls.append({"url": url, "hashed_key": hashed_key, "payload": payload, "method": method})
        if self.error is not None:
            raise self.error
        return self.responses.get(url)

    def set_user_agent(self, user_agent: str) -> None:
        self.user_agent = user_agent


class FakeView:
    """In-memory `TemplateView` that renders 'name:var=value;...'."""

    def __init__(self) -> None:
        self.variables: dict[str, Any] = {}
        self.css = ['<link href="a.css">', '<link href="b.css">']
        self.js = ['<script src="a.js"></script>']
        self.rendered: list[str | None] = []

    def assign(self, name, value):
        self.variables[name] = value

    def assign_multiple(self, values):
        self.variables.update(values)

    def render_template(self, name=None):
        self.rendered.append(name)
        body = ";".join(f"{k}={v}" for k, v in sorted(self.variables.items()))
        return f"{name or 'Default'}:{body}"

    def get_css_tag_strings(self):
        return list(self.css)

    def get_javascript_tag_strings(self):
        return list(self.js)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for key in (
        "ELEFUNDS_CLIENT_ID",
        "ELEFUNDS_API_KEY",
        "ELEFUNDS_API_URL",
        "ELEFUNDS_COUNTRYCODE",
        "ELEFUNDS_TEMPLATES_DIR",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> SdkSettings:
    return SdkSettings(
        _env_file=None,
        client_id=42,
        api_key="secret",
        api_url="https://api.example.com/v1/",
        countrycode="en",
    )


@pytest.fixture
def fake_rest() -> FakeRest:
    return FakeRest()


@pytest.fixture
def fake_view() -> FakeView:
    return FakeView()
