"""Tests for request state and client hydration."""

import pytest
from pydantic import ValidationError
from starlette.requests import Request

from pathlocale.i18n.links import localized_href, switch_locale_href
from pathlocale.i18n.state import I18nState, get_i18n_state


@pytest.fixture
def state() -> I18nState:
    """A resolved state for /ja/about."""
    return I18nState(
        locale="ja",
        path="/about",
        translations={
            "about": {"heading": "私たちについて", "greeting": "{name}さん"},
            "common": {"xss": "</script><script>alert(1)</script>"},
        },
    )


def make_request(path: str = "/") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("test", 80),
            "root_path": "",
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


class TestI18nState:
    """Tests for I18nState."""

    def test_translate(self, state: I18nState):
        """Test lookups through the state."""
        assert state.t("about.heading") == "私たちについて"
        assert state.t("about.greeting", name="太郎") == "太郎さん"
        assert state.t("about.missing") == "about.missing"

    def test_read_only(self, state: I18nState):
        """Test that the published state cannot be reassigned."""
        with pytest.raises(ValidationError):
            state.locale = "en"

    def test_json_round_trip(self, state: I18nState):
        """Test that the client sees the same locale, path and catalog."""
        restored = I18nState.from_json(state.to_json())

        assert restored == state
        assert restored.t("about.heading") == state.t("about.heading")

    def test_hydration_script_escapes_markup(self, state: I18nState):
        """Test that translation values cannot break out of the script tag."""
        script = str(state.hydration_script())

        assert script.startswith('<script id="__i18n_state__" type="application/json">')
        assert script.count("</script>") == 1
        assert "<script>alert" not in script

    def test_hydration_payload_is_valid_json(self, state: I18nState):
        """Test that the escaped payload decodes back to the state."""
        script = str(state.hydration_script(element_id="i18n"))
        payload = script.removeprefix('<script id="i18n" type="application/json">')
        payload = payload.removesuffix("</script>")

        assert I18nState.from_json(payload) == state

    def test_hydration_script_escapes_element_id(self, state: I18nState):
        """Test that the element id cannot inject attributes."""
        script = str(state.hydration_script(element_id='x" onload="alert(1)'))

        assert script.startswith('<script id="x&#34; onload=&#34;alert(1)" type="application/json">')


class TestGetI18nState:
    """Tests for the get_i18n_state dependency."""

    def test_returns_attached_state(self, state: I18nState):
        """Test that the middleware-attached state is returned."""
        request = make_request()
        request.state.i18n = state

        assert get_i18n_state(request) is state

    def test_missing_state(self):
        """Test that using the dependency without the middleware is an error."""
        with pytest.raises(RuntimeError):
            get_i18n_state(make_request("/health"))


class TestLinks:
    """Tests for locale-aware links."""

    @pytest.mark.parametrize(
        ("href", "expected"),
        [
            ("/about", "/ja/about"),
            ("about", "/ja/about"),
            ("/", "/ja/"),
            ("https://example.com/x", "https://example.com/x"),
            ("//cdn.example.com/x", "//cdn.example.com/x"),
            ("#top", "#top"),
        ],
    )
    def test_localized_href(self, href, expected):
        """Test prefixing site paths with the locale."""
        assert localized_href("ja", href) == expected

    def test_switch_locale(self, state: I18nState):
        """Test linking to the current page in another locale."""
        assert switch_locale_href(state, "en") == "/en/about"
        assert switch_locale_href(state, "en", query="page=2") == "/en/about?page=2"
