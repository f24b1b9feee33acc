"""Tests for toast notifications."""

import json

import pytest
from fastapi.responses import HTMLResponse

from book_catalog.modules.notifications import Toast, ToastNotifier, ToastOptions, ToastType


@pytest.fixture
def notifier() -> ToastNotifier:
    return ToastNotifier(ToastOptions(auto_close=3000, position="bottom-left", theme="dark"))


def test_toast_uses_notifier_options(notifier: ToastNotifier):
    toast = notifier.success("Saved")

    assert toast.type == ToastType.SUCCESS
    assert toast.auto_close == 3000
    assert toast.position == "bottom-left"
    assert toast.theme == "dark"


def test_default_options():
    toast = ToastNotifier().toast("Hello")

    assert toast.type == ToastType.DEFAULT
    assert toast.auto_close == 5000
    assert toast.position == "top-right"


@pytest.mark.parametrize(
    "method, expected",
    [("info", ToastType.INFO), ("success", ToastType.SUCCESS), ("warning", ToastType.WARNING), ("error", ToastType.ERROR)],
)
def test_shortcuts(notifier: ToastNotifier, method, expected):
    assert getattr(notifier, method)("message").type == expected


def test_attach_sets_hx_trigger(notifier: ToastNotifier):
    """Test that toasts are sent as a ``showToast`` event with camelCase options."""
    response = notifier.attach(HTMLResponse(""), notifier.error("Boom"), notifier.info("Retry later"))

    events = json.loads(response.headers["HX-Trigger"])
    assert events["showToast"] == [
        {"autoClose": 3000, "position": "bottom-left", "theme": "dark", "message": "Boom", "type": "error"},
        {"autoClose": 3000, "position": "bottom-left", "theme": "dark", "message": "Retry later", "type": "info"},
    ]


def test_attach_keeps_existing_events(notifier: ToastNotifier):
    response = HTMLResponse("", headers={"HX-Trigger": "bookListChanged"})

    notifier.attach(response, notifier.success("Added"))

    events = json.loads(response.headers["HX-Trigger"])
    assert "bookListChanged" in events
    assert events["showToast"][0]["message"] == "Added"


def test_attach_without_toasts_is_noop(notifier: ToastNotifier):
    response = notifier.attach(HTMLResponse(""))

    assert "HX-Trigger" not in response.headers


def test_empty_message_rejected():
    with pytest.raises(ValueError):
        Toast(message="")
