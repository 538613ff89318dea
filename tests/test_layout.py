from __future__ import annotations

from app.layout import navbar_markup
from core.models import UserProfile


def test_navbar_escapes_display_name():
    user = UserProfile(id=1, name="<img src=x onerror=alert(1)>")

    markup = navbar_markup("home", user)

    assert "<img" not in markup
    assert "&lt;img src=x onerror=alert(1)&gt;" in markup


def test_navbar_shows_workspace_links_only_when_signed_in():
    signed_out = navbar_markup("login", None)
    signed_in = navbar_markup("revenue", UserProfile(id=1, name="Asha"))

    assert "?page=revenue" not in signed_out
    assert "?page=logout" not in signed_out
    assert 'href="?page=revenue" aria-current="page"' in signed_in
    assert "?page=logout" in signed_in
    assert "?page=login" not in signed_in
