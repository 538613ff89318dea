"""Shared layout primitives for the Aura Gold Streamlit app."""

from __future__ import annotations

import html
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Optional

import streamlit as st
from streamlit.components.v1 import html as components_html

from core.models import UserProfile


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    requires_auth: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("home", "Home"),
    NavigationLink("upload", "Upload Invoice"),
    NavigationLink("manual", "Manual Entry"),
    NavigationLink("invoices", "Invoices"),
    NavigationLink("revenue", "Revenue"),
    NavigationLink("login", "Login", requires_auth=False),
    NavigationLink("signup", "Signup", requires_auth=False),
)

LOGOUT_SLUG = "logout"


def visible_links(user: Optional[UserProfile]) -> list[NavigationLink]:
    """Signed-in users see the workspace pages, everyone else only login/signup."""

    signed_in = user is not None
    return [link for link in NAV_LINKS if link.requires_auth == signed_in]


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 14px;
            --card-bg: #0b1120;
            --border: #1f2937;
            --gold: #fbbf24;
            --muted: #9ca3af;
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #030712;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2rem;
            padding-bottom: 4rem;
          }

          .aura-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .aura-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #f9fafb;
          }

          .aura-nav__brand span {
            color: var(--gold);
          }

          .aura-nav__links {
            display: flex;
            align-items: center;
            gap: 1.4rem;
            flex-wrap: wrap;
          }

          .aura-nav__link,
          .aura-nav__link:visited {
            font-weight: 600;
            color: var(--muted);
            text-decoration: none;
          }

          .aura-nav__link.is-active,
          .aura-nav__link:hover {
            color: var(--gold);
          }

          .aura-nav__user {
            color: #f9fafb;
            font-weight: 600;
          }

          .aura-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .aura-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            padding: 16px;
            margin-bottom: var(--gap);
          }

          .aura-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #f9fafb;
          }

          .aura-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid rgba(251, 191, 36, 0.4);
            background: rgba(251, 191, 36, 0.08);
            color: var(--gold);
            white-space: nowrap;
          }

          .aura-value--positive {
            color: #4ade80;
          }

          .aura-value--negative {
            color: #f87171;
          }

          .aura-stat {
            color: var(--gold);
            font-weight: 700;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable Aura card."""

    chip_html = f'<span class="aura-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="aura-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="aura-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def navbar_markup(active_page: str, user: Optional[UserProfile]) -> str:
    """Return the navbar HTML; workspace links only once signed in."""

    link_markup: list[str] = []
    for link in visible_links(user):
        css_class = "aura-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'
        link_markup.append(
            f'<a class="{css_class}" href="?page={link.slug}"{aria_current} target="_self">{link.label}</a>'
        )

    if user is not None:
        # display names come from signup input
        link_markup.append(f'<span class="aura-nav__user">{html.escape(user.display_name)}</span>')
        link_markup.append(
            f'<a class="aura-nav__link" href="?page={LOGOUT_SLUG}" target="_self">Logout</a>'
        )

    return f"""
        <nav class="aura-nav">
            <div class="aura-nav__brand">Aura<span>Gold</span></div>
            <div class="aura-nav__links">{''.join(link_markup)}</div>
        </nav>
        """


def render_navbar(active_page: str, user: Optional[UserProfile]) -> None:
    st.markdown(navbar_markup(active_page, user), unsafe_allow_html=True)
    _enforce_same_tab_navigation()


def _enforce_same_tab_navigation() -> None:
    """Keep navbar clicks in the current tab; Streamlit opens markdown links in a new one."""

    components_html(
        """
        <script>
        const doc = window.parent.document;
        if (!doc.body.dataset.auraNavBound) {
          doc.body.dataset.auraNavBound = "1";
          doc.addEventListener("click", (event) => {
            const link = event.target.closest("a.aura-nav__link");
            if (!link) return;
            event.preventDefault();
            window.parent.location.assign(link.href);
          }, true);
        }
        </script>
        """,
        height=0,
    )


def determine_active_page(valid_pages: Iterable[str], default_page: str) -> str:
    """Resolve ``?page=`` against ``valid_pages`` and rewrite the URL when it was unknown."""

    requested = st.query_params.get("page")
    page = requested if requested in set(valid_pages) else default_page
    if requested != page:
        st.query_params["page"] = page
    return page


def go_to(page: str) -> None:
    """Point the query string at ``page`` and start a fresh script run."""

    st.query_params["page"] = page
    st.rerun()


__all__ = [
    "LOGOUT_SLUG",
    "NAV_LINKS",
    "NavigationLink",
    "card",
    "determine_active_page",
    "go_to",
    "inject_css",
    "navbar_markup",
    "render_navbar",
    "visible_links",
]
