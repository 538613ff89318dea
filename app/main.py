"""Aura Gold invoice console entrypoint and page router."""

from __future__ import annotations

import logging
from typing import Callable

import streamlit as st

from app.layout import (
    LOGOUT_SLUG,
    determine_active_page,
    inject_css,
    render_navbar,
    visible_links,
)
from app.pages import (
    render_home_page,
    render_invoices_page,
    render_login_page,
    render_manual_entry_page,
    render_revenue_page,
    render_signup_page,
    render_upload_page,
)
from app.pages.invoices import INVOICE_LIST_KEY
from config import Settings, configure_logging, get_settings
from core import InvoiceApiClient, SessionContext

logger = logging.getLogger(__name__)

SESSION_KEY = "aura_session"

PageRenderer = Callable[[SessionContext, InvoiceApiClient, Settings], None]

PAGE_RENDERERS: dict[str, PageRenderer] = {
    "home": render_home_page,
    "upload": render_upload_page,
    "manual": render_manual_entry_page,
    "invoices": render_invoices_page,
    "revenue": render_revenue_page,
    "login": render_login_page,
    "signup": render_signup_page,
}


@st.cache_resource(show_spinner=False)
def _setup_logging(level: str) -> None:
    configure_logging(level)


@st.cache_resource(show_spinner=False)
def _api_client(base_url: str, timeout: float) -> InvoiceApiClient:
    """Share one HTTP connection pool across sessions for a given API target."""

    return InvoiceApiClient(base_url, timeout=timeout)


def _session_context() -> SessionContext:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SessionContext()
    return st.session_state[SESSION_KEY]


def main() -> None:
    """Application entrypoint for the Aura Gold console."""

    st.set_page_config(
        page_title="Aura Gold | Invoices",
        page_icon="🪙",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    settings = get_settings()
    _setup_logging(settings.log_level)
    client = _api_client(**settings.http_client_kwargs)
    context = _session_context()

    inject_css()

    valid_pages = [link.slug for link in visible_links(context.user)]
    if context.is_authenticated:
        valid_pages.append(LOGOUT_SLUG)
    default_page = context.active_page if context.active_page in valid_pages else valid_pages[0]
    page = determine_active_page(valid_pages, default_page)

    if page == LOGOUT_SLUG:
        logger.info("Signing out user %s", context.user.id if context.user else None)
        context.sign_out()
        page = context.active_page
        st.query_params["page"] = page

    if page != context.active_page:
        st.session_state.pop(INVOICE_LIST_KEY, None)
    context.navigate(page)

    render_navbar(page, context.user)
    PAGE_RENDERERS[page](context, client, settings)


if __name__ == "__main__":
    main()
