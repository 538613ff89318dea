"""Sign-in page."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import card, go_to
from config import Settings
from core import AuthenticationError, InvoiceApiClient, SessionContext, TransportError

logger = logging.getLogger(__name__)

SIGNUP_NOTICE_KEY = "signup_notice"


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    """Render the login form and sign the user in on success."""

    st.caption("Aura Gold Access")
    st.title("Sign in to your workspace")
    st.caption("Securely manage invoices, reconciliation and revenue health from a single pane.")

    notice = st.session_state.pop(SIGNUP_NOTICE_KEY, None)
    if notice:
        st.success(notice)

    with card("Login"):
        with st.form("login-form"):
            email = st.text_input("Work email", placeholder="you@company.com")
            password = st.text_input("Password", type="password", placeholder="••••••••")
            submitted = st.form_submit_button("Continue", type="primary")

    if not submitted:
        return

    try:
        user = client.login(email, password)
    except AuthenticationError:
        st.error("Invalid email or password")
        return
    except TransportError:
        logger.exception("Login request failed")
        st.error("Unable to login. Please try again.")
        return

    context.sign_in(user)
    go_to(context.active_page)
