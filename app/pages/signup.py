"""Workspace sign-up page."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import card, go_to
from app.pages.login import SIGNUP_NOTICE_KEY
from config import Settings
from core import InvoiceApiClient, SessionContext, TransportError

logger = logging.getLogger(__name__)


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    st.caption("Create workspace")
    st.title("Spin up your Aura Gold console")
    st.caption(
        "Connect invoicing flows, automate reconciliation and unlock live revenue visibility."
    )

    with card("Signup"):
        with st.form("signup-form"):
            username = st.text_input("Full name")
            email = st.text_input("Work email", placeholder="you@company.com")
            password = st.text_input("Password", type="password")
            confirm_password = st.text_input("Confirm password", type="password")
            submitted = st.form_submit_button("Create account", type="primary")

    if not submitted:
        return

    if password != confirm_password:
        st.error("Passwords do not match")
        return

    try:
        client.signup(username, email, password)
    except TransportError as exc:
        if exc.status_code is not None:
            st.error("Unable to create account")
        else:
            logger.exception("Signup request failed")
            st.error("Unable to create account. Please try again.")
        return

    st.session_state[SIGNUP_NOTICE_KEY] = "Account created. Sign in to continue."
    go_to("login")
