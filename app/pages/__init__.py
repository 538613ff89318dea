"""Page modules for the Aura Gold Streamlit application."""

from .home import render_page as render_home_page
from .invoices import render_page as render_invoices_page
from .login import render_page as render_login_page
from .manual_entry import render_page as render_manual_entry_page
from .revenue import render_page as render_revenue_page
from .signup import render_page as render_signup_page
from .upload import render_page as render_upload_page

__all__ = [
    "render_home_page",
    "render_invoices_page",
    "render_login_page",
    "render_manual_entry_page",
    "render_revenue_page",
    "render_signup_page",
    "render_upload_page",
]
