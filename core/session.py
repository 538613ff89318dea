"""Per-browser-session state owned by the Streamlit composition root."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from core.models import FilterCriteria, Holdings, UserProfile
from core.polling import InvoicePoller

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from core.api_client import InvoiceApiClient

__all__ = ["REVENUE_PAGE", "SessionContext"]

HOME_PAGE = "home"
LOGIN_PAGE = "login"
REVENUE_PAGE = "revenue"


@dataclass
class SessionContext:
    user: Optional[UserProfile] = None
    active_page: str = LOGIN_PAGE
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    holdings: Holdings = field(default_factory=Holdings)
    poller: Optional[InvoicePoller] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in(self, user: UserProfile) -> None:
        self._stop_polling()
        self.user = user
        self.active_page = HOME_PAGE

    def sign_out(self) -> None:
        self._stop_polling()
        self.user = None
        self.criteria = FilterCriteria()
        self.holdings = Holdings()
        self.active_page = LOGIN_PAGE

    def navigate(self, page: str) -> None:
        """Switch pages, tearing down dashboard state when leaving the revenue view."""

        if page == self.active_page:
            return
        if self.active_page == REVENUE_PAGE:
            self.criteria = FilterCriteria()
            self.holdings = Holdings()
            if self.poller is not None:
                self.poller.deactivate()
        self.active_page = page

    def invoice_poller(self, client: "InvoiceApiClient", interval_seconds: float) -> InvoicePoller:
        """Return the poller for the current user, creating it on first use."""

        if self.poller is None:
            user_id = self.user.id if self.user is not None else None
            self.poller = InvoicePoller(
                lambda: client.list_invoices(user_id),
                interval_seconds=interval_seconds,
            )
        return self.poller

    def _stop_polling(self) -> None:
        if self.poller is not None:
            self.poller.deactivate()
        self.poller = None
