"""Dashboard presenter: one fetch per trigger, whole-state replacement."""

from __future__ import annotations

import logging
from collections.abc import Callable

from domain.errors import NetworkOrStatusError
from presenter.client import DashboardClient
from presenter.render import render_dashboard
from presenter.state import Errored, Idle, Loaded, Loading, ViewState
from presenter.views import SectionView, build_sections

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class Presenter:
    """Owns the dashboard view state.

    Every transition replaces the state object as a whole, so a loaded document
    and an error message can never coexist. Overlapping triggers are not
    cancelled; whichever request resolves last decides the final state.
    """

    def __init__(
        self,
        client: DashboardClient,
        *,
        on_change: Callable[[ViewState], None] | None = None,
    ) -> None:
        self._client = client
        self._on_change = on_change
        self._state: ViewState = Idle()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    async def trigger_fetch(self) -> ViewState:
        """Request the dashboard once and settle into Loaded or Errored."""
        self._set_state(Loading())
        try:
            document = await self._client.fetch_dashboard()
        except NetworkOrStatusError as exc:
            logger.info("Dashboard fetch failed: %s", exc)
            self._set_state(Errored(str(exc)))
        except Exception as exc:
            logger.exception("Unexpected error while fetching the dashboard")
            self._set_state(Errored(str(exc) or UNKNOWN_ERROR_MESSAGE))
        else:
            self._set_state(Loaded(document))
        return self._state

    def sections(self) -> tuple[SectionView, ...]:
        if isinstance(self._state, Loaded):
            return build_sections(self._state.document)
        return ()

    def render(self) -> list[str]:
        return render_dashboard(self._state)

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
