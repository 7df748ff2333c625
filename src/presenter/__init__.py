"""Client-side dashboard presenter."""

from presenter.client import DashboardClient
from presenter.formatting import PLACEHOLDER, format_datetime, format_duration, format_number
from presenter.presenter import Presenter
from presenter.render import render_dashboard, render_section
from presenter.state import Errored, Idle, Loaded, Loading, ViewState
from presenter.views import NO_DATA_MESSAGE, SectionView, build_sections

__all__ = [
    "DashboardClient",
    "Errored",
    "Idle",
    "Loaded",
    "Loading",
    "NO_DATA_MESSAGE",
    "PLACEHOLDER",
    "Presenter",
    "SectionView",
    "ViewState",
    "build_sections",
    "format_datetime",
    "format_duration",
    "format_number",
    "render_dashboard",
    "render_section",
]
