"""
Navigation for the JobAgent dashboard.

The desktop side panel and the mobile overlay render the same ``Sidebar``.
Which one is visible depends on the viewport: the side panel at or above the
``lg`` breakpoint, the overlay (when open) below it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .base import Component
from .state import UiState

# Tailwind's ``lg`` breakpoint; the side panel uses ``hidden lg:block``.
LG_BREAKPOINT_PX = 1024


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    icon: str


NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem("Dashboard", "/dashboard", "layout-dashboard"),
    NavItem("My profile", "/profile", "user"),
    NavItem("Searches", "/searches", "search"),
    NavItem("Offers", "/offers", "briefcase"),
    NavItem("Applications", "/applications", "file-text"),
    NavItem("Settings", "/settings", "settings"),
)


class NavigationSurface(str, Enum):
    SIDEBAR = "sidebar"
    OVERLAY = "overlay"
    NONE = "none"


def desktop_sidebar_visible(viewport_width: int) -> bool:
    return viewport_width >= LG_BREAKPOINT_PX


def visible_navigation(viewport_width: int, ui_state: UiState) -> NavigationSurface:
    """Exactly one navigation surface at a time (``NONE`` = menu button only)."""
    if desktop_sidebar_visible(viewport_width):
        return NavigationSurface.SIDEBAR
    if ui_state.is_mobile_nav_open:
        return NavigationSurface.OVERLAY
    return NavigationSurface.NONE


def is_active(item_href: str, current_path: str) -> bool:
    return current_path == item_href or current_path.startswith(item_href + "/")


def active_item(current_path: str) -> Optional[NavItem]:
    for item in NAV_ITEMS:
        if is_active(item.href, current_path):
            return item
    return None


class Sidebar(Component):
    """Brand, navigation links and the sign-out control"""

    def __init__(self, current_path: str = "/dashboard"):
        self.current_path = current_path

    def render(self) -> str:
        links = "".join(self._render_item(item) for item in NAV_ITEMS)
        return f"""
    <aside class="sidebar flex h-screen w-64 flex-col" aria-label="Sidebar">
        <div class="sidebar-brand">
            <a href="/dashboard" class="sidebar-title">JobAgent</a>
        </div>
        <nav class="sidebar-nav" role="navigation" aria-label="Main navigation">
            {links}
        </nav>
        <div class="sidebar-footer">
            <form method="post" action="/logout">
                <button type="submit" class="sidebar-logout" data-icon="log-out">Sign out</button>
            </form>
        </div>
    </aside>"""

    def _render_item(self, item: NavItem) -> str:
        active = is_active(item.href, self.current_path)
        attrs = self.attributes(
            href=item.href,
            class_=self.classes("nav-link", active=active),
            data_icon=item.icon,
            aria_current="page" if active else None,
        )
        return f"<a {attrs}>{self.escape(item.label)}</a>"
