# JobAgent dashboard components
# Server-rendered shell around authenticated pages

from .base import Component
from .layout import AuthLayout, DashboardShell, Document
from .navigation import (
    LG_BREAKPOINT_PX,
    NAV_ITEMS,
    NavigationSurface,
    Sidebar,
    desktop_sidebar_visible,
    visible_navigation,
)
from .pages import ApplicationsPage, DashboardPage, LoginForm, PlaceholderPage, RegisterForm
from .state import UiState, UiStateRegistry

__all__ = [
    "Component",
    "AuthLayout",
    "DashboardShell",
    "Document",
    "LG_BREAKPOINT_PX",
    "NAV_ITEMS",
    "NavigationSurface",
    "Sidebar",
    "desktop_sidebar_visible",
    "visible_navigation",
    "ApplicationsPage",
    "DashboardPage",
    "LoginForm",
    "PlaceholderPage",
    "RegisterForm",
    "UiState",
    "UiStateRegistry",
]
