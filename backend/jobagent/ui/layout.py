"""
Page layouts for JobAgent.

``DashboardShell`` wraps every authenticated page: a fixed side panel
(desktop only), the header bar, the scrollable content area and, while the
client's overlay is open, the mobile navigation sheet. Page content is passed
through unchanged.
"""

from typing import Any, Dict, Optional

from .base import Component
from .header import Header
from .mobile_nav import MobileNav
from .navigation import Sidebar, active_item
from .state import UiState


class Document(Component):
    """Shared HTML document skeleton"""

    def __init__(self, title: str, body: str, body_class: str = ""):
        self.title = title
        self.body = body
        self.body_class = body_class

    def render(self) -> str:
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{self.escape(self.title)} - JobAgent</title>
    <link rel="stylesheet" href="/static/css/jobagent.css">
</head>
<body{f' class="{self.escape(self.body_class)}"' if self.body_class else ""}>
{self.body}
</body>
</html>"""


class DashboardShell(Component):
    def __init__(
        self,
        content: str,
        ui_state: UiState,
        user: Optional[Dict[str, Any]] = None,
        current_path: str = "/dashboard",
        title: Optional[str] = None,
    ):
        """
        Args:
            content: Pre-rendered page HTML, inserted as-is
            ui_state: The requesting client's UI state
            user: Current user dict (name, email, image)
            current_path: Current URL path for active link highlighting
            title: Page title; defaults to the active navigation label
        """
        self.content = content
        self.ui_state = ui_state
        self.user = user
        self.current_path = current_path
        item = active_item(current_path)
        self.title = title or (item.label if item else "Dashboard")

    def render(self) -> str:
        return Document(self.title, self.render_body(), body_class="dashboard").render()

    def render_body(self) -> str:
        return f"""
<div class="shell flex h-screen overflow-hidden">
    <div class="shell-sidebar hidden lg:block">
        {Sidebar(self.current_path).render()}
    </div>
    {MobileNav(self.ui_state, self.current_path).render()}
    <div class="shell-main flex flex-1 flex-col overflow-hidden">
        {Header(self.user, self.current_path).render()}
        <main id="main-content" class="shell-content flex-1 overflow-y-auto p-4 lg:p-6">
{self.content}
        </main>
    </div>
</div>"""


class AuthLayout(Component):
    """Centered card for the sign-in / registration pages"""

    def __init__(self, title: str, content: str):
        self.title = title
        self.content = content

    def render(self) -> str:
        body = f"""
<div class="auth-layout flex min-h-screen items-center justify-center">
    <div class="auth-card">
        <a href="/" class="auth-brand">JobAgent</a>
        {self.content}
    </div>
</div>"""
        return Document(self.title, body, body_class="auth").render()
