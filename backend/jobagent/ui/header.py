"""
Dashboard header: mobile menu toggle and the user menu.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from jobagent.services.users import initials

from .base import Component


class Header(Component):
    def __init__(self, user: Optional[Dict[str, Any]] = None, current_path: str = "/dashboard"):
        self.user = user or {}
        self.current_path = current_path

    def render(self) -> str:
        name = self.user.get("name")
        email = self.user.get("email")
        toggle_action = self.attributes(
            method="post",
            action=f"/ui/mobile-nav/toggle?next={quote(self.current_path, safe='/')}",
            class_="lg:hidden",
        )
        avatar = self.user.get("image")
        avatar_html = (
            f'<img class="avatar-image" {self.attributes(src=avatar, alt=name or "")}>'
            if avatar
            else f'<span class="avatar-fallback">{self.escape(initials(name))}</span>'
        )
        return f"""
    <header class="header flex h-16 items-center justify-between">
        <form {toggle_action}>
            <button type="submit" class="menu-toggle" data-icon="menu">
                <span class="sr-only">Open menu</span>
            </button>
        </form>
        <div class="flex-1"></div>
        <details class="user-menu">
            <summary class="avatar">{avatar_html}</summary>
            <div class="user-menu-content">
                <p class="user-name">{self.escape(name)}</p>
                <p class="user-email">{self.escape(email)}</p>
                <a href="/profile">My profile</a>
                <a href="/settings">Settings</a>
                <form method="post" action="/logout">
                    <button type="submit" class="user-menu-logout">Sign out</button>
                </form>
            </div>
        </details>
    </header>"""
