"""
Mobile navigation overlay: the sidebar in a sheet, only rendered while open.
"""

from urllib.parse import quote

from .base import Component
from .navigation import Sidebar
from .state import UiState


class MobileNav(Component):
    def __init__(self, ui_state: UiState, current_path: str = "/dashboard"):
        self.ui_state = ui_state
        self.current_path = current_path

    def render(self) -> str:
        if not self.ui_state.is_mobile_nav_open:
            return ""
        close_action = self.attributes(method="post", action=f"/ui/mobile-nav/close?next={quote(self.current_path, safe='/')}")
        return f"""
    <div class="mobile-nav lg:hidden" id="mobile-nav" role="dialog" aria-modal="true">
        <form {close_action} class="mobile-nav-backdrop">
            <button type="submit" class="mobile-nav-backdrop-button" aria-label="Close menu"></button>
        </form>
        <div class="mobile-nav-panel w-64">
            <form {close_action}>
                <button type="submit" class="mobile-nav-close" data-icon="x">
                    <span class="sr-only">Close menu</span>
                </button>
            </form>
            {Sidebar(self.current_path).render()}
        </div>
    </div>"""
