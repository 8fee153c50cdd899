"""
Page bodies rendered inside the layouts.
"""

from typing import Optional

from .base import Component


class DashboardPage(Component):
    def __init__(self, name: Optional[str] = None):
        self.name = name

    def render(self) -> str:
        greeting = f"Welcome back, {self.escape(self.name)}" if self.name else "Welcome back"
        return f"""
<section class="page page-dashboard">
    <h1>{greeting}</h1>
    <p class="text-muted">Your job search at a glance.</p>
</section>"""


class PlaceholderPage(Component):
    """Page that exists in the navigation but has no content yet"""

    def __init__(self, title: str, description: str = ""):
        self.title = title
        self.description = description

    def render(self) -> str:
        description = f'<p class="text-muted">{self.escape(self.description)}</p>' if self.description else ""
        return f"""
<section class="page page-placeholder">
    <h1>{self.escape(self.title)}</h1>
    {description}
</section>"""


class ApplicationsPage(Component):
    def render(self) -> str:
        return """
<section class="page page-applications" data-status="not-implemented">
    <h1>Applications</h1>
    <p class="text-muted">Application tracking is not implemented yet.</p>
</section>"""


class _AuthForm(Component):
    def __init__(self, error: Optional[str] = None, email: str = ""):
        self.error = error
        self.email = email

    def _render_error(self) -> str:
        if not self.error:
            return ""
        return f'<p class="form-error" role="alert">{self.escape(self.error)}</p>'


class LoginForm(_AuthForm):
    def render(self) -> str:
        return f"""
<h1>Sign in</h1>
{self._render_error()}
<form method="post" action="/login" class="auth-form">
    <label for="email">Email</label>
    <input id="email" name="email" type="email" required autocomplete="email" value="{self.escape(self.email)}">
    <label for="password">Password</label>
    <input id="password" name="password" type="password" required autocomplete="current-password">
    <button type="submit">Sign in</button>
</form>
<p class="auth-switch">No account yet? <a href="/register">Create one</a></p>"""


class RegisterForm(_AuthForm):
    def __init__(self, error: Optional[str] = None, email: str = "", name: str = ""):
        super().__init__(error=error, email=email)
        self.name = name

    def render(self) -> str:
        return f"""
<h1>Create your account</h1>
{self._render_error()}
<form method="post" action="/register" class="auth-form">
    <label for="name">Full name</label>
    <input id="name" name="name" type="text" required autocomplete="name" value="{self.escape(self.name)}">
    <label for="email">Email</label>
    <input id="email" name="email" type="email" required autocomplete="email" value="{self.escape(self.email)}">
    <label for="password">Password</label>
    <input id="password" name="password" type="password" required autocomplete="new-password">
    <button type="submit">Create account</button>
</form>
<p class="auth-switch">Already registered? <a href="/login">Sign in</a></p>"""
