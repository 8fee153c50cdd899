import pytest

from jobagent.ui import DashboardShell, UiState
from jobagent.ui.header import Header
from jobagent.ui.mobile_nav import MobileNav
from jobagent.ui.navigation import NAV_ITEMS, Sidebar

USER = {"name": "Camille Martin", "email": "camille@example.com", "image": None}


# -----------------------------
# Rendering
# -----------------------------
def test_shell_renders_sidebar_header_and_content():
    content = '<div id="page-body">Hello <b>there</b></div>'
    html = DashboardShell(content, UiState(), user=USER, current_path="/dashboard").render()

    assert 'class="shell-sidebar hidden lg:block"' in html
    assert '<header class="header' in html
    assert 'id="main-content"' in html
    # Content is passed through untouched.
    assert content in html
    assert "<title>Dashboard - JobAgent</title>" in html


def test_overlay_rendered_only_while_open():
    state = UiState()
    closed = DashboardShell("<p>x</p>", state, user=USER).render()
    assert 'id="mobile-nav"' not in closed

    state.open_mobile_nav()
    opened = DashboardShell("<p>x</p>", state, user=USER).render()
    assert 'id="mobile-nav"' in opened
    assert "/ui/mobile-nav/close?next=/dashboard" in opened


def test_mobile_nav_closed_renders_nothing():
    assert MobileNav(UiState()).render() == ""


def test_sidebar_lists_every_item_and_marks_active():
    html = Sidebar("/offers").render()
    for item in NAV_ITEMS:
        assert f'href="{item.href}"' in html
    assert 'href="/offers" class="nav-link active"' in html
    assert html.count('aria-current="page"') == 1
    assert 'action="/logout"' in html


def test_header_shows_initials_and_toggle():
    html = Header(USER, current_path="/searches").render()
    assert '<span class="avatar-fallback">CM</span>' in html
    assert "camille@example.com" in html
    assert 'action="/ui/mobile-nav/toggle?next=/searches"' in html
    assert 'class="lg:hidden"' in html


def test_header_prefers_avatar_image_and_escapes_name():
    html = Header({"name": "<Eve>", "email": "eve@example.com", "image": "https://img.example.com/e.png"}).render()
    assert 'src="https://img.example.com/e.png"' in html
    assert "&lt;Eve&gt;" in html
    assert "<Eve>" not in html


def test_header_without_user_falls_back():
    html = Header(None).render()
    assert '<span class="avatar-fallback">?</span>' in html


# -----------------------------
# HTTP
# -----------------------------
@pytest.mark.parametrize("path", ["/dashboard", "/profile", "/searches", "/offers", "/applications", "/settings"])
def test_dashboard_pages_redirect_to_login_without_session(client, path):
    res = client.get(path, follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/login"


def test_index_redirects_by_session(client, candidate_client):
    assert client.get("/", follow_redirects=False).headers["location"] == "/login"
    assert candidate_client.get("/", follow_redirects=False).headers["location"] == "/dashboard"


@pytest.mark.parametrize("path", ["/dashboard", "/profile", "/searches", "/offers", "/applications", "/settings"])
def test_dashboard_pages_render_in_shell(candidate_client, path):
    res = candidate_client.get(path)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert 'class="shell-sidebar hidden lg:block"' in res.text
    assert f'href="{path}" class="nav-link active"' in res.text
    assert "Camille Martin" in res.text


def test_applications_page_is_explicitly_not_implemented(candidate_client):
    res = candidate_client.get("/applications")
    assert 'data-status="not-implemented"' in res.text
    assert "Application tracking is not implemented yet." in res.text


def test_mobile_nav_endpoints_require_session(client):
    assert client.get("/ui/mobile-nav").status_code == 401
    assert client.post("/ui/mobile-nav/toggle").status_code == 401


def test_mobile_nav_json_transitions(candidate_client):
    assert candidate_client.get("/ui/mobile-nav").json() == {"is_mobile_nav_open": False}
    assert candidate_client.post("/ui/mobile-nav/toggle").json() == {"is_mobile_nav_open": True}
    assert candidate_client.post("/ui/mobile-nav/open").json() == {"is_mobile_nav_open": True}
    assert candidate_client.post("/ui/mobile-nav/close").json() == {"is_mobile_nav_open": False}
    assert candidate_client.post("/ui/mobile-nav/close").json() == {"is_mobile_nav_open": False}


def test_toggle_redirects_back_and_shows_overlay(candidate_client):
    candidate_client.get("/searches")

    res = candidate_client.post("/ui/mobile-nav/toggle?next=/searches", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/searches"

    page = candidate_client.get("/searches")
    assert 'id="mobile-nav"' in page.text

    # Navigating elsewhere dismisses the overlay.
    other = candidate_client.get("/offers")
    assert 'id="mobile-nav"' not in other.text
    assert candidate_client.get("/ui/mobile-nav").json() == {"is_mobile_nav_open": False}


@pytest.mark.parametrize("next_path", ["https://evil.example.com/", "//evil.example.com/x", "dashboard"])
def test_toggle_ignores_non_local_next(candidate_client, next_path):
    res = candidate_client.post("/ui/mobile-nav/toggle", params={"next": next_path}, follow_redirects=False)
    assert res.status_code == 200
    assert res.json() == {"is_mobile_nav_open": True}


def test_overlay_state_is_per_session(client_for, users):
    candidate, admin = users
    with client_for(candidate) as c1, client_for(admin) as c2:
        c1.post("/ui/mobile-nav/open")
        assert c1.get("/ui/mobile-nav").json() == {"is_mobile_nav_open": True}
        assert c2.get("/ui/mobile-nav").json() == {"is_mobile_nav_open": False}


def test_logout_clears_session_and_ui_state(candidate_client, app):
    candidate_client.post("/ui/mobile-nav/open")
    assert len(app.state.ui_registry) == 1

    res = candidate_client.post("/logout", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/login"
    assert len(app.state.ui_registry) == 0

    assert candidate_client.get("/dashboard", follow_redirects=False).status_code == 303


def test_login_form_flow(client, users):
    page = client.get("/login")
    assert page.status_code == 200
    assert 'action="/login"' in page.text

    bad = client.post("/login", data={"email": "candidate@example.com", "password": "wrong-password"})
    assert bad.status_code == 401
    assert 'role="alert"' in bad.text

    ok = client.post(
        "/login",
        data={"email": "candidate@example.com", "password": "Correct-Horse-42"},
        follow_redirects=False,
    )
    assert ok.status_code == 303
    assert ok.headers["location"] == "/dashboard"
    assert client.get("/dashboard").status_code == 200


def test_register_form_flow(client, db_session):
    res = client.post(
        "/register",
        data={"name": "Nora Nouvelle", "email": "nora@example.com", "password": "Sturdy-Password-9"},
        follow_redirects=False,
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard"

    dash = client.get("/dashboard")
    assert "Welcome back, Nora Nouvelle" in dash.text


def test_expired_session_page_redirects_to_login(candidate_client, db_session):
    from datetime import datetime, timedelta, timezone

    from jobagent.models.user_session import UserSession

    record = db_session.query(UserSession).one()
    record.expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)
    db_session.commit()

    res = candidate_client.get("/dashboard", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/login"
