import re

import pytest

from portfolio.models import PageView, Project, ProjectView
from portfolio.tracking import (
    browser,
    device_type,
    operating_system,
    pseudo_id,
    track_page_view,
    track_project_view,
)

IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
IPAD = (
    "Mozilla/5.0 (iPad; CPU OS 16_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.6 Mobile/15E148 Safari/604.1"
)
ANDROID_PHONE = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)
ANDROID_TABLET = (
    "Mozilla/5.0 (Linux; Android 13; SM-X700) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
WINDOWS_EDGE = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
)
MAC_FIREFOX = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.1; rv:121.0) Gecko/20100101 Firefox/121.0"
LINUX_OPERA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/105.0.0.0"
)


@pytest.mark.parametrize(
    "user_agent, device, browser_name, os_name",
    [
        (IPHONE, "mobile", "Safari", "iOS"),
        (IPAD, "tablet", "Safari", "iOS"),
        (ANDROID_PHONE, "mobile", "Chrome", "Android"),
        (ANDROID_TABLET, "tablet", "Chrome", "Android"),
        (WINDOWS_EDGE, "desktop", "Edge", "Windows"),
        (MAC_FIREFOX, "desktop", "Firefox", "macOS"),
        (LINUX_OPERA, "desktop", "Opera", "Linux"),
        ("", "desktop", "Other", "Other"),
    ],
)
def test_user_agent_classification(user_agent, device, browser_name, os_name):
    assert device_type(user_agent) == device
    assert browser(user_agent) == browser_name
    assert operating_system(user_agent) == os_name


def test_pseudo_id_format():
    value = pseudo_id("visitor")

    assert re.fullmatch(r"visitor_\d{13}_[0-9a-z]{9}", value)
    assert pseudo_id("visitor") != value


@pytest.mark.django_db
def test_track_page_view_records_classified_row(anon_gateway):
    assert track_page_view(anon_gateway, "/projects", "Projects", "", IPHONE, "visitor_1", "session_1")

    view = PageView.objects.get()
    assert view.referrer == "direct"
    assert (view.device_type, view.browser, view.os) == ("mobile", "Safari", "iOS")
    assert (view.visitor_id, view.session_id) == ("visitor_1", "session_1")


@pytest.mark.django_db
def test_track_page_view_swallows_backend_failure(anon_gateway, caplog):
    # session_id is required by the table
    assert track_page_view(anon_gateway, "/", user_agent=MAC_FIREFOX, visitor_id="v", session_id="") is False

    assert PageView.objects.count() == 0
    assert "Could not record page view" in caplog.text


@pytest.mark.django_db
def test_track_project_view(anon_gateway):
    project = Project.objects.create(title="Lab", description="", image_url="https://x/y.png")

    assert track_project_view(anon_gateway, project.pk, "v", "s")
    assert track_project_view(anon_gateway, 424242, "v", "s") is False

    assert ProjectView.objects.get().project == project
