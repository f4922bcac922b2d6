from datetime import timedelta

import pytest
from django.core.files.base import ContentFile
from django.utils import timezone

from portfolio.exceptions import GatewayError, is_permission_error
from portfolio.models import Message, PageView

from conftest import project_payload

pytestmark = pytest.mark.django_db


def test_unknown_table_reports_missing_relation(service_gateway):
    with pytest.raises(GatewayError, match='relation "public.experience" does not exist'):
        service_gateway.select("experience")


def test_unknown_column_is_rejected(service_gateway):
    with pytest.raises(GatewayError, match="Could not find the 'colour' column of 'projects'"):
        service_gateway.select("projects", filters={"colour": "blue"})


def test_insert_assigns_id_and_timestamps(admin_gateway):
    row = admin_gateway.insert("projects", project_payload())

    assert row["id"] is not None
    assert row["created_at"] is not None
    assert row["tech_stack"] == ["Cisco IOS", "pfSense"]


def test_insert_enforces_enum_values(admin_gateway):
    with pytest.raises(GatewayError, match="category"):
        admin_gateway.insert("projects", project_payload(category="mobile"))


def test_duplicate_list_entries_are_kept(admin_gateway):
    row = admin_gateway.insert("projects", project_payload(tech_stack=["Python", "Python"]))

    assert row["tech_stack"] == ["Python", "Python"]


def test_select_filters_orders_and_limits(service_gateway):
    now = timezone.now()
    for minutes, path in [(30, "/old"), (10, "/mid"), (1, "/new")]:
        PageView.objects.create(page_path=path, session_id="s", visitor_id="v", created_at=now - timedelta(minutes=minutes))

    rows = service_gateway.select(
        "page_views",
        columns=["page_path"],
        gte={"created_at": now - timedelta(minutes=15)},
        order_by="created_at",
        limit=1,
    )

    assert rows == [{"page_path": "/new"}]


def test_update_returns_empty_list_for_missing_row(admin_gateway):
    assert admin_gateway.update("projects", 999, {"title": "Nothing"}) == []


def test_delete_missing_row_is_not_an_error(admin_gateway):
    assert admin_gateway.delete("projects", 999) == 0


def test_anonymous_write_violates_row_level_security(anon_gateway):
    with pytest.raises(GatewayError) as excinfo:
        anon_gateway.insert("projects", project_payload())

    assert is_permission_error(excinfo.value)
    assert 'table "projects"' in str(excinfo.value)


def test_signed_in_non_admin_cannot_write_content(member_gateway):
    with pytest.raises(GatewayError) as excinfo:
        member_gateway.update("projects", 1, {"title": "Hijacked"})

    assert is_permission_error(excinfo.value)


def test_demo_identity_is_treated_as_anonymous(demo_gateway):
    with pytest.raises(GatewayError) as excinfo:
        demo_gateway.delete("projects", 1)

    assert is_permission_error(excinfo.value)


def test_denied_reads_come_back_empty(anon_gateway):
    Message.objects.create(name="Jane", email="jane@x.com", message="Hi")

    assert anon_gateway.select("messages") == []
    assert anon_gateway.count("messages") == 0


def test_public_can_insert_events_and_messages(anon_gateway):
    anon_gateway.insert("messages", {"name": "Jane", "email": "jane@x.com", "message": "Hi"})
    anon_gateway.insert("page_views", {"page_path": "/", "session_id": "s1", "visitor_id": "v1"})

    assert Message.objects.count() == 1
    assert PageView.objects.get().referrer == "direct"


def test_events_are_append_only_for_admins(admin_gateway, service_gateway):
    view = PageView.objects.create(page_path="/", session_id="s", visitor_id="v")

    with pytest.raises(GatewayError):
        admin_gateway.delete("page_views", view.pk)
    assert service_gateway.delete("page_views", view.pk) == 1


def test_upload_refuses_to_overwrite(admin_gateway, documents_bucket):
    admin_gateway.upload("documents", "cvs/cv-1.pdf", ContentFile(b"first"))

    with pytest.raises(GatewayError, match="already exists"):
        admin_gateway.upload("documents", "cvs/cv-1.pdf", ContentFile(b"second"))

    assert (documents_bucket / "cvs" / "cv-1.pdf").read_bytes() == b"first"


def test_upload_with_upsert_replaces(admin_gateway, documents_bucket):
    admin_gateway.upload("documents", "cvs/cv-1.pdf", ContentFile(b"first"))
    admin_gateway.upload("documents", "cvs/cv-1.pdf", ContentFile(b"second"), upsert=True)

    assert (documents_bucket / "cvs" / "cv-1.pdf").read_bytes() == b"second"


def test_public_url_points_into_bucket(service_gateway):
    assert service_gateway.public_url("documents", "cvs/cv-1.pdf") == "/media/documents/cvs/cv-1.pdf"


def test_anonymous_upload_is_denied(anon_gateway):
    with pytest.raises(GatewayError) as excinfo:
        anon_gateway.upload("documents", "cvs/cv-1.pdf", ContentFile(b"data"))

    assert is_permission_error(excinfo.value)


def test_unknown_bucket(service_gateway):
    with pytest.raises(GatewayError, match="Bucket not found"):
        service_gateway.public_url("avatars", "me.png")


def test_signed_in_user_cannot_grant_itself_admin(member_gateway):
    with pytest.raises(GatewayError) as excinfo:
        member_gateway.insert("admins", {"user_id": 7, "email": "member@example.com"})

    assert is_permission_error(excinfo.value)
