import io
import os
import re
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from werkzeug.datastructures import FileStorage

from storefront.errors import ValidationError
from storefront.services.email import Mailer
from storefront.utils.media import delete_file, save_file
from storefront.utils.order import apply_order, compact_order, next_order
from storefront.utils.reference import format_reference_number, generate_reference_number
from storefront.utils.request_data import coerce_bool, coerce_int, item_id, parse_json_field


def test_compact_order_closes_gaps():
    items = [{"id": "b", "order": 5}, {"id": "a", "order": 2}, {"id": "c", "order": 9}]

    compact_order(items)

    assert [(i["id"], i["order"]) for i in items] == [("a", 1), ("b", 2), ("c", 3)]


def test_next_order():
    assert next_order([]) == 1
    assert next_order([{"order": 3}, {"order": 7}]) == 8


def test_apply_order_leaves_unlisted_items():
    items = [{"id": "a", "order": 1}, {"id": "b", "order": 2}, {"id": "c", "order": 10}]

    apply_order(items, ["b", "a"])

    assert [i["id"] for i in items] == ["b", "a", "c"]
    assert {i["id"]: i["order"] for i in items} == {"b": 1, "a": 2, "c": 10}


def test_reference_number_format():
    assert format_reference_number(datetime(2024, 3, 7), 42) == "QR20240307-0042"
    assert re.match(r"^QR\d{8}-\d{4}$", format_reference_number())


def test_reference_number_retries_until_free():
    taken = MagicMock(side_effect=[True, True, False])

    reference = generate_reference_number(taken, now=datetime(2024, 3, 7))

    assert reference.startswith("QR20240307-")
    assert taken.call_count == 3


def test_reference_number_gives_up():
    with pytest.raises(RuntimeError):
        generate_reference_number(lambda candidate: True)


@pytest.mark.parametrize("value, expected", [(True, True), ("true", True), ("0", False), ("Off", False)])
def test_coerce_bool(value, expected):
    assert coerce_bool(value, "flag") is expected


def test_coerce_bool_rejects_other_values():
    with pytest.raises(ValidationError):
        coerce_bool("maybe", "flag")


def test_coerce_int():
    assert coerce_int("15", "limit") == 15
    with pytest.raises(ValidationError):
        coerce_int(True, "limit")
    with pytest.raises(ValidationError):
        coerce_int("ten", "limit")


def test_parse_json_field():
    assert parse_json_field('[{"id": "a"}]', "menuItems") == [{"id": "a"}]
    assert parse_json_field([1], "menuItems") == [1]
    with pytest.raises(ValidationError):
        parse_json_field("{not json", "menuItems")


def test_item_id_accepts_both_spellings():
    assert item_id({"id": "a"}) == "a"
    assert item_id({"_id": "b"}) == "b"
    assert item_id("c") == "c"


def test_save_and_delete_upload(app):
    upload = FileStorage(stream=io.BytesIO(b"img"), filename="../../etc/logo.PNG")

    with app.test_request_context():
        url = save_file(upload, subfolder="navbar")
        path = os.path.join(app.config["UPLOAD_FOLDER"], "navbar", url.rsplit("/", 1)[1])

        assert url.startswith("/uploads/navbar/") and url.endswith(".png")
        assert os.path.exists(path)
        assert delete_file(url) is True
        assert not os.path.exists(path)
        assert delete_file("https://cdn.example.com/logo.png") is False


def test_save_file_rejects_disallowed_extension(app):
    upload = FileStorage(stream=io.BytesIO(b"MZ"), filename="payload.exe")

    with app.test_request_context(), pytest.raises(ValidationError):
        save_file(upload)


def test_mailer_sends_over_ssl(app, monkeypatch):
    smtp_ssl = MagicMock()
    monkeypatch.setattr("smtplib.SMTP_SSL", smtp_ssl)
    mailer = Mailer({
        "MAIL_HOST": "smtp.example.com",
        "MAIL_PORT": 465,
        "MAIL_USERNAME": "shop@example.com",
        "MAIL_PASSWORD": "pw",
    })

    with app.test_request_context():
        message = mailer.send(
            "buyer@example.com",
            "Thank you for contacting us",
            "contact_auto_reply.html",
            brand="Tangerine Luxury",
            support_email="info@example.com",
            date="01 Jan 2025",
            submission=SimpleNamespace(name="Asha", subject="Returns"),
        )

    smtp_ssl.assert_called_once_with("smtp.example.com", 465, timeout=60)
    session = smtp_ssl.return_value
    session.login.assert_called_once_with("shop@example.com", "pw")
    session.send_message.assert_called_once_with(message)
    assert message["From"] == "shop@example.com"


def test_mailer_uses_starttls_on_other_ports(app, monkeypatch):
    smtp = MagicMock()
    monkeypatch.setattr("smtplib.SMTP", smtp)
    mailer = Mailer({"MAIL_HOST": "smtp.example.com", "MAIL_PORT": 587})

    with app.test_request_context():
        mailer.send(
            "buyer@example.com",
            "Subject",
            "contact_auto_reply.html",
            brand="Tangerine Luxury",
            support_email="info@example.com",
            date="01 Jan 2025",
            submission=SimpleNamespace(name="Asha", subject="Returns"),
        )

    smtp.return_value.starttls.assert_called_once()
