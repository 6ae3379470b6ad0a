"""
Shared test configuration and fixtures for the storefront API.
"""

from unittest.mock import MagicMock

import pytest
from flask_jwt_extended import create_access_token

from storefront import create_app
from storefront.extensions import db as _db, limiter
from storefront.models.product import Product
from storefront.models.user import User

GATEWAY_OK = {
    "ErrorCode": "000",
    "ErrorMessage": "Done",
    "JobId": "4015381",
    "MessageData": [{"Number": "919876543210", "MessageId": "mvHdpSyS7UOs9hjxixQLvw"}],
}


def gateway_response(body=GATEWAY_OK, status_code=200, text=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body
    response.text = text if text is not None else str(body)
    return response


@pytest.fixture(autouse=True)
def _no_network(monkeypatch):
    """Mock the SMS gateway and SMTP so no test reaches the network."""
    gateway = MagicMock(return_value=gateway_response())
    monkeypatch.setattr("requests.get", gateway)
    monkeypatch.setattr("smtplib.SMTP_SSL", MagicMock())
    monkeypatch.setattr("smtplib.SMTP", MagicMock())
    return gateway


@pytest.fixture
def sms_gateway(_no_network):
    return _no_network


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        _db.create_all()
        limiter.reset()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _create_user(name, email, role="user", phone=None, password="secret123"):
    user = User(name=name, email=email, role=role, phone=phone)
    user.set_password(password)
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    return _create_user("Admin", "admin@example.com", role="admin")


@pytest.fixture
def customer(app):
    return _create_user("Priya", "priya@example.com", phone="9876543210")


def _token_for(user):
    return create_access_token(identity=user.id, additional_claims={"role": user.role})


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {_token_for(admin_user)}"}


@pytest.fixture
def user_headers(customer):
    return {"Authorization": f"Bearer {_token_for(customer)}"}


@pytest.fixture
def make_product(app):
    def _make(**fields):
        fields.setdefault("name", "Chanel Classic Flap")
        fields.setdefault("price", 450000)
        product = Product(**fields)
        _db.session.add(product)
        _db.session.commit()
        return product

    return _make


@pytest.fixture
def sold_out_product(make_product):
    return make_product(name="Hermes Birkin 30", sold_out=True, stock_quantity=0)


@pytest.fixture
def sale_product(make_product):
    return make_product(name="Gucci Marmont", is_sale=True, sale_price=99000)


@pytest.fixture
def in_stock_product(make_product):
    return make_product(name="Dior Saddle", stock_quantity=2)


@pytest.fixture
def make_gateway_response():
    return gateway_response
