from werkzeug.security import generate_password_hash, check_password_hash
from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel

USER_ROLES = {"user", "admin", "agent"}


class User(BaseModel):
    __tablename__ = 'users'

    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    phone = db.Column(db.String(20), nullable=True)

    role = db.Column(db.String(50), nullable=False, default='user')
    is_active = db.Column(db.Boolean, default=True)

    @validates("email")
    def validate_email(self, key, value):
        return value.strip().lower() if value else value

    @validates("role")
    def validate_role(self, key, value):
        return assert_choice("role", value, USER_ROLES)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == "admin"
