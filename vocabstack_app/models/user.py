"""Learner account model.

Registration and credential checks live outside this package; the model is
the owner of review states, collections and the streak record.
"""

from __future__ import annotations

from flask_login import UserMixin
from sqlalchemy.sql import func
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.extensions import db


class User(UserMixin, db.Model):
    """Application user (learner) model."""

    __tablename__ = 'users'

    user_id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    review_states = db.relationship(
        'ReviewState', backref='user', lazy='dynamic', cascade='all, delete-orphan'
    )
    word_lists = db.relationship(
        'WordList', backref='owner', lazy=True, cascade='all, delete-orphan'
    )

    def get_id(self):
        return str(self.user_id)

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'
