"""Vocabulary content and learner collections."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..core.extensions import db


class Word(db.Model):
    """Immutable unit of study content, created by the seed import."""

    __tablename__ = 'words'

    word_id = db.Column(db.Integer, primary_key=True)
    word = db.Column(db.String(255), nullable=False, unique=True)
    definition = db.Column(db.Text, nullable=False)
    part_of_speech = db.Column(db.String(50), nullable=True)
    example = db.Column(db.Text, nullable=True)
    level = db.Column(db.String(50), nullable=True, index=True)

    def to_dict(self) -> dict:
        return {
            'word_id': self.word_id,
            'word': self.word,
            'definition': self.definition,
            'part_of_speech': self.part_of_speech,
            'example': self.example,
            'level': self.level,
        }

    def __repr__(self):
        return f'<Word {self.word}>'


class WordList(db.Model):
    """A learner-owned named collection of words."""

    __tablename__ = 'word_lists'

    list_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    name = db.Column(db.String(64), nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    entries = db.relationship(
        'WordListEntry', backref='word_list', lazy=True, cascade='all, delete-orphan'
    )

    __table_args__ = (
        db.UniqueConstraint('user_id', 'name', name='uq_word_list_user_name'),
    )

    def to_dict(self) -> dict:
        return {
            'list_id': self.list_id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


class WordListEntry(db.Model):
    """Membership of a word in a collection."""

    __tablename__ = 'word_list_entries'

    list_id = db.Column(
        db.Integer, db.ForeignKey('word_lists.list_id', ondelete='CASCADE'), primary_key=True
    )
    word_id = db.Column(
        db.Integer, db.ForeignKey('words.word_id', ondelete='CASCADE'), primary_key=True
    )
    added_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
