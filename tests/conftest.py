import os
import sys
from datetime import date

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vocabstack_app import create_app, db
from vocabstack_app.config import Config
from vocabstack_app.models import ReviewState, Word
from vocabstack_app.modules.learners.interface import create_learner


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_DIR = None
    WORDS_SEED_PATH = None
    STUDY_SESSION_LIMIT = 20
    STREAK_COUNTS_EMPTY_SESSIONS = True


WORD_ROWS = [
    ('abate', 'to lessen in intensity', 'verb', 'grade_6_8'),
    ('benevolent', 'kind and generous', 'adjective', 'grade_6_8'),
    ('candid', 'truthful and straightforward', 'adjective', 'grade_6_8'),
    ('diligent', 'showing care in one\'s work', 'adjective', 'grade_9_10'),
    ('ephemeral', 'lasting a very short time', 'adjective', 'sat'),
    ('garrulous', 'excessively talkative', 'adjective', 'gre'),
]


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def today():
    return date(2024, 3, 10)


@pytest.fixture
def learner(app):
    return create_learner('alice', 'alice@example.com', 'password123')


@pytest.fixture
def other_learner(app):
    return create_learner('bob', 'bob@example.com', 'password123')


@pytest.fixture
def words(app):
    rows = [
        Word(word=text, definition=definition, part_of_speech=pos, level=level)
        for text, definition, pos, level in WORD_ROWS
    ]
    db.session.add_all(rows)
    db.session.commit()
    return rows


def make_review_state(user, word, next_review_date, **fields):
    """Insert a review state directly, bypassing the enqueuer."""
    state = ReviewState(
        user_id=user.user_id,
        word_id=word.word_id,
        next_review_date=next_review_date,
        mastery_level=fields.pop('mastery_level', 0),
        ease_factor=fields.pop('ease_factor', 2.5),
        interval_days=fields.pop('interval_days', 1),
        times_seen=fields.pop('times_seen', 0),
        times_correct=fields.pop('times_correct', 0),
        **fields,
    )
    db.session.add(state)
    db.session.commit()
    return state


def login(client, user):
    with client.session_transaction() as sess:
        sess['_user_id'] = str(user.user_id)
        sess['_fresh'] = True
