"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker (Flask's signal library) to enable decoupled
communication between modules.

Usage:
    # Publisher (sender)
    from vocabstack_app.core.signals import card_reviewed
    card_reviewed.send(None, user_id=1, review_state_id=2, ...)

    # Subscriber (receiver) - in module's events.py
    @card_reviewed.connect
    def on_card_reviewed(sender, **kwargs):
        ...
"""
from blinker import Namespace

learning_signals = Namespace()

# Signal: Fired after an answer has been written to a review state
# Payload: user_id, review_state_id, word_id, quality, is_correct,
#          interval_days, mastery_level, session_key
card_reviewed = learning_signals.signal('card_reviewed')

# Signal: Fired once per finalized study session
# Payload: user_id, reviewed_count, correct_count, current_streak, session_key
session_completed = learning_signals.signal('session_completed')

# Signal: Fired when new review states are admitted to the pool
# Payload: user_id, added, mode ('item', 'count', 'level', 'collection')
items_enqueued = learning_signals.signal('items_enqueued')

# ============================================
# Account Signals
# ============================================
account_signals = Namespace()

# Signal: Fired after a learner row is created
# Payload: user
user_registered = account_signals.signal('user_registered')
