"""
Tests for the Scheduler - simplified SM-2 on whole days

Tests cover:
- Failure branch (missed / hard)
- Success branch (good / easy) with the ease clamp and mastery cap
- Round-half-up interval rounding
- Quality validation and labels
"""

from datetime import date, timedelta

import pytest

from vocabstack_app.core.error_handlers import ValidationError
from vocabstack_app.modules.srs.interface import (
    QUALITY_LABELS,
    SchedulerConstants,
    compute_next_state,
    is_correct,
    quality_from_label,
    validate_quality,
)

TODAY = date(2024, 3, 10)


class TestSchedulerScenarios:
    """Worked examples."""

    def test_first_good_answer(self):
        """interval=1, ease=2.5, mastery=0 answered 'good'."""
        result = compute_next_state(3, 1, 2.5, 0, TODAY)

        assert result.interval_days == 3
        assert result.ease_factor == pytest.approx(2.44)
        assert result.mastery_level == 1
        assert result.next_review_date == TODAY + timedelta(days=3)

    def test_missed_answer_resets_interval(self):
        """interval=6, ease=2.0, mastery=3 answered 'missed'."""
        result = compute_next_state(0, 6, 2.0, 3, TODAY)

        assert result.interval_days == 1
        assert result.ease_factor == 2.0
        assert result.mastery_level == 2
        assert result.next_review_date == TODAY + timedelta(days=1)


class TestFailureBranch:

    @pytest.mark.parametrize('quality', [0, 2])
    def test_failure_keeps_ease_and_drops_mastery(self, quality):
        result = compute_next_state(quality, 10, 2.1, 4, TODAY)

        assert result.interval_days == 1
        assert result.ease_factor == 2.1
        assert result.mastery_level == 3

    def test_mastery_floor_is_zero(self):
        result = compute_next_state(2, 1, 2.5, 0, TODAY)
        assert result.mastery_level == 0


class TestSuccessBranch:

    def test_easy_raises_ease(self):
        result = compute_next_state(5, 1, 2.5, 0, TODAY)
        assert result.ease_factor == pytest.approx(2.6)

    def test_ease_never_below_minimum(self):
        """Good at the minimum ease would drop to 1.24 without the clamp."""
        result = compute_next_state(3, 1, SchedulerConstants.MIN_EASE_FACTOR, 2, TODAY)

        assert result.ease_factor == SchedulerConstants.MIN_EASE_FACTOR
        assert result.interval_days == 1

    def test_mastery_capped_at_five(self):
        result = compute_next_state(5, 20, 2.5, 5, TODAY)
        assert result.mastery_level == 5

    def test_interval_rounds_half_up(self):
        """12.5 days becomes 13, not the 12 of banker's rounding."""
        result = compute_next_state(3, 5, 2.5, 1, TODAY)
        assert result.interval_days == 13

    def test_next_review_is_never_before_today(self):
        for quality in SchedulerConstants.ALLOWED_QUALITIES:
            result = compute_next_state(quality, 1, 1.3, 0, TODAY)
            assert result.next_review_date > TODAY

    def test_identical_inputs_give_identical_outputs(self):
        assert compute_next_state(3, 4, 2.2, 2, TODAY) == compute_next_state(3, 4, 2.2, 2, TODAY)


class TestQualityValidation:

    @pytest.mark.parametrize('quality', [0, 2, 3, 5])
    def test_accepted_qualities(self, quality):
        assert validate_quality(quality) == quality

    @pytest.mark.parametrize('value', [1, 4, 6, -1, True, '3', 2.5, 4.0, None])
    def test_rejected_values(self, value):
        with pytest.raises(ValidationError):
            validate_quality(value)

    def test_integral_float_is_accepted_as_int(self):
        quality = validate_quality(3.0)

        assert quality == 3
        assert type(quality) is int

    def test_labels(self):
        assert QUALITY_LABELS[0] == 'missed'
        assert quality_from_label(' Good ') == 3
        assert quality_from_label('easy') == 5

    def test_unknown_label(self):
        with pytest.raises(KeyError):
            quality_from_label('perfect')

    def test_correct_from_good_upwards(self):
        assert not is_correct(2)
        assert is_correct(3)
        assert is_correct(5)
