# tests/test_progress.py
"""Tests for the batch progress state machine."""

import pytest


class TestProgressPercent:
    @pytest.mark.parametrize(
        "done,total,expected",
        [(0, 5, 0), (1, 4, 25), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 3, 100)],
    )
    def test_rounding(self, done, total, expected):
        from slide_scrub.models.progress import progress_percent

        assert progress_percent(done, total) == expected

    def test_zero_total(self):
        from slide_scrub.models.progress import progress_percent

        with pytest.raises(ValueError):
            progress_percent(0, 0)


class TestProgressState:
    def test_full_cycle(self):
        from slide_scrub.models.progress import ProcessingStatus, ProgressState

        state = ProgressState()
        assert state.status is ProcessingStatus.IDLE

        state.begin("Working...")
        assert state.status is ProcessingStatus.PROCESSING
        assert state.progress == 0
        assert state.message == "Working..."

        state.advance(50)
        state.advance(100)
        state.complete("Done")
        assert state.status is ProcessingStatus.COMPLETED
        assert state.is_finished

        state.reset()
        assert state.status is ProcessingStatus.IDLE
        assert state.progress == 0
        assert state.message == ""

    def test_error_then_reset(self):
        from slide_scrub.models.progress import ProcessingStatus, ProgressState

        state = ProgressState()
        state.begin("Working...")
        state.fail("boom")
        assert state.status is ProcessingStatus.ERROR
        assert state.message == "boom"
        state.reset()
        assert state.status is ProcessingStatus.IDLE

    def test_reset_from_idle_allowed(self):
        from slide_scrub.models.progress import ProcessingStatus, ProgressState

        state = ProgressState()
        state.reset()
        assert state.status is ProcessingStatus.IDLE

    def test_cannot_begin_twice(self):
        from slide_scrub.models.progress import InvalidTransitionError, ProgressState

        state = ProgressState()
        state.begin("Working...")
        with pytest.raises(InvalidTransitionError):
            state.begin("Again")

    def test_cannot_restart_without_reset(self):
        from slide_scrub.models.progress import InvalidTransitionError, ProgressState

        state = ProgressState()
        state.begin("Working...")
        state.complete("Done")
        with pytest.raises(InvalidTransitionError):
            state.begin("Again")

    def test_cannot_reset_while_processing(self):
        from slide_scrub.models.progress import InvalidTransitionError, ProgressState

        state = ProgressState()
        state.begin("Working...")
        with pytest.raises(InvalidTransitionError):
            state.reset()

    def test_cannot_complete_from_idle(self):
        from slide_scrub.models.progress import InvalidTransitionError, ProgressState

        with pytest.raises(InvalidTransitionError):
            ProgressState().complete("Done")

    def test_progress_never_decreases(self):
        from slide_scrub.models.progress import ProgressState

        state = ProgressState()
        state.begin("Working...")
        state.advance(40)
        with pytest.raises(ValueError):
            state.advance(30)

    def test_progress_only_while_processing(self):
        from slide_scrub.models.progress import InvalidTransitionError, ProgressState

        with pytest.raises(InvalidTransitionError):
            ProgressState().advance(10)
