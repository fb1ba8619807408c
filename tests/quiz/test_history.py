"""
Unit tests for the question history tracker.

Verifies:
1. Append / go back / truncate-on-branch protocol
2. Bounded retention (oldest dropped, cursor follows)
3. Hint updates never create navigable entries
4. Cursor invariants over random operation sequences
"""

import random

import pytest

from station_quiz.quiz.history import History, HistoryNotInitializedError, MAX_HISTORY


def assert_invariants(history: History) -> None:
    assert len(history) >= 1
    assert 0 <= history.cursor < len(history)
    assert len(history) <= history.max_history


class TestUninitialized:
    """Behaviour before initialize()."""

    def test_current_when_uninitialized_then_raises(self):
        with pytest.raises(HistoryNotInitializedError):
            History().current()

    def test_append_when_uninitialized_then_raises(self, make_state):
        with pytest.raises(HistoryNotInitializedError):
            History().append(make_state(0))

    def test_go_back_when_uninitialized_then_raises(self):
        with pytest.raises(HistoryNotInitializedError):
            History().go_back()

    def test_init_when_max_history_zero_then_raises(self):
        with pytest.raises(ValueError, match="max_history"):
            History(max_history=0)

    def test_is_initialized_when_fresh_then_false(self):
        assert History().is_initialized is False


class TestInitialize:
    """initialize() / reset()."""

    def test_initialize_when_called_then_single_entry_at_cursor_zero(self, make_state):
        history = History()
        s0 = make_state(0)
        history.initialize(s0)
        assert history.entries == (s0,)
        assert history.cursor == 0
        assert history.current() is s0
        assert history.is_initialized

    def test_reset_when_history_long_then_discards_everything(self, make_state):
        history = History()
        history.initialize(make_state(0))
        for i in range(1, 5):
            history.append(make_state(i))
        history.go_back()

        fresh = make_state(3)
        history.reset(fresh)
        assert len(history) == 1
        assert history.cursor == 0
        assert history.current() is fresh
        assert history.can_go_back is False


class TestAppend:
    """append() including branch truncation and the size bound."""

    def test_append_when_at_end_then_cursor_moves_to_new_entry(self, make_state):
        history = History()
        s0, s1 = make_state(0), make_state(1)
        history.initialize(s0)
        history.append(s1)
        assert history.entries == (s0, s1)
        assert history.cursor == 1
        assert history.current() is s1

    def test_append_when_cursor_moved_back_then_forward_entries_discarded(self, make_state):
        """[s0, s1, s2] with cursor at 1, append(s3) -> [s0, s1, s3], cursor 2."""
        history = History()
        s0, s1, s2, s3 = (make_state(i) for i in range(4))
        history.initialize(s0)
        history.append(s1)
        history.append(s2)
        assert history.go_back() is s1

        history.append(s3)
        assert history.entries == (s0, s1, s3)
        assert history.entries[2] is s3
        assert history.cursor == 2

    def test_append_when_cursor_at_start_then_only_first_kept(self, make_state):
        history = History()
        states = [make_state(i) for i in range(4)]
        history.initialize(states[0])
        for s in states[1:3]:
            history.append(s)
        history.go_back()
        history.go_back()

        history.append(states[3])
        assert [id(s) for s in history.entries] == [id(states[0]), id(states[3])]

    def test_append_when_full_then_oldest_dropped(self, make_state):
        """100 entries with cursor 99, append -> first is old second, last is new."""
        history = History()
        states = [make_state(i) for i in range(MAX_HISTORY)]
        history.initialize(states[0])
        for s in states[1:]:
            history.append(s)
        assert len(history) == MAX_HISTORY
        assert history.cursor == MAX_HISTORY - 1

        new = make_state(0).with_hints(origin_expanded=True)
        history.append(new)
        assert len(history) == MAX_HISTORY
        assert history.entries[0] is states[1]
        assert history.entries[-1] is new
        assert history.cursor == MAX_HISTORY - 1

    def test_append_when_many_then_length_never_exceeds_bound(self, make_state):
        history = History()
        history.initialize(make_state(0))
        for i in range(1, 350):
            history.append(make_state(i))
            assert len(history) <= MAX_HISTORY
            assert history.current() is history.entries[history.cursor]

    def test_append_when_custom_bound_then_respected(self, make_state):
        history = History(max_history=3)
        history.initialize(make_state(0))
        for i in range(1, 10):
            history.append(make_state(i))
        assert len(history) == 3
        assert history.cursor == 2

    def test_append_when_bound_is_one_then_only_latest_kept(self, make_state):
        history = History(max_history=1)
        history.initialize(make_state(0))
        latest = make_state(1)
        history.append(latest)
        assert history.entries == (latest,)
        assert history.cursor == 0


class TestGoBack:
    """go_back() navigation."""

    def test_go_back_when_at_start_then_state_unchanged(self, make_state):
        history = History()
        s0 = make_state(0)
        history.initialize(s0)
        before = (history.entries, history.cursor)

        assert history.go_back() is s0
        assert (history.entries, history.cursor) == before

    def test_go_back_when_repeated_then_stops_at_first(self, make_state):
        history = History()
        states = [make_state(i) for i in range(3)]
        history.initialize(states[0])
        for s in states[1:]:
            history.append(s)

        assert history.go_back() is states[1]
        assert history.go_back() is states[0]
        assert history.go_back() is states[0]
        assert history.cursor == 0
        assert len(history) == 3

    def test_can_go_back_when_cursor_positive_then_true(self, make_state):
        history = History()
        history.initialize(make_state(0))
        assert history.can_go_back is False
        history.append(make_state(1))
        assert history.can_go_back is True


class TestHintFlags:
    """update_current_hint_flags()."""

    def test_update_when_called_then_current_entry_replaced_in_place(self, make_state):
        history = History()
        history.initialize(make_state(0))
        history.append(make_state(1))

        updated = history.update_current_hint_flags(origin_expanded=True, destination_expanded=True)
        assert len(history) == 2
        assert history.cursor == 1
        assert history.current() is updated
        assert updated.origin_hint_expanded and updated.destination_hint_expanded

    def test_update_when_one_flag_none_then_other_preserved(self, make_state):
        history = History()
        history.initialize(make_state(0))
        history.update_current_hint_flags(destination_expanded=True)
        state = history.update_current_hint_flags(origin_expanded=True)
        assert state.destination_hint_expanded is True

    def test_update_when_toggled_then_go_back_skips_it(self, make_state):
        """Toggling a hint then going back behaves as if the toggle never happened."""
        history = History()
        s0, s1 = make_state(0), make_state(1)
        history.initialize(s0)
        history.append(s1)
        history.update_current_hint_flags(origin_expanded=True)
        history.update_current_hint_flags(origin_expanded=False)

        assert history.go_back() is s0
        assert history.cursor == 0

    def test_update_when_on_older_entry_then_flag_kept_on_revisit(self, make_state):
        history = History()
        history.initialize(make_state(0))
        history.append(make_state(1))
        history.update_current_hint_flags(destination_expanded=True)
        history.go_back()
        assert history.current().destination_hint_expanded is False
        assert history.entries[1].destination_hint_expanded is True


class TestRandomOperationSequences:
    """Invariants hold across random interleavings of every operation."""

    @pytest.mark.parametrize("seed", range(25))
    def test_invariants_when_random_ops_then_always_hold(self, seed, make_state):
        rng = random.Random(seed)
        max_history = rng.choice([1, 2, 5, MAX_HISTORY])
        history = History(max_history=max_history)
        history.initialize(make_state(0))
        assert_invariants(history)

        for step in range(400):
            op = rng.choices(["append", "back", "hint", "init"], weights=[6, 3, 2, 1])[0]
            if op == "append":
                state = make_state(rng.randrange(6))
                history.append(state)
                assert history.current() is state
                assert history.cursor == len(history) - 1
            elif op == "back":
                before = history.cursor
                history.go_back()
                assert history.cursor == max(0, before - 1)
            elif op == "hint":
                length, cursor = len(history), history.cursor
                history.update_current_hint_flags(
                    origin_expanded=rng.random() < 0.5,
                    destination_expanded=rng.random() < 0.5,
                )
                assert (len(history), history.cursor) == (length, cursor)
            else:
                history.initialize(make_state(rng.randrange(6)))
                assert len(history) == 1
            assert_invariants(history)
