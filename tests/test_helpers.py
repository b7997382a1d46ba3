"""Tests for poststate.helpers."""

import logging
from enum import Enum

import pytest

from poststate.helpers import (
    build_metadata_dict,
    build_transitions,
    create_state_metadata,
    log_transition,
)
from poststate.types import StateMetadata, StateTransition


class Steps(Enum):
    A = "a"
    B = "b"


class Go(Enum):
    NEXT = "next"
    STAY = "stay"


# ── create_state_metadata ──────────────────────────────────────────────────────

class TestCreateStateMetadata:
    def test_returns_state_metadata(self):
        m = create_state_metadata("Step A")
        assert isinstance(m, StateMetadata)

    def test_defaults(self):
        m = create_state_metadata("X")
        assert m.name == "X"
        assert m.description == ""
        assert m.content_visible is False

    def test_custom_values(self):
        m = create_state_metadata("X", description="shown", content_visible=True)
        assert m.description == "shown"
        assert m.content_visible is True


# ── build_metadata_dict ────────────────────────────────────────────────────────

class TestBuildMetadataDict:
    def test_returns_dict_with_all_states(self):
        result = build_metadata_dict(Steps, {
            Steps.A: {"name": "A"},
            Steps.B: {"name": "B"},
        })
        assert set(result) == {Steps.A, Steps.B}
        assert isinstance(result[Steps.A], StateMetadata)

    def test_missing_name_raises(self):
        with pytest.raises(ValueError, match="name"):
            build_metadata_dict(Steps, {Steps.A: {"content_visible": True}})

    def test_optional_fields_applied(self):
        result = build_metadata_dict(Steps, {
            Steps.A: {"name": "A", "description": "desc", "content_visible": True},
        })
        m = result[Steps.A]
        assert m.description == "desc"
        assert m.content_visible is True

    def test_empty_configs_returns_empty_dict(self):
        assert build_metadata_dict(Steps, {}) == {}


# ── build_transitions ──────────────────────────────────────────────────────────

class TestBuildTransitions:
    def test_flattens_table(self):
        result = build_transitions({
            Steps.A: {Go.NEXT: Steps.B, Go.STAY: Steps.A},
            Steps.B: {Go.NEXT: Steps.A},
        })
        assert set(result) == {
            StateTransition(Steps.A, Go.NEXT, Steps.B),
            StateTransition(Steps.A, Go.STAY, Steps.A),
            StateTransition(Steps.B, Go.NEXT, Steps.A),
        }

    def test_empty_table(self):
        assert build_transitions({}) == []


# ── log_transition ─────────────────────────────────────────────────────────────

class TestLogTransition:
    """Verifies the decorator passes through calls and logs state changes."""

    def _make(self):
        class Thing:
            state = Steps.A

            @log_transition
            def advance(self, amount=1):
                self.state = Steps.B
                return amount

        return Thing()

    def test_return_value_passthrough(self):
        assert self._make().advance(amount=5) == 5

    def test_side_effect_applied(self):
        thing = self._make()
        thing.advance()
        assert thing.state == Steps.B

    def test_preserves_function_name(self):
        assert self._make().advance.__name__ == "advance"

    def test_logs_before_and_after(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="poststate.helpers"):
            self._make().advance()
        assert "advance: A → B" in caplog.text
