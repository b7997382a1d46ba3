"""
TransitionMachine — a reusable, trigger-driven state machine engine.

Features:
- Declarative state, trigger, metadata, and transition definitions via abstract methods
- Validation that the transition table is total (every state handles every trigger)
- O(1) transition lookup keyed by (state, trigger)
- Bounded transition history (deque) for debugging and introspection

Usage:
    from enum import Enum
    from poststate.machine import TransitionMachine
    from poststate.helpers import build_metadata_dict, build_transitions

    class Light(Enum):
        OFF = "off"
        ON = "on"

    class Switch(Enum):
        FLIP = "flip"

    class LightMachine(TransitionMachine):
        def define_states(self): return Light
        def define_triggers(self): return Switch
        def define_state_metadata(self):
            return build_metadata_dict(Light, {
                Light.OFF: {"name": "Off"},
                Light.ON:  {"name": "On", "content_visible": True},
            })
        def define_transitions(self):
            return build_transitions({
                Light.OFF: {Switch.FLIP: Light.ON},
                Light.ON:  {Switch.FLIP: Light.OFF},
            })
        def get_initial_state(self): return Light.OFF
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Dict, List, Optional, Tuple

from poststate.types import StateMetadata, StateTransition, TransitionRecord

logger = logging.getLogger(__name__)


class TransitionMachine(ABC):
    """
    Base class for trigger-driven state machines.

    Subclass this and implement the five abstract methods. Every
    (state, trigger) pair must have exactly one transition, so ``fire()``
    is defined for every state the machine can reach.

    Attributes:
        HISTORY_LIMIT: Number of transition records kept (default: 100).
    """

    HISTORY_LIMIT: int = 100

    def __init__(self, history_limit: Optional[int] = None):
        limit = self.HISTORY_LIMIT if history_limit is None else history_limit
        if limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {limit}")

        self._states: Optional[type[Enum]] = None
        self._triggers: Optional[type[Enum]] = None
        self._state_metadata: Dict[Enum, StateMetadata] = {}
        self._transitions: List[StateTransition] = []
        self._current_state: Optional[Enum] = None
        self._transition_map: Dict[Tuple[Enum, Enum], StateTransition] = {}

        self._history: deque = deque(maxlen=limit)

        self._initialized: bool = False

    # ------------------------------------------------------------------
    # Abstract interface — subclasses must implement these
    # ------------------------------------------------------------------

    @abstractmethod
    def define_states(self) -> type[Enum]:
        """Return the Enum class that defines all valid states."""

    @abstractmethod
    def define_triggers(self) -> type[Enum]:
        """Return the Enum class that defines all triggers."""

    @abstractmethod
    def define_state_metadata(self) -> Dict[Enum, StateMetadata]:
        """Return a mapping of every state to its StateMetadata."""

    @abstractmethod
    def define_transitions(self) -> List[StateTransition]:
        """Return one StateTransition per (state, trigger) pair."""

    @abstractmethod
    def get_initial_state(self) -> Enum:
        """Return the state the machine should start in."""

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Initialise the state machine.

        Called automatically by ``fire()`` and ``peek()`` if not already
        done. Validates that every state has metadata, all transitions
        reference valid states and triggers, and the table is total.

        Raises:
            ValueError: On invalid configuration.
        """
        if self._initialized:
            return

        self._states = self.define_states()
        self._triggers = self.define_triggers()
        self._state_metadata = self.define_state_metadata()
        self._transitions = self.define_transitions()
        self._current_state = self.get_initial_state()

        self._transition_map = {}
        for t in self._transitions:
            key = (t.from_state, t.trigger)
            if key in self._transition_map:
                raise ValueError(
                    f"Duplicate transition for {t.from_state} on {t.trigger}"
                )
            self._transition_map[key] = t

        self._validate()
        self._initialized = True

        logger.info(
            f"{self.__class__.__name__} initialised — "
            f"{len(self._state_metadata)} states, "
            f"{len(self._transitions)} transitions, "
            f"starting at {self._current_state.name}"
        )

    def _validate(self) -> None:
        """Validate configuration. Raises ValueError on problems."""
        for state in self._states:
            if state not in self._state_metadata:
                raise ValueError(f"State {state} has no metadata defined")

        if not isinstance(self._current_state, self._states):
            raise ValueError(
                f"Initial state {self._current_state} not found in states enum"
            )

        for t in self._transitions:
            if not isinstance(t.from_state, self._states):
                raise ValueError(f"Transition from_state {t.from_state} not in states enum")
            if not isinstance(t.to_state, self._states):
                raise ValueError(f"Transition to_state {t.to_state} not in states enum")
            if not isinstance(t.trigger, self._triggers):
                raise ValueError(f"Transition trigger {t.trigger} not in triggers enum")

        for state in self._states:
            for trigger in self._triggers:
                if (state, trigger) not in self._transition_map:
                    raise ValueError(f"No transition for {state} on {trigger}")

    # ------------------------------------------------------------------
    # Firing triggers
    # ------------------------------------------------------------------

    def fire(self, trigger: Enum) -> Enum:
        """
        Apply ``trigger`` to the current state and return the new state.

        Every fired trigger is recorded in the history, including no-op
        transitions.

        Raises:
            ValueError: If ``trigger`` is not a member of the triggers enum.
        """
        transition = self._lookup(trigger)

        self._history.append(
            TransitionRecord(
                from_state=transition.from_state,
                trigger=trigger,
                to_state=transition.to_state,
            )
        )

        if transition.is_noop:
            logger.debug(f"{trigger.name} ignored in {self._current_state.name}")
        else:
            logger.info(
                f"Transition: {transition.from_state.name} → {transition.to_state.name} "
                f"({trigger.name})"
            )

        self._current_state = transition.to_state
        return self._current_state

    def peek(self, trigger: Enum) -> Enum:
        """Return the state ``trigger`` would lead to, without firing it."""
        return self._lookup(trigger).to_state

    def _lookup(self, trigger: Enum) -> StateTransition:
        if not self._initialized:
            self.initialize()

        if not isinstance(trigger, self._triggers):
            raise ValueError(
                f"Trigger {trigger!r} is not defined for {self.__class__.__name__}"
            )
        return self._transition_map[(self._current_state, trigger)]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_current_state(self) -> Optional[Enum]:
        """Return the current state."""
        return self._current_state

    def get_state_metadata(self, state: Optional[Enum] = None) -> StateMetadata:
        """Return metadata for ``state``, or for the current state if omitted."""
        if not self._initialized:
            self.initialize()
        return self._state_metadata[state if state is not None else self._current_state]

    def is_content_visible(self) -> bool:
        """True if the current state exposes its owner's content."""
        return self.get_state_metadata().content_visible

    def get_history(self, last_n: Optional[int] = None) -> List[TransitionRecord]:
        """
        Return transition history.

        Args:
            last_n: If provided, return only the last N entries.

        Raises:
            ValueError: If ``last_n`` is negative.
        """
        history = list(self._history)
        if last_n is None:
            return history
        if last_n < 0:
            raise ValueError(f"last_n must be >= 0, got {last_n}")
        return history[-last_n:] if last_n > 0 else []

    def reset(self) -> None:
        """
        Reset the machine to its initial state and clear the history.

        Only engine state is reset; data held by the owning object (such
        as a Post's text) is untouched.
        """
        self._current_state = self.get_initial_state()
        self._history.clear()
        logger.info(f"Reset to {self._current_state.name}")
