"""
Post lifecycle data types.

Defines the core types used by the post state machine:
- PostState: Lifecycle states of a post
- Trigger: Events that drive transitions
- StateMetadata: Configuration for individual states
- StateTransition: One row of a transition table
- TransitionRecord: Tracks fired transitions
"""

import time
from dataclasses import dataclass, field
from enum import Enum


class PostState(Enum):
    """Editorial lifecycle state of a post."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"


class Trigger(Enum):
    """
    Event fired against a post state machine.

    EDIT is fired internally whenever text is appended to a post.
    """

    REQUEST_REVIEW = "request_review"
    APPROVE = "approve"
    EDIT = "edit"


@dataclass
class StateMetadata:
    """
    Metadata and configuration for a single state.

    Args:
        name: Display name for the state.
        description: Brief description of the state.
        content_visible: Whether the owner's content may be read in this state.

    Raises:
        ValueError: If name is empty.
    """

    name: str
    description: str = ""
    content_visible: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("StateMetadata name must not be empty")


@dataclass(frozen=True)
class StateTransition:
    """
    Maps a (from_state, trigger) pair to the resulting state.

    Args:
        from_state: The state this transition originates from.
        trigger: The event that fires it.
        to_state: The state this transition leads to.
    """

    from_state: Enum
    trigger: Enum
    to_state: Enum

    @property
    def is_noop(self) -> bool:
        """True if firing this transition leaves the state unchanged."""
        return self.from_state == self.to_state


@dataclass
class TransitionRecord:
    """Records a single fired trigger."""

    from_state: Enum
    trigger: Enum
    to_state: Enum
    timestamp: float = field(default_factory=time.time)

    @property
    def changed(self) -> bool:
        return self.from_state != self.to_state

    def to_dict(self) -> dict:
        """Serialise to a plain dictionary."""
        return {
            "from_state": self.from_state.name,
            "trigger": self.trigger.value,
            "to_state": self.to_state.name,
            "timestamp": self.timestamp,
        }
