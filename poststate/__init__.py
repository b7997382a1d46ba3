"""
poststate
~~~~~~~~~

An editorial post lifecycle (Draft → PendingReview → Published) built
on a small, table-driven state machine engine.

Quick start:
    from poststate import Post, PostState

    post = Post()
    post.add_text("Hello")
    post.request_review()
    post.approve()
    assert post.state is PostState.PUBLISHED
"""

from poststate.commands import COMMANDS, apply_command, replay
from poststate.helpers import (
    build_metadata_dict,
    build_transitions,
    create_state_metadata,
    log_transition,
)
from poststate.machine import TransitionMachine
from poststate.post import POST_TRANSITIONS, Post, PostStateMachine, next_post_state
from poststate.types import (
    PostState,
    StateMetadata,
    StateTransition,
    TransitionRecord,
    Trigger,
)

__all__ = [
    "Post",
    "PostState",
    "PostStateMachine",
    "POST_TRANSITIONS",
    "next_post_state",
    "Trigger",
    "TransitionMachine",
    "StateMetadata",
    "StateTransition",
    "TransitionRecord",
    "COMMANDS",
    "apply_command",
    "replay",
    "build_metadata_dict",
    "build_transitions",
    "create_state_metadata",
    "log_transition",
]
