"""
Post — a document whose content is only readable once published.

The lifecycle is Draft → PendingReview → Published. Any edit sends the
post back to Draft, discarding a pending review or a prior publication.

Usage:
    from poststate import Post

    post = Post()
    post.add_text("I ate a salad for lunch today")
    post.request_review()
    post.approve()
    post.content  # "I ate a salad for lunch today"
"""

import logging
from typing import Dict, List, Optional

from poststate.helpers import build_metadata_dict, build_transitions, log_transition
from poststate.machine import TransitionMachine
from poststate.types import PostState, StateMetadata, StateTransition, Trigger, TransitionRecord

logger = logging.getLogger(__name__)


POST_TRANSITIONS: Dict[PostState, Dict[Trigger, PostState]] = {
    PostState.DRAFT: {
        Trigger.REQUEST_REVIEW: PostState.PENDING_REVIEW,
        Trigger.APPROVE: PostState.DRAFT,
        Trigger.EDIT: PostState.DRAFT,
    },
    PostState.PENDING_REVIEW: {
        Trigger.REQUEST_REVIEW: PostState.PENDING_REVIEW,
        Trigger.APPROVE: PostState.PUBLISHED,
        Trigger.EDIT: PostState.DRAFT,
    },
    PostState.PUBLISHED: {
        Trigger.REQUEST_REVIEW: PostState.PENDING_REVIEW,
        Trigger.APPROVE: PostState.PUBLISHED,
        Trigger.EDIT: PostState.DRAFT,
    },
}


def next_post_state(state: PostState, trigger: Trigger) -> PostState:
    """Return the state a post in ``state`` moves to when ``trigger`` fires."""
    return POST_TRANSITIONS[state][trigger]


class PostStateMachine(TransitionMachine):
    """Editorial lifecycle of a single post."""

    def define_states(self):
        return PostState

    def define_triggers(self):
        return Trigger

    def define_state_metadata(self) -> Dict[PostState, StateMetadata]:
        return build_metadata_dict(PostState, {
            PostState.DRAFT: {
                "name": "Draft",
                "description": "Being written; content hidden",
            },
            PostState.PENDING_REVIEW: {
                "name": "Pending review",
                "description": "Awaiting approval; content hidden",
            },
            PostState.PUBLISHED: {
                "name": "Published",
                "description": "Approved; content visible",
                "content_visible": True,
            },
        })

    def define_transitions(self) -> List[StateTransition]:
        return build_transitions(POST_TRANSITIONS)

    def get_initial_state(self) -> PostState:
        return PostState.DRAFT


class Post:
    """
    A post owning its text and its lifecycle state.

    Args:
        history_limit: Number of transition records kept; defaults to
                       ``TransitionMachine.HISTORY_LIMIT``.
    """

    def __init__(self, history_limit: Optional[int] = None):
        self._text = ""
        self._machine = PostStateMachine(history_limit=history_limit)
        self._machine.initialize()

    @property
    def state(self) -> PostState:
        return self._machine.get_current_state()

    @property
    def content(self) -> str:
        """The post's text if published, otherwise an empty string."""
        if self._machine.is_content_visible():
            return self._text
        return ""

    @property
    def history(self) -> List[TransitionRecord]:
        return self._machine.get_history()

    @log_transition
    def add_text(self, text: str) -> None:
        """
        Append ``text`` and send the post back to Draft.

        Raises:
            TypeError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        self._text += text
        self._machine.fire(Trigger.EDIT)

    @log_transition
    def request_review(self) -> None:
        self._machine.fire(Trigger.REQUEST_REVIEW)

    @log_transition
    def approve(self) -> None:
        self._machine.fire(Trigger.APPROVE)

    def __repr__(self) -> str:
        return f"Post(state={self.state.name}, length={len(self._text)})"
