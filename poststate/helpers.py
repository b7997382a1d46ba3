"""
Helper utilities for building state machines.

Provides convenience functions and decorators that reduce boilerplate
when defining state metadata and transition tables.
"""

import logging
from enum import Enum
from functools import wraps
from typing import Dict, List, Mapping

from poststate.types import StateMetadata, StateTransition

logger = logging.getLogger(__name__)


def create_state_metadata(
    name: str,
    description: str = "",
    content_visible: bool = False,
) -> StateMetadata:
    """
    Create a StateMetadata instance with sensible defaults.

    Args:
        name: Display name for the state.
        description: Brief description of the state.
        content_visible: Whether content may be read in this state (default: False).

    Returns:
        A configured StateMetadata instance.

    Example:
        metadata = create_state_metadata(
            name="Published",
            description="Visible to readers",
            content_visible=True,
        )
    """
    return StateMetadata(
        name=name,
        description=description,
        content_visible=content_visible,
    )


def build_metadata_dict(
    states_enum: type[Enum],
    configs: Dict[Enum, dict],
) -> Dict[Enum, StateMetadata]:
    """
    Build a state metadata dictionary from a compact configuration.

    Args:
        states_enum: The states Enum class (used for documentation clarity).
        configs: Mapping of state → config dict. Supported keys:
            - ``name`` (str, required): Display name.
            - ``description`` (str, optional): Brief description.
            - ``content_visible`` (bool, optional, default False).

    Returns:
        Dict mapping each state to a StateMetadata instance.

    Raises:
        ValueError: If any config dict is missing the required ``name`` key.

    Example:
        metadata = build_metadata_dict(PostState, {
            PostState.DRAFT: {"name": "Draft"},
            PostState.PUBLISHED: {"name": "Published", "content_visible": True},
        })
    """
    result = {}
    for state, config in configs.items():
        if "name" not in config:
            raise ValueError(f"State {state} config missing required 'name' field")
        result[state] = create_state_metadata(
            name=config["name"],
            description=config.get("description", ""),
            content_visible=config.get("content_visible", False),
        )
    return result


def build_transitions(
    table: Mapping[Enum, Mapping[Enum, Enum]],
) -> List[StateTransition]:
    """
    Flatten a nested ``{state: {trigger: to_state}}`` table into transitions.

    Example:
        transitions = build_transitions({
            PostState.DRAFT: {Trigger.APPROVE: PostState.DRAFT},
        })
    """
    return [
        StateTransition(from_state, trigger, to_state)
        for from_state, row in table.items()
        for trigger, to_state in row.items()
    ]


def log_transition(func):
    """
    Decorator that adds entry/exit logging to methods of a stateful object.

    The decorated object must expose a ``state`` attribute holding an Enum.
    Logs the operation name with the state before and after at DEBUG level.

    Usage:
        class Post:
            @log_transition
            def approve(self) -> None:
                ...
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        before = self.state
        logger.debug(f"{func.__name__}: starting in {before.name}")
        result = func(self, *args, **kwargs)
        logger.debug(f"{func.__name__}: {before.name} → {self.state.name}")
        return result

    return wrapper
