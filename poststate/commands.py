"""
String command dispatch for posts.

Lets a host program drive a Post by operation name, e.g. from a script
or a recorded sequence of edits.
"""

import logging
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from poststate.post import Post
from poststate.types import PostState

logger = logging.getLogger(__name__)


COMMANDS: Dict[str, Callable[..., None]] = {
    "add_text": Post.add_text,
    "request_review": Post.request_review,
    "approve": Post.approve,
}

CommandSpec = Union[str, Tuple]


def apply_command(post: Post, command: str, *args) -> PostState:
    """
    Run the operation named ``command`` on ``post``.

    Returns:
        The post's state after the operation.

    Raises:
        ValueError: If ``command`` is not one of ``COMMANDS``.
    """
    operation = COMMANDS.get(command)
    if operation is None:
        raise ValueError(f"unsupported command '{command}'")
    operation(post, *args)
    return post.state


def replay(commands: Iterable[CommandSpec], post: Optional[Post] = None) -> Post:
    """
    Apply a sequence of commands to ``post`` (a new Post if omitted).

    Each entry is either a command name or a tuple of name and arguments:

        replay(["request_review", ("add_text", "A"), "approve"])
    """
    if post is None:
        post = Post()

    count = 0
    for entry in commands:
        if isinstance(entry, str):
            apply_command(post, entry)
        else:
            apply_command(post, *entry)
        count += 1

    logger.debug(f"Replayed {count} commands — {post!r}")
    return post
