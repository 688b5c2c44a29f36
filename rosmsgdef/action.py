"""Parser for action definitions (``.action`` files)."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

from .definitions import Action
from .errors import InvalidActionSpecification, RclMsgError
from .message import parse_message_string

ACTION_GOAL_SUFFIX = "_Goal"
ACTION_RESULT_SUFFIX = "_Result"
ACTION_FEEDBACK_SUFFIX = "_Feedback"

_SEPARATOR = re.compile(r"^---$", re.MULTILINE)


def parse_action_file(pkg_name: str, interface_file: Union[str, os.PathLike]) -> Action:
    """Read and parse an action file; the action is named after the file stem."""
    path = Path(interface_file)
    text = path.read_text(encoding="utf-8")
    try:
        return parse_action_string(pkg_name, path.stem, text)
    except RclMsgError as e:
        raise RclMsgError(f"Parse file error: {path}\n{e}") from e


def parse_action_string(pkg_name: str, action_name: str, action_string: str) -> Action:
    """Parse the text of an action definition: goal, result and feedback blocks."""
    blocks = _SEPARATOR.split(action_string)
    if len(blocks) != 3:
        raise InvalidActionSpecification(
            "Number of '---' separators nonconformant with action definition"
        )
    goal_text, result_text, feedback_text = blocks
    return Action(
        package=pkg_name,
        name=action_name,
        goal=parse_message_string(pkg_name, f"{action_name}{ACTION_GOAL_SUFFIX}", goal_text),
        result=parse_message_string(
            pkg_name, f"{action_name}{ACTION_RESULT_SUFFIX}", result_text
        ),
        feedback=parse_message_string(
            pkg_name, f"{action_name}{ACTION_FEEDBACK_SUFFIX}", feedback_text
        ),
    )