"""Parser for message definitions (``.msg`` files)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .constant import constant_def
from .definitions import Message
from .errors import ParseMemberError, RclMsgError
from .member import member_def


def split_once(s: str, pat: str) -> tuple[str, Optional[str]]:
    """Split ``s`` at the first ``pat``; the tail is None if ``pat`` is absent."""
    head, sep, tail = s.partition(pat)
    return head, (tail if sep else None)


def parse_message_file(pkg_name: str, interface_file: Union[str, os.PathLike]) -> Message:
    """Read and parse a message file; the message is named after the file stem."""
    path = Path(interface_file)
    text = path.read_text(encoding="utf-8")
    try:
        return parse_message_string(pkg_name, path.stem, text)
    except RclMsgError as e:
        raise RclMsgError(f"Parse file error: {path}\n{e}") from e


def parse_message_string(pkg_name: str, msg_name: str, message_string: str) -> Message:
    """Parse the text of a message definition."""
    message = Message(package=pkg_name, name=msg_name)
    for raw_line in message_string.split("\n"):
        line, _ = split_once(raw_line, "#")
        line = line.strip()
        if not line:
            continue
        _, rest = split_once(line, " ")
        if rest is None:
            raise ParseMemberError(line, "expected a type and a name separated by a space")
        if "=" in rest:
            message.constants.append(constant_def(line))
        else:
            message.members.append(member_def(line))
    return message