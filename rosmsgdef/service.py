"""Parser for service definitions (``.srv`` files)."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

from .definitions import Service
from .errors import InvalidServiceSpecification, RclMsgError
from .message import parse_message_string

SERVICE_REQUEST_SUFFIX = "_Request"
SERVICE_RESPONSE_SUFFIX = "_Response"

_SEPARATOR = re.compile(r"^---$", re.MULTILINE)


def parse_service_file(pkg_name: str, interface_file: Union[str, os.PathLike]) -> Service:
    """Read and parse a service file; the service is named after the file stem."""
    path = Path(interface_file)
    text = path.read_text(encoding="utf-8")
    try:
        return parse_service_string(pkg_name, path.stem, text)
    except RclMsgError as e:
        raise RclMsgError(f"Parse file error: {path}\n{e}") from e


def parse_service_string(pkg_name: str, srv_name: str, service_string: str) -> Service:
    """Parse the text of a service definition: a request and a response block."""
    blocks = _SEPARATOR.split(service_string)
    if len(blocks) != 2:
        raise InvalidServiceSpecification(
            "Number of '---' separators nonconformant with service definition"
        )
    request_text, response_text = blocks
    return Service(
        package=pkg_name,
        name=srv_name,
        request=parse_message_string(
            pkg_name, f"{srv_name}{SERVICE_REQUEST_SUFFIX}", request_text
        ),
        response=parse_message_string(
            pkg_name, f"{srv_name}{SERVICE_RESPONSE_SUFFIX}", response_text
        ),
    )