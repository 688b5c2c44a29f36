"""Discovery of the interfaces installed under ament prefix paths."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

from .action import parse_action_file
from .definitions import Package
from .message import parse_message_file
from .service import parse_service_file

logger = logging.getLogger(__name__)

ROSIDL_INTERFACES = "share/ament_index/resource_index/rosidl_interfaces"

NAMESPACES = ("msg", "srv", "action")

_SKIPPED_PACKAGES = frozenset({"libstatistics_collector"})

_EXTENSIONS = {"msg": "msg", "srv": "srv", "action": "action"}


def parse_line(line: str) -> Optional[tuple[str, str]]:
    """Split an index line like ``msg/Bool.idl`` into ``("msg", "Bool")``."""
    if not line.endswith(".idl"):
        return None
    for namespace in NAMESPACES:
        prefix = f"{namespace}/"
        if line.startswith(prefix):
            return namespace, line[len(prefix):-len(".idl")]
    logger.warning("Unknown type: %r", line)
    return None


def _read_index_lines(path: Path) -> Iterable[str]:
    with path.open(encoding="utf-8") as f:
        for line in f:
            yield line.removesuffix("\n").removesuffix("\r")


def _packages_in(root_dir: Path) -> list[Package]:
    index_dir = root_dir / ROSIDL_INTERFACES
    try:
        entries = list(index_dir.iterdir())
    except OSError:
        return []

    packages = []
    for entry in entries:
        name = entry.name
        if name in _SKIPPED_PACKAGES:
            continue
        package = Package(name)
        share = root_dir / "share" / name
        for line in _read_index_lines(entry):
            parsed = parse_line(line)
            if parsed is None:
                continue
            namespace, item = parsed
            file = share / namespace / f"{item}.{_EXTENSIONS[namespace]}"
            if namespace == "msg":
                package.messages.append(parse_message_file(name, file))
            elif namespace == "srv":
                package.services.append(parse_service_file(name, file))
            else:
                package.actions.append(parse_action_file(name, file))
        packages.append(package)
    return packages


def get_packages(paths: Iterable[Union[str, os.PathLike]]) -> list[Package]:
    """Collect the non-empty packages under the given prefixes, sorted by name.

    When several prefixes hold a package of the same name, the first one wins.
    """
    packages = [
        package
        for root in paths
        for package in _packages_in(Path(root))
        if not package.is_empty()
    ]
    packages.sort(key=lambda p: p.name)
    unique: list[Package] = []
    for package in packages:
        if not unique or unique[-1].name != package.name:
            unique.append(package)
    return unique