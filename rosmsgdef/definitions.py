"""Definitions of messages, services, actions and the packages holding them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .idltypes import BasicType, ConstantType, MemberType, NamespacedType


@dataclass
class Member:
    """A member of a structure."""

    name: str
    type: MemberType
    default: Optional[list[str]] = None


@dataclass
class Constant:
    """A constant definition."""

    name: str
    type: ConstantType
    value: list[str]


@dataclass
class Message:
    """A message definition."""

    package: str
    name: str
    members: list[Member] = field(default_factory=list)
    constants: list[Constant] = field(default_factory=list)


@dataclass
class Service:
    """A service definition."""

    package: str
    name: str
    request: Message
    response: Message


def _goal_id_member() -> Member:
    return Member(
        name="goal_id",
        type=NamespacedType(package="unique_identifier_msgs", namespace="msg", name="UUID"),
    )


@dataclass
class Action:
    """An action definition."""

    package: str
    name: str
    goal: Message
    result: Message
    feedback: Message

    def _action_type(self, suffix: str) -> NamespacedType:
        return NamespacedType(
            package=self.package, namespace="action", name=f"{self.name}{suffix}"
        )

    def send_goal_srv(self) -> Service:
        """Return the service used to send a goal to the action server."""
        common = f"{self.name}_SendGoal"
        request = Message(
            package=self.package,
            name=f"{common}_Request",
            members=[
                _goal_id_member(),
                Member(name="goal", type=self._action_type("_Goal")),
            ],
        )
        response = Message(
            package=self.package,
            name=f"{common}_Response",
            members=[
                Member(name="accepted", type=BasicType.BOOL),
                Member(
                    name="stamp",
                    type=NamespacedType(
                        package="builtin_interfaces", namespace="msg", name="Time"
                    ),
                ),
            ],
        )
        return Service(package=self.package, name=common, request=request, response=response)

    def get_result_srv(self) -> Service:
        """Return the service used to fetch the result of a goal."""
        common = f"{self.name}_GetResult"
        request = Message(
            package=self.package,
            name=f"{common}_Request",
            members=[_goal_id_member()],
        )
        response = Message(
            package=self.package,
            name=f"{common}_Response",
            members=[
                Member(name="status", type=BasicType.I8),
                Member(name="result", type=self._action_type("_Result")),
            ],
        )
        return Service(package=self.package, name=common, request=request, response=response)

    def feedback_message_msg(self) -> Message:
        """Return the message that carries feedback for a goal."""
        return Message(
            package=self.package,
            name=f"{self.name}_FeedbackMessage",
            members=[
                _goal_id_member(),
                Member(name="feedback", type=self._action_type("_Feedback")),
            ],
        )


@dataclass
class Package:
    """The interfaces defined by one package."""

    name: str
    messages: list[Message] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True if the package defines no interface at all."""
        return not (self.messages or self.services or self.actions)