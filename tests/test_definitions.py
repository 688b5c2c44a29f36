from rosmsgdef.definitions import Action, Constant, Member, Message, Package, Service
from rosmsgdef.idltypes import BasicType, NamespacedType, Sequence


def _fibonacci() -> Action:
    pkg = "test_msgs"
    return Action(
        package=pkg,
        name="Fibonacci",
        goal=Message(pkg, "Fibonacci_Goal", [Member("order", BasicType.I32)]),
        result=Message(pkg, "Fibonacci_Result", [Member("sequence", Sequence(BasicType.I32))]),
        feedback=Message(
            pkg, "Fibonacci_Feedback", [Member("sequence", Sequence(BasicType.I32))]
        ),
    )


GOAL_ID = NamespacedType("unique_identifier_msgs", "msg", "UUID")


def test_member_default_is_none():
    member = Member("value", BasicType.U8)
    assert member.default is None


def test_message_defaults_are_independent():
    a = Message("pkg", "A")
    b = Message("pkg", "B")
    a.members.append(Member("x", BasicType.I8))
    assert b.members == []
    assert a.constants == []


def test_constant_holds_values():
    c = Constant("AAA", BasicType.I32, ["30"])
    assert c.value == ["30"]
    assert c.type is BasicType.I32


def test_send_goal_srv():
    action = _fibonacci()
    srv = action.send_goal_srv()
    assert srv.package == "test_msgs"
    assert srv.name == "Fibonacci_SendGoal"
    assert srv.request.name == "Fibonacci_SendGoal_Request"
    assert [m.name for m in srv.request.members] == ["goal_id", "goal"]
    assert srv.request.members[0].type == GOAL_ID
    assert srv.request.members[1].type == NamespacedType("test_msgs", "action", "Fibonacci_Goal")
    assert srv.response.name == "Fibonacci_SendGoal_Response"
    assert [m.name for m in srv.response.members] == ["accepted", "stamp"]
    assert srv.response.members[0].type is BasicType.BOOL
    assert srv.response.members[1].type == NamespacedType("builtin_interfaces", "msg", "Time")
    assert srv.request.constants == [] and srv.response.constants == []


def test_get_result_srv():
    srv = _fibonacci().get_result_srv()
    assert srv.name == "Fibonacci_GetResult"
    assert srv.request.name == "Fibonacci_GetResult_Request"
    assert [m.type for m in srv.request.members] == [GOAL_ID]
    assert srv.response.name == "Fibonacci_GetResult_Response"
    assert [m.name for m in srv.response.members] == ["status", "result"]
    assert srv.response.members[0].type is BasicType.I8
    assert srv.response.members[1].type == NamespacedType(
        "test_msgs", "action", "Fibonacci_Result"
    )


def test_feedback_message_msg():
    msg = _fibonacci().feedback_message_msg()
    assert msg.package == "test_msgs"
    assert msg.name == "Fibonacci_FeedbackMessage"
    assert [m.name for m in msg.members] == ["goal_id", "feedback"]
    assert msg.members[0].type == GOAL_ID
    assert msg.members[1].type == NamespacedType("test_msgs", "action", "Fibonacci_Feedback")
    assert all(m.default is None for m in msg.members)


def test_package_is_empty():
    pkg = Package("std_msgs")
    assert pkg.is_empty()


def test_package_with_message_is_not_empty():
    pkg = Package("std_msgs", messages=[Message("std_msgs", "Bool")])
    assert not pkg.is_empty()


def test_package_with_service_or_action_is_not_empty():
    req = Message("p", "S_Request")
    res = Message("p", "S_Response")
    assert not Package("p", services=[Service("p", "S", req, res)]).is_empty()
    assert not Package("p", actions=[_fibonacci()]).is_empty()


def test_package_lists_are_independent():
    a = Package("a")
    b = Package("b")
    a.messages.append(Message("a", "M"))
    assert b.is_empty()