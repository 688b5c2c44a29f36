# rosmsgdef

A pure-Python parser for ROS 2 interface definitions: `.msg`, `.srv` and
`.action` files. It reads them into plain Python dataclasses that you can
inspect, check or pass on to your own tools.

## Installation

```
pip install rosmsgdef
```

The package has no runtime dependencies.

## What it parses

- **Messages**: member and constant definitions. These include:
  - basic types (`int8` … `uint64`, `float32`, `float64`, `bool`, `char`, `byte`)
  - strings and bounded strings (`string`, `wstring`, `string<=10`)
  - fixed arrays (`int32[3]`), sequences (`int32[]`) and bounded sequences (`int32[<=5]`)
  - nested types (`Header`, `std_msgs/Bool`)
  - default values and constants (`int32 MAX=10`)
  - comments starting with `#`
- **Services**: a request block and a response block, separated by a line
  that holds only `---`.
- **Actions**: a goal block, a result block and a feedback block, separated
  the same way.
- **Installed packages**: every package that an ament prefix lists in
  `share/ament_index/resource_index/rosidl_interfaces`.

Integer literals may be written in decimal, binary (`0b`), octal (`0o`) or
hexadecimal (`0x`). They may have a sign and `_` separators. Each value is
checked against the range of its type. Default and constant values are
stored as lists of strings:

- integers are given in decimal,
- booleans are given as `"true"` or `"false"`,
- floats are kept as written,
- strings have their quotes removed and are trimmed.

## Usage

Parse a message from a string:

```python
from rosmsgdef.message import parse_message_string

msg = parse_message_string("my_pkg", "Point", """
float64 x
float64 y 1.5
int32 MAX=10   # a constant
""")

for member in msg.members:
    print(member.name, member.type, member.default)
for constant in msg.constants:
    print(constant.name, constant.type, constant.value)
```

Parse services and actions from files. The name of the interface is taken
from the file stem:

```python
from rosmsgdef.service import parse_service_file
from rosmsgdef.action import parse_action_file

srv = parse_service_file("my_pkg", "srv/AddTwoInts.srv")
print(srv.request.name, srv.response.name)   # AddTwoInts_Request AddTwoInts_Response

action = parse_action_file("my_pkg", "action/Fibonacci.action")
print(action.goal.name)                      # Fibonacci_Goal
```

An `Action` can also build the types that are derived from it:
`send_goal_srv()`, `get_result_srv()` and `feedback_message_msg()`.

To collect every interface installed under one or more prefixes, use
`get_packages`:

```python
from rosmsgdef.package import get_packages

for package in get_packages(["/opt/ros/humble"]):
    print(package.name, len(package.messages), len(package.services), len(package.actions))
```

`get_packages` follows these rules:

- It returns `Package` objects sorted by name.
- If several prefixes hold a package with the same name, the first one is kept.
- Packages that define no interfaces are left out.
- A prefix that has no index directory adds nothing.
- Index lines that do not name a `msg/`, `srv/` or `action/` `.idl` entry are skipped.

## Data model

- `rosmsgdef.idltypes` holds the type classes:
  - `BasicType`
  - `NamedType`
  - `NamespacedType`
  - `GenericString`
  - `GenericUnboundedString`
  - `Array`
  - `Sequence`
  - `BoundedSequence`
  - `PrimitiveArray`
- `rosmsgdef.definitions` holds the definition classes:
  - `Member`
  - `Constant`
  - `Message`
  - `Service`
  - `Action`
  - `Package`

## Lower-level parsers

You can call these parsers on their own:

- `rosmsgdef.typeparse.parse_member_type` and `parse_constant_type`
- `rosmsgdef.member.member_def` and `rosmsgdef.constant.constant_def`
- the helpers in `rosmsgdef.literal` and `rosmsgdef.ident`

The parsers in `typeparse`, `literal` and `ident` return a `(rest, value)`
tuple, where `rest` is the input that was not consumed. When their input
does not match, they raise `ParseError`.

## Errors

When a definition is malformed, the parser raises a subclass of
`rosmsgdef.errors.RclMsgError`. Examples are `ParseMemberError`,
`ParseConstantError`, `ParseDefaultValueError`, `InvalidDefaultError`,
`InvalidServiceSpecification` and `InvalidActionSpecification`.

The `parse_*_file` functions add the file path to the error message. They
do this by raising a plain `RclMsgError` that is chained to the original
error. If a file cannot be read, the `OSError` is raised unchanged.

## What it does not do

This package only parses definitions. It does not:

- generate code or language bindings from them,
- serialise messages,
- talk to a ROS graph,
- provide a command-line tool.

## Running the tests

```
pip install rosmsgdef[test]
pytest
```