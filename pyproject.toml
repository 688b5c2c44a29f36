[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rosmsgdef"
version = "0.1.0"
description = "Parser for ROS 2 message, service and action interface definitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["ros2", "rosidl", "msg", "srv", "action", "parser", "interface"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rosmsgdef"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
