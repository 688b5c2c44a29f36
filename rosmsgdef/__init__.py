"""Parse ROS 2 message, service and action interface definitions."""

__version__ = "0.1.0"