"""Taskboard: task board backend with workflow automation."""
