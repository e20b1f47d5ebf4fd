"""Cyclopts command-line interface for bytedump."""
