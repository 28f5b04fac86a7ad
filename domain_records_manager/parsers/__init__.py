"""Parsers for desired-state input files."""

from .desired_state import DesiredStateParser

__all__ = ["DesiredStateParser"]
