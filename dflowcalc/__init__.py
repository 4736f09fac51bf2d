"""Dataflow dependency and critical-path analysis of instruction traces."""

__version__ = "1.0.0"