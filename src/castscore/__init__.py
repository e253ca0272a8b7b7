"""Castscore - quality scoring and query grounding for podcast and video episodes."""

__version__ = "0.1.0"
