"""Parsing, labelling, tag metadata, layout, navigation and tag prompts for cclip clipboard history."""

__version__ = "2.3.0"