"""
Clipfiles - copy a project's tree and source files to the clipboard.

This package scans a directory tree, optionally keeps only some file
extensions, renders the matched files as a tree and concatenates their
contents into a single payload for pasting into a chat-based LLM.
"""

__version__ = "0.1.0"
__author__ = "Clipfiles Team"
