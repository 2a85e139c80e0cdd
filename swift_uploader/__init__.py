"""Resumable uploader for Swift recorder sessions to the Internet Archive"""

__version__ = "0.1.0"
