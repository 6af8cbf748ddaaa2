"""Reading and writing logbook files."""

from .json_codec import decode_sessions, encode_sessions, read_sessions, write_sessions

__all__ = ["decode_sessions", "encode_sessions", "read_sessions", "write_sessions"]
