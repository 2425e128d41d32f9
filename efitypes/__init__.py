"""UEFI data types: characters, null-terminated strings, GUIDs, C-style enums and a logging handler."""

__version__ = "0.1.0"
__all__ = ["chars", "enums", "guid", "strs", "owned_strs", "logger"]