"""ARGUS UTILS

String, binary and path-syntax helpers for talking to an ARGUS TV recording
service: printf-style formatting, delimiter splitting, base64 encoding for
transport, and UNC/SMB path rewriting with credential injection.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
