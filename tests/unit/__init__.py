"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No network; filesystem only through ``tmp_path``.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
