"""Unit tests.

No filesystem access: writers target ``io.StringIO``, ``StringWriter`` or
collecting line writers, and environment settings go through ``monkeypatch``.
"""
