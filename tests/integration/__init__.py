"""Integration tests.

Local-file transactional sinks exercised against a real directory: atomic
publish, staging-file cleanup, newline translation and publish failures.
"""
