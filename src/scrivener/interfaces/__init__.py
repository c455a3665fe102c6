"""Interfaces (application boundary) for SCRIVENER.

Defines the contracts that concrete writers, transactional overlays and
reporters implement: ABCs, one runtime-checkable protocol and the shared
error types. Nothing here performs I/O.

Dependency rule: this package may import `scrivener.domain` (the reporters'
formatted variants use the message composer) but never `scrivener.adapters`.
"""
