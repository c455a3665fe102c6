"""Support namespace for small, cross-cutting helpers.

Nothing is re-exported at the package level. Import helpers from their
defining modules.
"""
