"""Contract tests.

Each contract is written once and parametrized over every implementation
through fixtures, so the transactional shapes and the writer flavours stay
interchangeable.
"""
