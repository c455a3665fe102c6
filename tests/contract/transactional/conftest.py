"""Pytest fixtures for transactional sink contract tests.

Provided fixtures
-----------------
- **harness**: Parametrized over every transactional shape. Returns a fresh
  `Harness` bundling the sink, a function that writes text to it, and a
  function that reports what has been published so far (None if nothing).

  Current params:
    - ``"local-writer"`` → `LocalTransactionalWriter` on a temp path
    - ``"local-unchecked"`` → `LocalTransactionalUncheckedWriter` on a temp path
    - ``"local-stream"`` → `LocalTransactionalOutputStream` on a temp path
    - ``"buffered"`` → `BufferedTransactionalWriter` over a `StringWriter`
"""

from __future__ import annotations

from pathlib import Path

import pytest

from scrivener.adapters.transactional import (
    BufferedTransactionalWriter,
    open_transactional_stream,
    open_transactional_unchecked_writer,
    open_transactional_writer,
)
from scrivener.adapters.writers import StringWriter
from tests.helpers.transactional import Harness, published_file


@pytest.fixture(params=["local-writer", "local-unchecked", "local-stream", "buffered"])
def harness(request: pytest.FixtureRequest, tmp_path: Path) -> Harness:
    """Return a fresh transactional sink for the requested shape."""
    target = tmp_path / "out.txt"

    match request.param:
        case "local-writer":
            writer = open_transactional_writer(target, line_separator="\n", fsync=False)
            return Harness(writer, writer.write, published_file(target))
        case "local-unchecked":
            unchecked = open_transactional_unchecked_writer(
                target, line_separator="\n", fsync=False
            )
            return Harness(unchecked, unchecked.write, published_file(target))
        case "local-stream":
            stream = open_transactional_stream(target, fsync=False)
            return Harness(
                stream, lambda s: stream.write(s.encode("utf-8")), published_file(target)
            )
        case "buffered":
            downstream = StringWriter()
            buffered = BufferedTransactionalWriter(downstream)
            return Harness(
                buffered, buffered.write, lambda: downstream.getvalue() or None
            )
        case _:
            raise ValueError(f"unknown transactional shape: {request.param}")
