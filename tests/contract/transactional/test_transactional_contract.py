"""Contract tests shared by every transactional sink.

- Nothing is published before `commit`.
- The first terminator wins; later `commit`/`abort` calls are no-ops.
- Leaving a ``with`` block without committing behaves like `abort`, also
  when the block raises.
- Operations other than `commit`/`abort` fail once the sink is terminated.
"""

from __future__ import annotations

import pytest

from scrivener.interfaces.errors import TransactionTerminatedError
from scrivener.interfaces.transactional import TransactionState
from tests.helpers.transactional import Harness

# pylint: disable=redefined-outer-name


def test_starts_open(harness: Harness):
    """A new sink is open and has published nothing."""
    assert harness.sink.state is TransactionState.OPEN
    assert not harness.sink.terminated
    harness.write("hi")
    assert harness.published() is None


def test_commit_publishes(harness: Harness):
    """Commit publishes exactly what was written."""
    harness.write("hi")
    harness.write("\nthere")
    harness.sink.commit()
    assert harness.sink.state is TransactionState.COMMITTED
    assert harness.published() == "hi\nthere"


def test_abort_publishes_nothing(harness: Harness):
    """Abort discards the staged work."""
    harness.write("hi")
    harness.sink.abort()
    assert harness.sink.state is TransactionState.ABORTED
    assert harness.published() is None


@pytest.mark.parametrize(
    ("calls", "expected"),
    [
        (["commit", "commit", "abort"], TransactionState.COMMITTED),
        (["commit", "abort", "commit"], TransactionState.COMMITTED),
        (["abort", "commit"], TransactionState.ABORTED),
        (["abort", "abort", "commit", "abort"], TransactionState.ABORTED),
    ],
)
def test_first_terminator_wins(harness: Harness, calls: list[str], expected: TransactionState):
    """Only the first terminator takes effect."""
    harness.write("hi")
    for name in calls:
        getattr(harness.sink, name)()
    assert harness.sink.state is expected
    assert harness.published() == ("hi" if expected is TransactionState.COMMITTED else None)


def test_scoped_release_aborts(harness: Harness):
    """Leaving the block without commit has the effect of abort."""
    with harness.sink as sink:
        harness.write("hi")
    assert sink.state is TransactionState.ABORTED
    assert harness.published() is None


def test_scoped_release_after_commit_keeps_result(harness: Harness):
    """Leaving the block after commit changes nothing."""
    with harness.sink as sink:
        harness.write("hi")
        sink.commit()
    assert sink.state is TransactionState.COMMITTED
    assert harness.published() == "hi"


def test_exception_in_scope_aborts(harness: Harness):
    """An exception leaving the block aborts and still propagates."""
    with pytest.raises(KeyError):
        with harness.sink:
            harness.write("hi")
            raise KeyError("boom")
    assert harness.sink.state is TransactionState.ABORTED
    assert harness.published() is None


def test_close_is_abort(harness: Harness):
    """`close` on an open sink aborts it."""
    harness.write("hi")
    harness.sink.close()
    assert harness.sink.state is TransactionState.ABORTED


@pytest.mark.parametrize("terminator", ["commit", "abort"])
def test_writes_after_termination_fail(harness: Harness, terminator: str):
    """Writing to a terminated sink raises TransactionTerminatedError."""
    getattr(harness.sink, terminator)()
    with pytest.raises(TransactionTerminatedError) as info:
        harness.write("late")
    assert info.value.state is harness.sink.state
    with pytest.raises(TransactionTerminatedError):
        harness.sink.flush()  # type: ignore[attr-defined]


def test_empty_commit(harness: Harness):
    """Committing without writing publishes an empty result."""
    harness.sink.commit()
    assert harness.sink.state is TransactionState.COMMITTED
    assert harness.published() in ("", None)
