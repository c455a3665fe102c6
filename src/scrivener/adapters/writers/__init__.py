"""Concrete writers and writer adaptors."""

from .host import (
    HostOutputStream,
    HostWriterAdapter,
    HostWriterProjection,
    as_host,
    from_host,
)
from .line_splitting import LineSplittingWriter
from .line_writers import CollectingLineWriter, LoggerLineWriter, ReporterLineWriter
from .string_writer import StringWriter
from .unchecked import (
    UncheckedOutputStreamAdapter,
    UncheckedWriterAdapter,
    translate_io_errors,
    unchecked_stream,
    unchecked_writer,
)

__all__ = [
    "CollectingLineWriter",
    "HostOutputStream",
    "HostWriterAdapter",
    "HostWriterProjection",
    "LineSplittingWriter",
    "LoggerLineWriter",
    "ReporterLineWriter",
    "StringWriter",
    "UncheckedOutputStreamAdapter",
    "UncheckedWriterAdapter",
    "as_host",
    "from_host",
    "translate_io_errors",
    "unchecked_stream",
    "unchecked_writer",
]
