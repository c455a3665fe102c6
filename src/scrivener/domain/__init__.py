"""Pure helpers and value objects: the message composer, extension lookup
and validation records. No I/O happens here."""
