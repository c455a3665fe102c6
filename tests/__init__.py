"""SCRIVENER test suite.

Folder taxonomy
- unit/         : One module at a time, in memory.
- contract/     : Behaviour every transactional sink or released writer must share.
- integration/  : Transactional sinks against the real filesystem (``tmp_path``).
- helpers/      : Shared utilities (no tests here).

Property-based tests live next to the unit tests they extend, in
``*_props.py`` modules marked with ``@pytest.mark.property``.
"""
