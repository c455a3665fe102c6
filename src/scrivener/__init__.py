"""SCRIVENER

Writer and output-stream contracts with transactional publication, a small
reporter family for errors, warnings and information, and a formatted-message
composer that renders plain text or HTML.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
