"""
Services package - Document level operations on catalog messages.
"""

from .documents import (
    DocumentReport,
    from_json,
    message_identifier,
    parse_document,
    render_document,
    to_json,
    validate_document,
)

__all__ = [
    "DocumentReport",
    "from_json",
    "message_identifier",
    "parse_document",
    "render_document",
    "to_json",
    "validate_document",
]
