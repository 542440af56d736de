"""
Notepad component - shared scratch-pad per public page.
"""

from ._impl import MAX_CONTENT_LENGTH, NotepadService, validate_notepad_content
from .ports import NotepadRepoPort, OwnerSlugLookupPort

__all__ = [
    "NotepadService",
    "NotepadRepoPort",
    "OwnerSlugLookupPort",
    "validate_notepad_content",
    "MAX_CONTENT_LENGTH",
]
