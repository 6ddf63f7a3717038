class NoteNotFound(LookupError):
    """Raised when an operation references a note id absent from the store."""

    def __init__(self, note_id: int):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class NoteValidationFailed(ValueError):
    """Raised when a note is created with both title and content empty."""
