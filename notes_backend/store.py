import logging
from typing import List, Tuple

from notes_backend.errors import NoteNotFound, NoteValidationFailed
from notes_backend.models import Note

logger = logging.getLogger(__name__)

SAMPLE_NOTES = (
    ("Welcome", "Start creating your notes!"),
    ("Tip", "Use the + button to add a new note."),
)


class NoteStore:
    """
    In-memory, ordered collection of notes.

    Notes are kept most-recent-first. Queries return tuples of frozen
    Note values, so a caller may keep a result while the store changes.
    Not thread-safe: one owner mutates it.
    """

    def __init__(self) -> None:
        self._notes: List[Note] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return any(note.id == note_id for note in self._notes)

    def _next_id(self) -> int:
        # Ids are never reused, even after the highest one is deleted.
        current_max = max((note.id for note in self._notes), default=0)
        return max(current_max, self._last_id) + 1

    def _index_of(self, note_id: int) -> int:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        raise NoteNotFound(note_id)

    # PUBLIC_INTERFACE
    def add(self, title: str, content: str) -> Note:
        """
        Create a note and insert it at the front of the list.

        Raises NoteValidationFailed when title and content are both empty
        after trimming; the store is left unchanged in that case.
        """
        title, content = title.strip(), content.strip()
        if not title and not content:
            raise NoteValidationFailed("Note title and content cannot both be empty")

        note = Note(id=self._next_id(), title=title, content=content)
        self._notes.insert(0, note)
        self._last_id = note.id
        logger.info("Added note id=%s title_len=%s content_len=%s", note.id, len(title), len(content))
        return note

    # PUBLIC_INTERFACE
    def get(self, note_id: int) -> Note:
        """Return the note with the given id or raise NoteNotFound."""
        return self._notes[self._index_of(note_id)]

    # PUBLIC_INTERFACE
    def update(self, note_id: int, title: str, content: str) -> Note:
        """Replace a note's title and content, keeping its id and position."""
        index = self._index_of(note_id)
        note = self._notes[index].model_copy(update={"title": title.strip(), "content": content.strip()})
        self._notes[index] = note
        logger.info("Updated note id=%s", note_id)
        return note

    # PUBLIC_INTERFACE
    def delete(self, note_id: int) -> Note:
        """Remove the note with the given id and return it."""
        note = self._notes.pop(self._index_of(note_id))
        logger.info("Deleted note id=%s", note_id)
        return note

    # PUBLIC_INTERFACE
    def filter(self, query: str = "") -> Tuple[Note, ...]:
        """
        Return a snapshot of notes whose title or content contains `query`.

        Matching is case-insensitive after trimming the query. An empty
        query returns every note in store order.
        """
        q = query.strip().lower()
        if not q:
            return tuple(self._notes)
        return tuple(note for note in self._notes if note.matches(q))


# PUBLIC_INTERFACE
def seed_sample_notes(store: NoteStore) -> None:
    """Populate an empty store with the demonstration notes, added newest-first like any other note."""
    if len(store):
        return
    for title, content in SAMPLE_NOTES:
        store.add(title, content)
