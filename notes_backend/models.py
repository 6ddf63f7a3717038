from pydantic import BaseModel, ConfigDict


class Note(BaseModel):
    """A single user note held by the NoteStore."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    content: str

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or content; `query` must already be lower-cased."""
        return query in self.title.lower() or query in self.content.lower()
