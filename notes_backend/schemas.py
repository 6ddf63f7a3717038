from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Schema for creating a note. Title and content may not both be blank."""
    title: str = Field("", description="Note title; surrounding whitespace is trimmed.")
    content: str = Field("", description="Note content; surrounding whitespace is trimmed.")


class NoteUpdate(BaseModel):
    """Schema for updating a note (omitted fields keep their current value)."""
    title: str | None = Field(None, description="Updated title.")
    content: str | None = Field(None, description="Updated content.")


class NoteOut(BaseModel):
    """Schema returned for a note."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Store-assigned ID of the note.")
    title: str
    content: str
