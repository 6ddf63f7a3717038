import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_backend.config import Settings, get_settings
from notes_backend.errors import NoteNotFound, NoteValidationFailed
from notes_backend.schemas import NoteCreate, NoteOut, NoteUpdate
from notes_backend.store import NoteStore, seed_sample_notes

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Service health endpoint."},
    {"name": "Notes", "description": "Create, edit, delete and search notes."},
]

router = APIRouter()


async def _note_not_found_handler(request: Request, exc: NoteNotFound) -> JSONResponse:
    logger.info("Note id=%s not found on %s %s", exc.note_id, request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Note not found"})


async def _note_validation_handler(request: Request, exc: NoteValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Return JSON for unexpected errors.

    Keeps clients from seeing non-JSON bodies while the real failure is logged.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


# PUBLIC_INTERFACE
def get_store(request: Request) -> NoteStore:
    """FastAPI dependency returning the application's note store."""
    return request.app.state.store


# PUBLIC_INTERFACE
def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the Notes API with its own NoteStore.

    The store lives on `app.state` for the lifetime of the process and is
    seeded with the sample notes unless SEED_SAMPLE_NOTES is disabled.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Notes API",
        description="Simple Notes API supporting create, edit, delete and search over an in-memory store.",
        version="1.0.0",
        openapi_tags=openapi_tags,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_origin_regex=settings.allowed_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(NoteNotFound, _note_not_found_handler)
    app.add_exception_handler(NoteValidationFailed, _note_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    store = NoteStore()
    if settings.seed_sample_notes:
        seed_sample_notes(store)
    app.state.store = store
    app.state.settings = settings
    logger.info("Notes API ready with %s notes (api_url=%s)", len(store), settings.api_url)

    app.include_router(router)
    return app


# PUBLIC_INTERFACE
@router.get("/", tags=["Health"], summary="Health check", description="Returns a simple health payload.")
def health_check() -> Dict[str, str]:
    """Health check endpoint used by previews/monitoring."""
    return {"message": "Healthy"}


# PUBLIC_INTERFACE
@router.get(
    "/notes",
    response_model=List[NoteOut],
    tags=["Notes"],
    summary="List notes",
    description="Return notes most-recent-first, optionally filtered by a case-insensitive search query.",
)
def list_notes(
    q: str = Query("", description="Substring to search for in title or content."),
    store: NoteStore = Depends(get_store),
) -> List[NoteOut]:
    """List notes matching the search query."""
    return list(store.filter(q))


# PUBLIC_INTERFACE
@router.post(
    "/notes",
    response_model=NoteOut,
    status_code=status.HTTP_201_CREATED,
    tags=["Notes"],
    summary="Create note",
    description="Create a new note; rejected with 422 when title and content are both blank.",
)
def create_note(payload: NoteCreate, store: NoteStore = Depends(get_store)) -> NoteOut:
    """Create a note."""
    return store.add(payload.title, payload.content)


# PUBLIC_INTERFACE
@router.get(
    "/notes/{note_id}",
    response_model=NoteOut,
    tags=["Notes"],
    summary="Get note",
    description="Fetch a single note by ID.",
)
def get_note(note_id: int, store: NoteStore = Depends(get_store)) -> NoteOut:
    """Get a note by id."""
    return store.get(note_id)


# PUBLIC_INTERFACE
@router.put(
    "/notes/{note_id}",
    response_model=NoteOut,
    tags=["Notes"],
    summary="Update note",
    description="Update a note by ID (any omitted fields remain unchanged).",
)
def update_note(note_id: int, payload: NoteUpdate, store: NoteStore = Depends(get_store)) -> NoteOut:
    """Update a note by id."""
    note = store.get(note_id)
    title = payload.title if payload.title is not None else note.title
    content = payload.content if payload.content is not None else note.content
    return store.update(note_id, title, content)


# PUBLIC_INTERFACE
@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Notes"],
    summary="Delete note",
    description="Delete a note by ID.",
)
def delete_note(note_id: int, store: NoteStore = Depends(get_store)) -> Response:
    """Delete a note by id."""
    store.delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


app = create_app()
