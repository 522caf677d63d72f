"""
Wizard API Endpoints.

Exposes the wizard session over HTTP. Sessions are held in memory only and
vanish with the process.
"""

import logging
import uuid

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from .exceptions import RatingError, ResultsError, StepError, StepNotReadyError
from .options import get_wizard_options
from .session import WizardSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wizard", tags=["wizard"])

WizardErrors = (StepError, ResultsError)

# In-memory session store (keyed by session_id)
sessions: dict[str, WizardSession] = {}


# =============================================================================
# Request/Response Models
# =============================================================================


class AnswerRequest(BaseModel):
    """Single-choice answer for the current step."""
    value: str


class SignInRequest(BaseModel):
    """LOGIN step."""
    name: str
    age: str
    email: str = ""


class DetailsRequest(BaseModel):
    """Profile screen edit."""
    name: str
    age: str
    email: str = ""


class IngredientRequest(BaseModel):
    ingredient: str


class GoalRequest(BaseModel):
    goal: str


class RatingRequest(BaseModel):
    """Star rating for a displayed recipe."""
    stars: int = Field(ge=1, le=5)
    comment: str | None = None


class SessionResponse(BaseModel):
    """Current wizard state."""
    session_id: str
    step: str
    can_advance: bool
    auto_advance: bool
    profile: dict
    results: dict | None = None
    auto_advanced: bool = False


# =============================================================================
# Helpers
# =============================================================================


def get_session(session_id: str) -> WizardSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session


def to_response(session_id: str, session: WizardSession, auto_advanced: bool = False) -> SessionResponse:
    return SessionResponse(session_id=session_id, auto_advanced=auto_advanced, **session.to_dict())


def raise_for(e: Exception) -> None:
    """Map wizard exceptions to HTTP errors."""
    if isinstance(e, StepNotReadyError):
        raise HTTPException(status_code=409, detail=str(e))
    if isinstance(e, RatingError):
        raise HTTPException(status_code=409, detail=str(e))
    if isinstance(e, (StepError, ResultsError)):
        raise HTTPException(status_code=400, detail=str(e))
    raise e


# =============================================================================
# Endpoints: Sessions
# =============================================================================


@router.get("/options")
async def get_options():
    """Option catalogs for every selection step."""
    return get_wizard_options()


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def create_session() -> SessionResponse:
    """Start a new wizard run at the landing step."""
    session_id = uuid.uuid4().hex
    sessions[session_id] = WizardSession()
    logger.info(f"Wizard session created: {session_id}")
    return to_response(session_id, sessions[session_id])


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def read_session(session_id: str) -> SessionResponse:
    return to_response(session_id, get_session(session_id))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str) -> None:
    get_session(session_id)
    del sessions[session_id]


@router.get("/sessions/{session_id}/profile-summary")
async def read_profile_summary(session_id: str) -> dict:
    return get_session(session_id).profile_summary()


# =============================================================================
# Endpoints: Navigation
# =============================================================================


@router.post("/sessions/{session_id}/next", response_model=SessionResponse)
async def advance(session_id: str) -> SessionResponse:
    """Continue to the next step. Entering results generates recipes."""
    session = get_session(session_id)
    try:
        await session.advance()
    except StepNotReadyError as e:
        raise_for(e)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/back", response_model=SessionResponse)
async def back(session_id: str) -> SessionResponse:
    session = get_session(session_id)
    session.back()
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/profile", response_model=SessionResponse)
async def open_profile(session_id: str) -> SessionResponse:
    session = get_session(session_id)
    session.open_profile()
    return to_response(session_id, session)


# =============================================================================
# Endpoints: Answers
# =============================================================================


@router.post("/sessions/{session_id}/answer", response_model=SessionResponse)
async def answer(session_id: str, request: AnswerRequest) -> SessionResponse:
    """
    Record a single-choice answer.

    Auto-advancing steps move on in the same call; the UI's short delay is
    a presentation concern.
    """
    session = get_session(session_id)
    try:
        auto = session.answer(request.value)
        if auto:
            await session.advance()
    except WizardErrors as e:
        raise_for(e)
    return to_response(session_id, session, auto_advanced=auto)


@router.post("/sessions/{session_id}/sign-in", response_model=SessionResponse)
async def sign_in(session_id: str, request: SignInRequest) -> SessionResponse:
    session = get_session(session_id)
    try:
        session.sign_in(request.name, request.age, request.email)
    except StepNotReadyError as e:
        raise_for(e)
    return to_response(session_id, session)


@router.patch("/sessions/{session_id}/details", response_model=SessionResponse)
async def update_details(session_id: str, request: DetailsRequest) -> SessionResponse:
    session = get_session(session_id)
    session.update_details(request.name, request.age, request.email)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/ingredients", response_model=SessionResponse)
async def add_ingredient(session_id: str, request: IngredientRequest) -> SessionResponse:
    """Manual ingredient entry (idempotent)."""
    session = get_session(session_id)
    session.add_ingredient(request.ingredient)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/ingredients/toggle", response_model=SessionResponse)
async def toggle_ingredient(session_id: str, request: IngredientRequest) -> SessionResponse:
    """Quick-add chip toggle."""
    session = get_session(session_id)
    session.toggle_ingredient(request.ingredient)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/goals/toggle", response_model=SessionResponse)
async def toggle_goal(session_id: str, request: GoalRequest) -> SessionResponse:
    session = get_session(session_id)
    try:
        session.toggle_goal(request.goal)
    except StepError as e:
        raise_for(e)
    return to_response(session_id, session)


# =============================================================================
# Endpoints: Results
# =============================================================================


@router.post("/sessions/{session_id}/results/retry", response_model=SessionResponse)
async def retry(session_id: str) -> SessionResponse:
    """Re-run recipe generation from the current profile. Only valid on results."""
    session = get_session(session_id)
    try:
        await session.retry()
    except ResultsError as e:
        raise_for(e)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/results/{index}/expand", response_model=SessionResponse)
async def expand_recipe(session_id: str, index: int) -> SessionResponse:
    session = get_session(session_id)
    try:
        session.expand_recipe(index)
    except ResultsError as e:
        raise_for(e)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/results/collapse", response_model=SessionResponse)
async def collapse_recipe(session_id: str) -> SessionResponse:
    session = get_session(session_id)
    try:
        session.collapse_recipe()
    except ResultsError as e:
        raise_for(e)
    return to_response(session_id, session)


@router.post("/sessions/{session_id}/results/{index}/rating", response_model=SessionResponse)
async def rate_recipe(session_id: str, index: int, request: RatingRequest) -> SessionResponse:
    """Rate a displayed recipe. The card's form locks after one rating."""
    session = get_session(session_id)
    try:
        session.rate_recipe(index, request.stars, request.comment)
    except ResultsError as e:
        raise_for(e)
    return to_response(session_id, session)

