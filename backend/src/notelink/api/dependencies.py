"""FastAPI dependencies wiring services to the per-request session."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..core.repositories import NoteRepository, UserRepository
from ..core.services import AuthService, NoteService
from ..database import get_db_session
from ..security import TokenService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_auth_service(
    settings: Settings = Depends(get_app_settings),
    token_service: TokenService = Depends(get_token_service),
    session: AsyncSession = Depends(get_db_session),
) -> AuthService:
    return AuthService(UserRepository(session, settings.storage_timeout), token_service)


def get_note_service(
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession = Depends(get_db_session),
) -> NoteService:
    return NoteService(NoteRepository(session, settings.storage_timeout))
