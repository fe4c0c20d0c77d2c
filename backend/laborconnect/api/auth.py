"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends, status
from ..core.config import Settings
from ..core.dependencies import get_settings, get_store
from ..core.security import create_access_token
from ..schemas.auth import UserRegister, UserLogin, LoginResponse
from ..schemas.user import UserResponse
from ..services.registration_service import register_user, authenticate_user
from ..storage.base import EntityStore

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    store: EntityStore = Depends(get_store)
):
    """Register a worker or employer together with their profile"""
    return register_user(store, user_data)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    """Check credentials and return the user with a chat access token"""
    user = authenticate_user(store, credentials.email, credentials.password)
    access_token = create_access_token(
        data={"sub": user.id, "name": f"{user.first_name} {user.last_name}"},
        settings=settings
    )
    return LoginResponse(**user.model_dump(), access_token=access_token)
