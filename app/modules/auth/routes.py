from fastapi import APIRouter, Depends
from app.core.dependencies import get_account_store, get_profile_store
from app.core.schemas import ApiResponse, ok, failure
from app.modules.accounts.store import AccountStore
from app.modules.auth.schemas import LoginRequest, SignupRequest
from app.modules.auth.service import AuthService, RegistrationService
from app.modules.pictures.provider import ProfilePictureProvider, get_picture_provider
from app.modules.profiles.store import ProfileStore

router = APIRouter(tags=["auth"])


def get_registration_service(
    accounts: AccountStore = Depends(get_account_store),
    profiles: ProfileStore = Depends(get_profile_store),
    pictures: ProfilePictureProvider = Depends(get_picture_provider),
) -> RegistrationService:
    return RegistrationService(accounts, profiles, pictures)


def get_auth_service(
    accounts: AccountStore = Depends(get_account_store),
    profiles: ProfileStore = Depends(get_profile_store),
) -> AuthService:
    return AuthService(accounts, profiles)


@router.post("/signup", response_model=ApiResponse)
def signup(
    signup_data: SignupRequest,
    service: RegistrationService = Depends(get_registration_service)
):
    """Register a new user: account, profile and an assigned picture"""
    result = service.register(signup_data.email, signup_data.username, signup_data.password)
    if not result.success:
        return failure(result.message, {"outcome": result.outcome.value})
    return ok(result.message, result.data)


@router.post("/login", response_model=ApiResponse)
def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Check credentials and return the account with its profile"""
    return ok("Login successful", service.login(login_data.email, login_data.password))
