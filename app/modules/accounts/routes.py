from fastapi import APIRouter, Depends
from app.core.dependencies import get_account_store
from app.core.exceptions import NotFoundError
from app.core.schemas import ApiResponse, ok
from app.modules.accounts.store import AccountStore

router = APIRouter(tags=["accounts"])


@router.get("/users", response_model=ApiResponse)
def list_users(store: AccountStore = Depends(get_account_store)):
    """List accounts (email, username, createdAt, lastLogin only)"""
    users = [user.model_dump(by_alias=True, mode="json") for user in store.list_all()]
    return ok("Users retrieved", {"users": users, "count": len(users)})


@router.delete("/user/{email}", response_model=ApiResponse)
def delete_user(email: str, store: AccountStore = Depends(get_account_store)):
    """Delete the account only; the profile is left as is"""
    deleted = store.delete_by_email(email)
    if not deleted:
        raise NotFoundError("User not found")
    return ok("User deleted", {"email": email, "deletedCount": deleted})


@router.get("/checkEmail/{email}", response_model=ApiResponse)
def check_email(email: str, store: AccountStore = Depends(get_account_store)):
    exists = store.exists(email)
    return ok("Email is registered" if exists else "Email is available", {"exists": exists})
