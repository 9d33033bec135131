"""User Routes — account creation and password authentication.

Invariants:
    - POST /user/authenticate → 200 with the user id as the JSON body
    - POST /user → 201 with the new id; duplicate email → 409
    - Error statuses (400/401/404/409) come from typed CampusErrors via the global handler
"""

from fastapi import APIRouter, Depends, status

from campus_api.api.dependencies import get_user_accounts
from campus_api.schemas.user import UserAuthenticate, UserCreate, UserCreated
from campus_api.services.user_accounts import UserAccounts

router = APIRouter(prefix="/user", tags=["users"])


@router.post("/authenticate", response_model=int)
async def authenticate(
    body: UserAuthenticate, accounts: UserAccounts = Depends(get_user_accounts),
):
    return await accounts.authenticate(body.email_address, body.password)


@router.post(
    "", response_model=UserCreated, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, accounts: UserAccounts = Depends(get_user_accounts),
):
    """Register a new account."""
    user_id = await accounts.create_user(
        body.first_name, body.last_name, body.email_address, body.password,
    )
    return UserCreated(
        user_id=user_id,
        message=f"User was added successfully! User ID: {user_id}",
    )
