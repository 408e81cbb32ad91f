# File: app/api/v1/routes_users.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.deps import get_user_service
from app.core.exceptions import (
    DuplicateEmailError,
    InvalidArgumentError,
    UserNotFoundError,
    UserValidationError,
)
from app.models.user import User
from app.schemas.user import UserCount, UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

router = APIRouter()


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """
    Create a user and send the welcome email.

    409 if the email is already taken, 422 if the validator rejects it.
    """
    user = User(**payload.model_dump())
    try:
        return service.create_user(user)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except UserValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors or str(e))


@router.get("/", response_model=list[UserRead], summary="List active users")
def list_active_users(service: UserService = Depends(get_user_service)):
    return service.get_all_active_users()


@router.get("/count", response_model=UserCount, summary="Count users")
def count_users(service: UserService = Depends(get_user_service)):
    return UserCount(total=service.count_users())


@router.get("/by-email", response_model=UserRead, summary="Find user by email")
def find_user_by_email(
    email: str = Query(""),
    service: UserService = Depends(get_user_service),
):
    user = service.find_by_email(email)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No user with email {email!r}",
        )
    return user


@router.get("/{user_id}", response_model=UserRead, summary="Get user by id")
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    try:
        return service.get_user_by_id(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{user_id}", response_model=UserRead, summary="Update user")
def update_user(
    user_id: int,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """
    Overwrite name and email of an existing user.
    """
    try:
        return service.update_user(user_id, User(**payload.model_dump()))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """
    Delete a user and send the goodbye email.
    """
    try:
        service.delete_user(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
