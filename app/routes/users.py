import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from app.crud.user import (
    DuplicateEmailError,
    UserStorageError,
    create_user,
    delete_user,
    get_user_by_id,
    list_users,
    update_user,
)
from app.database import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"User {user_id} not found")


def _storage_failure(e: UserStorageError) -> HTTPException:
    logger.error(f"User storage error: {str(e)}")
    return HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: UserCreate, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        user = await create_user(db, User(**payload.model_dump()))
        return user
    except DuplicateEmailError as e:
        raise HTTPException(status_code=409, detail=f"Email already in use: {e.email}")
    except UserStorageError as e:
        raise _storage_failure(e)


@router.get("", response_model=List[UserResponse])
async def index(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    try:
        return await list_users(db, skip=skip, limit=limit)
    except UserStorageError as e:
        raise _storage_failure(e)


@router.get("/{user_id}", response_model=UserResponse)
async def show(user_id: int, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        user = await get_user_by_id(db, user_id)
    except UserStorageError as e:
        raise _storage_failure(e)
    if user is None:
        raise _not_found(user_id)
    return user


@router.put("/{user_id}", response_model=UserResponse)
async def update(user_id: int, payload: UserUpdate, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        user = await update_user(db, user_id, payload.model_dump(exclude_unset=True))
        if user is None:
            raise _not_found(user_id)
        return user
    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    except DuplicateEmailError as e:
        raise HTTPException(status_code=409, detail=f"Email already in use: {e.email}")
    except UserStorageError as e:
        raise _storage_failure(e)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove(user_id: int, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        deleted = await delete_user(db, user_id)
    except UserStorageError as e:
        raise _storage_failure(e)
    if not deleted:
        raise _not_found(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
