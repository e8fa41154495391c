from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.database.connection import get_db
from app.models.user import User
from app.repositories.user import UserRepository
from app.serializers.user import UserCreate, UserRead, UserLogin
from app.services.auth import hash_password, verify_password, create_auth_token, get_current_user
from app.services.exceptions import BadRequestError, UnauthorizedError

import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

@router.post("/register", response_model=UserRead)
async def register_user(
    user: UserCreate,
    db: AsyncSession = Depends(get_db)):

    repo = UserRepository(db)

    if await repo.find_by_username(user.username):
        raise BadRequestError("Username already exists")

    if await repo.find_by_email(user.email):
        raise BadRequestError("Email already registered")

    new_user = repo.add(User(
        username=user.username,
        email=user.email,
        hashed_password=hash_password(user.password)
    ))
    await db.commit()
    await db.refresh(new_user)

    logger.info(f"Registered user {new_user.id}")
    return new_user

@router.post("/login")
async def login(user: UserLogin, db: AsyncSession = Depends(get_db)):
    db_user = await UserRepository(db).find_by_username(user.username)
    if not db_user or not verify_password(user.password, db_user.hashed_password):
        raise UnauthorizedError("Invalid credentials")

    auth_token = create_auth_token({"sub": str(db_user.id)})
    return {"auth_token": auth_token, "token_type": "bearer"}

@router.get("/me", response_model=UserRead)
async def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    return current_user
