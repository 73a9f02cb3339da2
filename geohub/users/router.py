# geohub/users/router.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.auth import get_current_identity
from geohub.core.security import TokenIdentity
from geohub.db.session import get_session
from geohub.users import service as svc
from geohub.users.repository import get_user
from geohub.users.schemas import AuthOut, LoginIn, UserCreate, UserOut, UserUpdate

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
router = APIRouter(prefix="/api/users", tags=["users"])


@auth_router.post("/register", response_model=AuthOut)
async def register(payload: UserCreate, db: AsyncSession = Depends(get_session)):
    try:
        user, token = await svc.register_user(db, payload)
        await db.commit()
    except ValueError as e:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except IntegrityError:
        # lost a race against a concurrent registration
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
    return AuthOut(user=UserOut.model_validate(user), token=token)


@auth_router.post("/login", response_model=AuthOut)
async def login(payload: LoginIn, db: AsyncSession = Depends(get_session)):
    try:
        user, token = await svc.login_user(db, payload.email, payload.password)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return AuthOut(user=UserOut.model_validate(user), token=token)


@router.get("/me", response_model=UserOut)
async def me(
    identity: TokenIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_session),
):
    user = await get_user(db, identity.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/me", response_model=UserOut)
async def update_me(
    payload: UserUpdate,
    identity: TokenIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_session),
):
    try:
        user = await svc.update_profile(db, identity.user_id, payload)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        await db.commit()
    except ValueError as e:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username or email already in use")
    return user
