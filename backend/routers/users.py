import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db.deps import get_db
from db.store import get_user_by_email, get_user_by_username
from models import User
from routers.common import require_user
from schemas.users import LoginRequest, UserCreate, UserOut, UserUpdate
from services.users import user_values, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/user/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return require_user(db, user_id)


@router.put("/user/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    user = require_user(db, user_id)
    if payload.email is not None:
        owner = get_user_by_email(db, payload.email)
        if owner is not None and owner.id != user.id:
            raise HTTPException(409, detail="Email already exists")
    for field, value in user_values(payload.model_dump(exclude_unset=True)).items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    logger.info("Updated user id=%s", user.id)
    return user


@router.post("/register", response_model=UserOut, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_username(db, payload.username) is not None:
        raise HTTPException(409, detail="Username already exists")
    if get_user_by_email(db, payload.email) is not None:
        raise HTTPException(409, detail="Email already exists")
    user = User(**user_values(payload.model_dump()))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


@router.post("/login", response_model=UserOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    if not payload.username or not payload.password:
        raise HTTPException(400, detail="Username and password are required")
    user = get_user_by_username(db, payload.username)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.warning("Rejected login for username=%r", payload.username)
        raise HTTPException(401, detail="Invalid username or password")
    return user
