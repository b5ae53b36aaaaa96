"""
User Registration, Login & Profile Endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List
import logging

from orbital.routers.deps import get_booking_service, get_user_service
from orbital.schemas.booking import BookingResponse
from orbital.schemas.user import UserCreate, UserLogin, UserResponse
from orbital.services.booking_service import BookingService
from orbital.services.user_service import UserService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    users: UserService = Depends(get_user_service),
):
    """
    Register a new user. Username and email must be unique.
    """
    return users.register(user_data)


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: UserLogin,
    users: UserService = Depends(get_user_service),
):
    """
    Check credentials and return the user profile
    """
    user = users.authenticate(credentials.username, credentials.password)
    logger.info(f"User logged in: {user.id}")
    return user


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    users: UserService = Depends(get_user_service),
):
    return users.get_user_by_username(username)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    users: UserService = Depends(get_user_service),
):
    return users.get_user(user_id)


@router.get("/{user_id}/bookings", response_model=List[BookingResponse])
async def list_user_bookings(
    user_id: int,
    bookings: BookingService = Depends(get_booking_service),
):
    """
    All bookings made by a user, oldest first
    """
    return bookings.list_bookings_for_user(user_id)
