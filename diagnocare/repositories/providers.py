"""FastAPI dependencies that bind repositories to the request's session."""

from fastapi import Depends
from sqlalchemy.orm import Session

from diagnocare.database import get_db
from diagnocare.repositories.bookings_repo import BookingRepository
from diagnocare.repositories.content_repo import BannerRepository, RecommendationRepository
from diagnocare.repositories.diagnostic_tests_repo import DiagnosticTestRepository
from diagnocare.repositories.users_repo import UserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_banner_repository(db: Session = Depends(get_db)) -> BannerRepository:
    return BannerRepository(db)


def get_recommendation_repository(db: Session = Depends(get_db)) -> RecommendationRepository:
    return RecommendationRepository(db)


def get_test_repository(db: Session = Depends(get_db)) -> DiagnosticTestRepository:
    return DiagnosticTestRepository(db)


def get_booking_repository(db: Session = Depends(get_db)) -> BookingRepository:
    return BookingRepository(db)
