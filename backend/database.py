# backend/database.py
from functools import lru_cache

from config import settings
from repositories.cart import CartFileRepository, CartRepository
from repositories.disc import DiscFileRepository, DiscRepository
from repositories.lesson import LessonFileRepository, LessonRepository
from repositories.user import UserFileRepository, UserRepository

# One repository per data file for the whole process.
# Tests swap them out through app.dependency_overrides.

@lru_cache
def get_disc_repo() -> DiscRepository:
    return DiscFileRepository(settings.DISCS_FILE)

@lru_cache
def get_cart_repo() -> CartRepository:
    return CartFileRepository(settings.CARTS_FILE)

@lru_cache
def get_lesson_repo() -> LessonRepository:
    return LessonFileRepository(settings.LESSONS_FILE)

@lru_cache
def get_user_repo() -> UserRepository:
    return UserFileRepository(settings.USERS_FILE)

def init_db():
    # Load every file up front so a broken one fails at startup
    get_disc_repo()
    get_cart_repo()
    get_lesson_repo()
    get_user_repo()
