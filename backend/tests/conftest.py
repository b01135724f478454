"""
Pytest configuration and fixtures for tests.

Repositories are built on temporary files; the API fixture plugs them into the
app in place of the configured data files.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add backend directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import get_cart_repo, get_disc_repo, get_lesson_repo, get_user_repo
from models.disc import Disc
from models.lesson import Lesson
from repositories.cart import CartFileRepository
from repositories.disc import DiscFileRepository
from repositories.lesson import LessonFileRepository
from repositories.user import UserFileRepository


@pytest.fixture
def discs_file(tmp_path):
    return str(tmp_path / "discs.json")


@pytest.fixture
def carts_file(tmp_path):
    return str(tmp_path / "carts.json")


@pytest.fixture
def lessons_file(tmp_path):
    return str(tmp_path / "lessons.json")


@pytest.fixture
def users_file(tmp_path):
    return str(tmp_path / "users.json")


@pytest.fixture
def disc_repo(discs_file):
    return DiscFileRepository(discs_file)


@pytest.fixture
def cart_repo(carts_file):
    return CartFileRepository(carts_file)


@pytest.fixture
def lesson_repo(lessons_file):
    return LessonFileRepository(lessons_file)


@pytest.fixture
def user_repo(users_file):
    return UserFileRepository(users_file)


@pytest.fixture
def blue_putter(disc_repo):
    """Disc id 1: Blue 160g Putter, 10.0 each, 5 in stock."""
    return disc_repo.create(Disc(0, "Blue", 160, "Putter", 10.0, 5))


@pytest.fixture
def putting_lesson():
    """Open Monday/Wednesday/Friday lesson from 10/10/2022 to 12/10/2022."""
    return Lesson(0, None, "Putting Basics", "Short game", "MWF", "10/10/2022", "12/10/2022", 45.0)


@pytest.fixture
def client(disc_repo, cart_repo, lesson_repo, user_repo):
    from main import app

    app.dependency_overrides[get_disc_repo] = lambda: disc_repo
    app.dependency_overrides[get_cart_repo] = lambda: cart_repo
    app.dependency_overrides[get_lesson_repo] = lambda: lesson_repo
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
