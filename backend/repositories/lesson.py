# backend/repositories/lesson.py
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from exceptions import InvalidLessonDateException
from models.lesson import Lesson
from repositories.base import JsonFileRepository
from schemas.lesson import LessonResponse

logger = logging.getLogger(__name__)


class LessonRepository(ABC):
    """Storage contract for lessons."""

    @abstractmethod
    def get_all(self) -> List[Lesson]:
        pass

    @abstractmethod
    def get_open_lessons(self, title: Optional[str] = None) -> List[Lesson]:
        """Lessons nobody has booked, optionally filtered by title substring."""
        pass

    @abstractmethod
    def get(self, id: int) -> Optional[Lesson]:
        pass

    @abstractmethod
    def get_lessons_by_user(self, username: str) -> List[Lesson]:
        pass

    @abstractmethod
    def get_lessons_on_date(self, day: date) -> List[Lesson]:
        """Every lesson, booked or open, that meets on `day`."""
        pass

    @abstractmethod
    def create(self, lesson: Lesson) -> Lesson:
        pass

    @abstractmethod
    def update(self, lesson: Lesson) -> Optional[Lesson]:
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        pass


class LessonFileRepository(JsonFileRepository[Lesson], LessonRepository):
    record_schema = LessonResponse

    def _build(self, record: LessonResponse) -> Lesson:
        return Lesson(**record.model_dump())

    def get_open_lessons(self, title: Optional[str] = None) -> List[Lesson]:
        with self._lock:
            return self._select(
                lambda lesson: lesson.is_open
                and (title is None or title.lower() in (lesson.title or "").lower())
            )

    def get_lessons_by_user(self, username: str) -> List[Lesson]:
        wanted = username.lower()
        with self._lock:
            return self._select(
                lambda lesson: lesson.username is not None and lesson.username.lower() == wanted
            )

    def get_lessons_on_date(self, day: date) -> List[Lesson]:
        with self._lock:
            return self._select(lambda lesson: self._meets_on(lesson, day))

    @staticmethod
    def _meets_on(lesson: Lesson, day: date) -> bool:
        try:
            return lesson.occurs_on(day)
        except InvalidLessonDateException as e:
            logger.warning("Skipping lesson %s with unreadable dates: %s", lesson.id, e)
            return False

    def create(self, lesson: Lesson) -> Lesson:
        return self._insert(
            lambda new_id: Lesson(new_id, lesson.username, lesson.title, lesson.description,
                                  lesson.days, lesson.start_date, lesson.end_date, lesson.price)
        )
