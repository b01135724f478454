# backend/routes/lessons.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from database import get_lesson_repo
from exceptions import InvalidLessonDateException
from models.lesson import Lesson, parse_date
from repositories.lesson import LessonRepository
from utils.audit import client_ip, write_log
import schemas.lesson as lesson_schemas

router = APIRouter(prefix="/lessons", tags=["Lessons"])


def _out(lessons: List[Lesson]) -> List[lesson_schemas.LessonResponse]:
    return [lesson_schemas.LessonResponse.model_validate(l) for l in lessons]


# Lessons still on offer (not booked by anyone)
@router.get("", response_model=List[lesson_schemas.LessonResponse])
def get_lessons(lessons: LessonRepository = Depends(get_lesson_repo)):
    return _out(lessons.get_open_lessons())


# Lessons on offer whose title contains the given text
@router.get("/", response_model=List[lesson_schemas.LessonResponse])
def search_lessons(title: str = Query(...), lessons: LessonRepository = Depends(get_lesson_repo)):
    return _out(lessons.get_open_lessons(title))


# All lessons, booked or not, meeting on the given date (MM/DD/YYYY or YYYY-MM-DD)
@router.get("/dates", response_model=List[lesson_schemas.LessonResponse])
def get_lessons_on_date(date: str = Query(...), lessons: LessonRepository = Depends(get_lesson_repo)):
    try:
        day = parse_date(date)
    except InvalidLessonDateException:
        raise HTTPException(status_code=400, detail="Invalid date")
    return _out(lessons.get_lessons_on_date(day))


# Lessons booked by a user
@router.get("/user/{username}", response_model=List[lesson_schemas.LessonResponse])
def get_lessons_by_user(username: str, lessons: LessonRepository = Depends(get_lesson_repo)):
    return _out(lessons.get_lessons_by_user(username))


@router.get("/{lesson_id}", response_model=lesson_schemas.LessonResponse)
def get_lesson(lesson_id: int, lessons: LessonRepository = Depends(get_lesson_repo)):
    lesson = lessons.get(lesson_id)
    if lesson is None:
        raise HTTPException(status_code=404, detail="Lesson not found")
    return lesson_schemas.LessonResponse.model_validate(lesson)


@router.post("", response_model=lesson_schemas.LessonResponse, status_code=status.HTTP_201_CREATED)
def create_lesson(
    payload: lesson_schemas.LessonCreate,
    request: Request,
    lessons: LessonRepository = Depends(get_lesson_repo),
):
    new_lesson = lessons.create(Lesson(0, **payload.model_dump()))
    if new_lesson is None:
        raise HTTPException(status_code=409, detail="Lesson already exists")

    write_log(username=new_lesson.username, action="LESSON_CREATE", resource="lesson",
              ip=client_ip(request), meta={"lesson_id": new_lesson.id, "title": new_lesson.title})
    return lesson_schemas.LessonResponse.model_validate(new_lesson)


# Also used to book a lesson: send it back with the username set
@router.put("", response_model=lesson_schemas.LessonResponse)
def update_lesson(
    payload: lesson_schemas.LessonUpdate,
    request: Request,
    lessons: LessonRepository = Depends(get_lesson_repo),
):
    updated = lessons.update(Lesson(**payload.model_dump()))
    if updated is None:
        raise HTTPException(status_code=404, detail="Lesson not found")

    write_log(username=updated.username, action="LESSON_UPDATE", resource="lesson",
              ip=client_ip(request), meta={"lesson_id": updated.id})
    return lesson_schemas.LessonResponse.model_validate(updated)


@router.delete("/{lesson_id}")
def delete_lesson(lesson_id: int, request: Request, lessons: LessonRepository = Depends(get_lesson_repo)):
    if not lessons.delete(lesson_id):
        raise HTTPException(status_code=404, detail="Lesson not found")

    write_log(username=None, action="LESSON_DELETE", resource="lesson", ip=client_ip(request),
              meta={"lesson_id": lesson_id})
    return Response(status_code=status.HTTP_200_OK)
