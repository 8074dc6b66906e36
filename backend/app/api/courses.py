"""Course endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_course import course_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.course import Course
from backend.app.schemas.course import CourseCreate, CourseRead, CourseUpdate
from backend.app.schemas.user import MessageResponse

router = APIRouter(prefix="/courses", tags=["courses"], dependencies=[Depends(get_current_user)])


def _get_course_or_404(db: Session, course_id: int) -> Course:
    course = course_crud.get(db, course_id=course_id)
    if not course:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@router.get("", response_model=list[CourseRead])
async def list_courses(db: Session = Depends(get_db)):
    return course_crud.get_multi(db)


@router.post("", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
async def create_course(course_in: CourseCreate, db: Session = Depends(get_db)):
    return course_crud.create(db, obj_in=course_in)


@router.get("/{course_id}", response_model=CourseRead)
async def get_course(course_id: int, db: Session = Depends(get_db)):
    return _get_course_or_404(db, course_id)


@router.put("/{course_id}", response_model=CourseRead)
async def update_course(course_id: int, course_in: CourseUpdate, db: Session = Depends(get_db)):
    course = _get_course_or_404(db, course_id)
    return course_crud.update(db, db_obj=course, obj_in=course_in)


@router.delete("/{course_id}", response_model=MessageResponse)
async def delete_course(course_id: int, db: Session = Depends(get_db)):
    course = _get_course_or_404(db, course_id)
    course_crud.delete(db, db_obj=course)
    return {"message": "Course deleted successfully"}
