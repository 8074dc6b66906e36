"""Student endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.student import (
    StudentCreate,
    StudentCreateResponse,
    StudentForUserCreate,
    StudentRead,
    StudentResponse,
    StudentUpdate,
)
from backend.app.schemas.user import MessageResponse
from backend.app.services import student_management_service as students_service

router = APIRouter(prefix="/students", tags=["students"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[StudentRead])
async def list_students(user_id: Optional[int] = None, db: Session = Depends(get_db)):
    return students_service.list_students(db, user_id=user_id)


@router.post("", response_model=StudentCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_student(student_in: StudentCreate, db: Session = Depends(get_db)):
    user, student = students_service.create_student_with_user(db, student_in)
    return {"message": "User and Student created successfully", "user": user, "student": student}


@router.get("/user/{user_id}", response_model=StudentRead)
async def get_student_by_user(user_id: int, db: Session = Depends(get_db)):
    return students_service.get_student_by_user_id(db, user_id)


@router.post("/user/{user_id}", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student_for_user(user_id: int, student_in: StudentForUserCreate, db: Session = Depends(get_db)):
    student = students_service.create_student_for_user(db, user_id, student_in)
    return {"message": "Student created successfully for existing user", "student": student}


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(student_id: int, db: Session = Depends(get_db)):
    return students_service.get_student(db, student_id)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(student_id: int, student_in: StudentUpdate, db: Session = Depends(get_db)):
    student = students_service.get_student(db, student_id)
    student = students_service.update_student_and_user(db, student, student_in)
    return {"message": "Student and user updated successfully", "student": student}


@router.delete("/{student_id}", response_model=MessageResponse)
async def delete_student(student_id: int, db: Session = Depends(get_db)):
    student = students_service.get_student(db, student_id)
    students_service.delete_student_and_user(db, student)
    return {"message": "Student and user deleted successfully"}
