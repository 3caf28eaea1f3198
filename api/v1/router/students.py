from fastapi import APIRouter, Depends, Response
from controller.students import StudentOp
from schema.students import StudentIn, StudentUpdate, StudentOut, StudentListOut
from schema.enrolments import StudentDetailOut
from service.storage import EnrollmentStore, get_store
from config.setting import settings

router = APIRouter(tags=["Students"])


@router.get("/students", response_model=StudentListOut)
async def list_students(
    name: str = None,
    email: str = None,
    page: int = 1,
    limit: int = settings.DEFAULT_PAGE_SIZE,
    store: EnrollmentStore = Depends(get_store),
):
    students, total = StudentOp.get_students(
        store, name=name, email=email, page=page, limit=limit
    )
    return {"students": students, "total": total}


@router.get("/students/{student_id}", response_model=StudentDetailOut)
async def get_student(
    student_id: str,
    store: EnrollmentStore = Depends(get_store),
):
    student = StudentOp.get_student_by_id(store, student_id=student_id)
    courses = StudentOp.get_student_courses(store, student_id=student_id)
    return {"student": student, "courses": courses}


@router.post("/students", response_model=StudentOut, status_code=201)
async def create_student(
    data: StudentIn,
    store: EnrollmentStore = Depends(get_store),
):
    return StudentOp.add(store, data)


@router.put("/students/{student_id}", response_model=StudentOut)
async def update_student(
    student_id: str,
    data: StudentUpdate,
    store: EnrollmentStore = Depends(get_store),
):
    return StudentOp.update(store, student_id=student_id, student_data=data)


@router.delete("/students/{student_id}", status_code=204, response_class=Response)
async def delete_student(
    student_id: str,
    store: EnrollmentStore = Depends(get_store),
):
    StudentOp.delete(store, student_id=student_id)
    return Response(status_code=204)
