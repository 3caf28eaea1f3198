from typing import Union
from error import InvalidRequestError, ResourceNotFoundError, raise_for_result
from schema.students import StudentIn, StudentUpdate
from service.storage import EnrollmentStore
from util.enum import EntityKind
from util.paginate import filter_records, paginate
from util.params import to_record_id

STUDENT_NOT_FOUND = "Student not found"


class StudentOp:
    @staticmethod
    def add(store: EnrollmentStore, student_data: StudentIn) -> dict:
        if not student_data.name or not student_data.email:
            raise InvalidRequestError(msg="name and email required")
        result = store.create(EntityKind.students, student_data.model_dump())
        raise_for_result(result)
        return result

    @staticmethod
    def update(
        store: EnrollmentStore, student_id: Union[int, str], student_data: StudentUpdate
    ) -> dict:
        result = store.update(
            EntityKind.students,
            to_record_id(student_id),
            student_data.model_dump(exclude_none=True),
        )
        raise_for_result(result)
        return result

    @staticmethod
    def delete(store: EnrollmentStore, student_id: Union[int, str]) -> bool:
        result = store.remove(EntityKind.students, to_record_id(student_id))
        if result is False:
            raise ResourceNotFoundError(msg=STUDENT_NOT_FOUND)
        raise_for_result(result)
        return result

    @staticmethod
    def get_students(
        store: EnrollmentStore,
        name: str = None,
        email: str = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[dict], int]:
        """Filtered page of students plus the filtered total"""
        students = filter_records(
            store.list(EntityKind.students), name=name, email=email
        )
        return paginate(students, page, limit), len(students)

    @staticmethod
    def get_student_by_id(store: EnrollmentStore, student_id: Union[int, str]) -> dict:
        student = store.get(EntityKind.students, to_record_id(student_id))
        if not student:
            raise ResourceNotFoundError(msg=STUDENT_NOT_FOUND)
        return student

    @staticmethod
    def get_student_courses(
        store: EnrollmentStore, student_id: Union[int, str]
    ) -> list[dict]:
        return store.get_student_courses(to_record_id(student_id))
