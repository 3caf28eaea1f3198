from typing import Union
from error import InvalidRequestError, ResourceNotFoundError, raise_for_result
from schema.courses import CourseIn, CourseUpdate
from service.storage import EnrollmentStore
from util.enum import EntityKind
from util.paginate import filter_records, paginate
from util.params import to_record_id

COURSE_NOT_FOUND = "Course not found"


class CourseOp:
    @staticmethod
    def add(store: EnrollmentStore, course_data: CourseIn) -> dict:
        if not course_data.title or not course_data.teacher:
            raise InvalidRequestError(msg="title and teacher required")
        result = store.create(EntityKind.courses, course_data.model_dump())
        raise_for_result(result)
        return result

    @staticmethod
    def update(
        store: EnrollmentStore, course_id: Union[int, str], course_data: CourseUpdate
    ) -> dict:
        result = store.update(
            EntityKind.courses,
            to_record_id(course_id),
            course_data.model_dump(exclude_none=True),
        )
        raise_for_result(result)
        return result

    @staticmethod
    def delete(store: EnrollmentStore, course_id: Union[int, str]) -> bool:
        result = store.remove(EntityKind.courses, to_record_id(course_id))
        if result is False:
            raise ResourceNotFoundError(msg=COURSE_NOT_FOUND)
        raise_for_result(result)
        return result

    @staticmethod
    def get_courses(
        store: EnrollmentStore,
        title: str = None,
        teacher: str = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[dict], int]:
        courses = filter_records(
            store.list(EntityKind.courses), title=title, teacher=teacher
        )
        return paginate(courses, page, limit), len(courses)

    @staticmethod
    def get_course_by_id(store: EnrollmentStore, course_id: Union[int, str]) -> dict:
        course = store.get(EntityKind.courses, to_record_id(course_id))
        if not course:
            raise ResourceNotFoundError(msg=COURSE_NOT_FOUND)
        return course

    @staticmethod
    def get_course_students(
        store: EnrollmentStore, course_id: Union[int, str]
    ) -> list[dict]:
        return store.get_course_students(to_record_id(course_id))
