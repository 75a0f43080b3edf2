from typing import Any, Dict, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.constants import SubjectCollectionEnum
from app.core.exceptions import ValidationError
from app.crud.catalog import instructor as crud_instructor
from app.models.instructor import Instructor as InstructorModel
from app.realtime.server_context import RealtimeContext
from app.schemas.instructor import Instructor as InstructorSchema
from app.services.catalog import CatalogService, changed_from, updated_to


class InstructorService(CatalogService[InstructorModel]):
    entity_name = "Instructor"
    plural_name = "Instructors"
    cache_name = "instructor"
    subject_collection = SubjectCollectionEnum.INSTRUCTOR.value
    significant_fields = {
        "name": changed_from("Name"),
        "job": changed_from("Job"),
        "description": updated_to("Description updated"),
    }

    async def create(self, db: Session, obj_in: BaseModel, realtime: Optional[RealtimeContext] = None) -> Dict[str, Any]:
        if crud_instructor.get_by_external_id(db, external_id=obj_in.external_id):
            raise ValidationError(
                "An instructor with this external id already exists",
                details={"external_id": obj_in.external_id},
            )
        return await super().create(db, obj_in, realtime=realtime)

    def check_deletable(self, db: Session, db_obj: InstructorModel) -> None:
        # Course.instructor_id is required; reassign or delete the courses first.
        if db_obj.courses:
            course_ids = sorted(course.course_id for course in db_obj.courses)
            raise ValidationError(
                f"Instructor still teaches {len(course_ids)} course(s)",
                details={"course_ids": course_ids},
            )


instructor_service = InstructorService(crud_instructor, InstructorSchema)
