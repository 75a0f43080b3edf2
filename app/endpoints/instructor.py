from app.endpoints.base import create_entity_router
from app.schemas.instructor import Instructor, InstructorCreate, InstructorUpdate
from app.services.instructor import instructor_service

router = create_entity_router(
    instructor_service,
    create_path="/addInstructor",
    list_path="/allInstructors",
    create_schema=InstructorCreate,
    update_schema=InstructorUpdate,
    read_schema=Instructor,
    image_field="image",
)
