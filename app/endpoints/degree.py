from app.endpoints.base import create_entity_router
from app.schemas.degree import Degree, DegreeCreate, DegreeUpdate
from app.services.degree import degree_service

router = create_entity_router(
    degree_service,
    create_path="/addDegree",
    list_path="/allDegrees",
    create_schema=DegreeCreate,
    update_schema=DegreeUpdate,
    read_schema=Degree,
    image_field="img",
)
