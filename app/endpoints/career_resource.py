from app.endpoints.base import create_entity_router
from app.schemas.career_resource import (
    CareerResource, CareerResourceCreate, CareerResourceUpdate,
    CareerResourceCategory, CareerResourceCategoryCreate, CareerResourceCategoryUpdate,
)
from app.services.career_resource import career_resource_category_service, career_resource_service

resource_router = create_entity_router(
    career_resource_service,
    create_path="/addCareerResource",
    list_path="/allCareerResources",
    create_schema=CareerResourceCreate,
    update_schema=CareerResourceUpdate,
    read_schema=CareerResource,
)

category_router = create_entity_router(
    career_resource_category_service,
    create_path="/addCareerResourceCategory",
    list_path="/allCareerResourceCategories",
    create_schema=CareerResourceCategoryCreate,
    update_schema=CareerResourceCategoryUpdate,
    read_schema=CareerResourceCategory,
)
