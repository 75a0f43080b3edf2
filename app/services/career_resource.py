from typing import Any, Dict

from sqlalchemy.orm import Session

from app.core.constants import SubjectCollectionEnum
from app.core.exceptions import NotFoundError
from app.crud.catalog import career_resource as crud_career_resource
from app.crud.catalog import career_resource_category as crud_career_resource_category
from app.models.career_resource import CareerResource, CareerResourceCategory
from app.schemas.career_resource import (
    CareerResource as CareerResourceSchema,
    CareerResourceCategory as CareerResourceCategorySchema,
)
from app.services.catalog import CatalogService, changed_from, updated


class CareerResourceCategoryService(CatalogService[CareerResourceCategory]):
    entity_name = "Career Resource Category"
    plural_name = "Career Resource Categories"
    cache_name = "career_resource_category"
    subject_collection = SubjectCollectionEnum.CAREER_RESOURCE_CATEGORY.value
    label_field = "category_name"
    significant_fields = {"category_name": changed_from("Category name")}
    dependent_caches = ["career_resource"]


class CareerResourceService(CatalogService[CareerResource]):
    entity_name = "Career Resource"
    plural_name = "Career Resources"
    cache_name = "career_resource"
    subject_collection = SubjectCollectionEnum.CAREER_RESOURCE.value
    label_field = "question"
    significant_fields = {
        "question": changed_from("Question"),
        "answer": updated("Answer"),
    }

    def validate_references(self, db: Session, data: Dict[str, Any]) -> None:
        category_id = data.get("category_id")
        if category_id and not crud_career_resource_category.get(db, id=category_id):
            raise NotFoundError("Career resource category not found")


career_resource_category_service = CareerResourceCategoryService(
    crud_career_resource_category, CareerResourceCategorySchema
)
career_resource_service = CareerResourceService(crud_career_resource, CareerResourceSchema)
