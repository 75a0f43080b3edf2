from typing import Any, Dict

from sqlalchemy.orm import Session

from app.core.constants import SubjectCollectionEnum
from app.core.exceptions import NotFoundError
from app.crud.catalog import module as crud_module, topic as crud_topic
from app.crud.course import course as crud_course
from app.models.module import Module as ModuleModel
from app.models.topic import Topic as TopicModel
from app.schemas.module import Module as ModuleSchema
from app.schemas.topic import Topic as TopicSchema
from app.services.catalog import CatalogService, changed_from, updated


class ModuleService(CatalogService[ModuleModel]):
    entity_name = "Module"
    plural_name = "Modules"
    cache_name = "module"
    subject_collection = SubjectCollectionEnum.MODULE.value
    label_field = "title"
    significant_fields = {
        "title": changed_from("Title"),
        "duration": lambda old, new: f'Duration updated from "{old}" to "{new}"',
    }
    dependent_caches = ["topic"]

    def validate_references(self, db: Session, data: Dict[str, Any]) -> None:
        course_id = data.get("course_id")
        if course_id and not crud_course.get(db, id=course_id):
            raise NotFoundError("Course not found")


class TopicService(CatalogService[TopicModel]):
    entity_name = "Topic"
    plural_name = "Topics"
    cache_name = "topic"
    subject_collection = SubjectCollectionEnum.TOPIC.value
    label_field = "title"
    significant_fields = {
        "title": changed_from("Title"),
        "description": updated("Description"),
    }
    # module pages carry topic_ids
    dependent_caches = ["module"]

    def validate_references(self, db: Session, data: Dict[str, Any]) -> None:
        module_id = data.get("module_id")
        if module_id and not crud_module.get(db, id=module_id):
            raise NotFoundError("Module not found")


module_service = ModuleService(crud_module, ModuleSchema)
topic_service = TopicService(crud_topic, TopicSchema)
