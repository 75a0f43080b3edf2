from app.endpoints.base import create_entity_router
from app.schemas.module import Module, ModuleCreate, ModuleUpdate
from app.schemas.topic import Topic, TopicCreate, TopicUpdate
from app.services.curriculum import module_service, topic_service

module_router = create_entity_router(
    module_service,
    create_path="/addModule",
    list_path="/allModules",
    create_schema=ModuleCreate,
    update_schema=ModuleUpdate,
    read_schema=Module,
)

topic_router = create_entity_router(
    topic_service,
    create_path="/addTopic",
    list_path="/allTopics",
    create_schema=TopicCreate,
    update_schema=TopicUpdate,
    read_schema=Topic,
)
