from app.endpoints.base import create_entity_router
from app.schemas.success_story import SuccessStory, SuccessStoryCreate, SuccessStoryUpdate
from app.services.success_story import success_story_service

router = create_entity_router(
    success_story_service,
    create_path="/addSuccessStory",
    list_path="/allSuccessStories",
    create_schema=SuccessStoryCreate,
    update_schema=SuccessStoryUpdate,
    read_schema=SuccessStory,
    image_field="person_image",
)
