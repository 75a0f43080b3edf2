from app.core.constants import SubjectCollectionEnum
from app.crud.catalog import success_story as crud_success_story
from app.models.success_story import SuccessStory as SuccessStoryModel
from app.schemas.success_story import SuccessStory as SuccessStorySchema
from app.services.catalog import CatalogService, changed_from, updated_to


class SuccessStoryService(CatalogService[SuccessStoryModel]):
    entity_name = "Success Story"
    plural_name = "Success Stories"
    cache_name = "success_story"
    subject_collection = SubjectCollectionEnum.SUCCESS_STORY.value
    significant_fields = {
        "name": changed_from("Name"),
        "review": updated_to("Review updated"),
    }


success_story_service = SuccessStoryService(crud_success_story, SuccessStorySchema)
