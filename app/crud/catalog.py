from app.crud.base import CRUDBase
from app.models.instructor import Instructor
from app.models.module import Module
from app.models.topic import Topic
from app.models.degree import Degree
from app.models.career_resource import CareerResource, CareerResourceCategory
from app.models.success_story import SuccessStory
from app.schemas.instructor import InstructorCreate, InstructorUpdate
from app.schemas.module import ModuleCreate, ModuleUpdate
from app.schemas.topic import TopicCreate, TopicUpdate
from app.schemas.degree import DegreeCreate, DegreeUpdate
from app.schemas.career_resource import (
    CareerResourceCreate, CareerResourceUpdate,
    CareerResourceCategoryCreate, CareerResourceCategoryUpdate,
)
from app.schemas.success_story import SuccessStoryCreate, SuccessStoryUpdate


class CRUDInstructor(CRUDBase[Instructor, InstructorCreate, InstructorUpdate]):
    def get_by_external_id(self, db, *, external_id: str):
        return db.query(Instructor).filter(Instructor.external_id == external_id).first()


instructor = CRUDInstructor(Instructor)
module = CRUDBase[Module, ModuleCreate, ModuleUpdate](Module)
topic = CRUDBase[Topic, TopicCreate, TopicUpdate](Topic)
degree = CRUDBase[Degree, DegreeCreate, DegreeUpdate](Degree)
career_resource_category = CRUDBase[CareerResourceCategory, CareerResourceCategoryCreate, CareerResourceCategoryUpdate](CareerResourceCategory)
career_resource = CRUDBase[CareerResource, CareerResourceCreate, CareerResourceUpdate](CareerResource)
success_story = CRUDBase[SuccessStory, SuccessStoryCreate, SuccessStoryUpdate](SuccessStory)
