from enum import Enum


class RoleEnum(str, Enum):
    USER = "user"
    ADMIN = "admin"

class NotificationTypeEnum(str, Enum):
    SYSTEM = "system"
    REVIEW = "review"

class SubjectCollectionEnum(str, Enum):
    COURSE = "Course"
    MODULE = "Modules"
    TOPIC = "Topics"
    DEGREE = "Degrees"
    INSTRUCTOR = "Instructors"
    CAREER_RESOURCE = "CareerResources"
    CAREER_RESOURCE_CATEGORY = "CareerResourceCategories"
    SUCCESS_STORY = "SuccessStories"
    REVIEW = "Review"

COURSE_ID_COUNTER = "course_id"
