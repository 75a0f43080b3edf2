from app.models.counter import Counter
from app.models.instructor import Instructor
from app.models.course import Course, user_courses_association
from app.models.module import Module
from app.models.topic import Topic
from app.models.degree import Degree
from app.models.review import Review
from app.models.career_resource import CareerResource, CareerResourceCategory
from app.models.success_story import SuccessStory
from app.models.user import User
from app.models.notification import Notification, NotificationRecipient
