import uuid
from datetime import datetime, timezone

from app.crud.catalog import (
    career_resource_category as crud_career_resource_category,
    instructor as crud_instructor,
    module as crud_module,
    topic as crud_topic,
)
from app.crud.course import course as crud_course
from app.models.notification import Notification, NotificationRecipient

DEFAULT_PASSWORD = "testpass123"

COURSE_DESCRIPTION = "A practical introduction to building reliable backends."


def create_instructor(db, name="Ada Lovelace", **overrides):
    data = {
        "external_id": uuid.uuid4().hex[:12],
        "name": name,
        "image": "https://cdn.catalog.io/instructors/ada.png",
        "job": "Engineer",
        "courses_title": [],
        "description": "Writes analytical engines.",
    }
    data.update(overrides)
    return crud_instructor.create(db, obj_in=data)


def create_course(db, instructor=None, name="python basics", **overrides):
    instructor = instructor or create_instructor(db)
    data = {
        "name": name,
        "description": COURSE_DESCRIPTION,
        "instructor_id": instructor.id,
        "image": "https://cdn.catalog.io/courses/python.png",
        "related_courses": [],
    }
    data.update(overrides)
    return crud_course.create(db, obj_in=data)


def create_module(db, course=None, title="Getting started", duration="2h"):
    return crud_module.create(db, obj_in={"title": title, "duration": duration, "course_id": course.id if course else None})


def create_topic(db, module, title="Variables"):
    return crud_topic.create(db, obj_in={
        "title": title,
        "description": "Names bound to values.",
        "videos": [],
        "assignments": [],
        "module_id": module.id,
    })


def create_category(db, name="Interviews"):
    return crud_career_resource_category.create(db, obj_in={"category_name": name})


def degree_payload(**overrides):
    data = {
        "name": "Computer Science",
        "degree": "BSc",
        "description": "Four years of algorithms and systems.",
        "duration": "4 years",
        "level": "Undergraduate",
        "subject": "Computing",
        "link": "https://university.catalog.io/cs",
        "img": "https://cdn.catalog.io/degrees/cs.png",
    }
    data.update(overrides)
    return data


def success_story_payload(**overrides):
    data = {
        "name": "Grace Hopper",
        "certificate_name": "Compilers",
        "review": "The course changed my career.",
        "date": datetime(2024, 5, 1, tzinfo=timezone.utc).isoformat(),
        "person_image": "https://cdn.catalog.io/stories/grace.png",
    }
    data.update(overrides)
    return data


def recipients_of(db, notification_title):
    """User ids that received notifications with ``notification_title``."""
    rows = (
        db.query(NotificationRecipient.user_id)
        .join(Notification, Notification.id == NotificationRecipient.notification_id)
        .filter(Notification.title == notification_title)
        .all()
    )
    return [row.user_id for row in rows]


def notifications_titled(db, notification_title):
    return db.query(Notification).filter(Notification.title == notification_title).all()
