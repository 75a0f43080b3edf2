import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.cache import cache
from app.core.cache_config import CACHE_TTL, LIST_CACHE_KEYS, is_unfiltered_key, list_cache_key, list_cache_pattern
from app.core.exceptions import NotFoundError
from app.crud.base import CRUDBase
from app.crud.user import user as crud_user
from app.realtime.server_context import RealtimeContext
from app.services.notification import notification_service

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")

ChangeDescriber = Callable[[Any, Any], str]

CACHE_HIT = "HIT"
CACHE_MISS = "MISS"


def changed_from(label: str) -> ChangeDescriber:
    return lambda old, new: f'{label} changed from "{old}" to "{new}"'


def updated_to(label: str) -> ChangeDescriber:
    return lambda old, new: f'{label}: "{new}"'


def updated(label: str) -> ChangeDescriber:
    return lambda old, new: f"{label} updated."


class CatalogService(Generic[ModelType]):
    """Create/list/get/update/delete for one catalog entity.

    Writes go to the store first, then the entity's cached list pages are
    reconciled, then a notification is fanned out. List reads are
    cache-aside, keyed by (entity, filter, skip, limit).
    """

    entity_name: str = "Entity"
    plural_name: str = "Entities"
    cache_name: str = ""
    subject_collection: str = ""
    label_field: str = "name"
    # field -> describer(old, new); a change in any of these notifies admins
    significant_fields: Dict[str, ChangeDescriber] = {}
    # other entities' lists that embed or reference this entity; dropped on every write
    dependent_caches: List[str] = []

    def __init__(self, crud: CRUDBase, read_schema: Type[BaseModel]):
        self.crud = crud
        self.read_schema = read_schema

    @property
    def cache_base(self) -> str:
        return LIST_CACHE_KEYS[self.cache_name]

    def serialize(self, db_obj: ModelType) -> Dict[str, Any]:
        return self.read_schema.model_validate(db_obj).model_dump(mode="json")

    def get_object(self, db: Session, entity_id: str) -> ModelType:
        db_obj = self.crud.get(db, id=entity_id)
        if not db_obj:
            raise NotFoundError(f"{self.entity_name} not found")
        return db_obj

    def validate_references(self, db: Session, data: Dict[str, Any]) -> None:
        """Raise NotFoundError when ``data`` points at a missing record."""

    def creation_message(self, db: Session, db_obj: ModelType) -> str:
        label = getattr(db_obj, self.label_field)
        return f'A new {self.entity_name.lower()} "{label}" has been added to our collection.'

    def significant_changes(self, before: Dict[str, Any], after: Dict[str, Any]) -> List[str]:
        return [
            describe(before.get(field), after.get(field))
            for field, describe in self.significant_fields.items()
            if before.get(field) != after.get(field)
        ]

    # -- cache ---------------------------------------------------------------

    async def invalidate_list_cache(self, cache_name: Optional[str] = None) -> int:
        base = LIST_CACHE_KEYS[cache_name] if cache_name else self.cache_base
        deleted = await cache.delete_pattern(list_cache_pattern(base))
        logger.info(f"Invalidated {deleted} cached lists under {base}")
        return deleted

    async def invalidate_dependent_caches(self) -> None:
        for cache_name in self.dependent_caches:
            await self.invalidate_list_cache(cache_name)

    async def reconcile_cached_lists(self, entity_id: str, replacement: Dict[str, Any]) -> None:
        """Swap ``replacement`` into unfiltered pages; drop filtered pages.

        Only valid when page membership and order are unchanged, i.e. after
        an update. Deletes shift every later page and go through
        ``invalidate_list_cache`` instead.
        """
        base = self.cache_base
        keys = await cache.keys(list_cache_pattern(base))
        for key in keys:
            if not is_unfiltered_key(base, key):
                await cache.delete(key)
                continue
            items = await cache.get(key)
            if items is None:
                continue
            reconciled = [replacement if str(item.get("id")) == entity_id else item for item in items]
            if reconciled != items:
                await cache.set(key, reconciled, ttl=CACHE_TTL["entity_list"])

    def check_deletable(self, db: Session, db_obj: ModelType) -> None:
        """Raise ValidationError when other rows still require ``db_obj``."""

    # -- operations ------------------------------------------------------------

    async def create(self, db: Session, obj_in: BaseModel, realtime: Optional[RealtimeContext] = None) -> Dict[str, Any]:
        self.validate_references(db, obj_in.model_dump(exclude_unset=True))
        db_obj = self.crud.create(db, obj_in=obj_in)
        data = self.serialize(db_obj)
        logger.info(f"{self.entity_name} {db_obj.id} created successfully")

        await self.invalidate_list_cache()
        await self.invalidate_dependent_caches()

        await notification_service.fan_out(
            db,
            recipients=crud_user.get_notifiable_ids,
            title=f"New {self.entity_name} Added",
            body=lambda: self.creation_message(db, db_obj),
            subject_id=data["id"],
            subject_collection=self.subject_collection,
            realtime=realtime,
        )
        return data

    async def list(
        self, db: Session, *, filters: Optional[Dict[str, Any]] = None, skip: int = 0, limit: int = 10
    ) -> Tuple[List[Dict[str, Any]], str]:
        cache_key = list_cache_key(self.cache_base, filters, skip, limit)
        cached = await cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache HIT for key: {cache_key}")
            return cached, CACHE_HIT

        items = self.crud.get_multi(db, filters=filters, skip=skip, limit=limit)
        if not items:
            raise NotFoundError(f"No {self.plural_name.lower()} found")

        data = [self.serialize(item) for item in items]
        await cache.set(cache_key, data, ttl=CACHE_TTL["entity_list"])
        logger.info(f"Fetched {len(data)} {self.plural_name.lower()} (cache MISS for {cache_key})")
        return data, CACHE_MISS

    def get(self, db: Session, entity_id: str) -> Dict[str, Any]:
        return self.serialize(self.get_object(db, entity_id))

    async def update(
        self, db: Session, entity_id: str, obj_in: BaseModel, realtime: Optional[RealtimeContext] = None
    ) -> Dict[str, Any]:
        db_obj = self.get_object(db, entity_id)
        before = self.serialize(db_obj)

        update_data = obj_in.model_dump(exclude_unset=True)
        self.validate_references(db, update_data)
        updated_obj = self.crud.update(db, db_obj=db_obj, obj_in=update_data)
        after = self.serialize(updated_obj)
        logger.info(f"{self.entity_name} {after['id']} updated successfully")

        await self.reconcile_cached_lists(after["id"], replacement=after)
        await self.invalidate_dependent_caches()

        changes = self.significant_changes(before, after)
        if changes:
            label = after.get(self.label_field)
            await notification_service.fan_out(
                db,
                recipients=crud_user.get_admin_ids,
                title=f"{self.entity_name} Updated",
                body=f'The {self.entity_name.lower()} "{label}" has been updated: {", ".join(changes)}.',
                subject_id=after["id"],
                subject_collection=self.subject_collection,
                realtime=realtime,
            )
        return after

    async def delete(self, db: Session, entity_id: str) -> Dict[str, Any]:
        db_obj = self.get_object(db, entity_id)
        self.check_deletable(db, db_obj)
        data = self.serialize(db_obj)
        self.crud.delete(db, id=db_obj.id)
        logger.info(f"{self.entity_name} {data['id']} deleted successfully")

        await self.invalidate_list_cache()
        await self.invalidate_dependent_caches()
        return data
