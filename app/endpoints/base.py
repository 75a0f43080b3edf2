import json
from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.constants import RoleEnum
from app.core.exceptions import ValidationError
from app.models.user import User
from app.realtime.server_context import RealtimeContext
from app.schemas.response import APIResponse
from app.services.catalog import CatalogService
from app.utils import deps
from app.utils.uploads import parse_entity_payload


def parse_filter(raw: str) -> Dict[str, Any]:
    try:
        filters = json.loads(raw) if raw else {}
    except json.JSONDecodeError:
        raise ValidationError("filter must be a valid JSON object", details={"filter": raw})
    if not isinstance(filters, dict):
        raise ValidationError("filter must be a JSON object", details={"filter": raw})
    return filters


def create_entity_router(
    service: CatalogService,
    *,
    create_path: str,
    list_path: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    image_field: Optional[str] = None,
) -> APIRouter:
    """Create/list/get/update/delete routes for one catalog entity.

    Every route needs a logged-in user; writes need an admin.
    """
    router = APIRouter()
    entity = service.entity_name
    admin_only = deps.require_role(RoleEnum.ADMIN)

    @router.post(create_path, response_model=APIResponse[read_schema], status_code=status.HTTP_201_CREATED)
    async def create_entity(
        request: Request,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(admin_only),
        realtime: Optional[RealtimeContext] = Depends(deps.get_realtime),
    ):
        obj_in = await parse_entity_payload(
            request, create_schema, image_field=image_field, image_required=image_field is not None
        )
        created = await service.create(db, obj_in, realtime=realtime)
        return APIResponse(message=f"{entity} created successfully", data=created)

    @router.get(list_path, response_model=APIResponse[List[read_schema]])
    async def list_entities(
        request: Request,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_user),
        skip: int = Query(0, ge=0),
        limit: int = Query(10, ge=1, le=100),
        filter: str = Query("{}", description="JSON object of field equality filters"),
    ):
        items, cache_status = await service.list(db, filters=parse_filter(filter), skip=skip, limit=limit)
        request.state.cache_status = cache_status
        return APIResponse(message=f"{service.plural_name} retrieved successfully", data=items)

    @router.get("/{entity_id}", response_model=APIResponse[read_schema])
    def read_entity(
        entity_id: str,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_user),
    ):
        return APIResponse(message=f"{entity} retrieved successfully", data=service.get(db, entity_id))

    @router.patch("/{entity_id}", response_model=APIResponse[read_schema])
    async def update_entity(
        entity_id: str,
        request: Request,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(admin_only),
        realtime: Optional[RealtimeContext] = Depends(deps.get_realtime),
    ):
        obj_in = await parse_entity_payload(request, update_schema, image_field=image_field)
        updated = await service.update(db, entity_id, obj_in, realtime=realtime)
        return APIResponse(message=f"{entity} updated successfully", data=updated)

    @router.delete("/{entity_id}", response_model=APIResponse[None])
    async def delete_entity(
        entity_id: str,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(admin_only),
    ):
        await service.delete(db, entity_id)
        return APIResponse(message=f"{entity} deleted successfully")

    return router
