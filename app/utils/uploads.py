import json
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Request, UploadFile
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.exceptions import InternalError, ValidationError

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)

UPLOAD_URL_PREFIX = "/uploads"
FILE_FIELD = "image"


def _coerce_form_value(value: str) -> Any:
    # Nested fields (lists, objects) arrive JSON-encoded in multipart forms.
    stripped = value.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    return value


async def save_upload(file: UploadFile, upload_dir: Optional[str] = None) -> str:
    """Write ``file`` under the upload directory and return its public path."""
    directory = Path(upload_dir or settings.UPLOAD_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    name = f"{uuid.uuid4().hex}{Path(file.filename or '').suffix.lower()}"
    content = await file.read()
    try:
        (directory / name).write_bytes(content)
    except OSError as e:
        logger.error(f"Failed to store upload {file.filename}: {e}")
        raise InternalError("Failed to upload image")
    logger.info(f"Stored upload {file.filename} as {name} ({len(content)} bytes)")
    return f"{UPLOAD_URL_PREFIX}/{name}"


async def read_payload(request: Request) -> tuple[Dict[str, Any], Dict[str, UploadFile]]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data") or content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        data: Dict[str, Any] = {}
        files: Dict[str, UploadFile] = {}
        for key, value in form.multi_items():
            if isinstance(value, str):
                data[key] = _coerce_form_value(value)
            elif value.filename:
                files[key] = value
        return data, files

    body = await request.body()
    if not body:
        return {}, {}
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        raise ValidationError("Request body is not valid JSON")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data, {}


def validate_payload(schema: Type[SchemaType], data: Dict[str, Any]) -> SchemaType:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            "Request validation failed",
            details={"errors": jsonable_encoder(e.errors(include_url=False))},
        )


async def parse_entity_payload(
    request: Request,
    schema: Type[SchemaType],
    *,
    image_field: Optional[str] = None,
    image_required: bool = False,
) -> SchemaType:
    """Validate a JSON or multipart body against ``schema``.

    An uploaded ``image`` file fills ``image_field`` unless the body already
    carries a URL for it.
    """
    data, files = await read_payload(request)

    if image_field:
        upload = files.get(FILE_FIELD) or files.get(image_field)
        if not data.get(image_field) and upload is not None:
            data[image_field] = await save_upload(upload)
        if image_required and not data.get(image_field):
            raise ValidationError("Image is required (file or URL)", details={"field": image_field})

    return validate_payload(schema, data)
