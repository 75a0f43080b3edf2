from typing import Annotated

from pydantic import AfterValidator, HttpUrl, StringConstraints, TypeAdapter

_http_url = TypeAdapter(HttpUrl)


def _validate_url(value: str) -> str:
    # Validate as a URL but keep the caller's exact spelling.
    _http_url.validate_python(value)
    return value


EntityId = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{32}$")]
UrlStr = Annotated[str, AfterValidator(_validate_url)]
ImageRef = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
