"""Blob reference resolution for the image capability.

The image capability asks a ``BlobResolver`` to turn an uploaded file handle
into a reference the rendering surface can fetch bytes from. Fetching and
its failure modes belong to the resolver, not to the kit.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field


class BlobRef(BaseModel):
    """A fetchable reference to a stored blob."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="Storage id of the blob")
    name: Optional[str] = Field(default=None, description="Original file name")
    size: Optional[int] = Field(default=None, ge=0, description="Blob size in bytes")
    src: str = Field(..., description="URL the rendering surface loads the blob from")


@runtime_checkable
class BlobResolver(Protocol):
    """Protocol for blob resolution callbacks used by the image capability."""

    async def __call__(self, file: Any, name: Optional[str], size: Optional[int]) -> Any: ...


class UrlBlobResolver:
    """Resolve blobs to URLs under a fixed base URL.

    ``UrlBlobResolver("https://cdn.example.com/files")`` maps file ``abc`` to
    ``https://cdn.example.com/files/abc``. Relative bases such as ``/files``
    are kept relative.

    The file id always becomes exactly one path segment below the base:
    ``/``, ``?``, ``#`` and every other reserved character is percent-quoted.
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = httpx.URL(base_url.rstrip("/") + "/")

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    async def __call__(self, file: Any, name: Optional[str] = None, size: Optional[int] = None) -> BlobRef:
        file_id = str(file).strip()
        if not file_id:
            raise ValueError("blob file id must not be empty")
        if file_id in (".", ".."):
            raise ValueError(f"blob file id {file_id!r} is not a valid path segment")
        src = httpx.URL(str(self._base_url) + quote(file_id, safe=""))
        return BlobRef(file=file_id, name=name, size=size, src=str(src))
