# ecell/integrations/supabase_storage.py
from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote, unquote, urlsplit

import httpx

from ecell.core.errors import StorageError

logger = logging.getLogger(__name__)


class SupabaseStorage:
    """Cliente mínimo da API REST do Supabase Storage (um bucket público)."""

    def __init__(
        self,
        project_url: str,
        service_key: str,
        bucket: str,
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = project_url.rstrip("/") + "/storage/v1"
        self.bucket = bucket
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, headers=self._headers, transport=self._transport)

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/object/public/{self.bucket}/{quote(path)}"

    @staticmethod
    def object_name_from_url(url: str) -> str:
        """Nome do objeto = último segmento do caminho da URL pública."""
        return unquote(urlsplit(url).path.rstrip("/").rsplit("/", 1)[-1])

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        url = f"{self.base_url}/object/{self.bucket}/{quote(path)}"
        try:
            async with self._client() as client:
                r = await client.post(
                    url,
                    content=data,
                    headers={"Content-Type": content_type, "x-upsert": "false"},
                )
        except httpx.HTTPError as exc:
            raise StorageError(f"upload of {path!r} failed: {exc!r}") from exc
        if r.status_code >= 400:
            raise StorageError(f"upload of {path!r} failed: {r.status_code} {_error_body(r)}")
        return self.public_url(path)

    async def remove(self, path: str) -> None:
        url = f"{self.base_url}/object/{self.bucket}"
        try:
            async with self._client() as client:
                # DELETE com corpo JSON: httpx só permite via request()
                r = await client.request("DELETE", url, json={"prefixes": [path]})
        except httpx.HTTPError as exc:
            raise StorageError(f"removal of {path!r} failed: {exc!r}") from exc
        if r.status_code >= 400:
            raise StorageError(f"removal of {path!r} failed: {r.status_code} {_error_body(r)}")


def _error_body(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return r.text
