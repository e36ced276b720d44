"""
HTTP client for the developer REST API.

Every call returns None on failure (transport error, non-2xx status,
undecodable body) instead of raising; callers treat None as "no data".
"""
import httpx
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# Fields returned to callers after a mutation (the stored id is not echoed)
DEVELOPER_FIELDS = (
    "experienceYears",
    "imageUrl",
    "location",
    "name",
    "position",
    "skills",
)


class DevelopersClient:
    """
    Client for the /api/devs endpoints.

    Works against a running server or, in tests, against the app directly
    through httpx.ASGITransport.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = "",
        logger_instance: logging.Logger = logger
    ):
        """
        Args:
            http_client: httpx AsyncClient for making HTTP requests
            base_url: Server root, e.g. "http://localhost:8000". Empty when the
                http_client already carries a base_url.
            logger_instance: Logger for tracking API calls
        """
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")
        self._logger = logger_instance

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def _request(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        """
        Issue a request and decode the JSON body.

        Returns:
            Decoded JSON, or None on any failure
        """
        try:
            response = await self._http_client.request(method, self._url(path), json=body)
        except httpx.HTTPError as e:
            self._logger.error(f"{method} {path} failed: {e}")
            return None

        if response.is_error:
            self._logger.warning(
                f"{method} {path} returned {response.status_code}: {response.text[:200]}"
            )
            return None

        try:
            return response.json()
        except ValueError as e:
            self._logger.error(f"{method} {path} returned invalid JSON: {e}")
            return None

    @staticmethod
    def _project(data: Optional[dict]) -> Optional[Dict[str, Any]]:
        if not data:
            return None
        return {field: data.get(field) for field in DEVELOPER_FIELDS}

    async def get_developers(self) -> Optional[List[Dict[str, Any]]]:
        """Get the roster, or None when it could not be fetched."""
        return await self._request("GET", "/api/devs")

    async def get_developer(self, developer_id: str) -> Optional[Dict[str, Any]]:
        """Get one developer (with id), or None if unknown or unreachable."""
        return await self._request("GET", f"/api/devs/{developer_id}")

    async def add_developer(self, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Create a developer.

        Returns:
            The created developer's fields (without id), or None on failure
        """
        data = await self._request("POST", "/api/devs", body)
        if data:
            self._logger.info(f"Developer added: {data.get('id')}")
        return self._project(data)

    async def edit_developer(self, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Edit a developer. The target is taken from body["id"].

        Returns:
            The updated developer's fields (without id), or None on failure
        """
        developer_id = body.get("id")
        if not developer_id:
            self._logger.error("Cannot edit developer: body has no id")
            return None

        data = await self._request("PATCH", f"/api/devs/{developer_id}", body)
        if data:
            self._logger.info(f"Developer edited: {developer_id}")
        return self._project(data)
