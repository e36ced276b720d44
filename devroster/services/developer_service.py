"""
Developer Service - roster reads and mutations

Provides:
- Listing and lookup of developers
- Creating developers (id assignment, payload validation)
- Editing developers (replace submitted fields)

Every mutation failure surfaces as DeveloperStoreError so callers have a
single thing to catch.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from devroster.api.schemas import DeveloperCreate, DeveloperUpdate
from devroster.domain.entities import Developer, Skills
from devroster.repositories.developer_repository import DeveloperRepository

logger = logging.getLogger(__name__)

Payload = Union[Dict[str, Any], BaseModel]


class DeveloperStoreError(Exception):
    """Raised when a developer cannot be created or updated"""
    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.message = message
        self.errors = errors or []  # [{"field": "skills.timely", "message": "..."}]
        super().__init__(self.message)

    def to_detail(self) -> Dict[str, Any]:
        return {"error": self.message, "errors": self.errors}


def generate_developer_id() -> str:
    return f"dev_{uuid.uuid4().hex[:12]}"


def _field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors to dot paths matching the form field names"""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors.append({"field": field, "message": error["msg"]})
    return errors


def _validate(schema, payload: Payload):
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True, exclude_unset=True)
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        errors = _field_errors(e)
        logger.warning(f"Rejected developer payload: {errors}")
        raise DeveloperStoreError("Invalid developer data", errors)


class DeveloperService:
    """Service for reading and mutating the developer roster"""

    @staticmethod
    async def get_developers(db: AsyncSession) -> List[Developer]:
        developers = await DeveloperRepository(db).find_many()
        logger.debug(f"Listing {len(developers)} developers")
        return developers

    @staticmethod
    async def get_developer_by_id(db: AsyncSession, developer_id: str) -> Optional[Developer]:
        developer = await DeveloperRepository(db).find_unique(developer_id)
        if developer is None:
            logger.debug(f"Developer not found: {developer_id}")
        return developer

    @staticmethod
    async def add_developer(db: AsyncSession, payload: Payload) -> Developer:
        """
        Create a developer from a request payload.

        Args:
            db: Database session
            payload: Developer fields (camelCase or snake_case), id ignored

        Returns:
            Stored developer with its generated id

        Raises:
            DeveloperStoreError: If the payload is invalid or the store rejects it
        """
        request = _validate(DeveloperCreate, payload)

        try:
            developer = Developer(
                id=generate_developer_id(),
                name=request.name,
                position=request.position,
                location=request.location,
                experience_years=request.experience_years,
                image_url=request.image_url,
                skills=Skills(**request.skills.model_dump()),
            )
        except ValueError as e:
            raise DeveloperStoreError(str(e))

        try:
            created = await DeveloperRepository(db).create(developer)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Failed to store developer {request.name!r}: {e}")
            raise DeveloperStoreError("Developer could not be stored")

        logger.info(f"✅ Developer created: {created.id} ({created.name})")
        return created

    @staticmethod
    async def edit_developer(db: AsyncSession, developer_id: str, payload: Payload) -> Developer:
        """
        Replace the submitted fields of an existing developer.

        Args:
            db: Database session
            developer_id: Developer to edit (from the URL)
            payload: Fields to replace; skills, when given, must be complete

        Returns:
            Updated developer

        Raises:
            DeveloperStoreError: If the payload is invalid, the body id does not
                match, or no developer has this id
        """
        request = _validate(DeveloperUpdate, payload)

        if request.id is not None and request.id != developer_id:
            logger.warning(f"Body id {request.id} does not match path id {developer_id}")
            raise DeveloperStoreError(
                f"Body id '{request.id}' does not match developer '{developer_id}'",
                [{"field": "id", "message": "Does not match the developer being edited"}],
            )

        fields = request.model_dump(exclude_unset=True, exclude={"id"})

        try:
            updated = await DeveloperRepository(db).update(developer_id, fields)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Failed to update developer {developer_id}: {e}")
            raise DeveloperStoreError("Developer could not be updated")

        if updated is None:
            logger.warning(f"Cannot edit unknown developer: {developer_id}")
            raise DeveloperStoreError(f"Developer not found: {developer_id}")

        logger.info(f"✅ Developer updated: {developer_id} (fields: {', '.join(sorted(fields)) or 'none'})")
        return updated
