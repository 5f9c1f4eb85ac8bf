# portfolio/services/entity_service.py
"""
CRUD service shared by every content entity.

The service wires a repository to the entity's validate and normalize
functions: a request is validated, normalized into a storage record and then
handed to the repository. Ids are checked before any storage call.
"""

from typing import Any, Callable, Dict, Generic, List, TypeVar
import logging

from pydantic import BaseModel

from portfolio.repositories.base import EntityRepository
from portfolio.services.validation import validate_id

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class EntityService(Generic[EntityT]):
    def __init__(
        self,
        repository: EntityRepository[EntityT],
        validate: Callable[[Any], None],
        normalize: Callable[[Any], Dict[str, Any]],
    ):
        self.repository = repository
        self.validate = validate
        self.normalize = normalize

    @property
    def name(self) -> str:
        return self.repository.kind.name

    async def get_all(self) -> List[EntityT]:
        return await self.repository.get_all()

    async def get_by_id(self, entity_id: int) -> EntityT:
        validate_id(self.name, entity_id)
        return await self.repository.get_by_id(entity_id)

    async def create(self, request: BaseModel) -> EntityT:
        self.validate(request)
        return await self.repository.create(self.normalize(request))

    async def update(self, entity_id: int, request: BaseModel) -> EntityT:
        """Replace the entity and return it as stored; unknown ids raise NotFoundError."""
        validate_id(self.name, entity_id)
        self.validate(request)
        await self.repository.update(entity_id, self.normalize(request))
        return await self.repository.get_by_id(entity_id)

    async def delete(self, entity_id: int) -> None:
        validate_id(self.name, entity_id)
        await self.repository.delete(entity_id)
