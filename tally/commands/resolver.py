from loguru import logger

from tally.commands.errors import ResolutionError
from tally.commands.keywords import EntityType
from tally.db.repository import NAME_FIELDS, TallyRepository
from tally.models.commands import IdentifierQuery, ResolutionMethod, ResolvedEntity

SEARCH_LIMIT = 50


class EntityResolver:
    """Turn a user-supplied id or name into one of the owner's stored records."""

    def __init__(self, repo: TallyRepository):
        self.repo = repo

    def resolve(self, entity_type: EntityType, identifier: str, owner_id: int) -> ResolvedEntity:
        query = IdentifierQuery(raw=identifier)

        # A numeric identifier is always an id; it never falls back to a name search.
        if query.as_integer is not None:
            record = self.repo.get(entity_type, query.as_integer, owner_id)
            if record is None:
                logger.warning("No {} with id {} for user #{}", entity_type.value, query.as_integer, owner_id)
                raise ResolutionError(entity_type, identifier)
            return ResolvedEntity(entity_type=entity_type, record=record, method=ResolutionMethod.EXACT_ID)

        needle = query.raw.strip().lower()
        if not needle:
            raise ResolutionError(entity_type, identifier)

        field = NAME_FIELDS[entity_type]
        matches = self.repo.search_by_name(entity_type, owner_id, needle, limit=SEARCH_LIMIT)
        for record in matches:
            if getattr(record, field).lower() == needle:
                return ResolvedEntity(entity_type=entity_type, record=record, method=ResolutionMethod.EXACT_NAME_MATCH)

        partial = sorted(matches, key=lambda r: (getattr(r, field).lower(), r.id))
        if partial:
            return ResolvedEntity(entity_type=entity_type, record=partial[0], method=ResolutionMethod.PARTIAL_NAME_MATCH)

        logger.warning("No {} matching {!r} for user #{}", entity_type.value, identifier, owner_id)
        raise ResolutionError(entity_type, identifier)
