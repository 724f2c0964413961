"""Record stores for moderated community content."""

from core.models import HelpRequest, Pet
from core.repositories.record_store import RecordStore


class PetRepository(RecordStore[Pet]):
    """Pets listed for matching."""

    model = Pet
    entity_name = "pet"


class HelpRequestRepository(RecordStore[HelpRequest]):
    """Help-network posts."""

    model = HelpRequest
    entity_name = "help request"
