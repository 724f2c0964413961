"""Record store for user profiles, including audience queries."""

from typing import Any
from uuid import UUID

from django.db.models import Q, QuerySet

from core.enums import Channel
from core.models import Profile
from core.repositories.record_store import RecordStore


def _non_empty(field: str) -> Q:
    return Q(**{f"{field}__isnull": False}) & ~Q(**{field: ""})


# Column(s) that must hold a value for a profile to be reachable on a channel
DELIVERY_TOKEN_FILTERS: dict[Channel, Q] = {
    Channel.EMAIL: _non_empty("email"),
    Channel.PUSH: _non_empty("fcm_token"),
    Channel.IN_APP: _non_empty("fcm_token"),
    Channel.SMS: _non_empty("phone") | _non_empty("email"),
}


class ProfileRepository(RecordStore[Profile]):
    """Queries on the ``profiles`` table."""

    model = Profile
    entity_name = "user"

    def reachable_by(self, channel: Channel) -> QuerySet[Profile]:
        """Profiles holding a delivery token for ``channel``."""
        return Profile.objects.filter(DELIVERY_TOKEN_FILTERS[channel])

    def premium_reachable_by(self, channel: Channel) -> QuerySet[Profile]:
        """Reachable profiles with at least one active membership."""
        return (
            self.reachable_by(channel)
            .filter(memberships__is_active=True)
            .distinct()
        )

    def reachable_matching(
        self, channel: Channel, emails: list[str], ids: list[UUID]
    ) -> QuerySet[Profile]:
        """Reachable profiles whose email or id is in the given lists."""
        return self.reachable_by(channel).filter(Q(email__in=emails) | Q(id__in=ids))

    def contact_summary(self, profile_id: UUID | None) -> dict[str, Any] | None:
        """``{full_name, email}`` of a profile, or None when it does not exist."""
        return self.summary(profile_id, "full_name", "email")
