"""Turns a symbolic target audience into concrete recipients."""

from collections.abc import Callable
from uuid import UUID

from django.db import DatabaseError
from django.db.models import QuerySet

import structlog

from core.enums import Channel, TargetAudience
from core.exceptions import UnsupportedChannelError
from core.models import Profile
from core.repositories import ProfileRepository
from core.schemas.dispatch import Recipient

logger = structlog.get_logger(__name__)


def split_identifiers(values: list[str]) -> tuple[list[str], list[UUID]]:
    """Separate explicit recipients into emails and profile ids."""
    emails: list[str] = []
    ids: list[UUID] = []
    for raw in values:
        value = str(raw).strip()
        if not value:
            continue
        try:
            ids.append(UUID(value))
        except ValueError:
            emails.append(value)
    return emails, ids


class AudienceResolver:
    """Resolves ``(audience, channel, specific_users)`` to recipients.

    Only profiles holding a delivery token for the channel are returned, and
    no profile appears twice. Lookup failures degrade to an empty list.
    """

    def __init__(self, profiles: ProfileRepository | None = None) -> None:
        self.profiles = profiles or ProfileRepository()
        self.handlers: dict[
            TargetAudience, Callable[[Channel, list[str]], QuerySet[Profile] | None]
        ] = {
            # "users" is the same group as "all" in the hosted schema
            TargetAudience.ALL: self._everyone,
            TargetAudience.USERS: self._everyone,
            TargetAudience.PREMIUM_USERS: self._premium,
            TargetAudience.SPECIFIC: self._specific,
        }

    def resolve(
        self,
        audience: TargetAudience | str,
        channel: Channel | str,
        specific_users: list[str] | None = None,
    ) -> list[Recipient]:
        """Return the recipients of an audience on a channel.

        Raises:
            UnsupportedChannelError: If ``channel`` is not a known channel.
        """
        try:
            channel = Channel(channel)
        except ValueError as e:
            raise UnsupportedChannelError(channel) from e

        try:
            audience = TargetAudience(audience)
        except ValueError:
            logger.warning("audience_unknown", audience=audience)
            return []

        try:
            queryset = self.handlers[audience](channel, specific_users or [])
            profiles = list(queryset) if queryset is not None else []
        except DatabaseError as e:
            logger.error(
                "audience_resolution_failed",
                audience=audience.value,
                channel=channel.value,
                error=str(e),
            )
            return []

        recipients: list[Recipient] = []
        seen: set[UUID] = set()
        for profile in profiles:
            if profile.id in seen:
                continue
            seen.add(profile.id)
            recipients.append(Recipient.from_profile(profile))

        logger.info(
            "audience_resolved",
            audience=audience.value,
            channel=channel.value,
            recipient_count=len(recipients),
        )
        return recipients

    def _everyone(self, channel: Channel, _specific: list[str]) -> QuerySet[Profile]:
        return self.profiles.reachable_by(channel)

    def _premium(self, channel: Channel, _specific: list[str]) -> QuerySet[Profile]:
        return self.profiles.premium_reachable_by(channel)

    def _specific(
        self, channel: Channel, specific: list[str]
    ) -> QuerySet[Profile] | None:
        emails, ids = split_identifiers(specific)
        if not emails and not ids:
            return None
        return self.profiles.reachable_matching(channel, emails, ids)
