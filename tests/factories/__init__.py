"""Faker-backed builders for test data.

Each ``make_*`` function saves a row with realistic defaults; keyword
arguments override any field.
"""

from typing import Any

from faker import Faker

from core.enums import Channel, NotificationLifecycle, TargetAudience
from core.models import (
    HelpRequest,
    Notification,
    Pet,
    Profile,
    Report,
    UserMembership,
)

fake = Faker()


def make_profile(**overrides: Any) -> Profile:
    fields = {
        "email": fake.unique.email(),
        "full_name": fake.name(),
        "phone": fake.numerify("+34 6## ### ###"),
        "fcm_token": fake.sha256(),
        "notifications_enabled": True,
    }
    fields.update(overrides)
    return Profile.objects.create(**fields)


def make_membership(user: Profile, **overrides: Any) -> UserMembership:
    fields = {"user": user, "is_active": True}
    fields.update(overrides)
    return UserMembership.objects.create(**fields)


def make_notification(**overrides: Any) -> Notification:
    fields = {
        "title": fake.sentence(nb_words=4),
        "message": fake.paragraph(),
        "channel": Channel.IN_APP.value,
        "target_audience": TargetAudience.ALL.value,
        "status": NotificationLifecycle.DRAFT.value,
    }
    fields.update(overrides)
    return Notification.objects.create(**fields)


def make_pet(**overrides: Any) -> Pet:
    fields = {
        "owner_id": fake.uuid4(cast_to=None),
        "name": fake.first_name(),
        "species": "dog",
    }
    fields.update(overrides)
    return Pet.objects.create(**fields)


def make_help_request(**overrides: Any) -> HelpRequest:
    fields = {
        "user_id": fake.uuid4(cast_to=None),
        "title": fake.sentence(nb_words=5),
        "description": fake.paragraph(),
    }
    fields.update(overrides)
    return HelpRequest.objects.create(**fields)


def make_report(**overrides: Any) -> Report:
    fields = {
        "reporter_id": fake.uuid4(cast_to=None),
        "report_type": "user",
        "reported_id": fake.uuid4(cast_to=None),
        "reason": "spam",
        "description": fake.sentence(),
    }
    fields.update(overrides)
    return Report.objects.create(**fields)
