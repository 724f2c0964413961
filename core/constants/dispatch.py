"""Constants used by the notification dispatch pipeline."""

import uuid

# Sender recorded on notifications created without an authenticated admin
SYSTEM_SENDER_ID = uuid.UUID("00000000-0000-0000-0000-000000000000")

# Namespace for per-recipient record ids: uuid5(namespace, "<notification>:<user>")
USER_NOTIFICATION_NAMESPACE = uuid.UUID("6f0c4a59-0d0e-4c55-9d3b-7a4f2f3f6b21")

PET_SUSPENSION_REASON = "Reported and disabled by an administrator"
