"""Cross-domain event contracts for the Directory (user and location registry).

The Directory owns user and location registration. These classes define
the event shape the Ledger consumes to keep its registry projections up
to date. They are registered as external events via
domain.register_external_event() with matching __type__ strings so
Protean's stream deserialization works correctly.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, Integer, String


class UserRegistered(BaseEvent):
    """A user identity was registered and may now submit reviews."""

    __version__ = 1

    user_id = Identifier(required=True)
    registered_at = DateTime(required=True)


class LocationRegistered(BaseEvent):
    """A location was registered and may now be reviewed."""

    __version__ = 1

    location_id = Integer(required=True)
    name = String(max_length=255)
    registered_at = DateTime(required=True)
