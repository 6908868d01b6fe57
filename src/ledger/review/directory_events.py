"""Inbound cross-domain event handler — Ledger reacts to Directory events.

Listens for UserRegistered and LocationRegistered events to populate the
RegisteredUser and RegisteredLocation projections that the SubmitReview
handler checks before accepting a review.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.directory import LocationRegistered, UserRegistered

from ledger.domain import ledger
from ledger.projections.registries import (
    RegisteredLocation,
    RegisteredUser,
    is_registered_location,
    is_registered_user,
)
from ledger.review.review import Review, is_valid_location_id

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
ledger.register_external_event(UserRegistered, "Directory.UserRegistered.v1")
ledger.register_external_event(LocationRegistered, "Directory.LocationRegistered.v1")


@ledger.event_handler(part_of=Review, stream_category="directory::registry")
class DirectoryEventsHandler:
    """Keeps the registry projections in step with the Directory."""

    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        if is_registered_user(event.user_id):
            logger.info("User already registered, skipping", user_id=str(event.user_id))
            return

        current_domain.repository_for(RegisteredUser).add(
            RegisteredUser(user_id=str(event.user_id), registered_at=event.registered_at)
        )
        logger.info("User registered", user_id=str(event.user_id))

    @handle(LocationRegistered)
    def on_location_registered(self, event: LocationRegistered) -> None:
        if not is_valid_location_id(event.location_id):
            logger.warning("LocationRegistered with non-positive id, skipping", location_id=event.location_id)
            return

        if is_registered_location(event.location_id):
            logger.info("Location already registered, skipping", location_id=event.location_id)
            return

        current_domain.repository_for(RegisteredLocation).add(
            RegisteredLocation(
                location_id=event.location_id,
                name=event.name,
                registered_at=event.registered_at,
            )
        )
        logger.info("Location registered", location_id=event.location_id)
