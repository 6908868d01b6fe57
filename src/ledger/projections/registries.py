"""User and location registries: membership tables owned by the directory.

The ledger only reads them: a row means "registered", no row means not.
Rows are written by the DirectoryEventsHandler or directly by the host.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from ledger.domain import ledger


@ledger.projection
class RegisteredUser:
    user_id = Identifier(identifier=True, required=True)
    registered_at = DateTime()


@ledger.projection
class RegisteredLocation:
    location_id = Integer(identifier=True, required=True)
    name = String(max_length=255)
    registered_at = DateTime()


def _exists(projection_cls, identifier) -> bool:
    try:
        current_domain.repository_for(projection_cls).get(identifier)
    except ObjectNotFoundError:
        return False
    return True


def is_registered_user(user_id) -> bool:
    if user_id is None:
        return False
    return _exists(RegisteredUser, str(user_id))


def is_registered_location(location_id) -> bool:
    if location_id is None:
        return False
    return _exists(RegisteredLocation, location_id)
