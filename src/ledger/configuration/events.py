"""Domain events for the LedgerConfiguration aggregate."""

from protean.fields import Identifier, Integer

from ledger.domain import ledger


@ledger.event(part_of="LedgerConfiguration")
class AuthorityAssigned:
    """The write-once authority identity was set."""

    __version__ = 1

    authority = Identifier(required=True)


@ledger.event(part_of="LedgerConfiguration")
class CooldownPeriodChanged:
    """The cooldown period was changed."""

    __version__ = 1

    previous_period = Integer(required=True)
    cooldown_period = Integer(required=True)
