"""LedgerConfiguration aggregate — authority identity and cooldown period.

A single instance exists per ledger. The authority can be set exactly once
and must exist before any submission is accepted or the cooldown changed.

The cooldown period is stored but not enforced on submissions or updates.
"""

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ledger.configuration.events import AuthorityAssigned, CooldownPeriodChanged
from ledger.domain import ledger
from ledger.utils import settings

CONFIGURATION_KEY = "ledger"


@ledger.aggregate
class LedgerConfiguration:
    config_id = String(identifier=True, required=True, max_length=50)
    authority = Identifier()
    cooldown_period = Integer(required=True)

    @invariant.post
    def cooldown_must_be_positive(self):
        if self.cooldown_period is not None and self.cooldown_period <= 0:
            raise ValidationError({"cooldown_period": ["Cooldown period must be positive"]})

    @property
    def has_authority(self) -> bool:
        return self.authority is not None

    def can_accept_authority(self, candidate) -> bool:
        return not self.has_authority and str(candidate) != settings.BURN_IDENTITY

    def assign_authority(self, candidate):
        if str(candidate) == settings.BURN_IDENTITY:
            raise ValidationError({"authority": ["The null identity cannot be the authority"]})
        if self.has_authority:
            raise ValidationError({"authority": ["Authority is already set"]})

        self.authority = candidate

        self.raise_(AuthorityAssigned(authority=str(candidate)))

    def change_cooldown_period(self, new_period):
        if not self.has_authority:
            raise ValidationError({"authority": ["Authority must be set before changing configuration"]})

        if new_period is None or new_period <= 0:
            raise ValidationError({"cooldown_period": ["Cooldown period must be positive"]})

        previous = self.cooldown_period
        self.cooldown_period = new_period

        self.raise_(CooldownPeriodChanged(previous_period=previous, cooldown_period=new_period))


def load_configuration() -> LedgerConfiguration:
    repo = current_domain.repository_for(LedgerConfiguration)
    try:
        return repo.get(CONFIGURATION_KEY)
    except ObjectNotFoundError:
        return LedgerConfiguration(
            config_id=CONFIGURATION_KEY,
            cooldown_period=settings.DEFAULT_COOLDOWN_PERIOD,
        )
