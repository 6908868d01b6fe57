"""SetCooldownPeriod — change the stored cooldown period.

The authority check runs before the value check, so a request made while
no authority exists fails the same way whatever period it carries.
"""

import structlog
from protean.fields import Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ledger.configuration.configuration import LedgerConfiguration, load_configuration
from ledger.domain import ledger
from ledger.shared.result import LedgerResult

logger = structlog.get_logger(__name__)


@ledger.command(part_of="LedgerConfiguration")
class SetCooldownPeriod:
    new_period = Integer(required=True)


@ledger.command_handler(part_of=LedgerConfiguration)
class SetCooldownPeriodHandler:
    @handle(SetCooldownPeriod)
    def set_cooldown_period(self, command):
        config = load_configuration()

        if not config.has_authority:
            logger.info("Cooldown change rejected: no authority set")
            return LedgerResult.failure()

        if command.new_period <= 0:
            logger.info("Cooldown change rejected: period must be positive", new_period=command.new_period)
            return LedgerResult.failure()

        config.change_cooldown_period(command.new_period)
        current_domain.repository_for(LedgerConfiguration).add(config)

        logger.info("Cooldown period changed", cooldown_period=command.new_period)
        return LedgerResult.success()
