"""SetAuthorityContract — set the write-once authority identity.

Fails when the candidate is the reserved null identity or when an
authority has already been set. No other side effects.
"""

import structlog
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ledger.configuration.configuration import LedgerConfiguration, load_configuration
from ledger.domain import ledger
from ledger.shared.result import LedgerResult

logger = structlog.get_logger(__name__)


@ledger.command(part_of="LedgerConfiguration")
class SetAuthorityContract:
    candidate = Identifier(required=True)


@ledger.command_handler(part_of=LedgerConfiguration)
class SetAuthorityContractHandler:
    @handle(SetAuthorityContract)
    def set_authority_contract(self, command):
        config = load_configuration()

        if not config.can_accept_authority(command.candidate):
            logger.info(
                "Authority assignment rejected",
                candidate=str(command.candidate),
                authority_already_set=config.has_authority,
            )
            return LedgerResult.failure()

        config.assign_authority(command.candidate)
        current_domain.repository_for(LedgerConfiguration).add(config)

        logger.info("Authority assigned", authority=str(command.candidate))
        return LedgerResult.success()
