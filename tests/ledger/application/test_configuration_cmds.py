"""Application tests for SetAuthorityContract and SetCooldownPeriod."""

import pytest
from ledger.api import set_authority_contract, set_cooldown_period
from ledger.configuration.authority import SetAuthorityContract
from ledger.review.lookups import get_configuration
from ledger.utils import settings
from protean import current_domain


class TestSetAuthorityContract:
    def test_first_assignment_succeeds(self):
        result = set_authority_contract("ST2TEST")
        assert result.ok is True
        assert result.value is True
        assert str(get_configuration().authority) == "ST2TEST"

    def test_processed_as_command(self):
        result = current_domain.process(SetAuthorityContract(candidate="ST2TEST"), asynchronous=False)
        assert result.ok is True

    def test_second_assignment_fails(self):
        set_authority_contract("ST2TEST")
        result = set_authority_contract("ST3OTHER")
        assert result.ok is False
        assert result.value is False
        assert str(get_configuration().authority) == "ST2TEST"

    def test_same_candidate_twice_fails(self):
        set_authority_contract("ST2TEST")
        assert set_authority_contract("ST2TEST").ok is False

    def test_burn_identity_rejected(self):
        result = set_authority_contract(settings.BURN_IDENTITY)
        assert result.ok is False
        assert get_configuration().authority is None

    def test_burn_rejection_does_not_consume_write_once(self):
        set_authority_contract(settings.BURN_IDENTITY)
        assert set_authority_contract("ST2TEST").ok is True

    def test_cooldown_unchanged_by_authority(self):
        set_authority_contract("ST2TEST")
        assert get_configuration().cooldown_period == settings.DEFAULT_COOLDOWN_PERIOD


class TestSetCooldownPeriod:
    def test_change_with_authority(self):
        set_authority_contract("ST2TEST")
        result = set_cooldown_period(288)
        assert result.ok is True
        assert result.value is True
        assert get_configuration().cooldown_period == 288

    def test_rejected_without_authority(self):
        result = set_cooldown_period(288)
        assert result.ok is False
        assert result.value is False
        assert get_configuration().cooldown_period == 144

    def test_invalid_value_without_authority_fails_the_same_way(self):
        assert set_cooldown_period(0) == set_cooldown_period(288)

    @pytest.mark.parametrize("period", [0, -1])
    def test_non_positive_rejected(self, period):
        set_authority_contract("ST2TEST")
        result = set_cooldown_period(period)
        assert result.ok is False
        assert get_configuration().cooldown_period == 144

    def test_can_change_repeatedly(self):
        set_authority_contract("ST2TEST")
        set_cooldown_period(10)
        set_cooldown_period(20)
        assert get_configuration().cooldown_period == 20
