"""Tests for the certification registry service against an in-memory database."""

import pytest

from conftest import EQUIPMENT, FEB_2021, FEB_2025, OUTSIDER, OWNER, TECHNICIAN
from equipment_registry.domain.caller import CallerContext
from equipment_registry.domain.exceptions import (
    AlreadyInitializedError,
    InvalidDateRangeError,
    NotAuthorizedError,
    NotFoundError,
    ValueOutOfRangeError,
)
from equipment_registry.services.certification_service import CertificationService


def _issue(service, caller, technician=TECHNICIAN, equipment=EQUIPMENT,
           start=FEB_2021, end=FEB_2025, level=3):
    return service.issue_certification(caller, technician, equipment, start, end, level)


class TestInitialize:
    """Deployment-time initialization."""

    def test_owner_seeded_as_issuer(self, cert_service):
        assert cert_service.get_contract_owner() == OWNER
        assert cert_service.is_initialized() is True
        assert cert_service.is_authorized_issuer(OWNER) is True

    def test_second_initialize_rejected(self, cert_service):
        with pytest.raises(AlreadyInitializedError):
            cert_service.initialize(OUTSIDER)
        assert cert_service.get_contract_owner() == OWNER
        assert cert_service.is_authorized_issuer(OUTSIDER) is False

    def test_uninitialized_registry_has_no_owner(self):
        service = CertificationService()
        assert service.is_initialized() is False
        with pytest.raises(NotAuthorizedError):
            service.add_authorized_issuer(CallerContext(OWNER), TECHNICIAN)


class TestAuthorizedIssuers:
    """Issuer allow-list management."""

    def test_owner_adds_issuer(self, cert_service, as_owner):
        assert cert_service.add_authorized_issuer(as_owner, OUTSIDER) is True
        assert cert_service.is_authorized_issuer(OUTSIDER) is True

    def test_adding_twice_is_harmless(self, cert_service, as_owner):
        cert_service.add_authorized_issuer(as_owner, OUTSIDER)
        assert cert_service.add_authorized_issuer(as_owner, OUTSIDER) is True

    def test_non_owner_cannot_add(self, cert_service, as_outsider):
        with pytest.raises(NotAuthorizedError) as exc_info:
            cert_service.add_authorized_issuer(as_outsider, TECHNICIAN)
        assert exc_info.value.error_code == "NOT_AUTHORIZED"
        assert cert_service.is_authorized_issuer(TECHNICIAN) is False

    def test_issuer_cannot_add_other_issuers(self, cert_service, as_owner):
        cert_service.add_authorized_issuer(as_owner, OUTSIDER)
        with pytest.raises(NotAuthorizedError):
            cert_service.add_authorized_issuer(CallerContext(OUTSIDER), TECHNICIAN)


class TestIssueCertification:
    """Issuance rules."""

    def test_issue_and_validate(self, cert_service, as_owner):
        assert _issue(cert_service, as_owner) is True
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2021 + 1) is True
        assert cert_service.get_certification(TECHNICIAN, EQUIPMENT) == {
            "technician": TECHNICIAN,
            "equipment_type": EQUIPMENT,
            "certification_date": FEB_2021,
            "expiration_date": FEB_2025,
            "certification_level": 3,
            "issuer": OWNER,
            "is_active": True,
        }

    def test_equal_dates_rejected(self, cert_service, as_owner):
        with pytest.raises(InvalidDateRangeError):
            _issue(cert_service, as_owner, end=FEB_2021)
        assert cert_service.get_certification(TECHNICIAN, EQUIPMENT) is None

    def test_invalid_dates_leave_existing_record_untouched(self, cert_service, as_owner):
        _issue(cert_service, as_owner, level=2)
        with pytest.raises(InvalidDateRangeError):
            _issue(cert_service, as_owner, start=FEB_2025, end=FEB_2021, level=5)
        assert cert_service.get_certification(TECHNICIAN, EQUIPMENT)["certification_level"] == 2

    def test_unauthorized_caller_rejected(self, cert_service, as_outsider):
        with pytest.raises(NotAuthorizedError):
            _issue(cert_service, as_outsider)
        assert cert_service.get_certification(TECHNICIAN, EQUIPMENT) is None
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2021 + 1) is False

    def test_authorization_checked_before_dates(self, cert_service, as_outsider):
        with pytest.raises(NotAuthorizedError):
            _issue(cert_service, as_outsider, end=FEB_2021)

    def test_added_issuer_can_issue(self, cert_service, as_owner, as_outsider):
        cert_service.add_authorized_issuer(as_owner, OUTSIDER)
        _issue(cert_service, as_outsider)
        assert cert_service.get_certification(TECHNICIAN, EQUIPMENT)["issuer"] == OUTSIDER

    def test_reissue_overwrites_and_reactivates(self, cert_service, as_owner, as_outsider):
        _issue(cert_service, as_owner, level=1)
        cert_service.revoke_certification(as_owner, TECHNICIAN, EQUIPMENT)
        cert_service.add_authorized_issuer(as_owner, OUTSIDER)

        _issue(cert_service, as_outsider, start=FEB_2021 + 10, level=4)

        record = cert_service.get_certification(TECHNICIAN, EQUIPMENT)
        assert record["is_active"] is True
        assert record["issuer"] == OUTSIDER
        assert record["certification_level"] == 4
        assert record["certification_date"] == FEB_2021 + 10

    def test_composite_key_parts_do_not_collide(self, cert_service, as_owner):
        # "a-b" + "c" and "a" + "b-c" would share a naive "tech-equipment" key
        _issue(cert_service, as_owner, technician="a-b", equipment="c")
        assert cert_service.is_certified("a", "b-c", FEB_2021 + 1) is False
        assert cert_service.is_certified("a-b", "c", FEB_2021 + 1) is True


class TestIsCertified:
    """The derived validity predicate."""

    def test_no_record(self, cert_service):
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2021) is False

    def test_expiration_boundary(self, cert_service, as_owner):
        _issue(cert_service, as_owner)
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2025) is True
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2025 + 1) is False

    def test_other_equipment_type_not_certified(self, cert_service, as_owner):
        _issue(cert_service, as_owner)
        assert cert_service.is_certified(TECHNICIAN, "Boiler B-200", FEB_2021 + 1) is False


class TestRevokeCertification:
    """Revocation rules."""

    def test_revoke(self, cert_service, as_owner):
        _issue(cert_service, as_owner)
        assert cert_service.revoke_certification(as_owner, TECHNICIAN, EQUIPMENT) is True
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2021 + 1) is False

    def test_revoke_preserves_other_fields(self, cert_service, as_owner):
        _issue(cert_service, as_owner)
        cert_service.revoke_certification(as_owner, TECHNICIAN, EQUIPMENT)

        record = cert_service.get_certification(TECHNICIAN, EQUIPMENT)
        assert record["is_active"] is False
        assert record["issuer"] == OWNER
        assert record["certification_level"] == 3
        assert record["expiration_date"] == FEB_2025

    @pytest.mark.parametrize("now", [0, FEB_2021, FEB_2021 + 1, FEB_2025])
    def test_revoked_never_certified(self, cert_service, as_owner, now):
        _issue(cert_service, as_owner)
        cert_service.revoke_certification(as_owner, TECHNICIAN, EQUIPMENT)
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, now) is False

    def test_any_issuer_may_revoke(self, cert_service, as_owner, as_outsider):
        _issue(cert_service, as_owner)
        cert_service.add_authorized_issuer(as_owner, OUTSIDER)

        assert cert_service.revoke_certification(as_outsider, TECHNICIAN, EQUIPMENT) is True

    def test_unauthorized_revoke_rejected(self, cert_service, as_owner, as_outsider):
        _issue(cert_service, as_owner)
        with pytest.raises(NotAuthorizedError):
            cert_service.revoke_certification(as_outsider, TECHNICIAN, EQUIPMENT)
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, FEB_2021 + 1) is True

    def test_revoke_unknown_key_not_found(self, cert_service, as_owner):
        with pytest.raises(NotFoundError) as exc_info:
            cert_service.revoke_certification(as_owner, TECHNICIAN, EQUIPMENT)
        assert exc_info.value.key == (TECHNICIAN, EQUIPMENT)


class TestCertificationValueRange:
    """Levels and dates are opaque integers bounded only by storage."""

    def test_negative_level_and_dates_accepted(self, cert_service, as_owner):
        _issue(cert_service, as_owner, start=-100, end=-10, level=-1)

        record = cert_service.get_certification(TECHNICIAN, EQUIPMENT)
        assert record["certification_level"] == -1
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, -50) is True

    def test_oversized_expiration_rejected(self, cert_service, as_owner):
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            _issue(cert_service, as_owner, end=2 ** 64)
        assert exc_info.value.field == "expiration_date"
        assert cert_service.get_certification(TECHNICIAN, EQUIPMENT) is None

    def test_oversized_level_rejected(self, cert_service, as_owner):
        with pytest.raises(ValueOutOfRangeError):
            _issue(cert_service, as_owner, level=2 ** 63)

    def test_largest_storable_values_accepted(self, cert_service, as_owner):
        _issue(cert_service, as_owner, end=2 ** 63 - 1, level=2 ** 63 - 1)
        assert cert_service.is_certified(TECHNICIAN, EQUIPMENT, 2 ** 63 - 1) is True
