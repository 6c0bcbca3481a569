"""Certification service — the technician certification registry.

Flow for every mutation: authorize caller → validate input → persist.
Nothing is written until every check has passed.
"""

import logging

from equipment_registry.domain.access_policy import AccessPolicy
from equipment_registry.domain.bounds import require_int64
from equipment_registry.domain.caller import CallerContext
from equipment_registry.domain.exceptions import (
    AlreadyInitializedError,
    InvalidDateRangeError,
    NotFoundError,
)
from equipment_registry.domain.validity import is_valid_at, validate_date_range
from equipment_registry.repositories.certification_repository import (
    CertificationRepository,
    IssuerRepository,
    SettingRepository,
)

logger = logging.getLogger(__name__)

CONTRACT_OWNER = "contract_owner"


class CertificationService:
    """Owns certification records, the issuer allow-list and the contract owner."""

    def __init__(
        self,
        cert_repo: CertificationRepository | None = None,
        issuer_repo: IssuerRepository | None = None,
        setting_repo: SettingRepository | None = None,
    ):
        self._cert_repo = cert_repo or CertificationRepository()
        self._issuer_repo = issuer_repo or IssuerRepository()
        self._setting_repo = setting_repo or SettingRepository()
        self._policy = AccessPolicy()

    # ------------------------------------------------------------------
    # Deployment
    # ------------------------------------------------------------------

    def initialize(self, owner: str) -> None:
        """Fix the contract owner and seed it as the first authorized issuer.

        Runs once per registry; later calls raise ``AlreadyInitializedError``.
        """
        existing = self.get_contract_owner()
        if existing is not None:
            raise AlreadyInitializedError(existing)

        self._setting_repo.set_value(CONTRACT_OWNER, owner)
        self._issuer_repo.authorize(owner)
        self._setting_repo.commit()
        logger.info("Certification registry initialized owner=%s", owner)

    def is_initialized(self) -> bool:
        return self.get_contract_owner() is not None

    def get_contract_owner(self) -> str | None:
        return self._setting_repo.get_value(CONTRACT_OWNER)

    # ------------------------------------------------------------------
    # Issuer allow-list
    # ------------------------------------------------------------------

    def add_authorized_issuer(self, caller: CallerContext, issuer: str) -> bool:
        """Allow ``issuer`` to issue and revoke. Contract owner only; idempotent."""
        self._policy.require_contract_owner(self.get_contract_owner(), caller.current_caller())

        self._issuer_repo.authorize(issuer)
        self._issuer_repo.commit()
        logger.info("Authorized issuer %s", issuer)
        return True

    def is_authorized_issuer(self, identity: str) -> bool:
        return self._issuer_repo.is_authorized(identity)

    # ------------------------------------------------------------------
    # Certifications
    # ------------------------------------------------------------------

    def issue_certification(
        self,
        caller: CallerContext,
        technician: str,
        equipment_type: str,
        certification_date: int,
        expiration_date: int,
        certification_level: int,
    ) -> bool:
        """Issue (or re-issue) a certification for ``(technician, equipment_type)``.

        A re-issue replaces the previous record entirely, including its
        issuer, and makes it active again.

        Raises:
            NotAuthorizedError: the caller is not an authorized issuer.
            InvalidDateRangeError: ``certification_date >= expiration_date``.
            ValueOutOfRangeError: a date or the level does not fit its 64-bit column.
        """
        issuer = caller.current_caller()
        self._policy.require_issuer(
            self._issuer_repo.is_authorized(issuer), issuer, "issue certifications",
        )
        try:
            validate_date_range(certification_date, expiration_date)
        except InvalidDateRangeError:
            logger.warning(
                "Issue rejected for technician=%s equipment=%r: dates %s..%s",
                technician, equipment_type, certification_date, expiration_date,
            )
            raise
        require_int64(
            certification_date=certification_date,
            expiration_date=expiration_date,
            certification_level=certification_level,
        )

        self._cert_repo.put(
            (technician, equipment_type),
            technician=technician,
            equipment_type=equipment_type,
            certification_date=certification_date,
            expiration_date=expiration_date,
            certification_level=certification_level,
            issuer=issuer,
            is_active=True,
        )
        self._cert_repo.commit()
        logger.info(
            "Issued certification technician=%s equipment=%r level=%s issuer=%s",
            technician, equipment_type, certification_level, issuer,
        )
        return True

    def is_certified(self, technician: str, equipment_type: str, current_time: int) -> bool:
        """True iff an active, unexpired record exists for the key at ``current_time``."""
        cert = self._cert_repo.get_for(technician, equipment_type)
        if cert is None:
            return False
        return is_valid_at(cert.is_active, cert.expiration_date, current_time)

    def get_certification(self, technician: str, equipment_type: str) -> dict | None:
        """Return the stored record, or ``None`` when the key has never been issued."""
        cert = self._cert_repo.get_for(technician, equipment_type)
        return cert.to_dict() if cert else None

    def revoke_certification(
        self, caller: CallerContext, technician: str, equipment_type: str,
    ) -> bool:
        """Deactivate a certification. Any authorized issuer may revoke.

        Raises:
            NotAuthorizedError: the caller is not an authorized issuer.
            NotFoundError: no record exists for the key.
        """
        revoker = caller.current_caller()
        self._policy.require_issuer(
            self._issuer_repo.is_authorized(revoker), revoker, "revoke certifications",
        )

        cert = self._cert_repo.get_for(technician, equipment_type)
        if cert is None:
            logger.warning(
                "Revoke rejected: no certification for technician=%s equipment=%r",
                technician, equipment_type,
            )
            raise NotFoundError("Certification", (technician, equipment_type))

        self._cert_repo.update(cert, is_active=False)
        self._cert_repo.commit()
        logger.info(
            "Revoked certification technician=%s equipment=%r by %s",
            technician, equipment_type, revoker,
        )
        return True
