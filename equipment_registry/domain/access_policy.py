"""Access policy — identity checks guarding registry mutations.

Pure business logic with no Flask or database dependency. Each check
returns ``None`` on success and raises a typed error otherwise.
"""

import logging

from equipment_registry.domain.exceptions import NotAuthorizedError, NotOwnerError

logger = logging.getLogger(__name__)


class AccessPolicy:
    """Decides whether a caller may perform a registry mutation."""

    @staticmethod
    def require_asset_owner(asset_id: int, owner: str, caller: str) -> None:
        """Only the current owner may transfer an asset."""
        if caller != owner:
            logger.warning("Caller %s rejected: not owner of asset %s", caller, asset_id)
            raise NotOwnerError(asset_id, caller)

    @staticmethod
    def require_contract_owner(contract_owner: str | None, caller: str) -> None:
        """Only the fixed contract owner may grow the issuer allow-list.

        An uninitialized registry has no owner, so every caller is rejected.
        """
        if contract_owner is None or caller != contract_owner:
            logger.warning("Caller %s rejected: not the contract owner", caller)
            raise NotAuthorizedError(caller, "add authorized issuers")

    @staticmethod
    def require_issuer(is_authorized: bool, caller: str, action: str) -> None:
        """Issuer-only operations need an allow-list entry flagged true."""
        if not is_authorized:
            logger.warning("Caller %s rejected: not an authorized issuer", caller)
            raise NotAuthorizedError(caller, action)
