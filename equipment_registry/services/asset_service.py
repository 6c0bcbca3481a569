"""Asset service — the asset registry.

Registers physical assets under monotonically allocated ids and transfers
ownership between identities.
"""

import logging

from equipment_registry.domain.access_policy import AccessPolicy
from equipment_registry.domain.bounds import fits_int64, require_int64
from equipment_registry.domain.caller import CallerContext
from equipment_registry.domain.exceptions import NotFoundError
from equipment_registry.repositories.asset_repository import AssetRepository, CounterRepository

logger = logging.getLogger(__name__)

LAST_ASSET_ID = "last_asset_id"


class AssetService:
    """Owns asset records and the ``last_asset_id`` counter."""

    def __init__(
        self,
        asset_repo: AssetRepository | None = None,
        counter_repo: CounterRepository | None = None,
    ):
        self._asset_repo = asset_repo or AssetRepository()
        self._counter_repo = counter_repo or CounterRepository()
        self._policy = AccessPolicy()

    def register_asset(
        self,
        caller: CallerContext,
        name: str,
        model: str,
        serial_number: str,
        manufacturer: str,
        installation_date: int,
        warranty_expiration: int,
    ) -> int:
        """Register an asset owned by the caller and return its new id.

        Any caller may register. Ids start at 1 and are never reused.

        Raises:
            ValueOutOfRangeError: a timestamp does not fit its 64-bit column.
        """
        require_int64(
            installation_date=installation_date,
            warranty_expiration=warranty_expiration,
        )
        owner = caller.current_caller()
        asset_id = self._counter_repo.advance(LAST_ASSET_ID)
        self._asset_repo.create(
            id=asset_id,
            name=name,
            model=model,
            serial_number=serial_number,
            manufacturer=manufacturer,
            installation_date=installation_date,
            warranty_expiration=warranty_expiration,
            owner=owner,
        )
        self._asset_repo.commit()
        logger.info("Registered asset id=%s owner=%s serial=%s", asset_id, owner, serial_number)
        return asset_id

    def get_asset(self, asset_id: int) -> dict | None:
        """Return the asset record, or ``None`` when no such asset exists."""
        if not fits_int64(asset_id):
            return None
        asset = self._asset_repo.get(asset_id)
        return asset.to_dict() if asset else None

    def get_last_asset_id(self) -> int:
        """Return the most recently allocated id (0 before any registration)."""
        return self._counter_repo.current(LAST_ASSET_ID)

    def transfer_asset(self, caller: CallerContext, asset_id: int, new_owner: str) -> bool:
        """Hand the asset to ``new_owner``.

        Raises:
            NotFoundError: no asset exists for ``asset_id``.
            NotOwnerError: the caller is not the current owner.
        """
        asset = self._asset_repo.get(asset_id) if fits_int64(asset_id) else None
        if asset is None:
            logger.warning("Transfer rejected: asset id=%s not found", asset_id)
            raise NotFoundError("Asset", asset_id)

        previous_owner = asset.owner
        self._policy.require_asset_owner(asset_id, previous_owner, caller.current_caller())

        self._asset_repo.update(asset, owner=new_owner)
        self._asset_repo.commit()
        logger.info("Transferred asset id=%s from %s to %s", asset_id, previous_owner, new_owner)
        return True
