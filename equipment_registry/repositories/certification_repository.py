"""Certification, issuer allow-list and registry-setting repositories."""

from equipment_registry.domain.models import AuthorizedIssuer, Certification, RegistrySetting
from equipment_registry.repositories.base import BaseRepository


class CertificationRepository(BaseRepository[Certification]):
    """Data access for Certification records keyed by (technician, equipment_type)."""

    def __init__(self):
        super().__init__(Certification)

    def get_for(self, technician: str, equipment_type: str) -> Certification | None:
        return self.get((technician, equipment_type))


class IssuerRepository(BaseRepository[AuthorizedIssuer]):
    """Data access for the issuer allow-list."""

    def __init__(self):
        super().__init__(AuthorizedIssuer)

    def is_authorized(self, identity: str) -> bool:
        """True only for identities present with the flag set."""
        entry = self.get(identity)
        return bool(entry and entry.is_authorized)

    def authorize(self, identity: str) -> AuthorizedIssuer:
        return self.put(identity, identity=identity, is_authorized=True)


class SettingRepository(BaseRepository[RegistrySetting]):
    """Data access for registry settings fixed at deployment."""

    def __init__(self):
        super().__init__(RegistrySetting)

    def get_value(self, key: str) -> str | None:
        setting = self.get(key)
        return setting.value if setting else None

    def set_value(self, key: str, value: str) -> RegistrySetting:
        return self.put(key, key=key, value=value)
