"""SQLAlchemy ORM models.

These tables are the registries' key-value store. The asset registry owns
``assets`` and ``registry_counters``; the certification registry owns
``certifications``, ``authorized_issuers`` and ``registry_settings``.
"""

from equipment_registry.extensions import db


# ---------------------------------------------------------------------------
# Asset registry
# ---------------------------------------------------------------------------
class Asset(db.Model):
    """A physical asset with a single current owner."""

    __tablename__ = "assets"

    id = db.Column(db.BigInteger, primary_key=True, autoincrement=False)
    name = db.Column(db.String(255), nullable=False)
    model = db.Column(db.String(255), nullable=False)
    serial_number = db.Column(db.String(255), nullable=False)
    manufacturer = db.Column(db.String(255), nullable=False)
    installation_date = db.Column(db.BigInteger, nullable=False)
    warranty_expiration = db.Column(db.BigInteger, nullable=False)
    owner = db.Column(db.String(255), nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "model": self.model,
            "serial_number": self.serial_number,
            "manufacturer": self.manufacturer,
            "installation_date": self.installation_date,
            "warranty_expiration": self.warranty_expiration,
            "owner": self.owner,
        }


class RegistryCounter(db.Model):
    """A named monotonic counter (e.g. ``last_asset_id``)."""

    __tablename__ = "registry_counters"

    name = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.BigInteger, nullable=False, default=0)


# ---------------------------------------------------------------------------
# Certification registry
# ---------------------------------------------------------------------------
class Certification(db.Model):
    """A technician's certification for one equipment type.

    Keyed by the composite ``(technician, equipment_type)`` primary key.
    """

    __tablename__ = "certifications"

    technician = db.Column(db.String(255), primary_key=True)
    equipment_type = db.Column(db.String(255), primary_key=True)
    certification_date = db.Column(db.BigInteger, nullable=False)
    expiration_date = db.Column(db.BigInteger, nullable=False)
    certification_level = db.Column(db.BigInteger, nullable=False)
    issuer = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    def to_dict(self) -> dict:
        return {
            "technician": self.technician,
            "equipment_type": self.equipment_type,
            "certification_date": self.certification_date,
            "expiration_date": self.expiration_date,
            "certification_level": self.certification_level,
            "issuer": self.issuer,
            "is_active": self.is_active,
        }


class AuthorizedIssuer(db.Model):
    """Allow-list entry for identities that may issue and revoke."""

    __tablename__ = "authorized_issuers"

    identity = db.Column(db.String(255), primary_key=True)
    is_authorized = db.Column(db.Boolean, default=True, nullable=False)


class RegistrySetting(db.Model):
    """String settings fixed at deployment (e.g. ``contract_owner``)."""

    __tablename__ = "registry_settings"

    key = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.String(255), nullable=False)
