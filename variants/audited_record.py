"""AuditedRecord: a second variant sharing the same hook configuration."""

from lifecycle import VariantRegistry

from .synced_record import SyncedRecord


@VariantRegistry.register
class AuditedRecord(SyncedRecord):
    """SyncedRecord that also refuses records flagged as locked.

    Overrides ``valid`` and ``sync_method`` only; the hooks registered on
    the base lifecycles pick up the overrides by name.
    """

    name = "audited"

    def __init__(self, *args, **kwargs):
        self.audit_log: list[str] = []
        super().__init__(*args, **kwargs)

    def valid(self) -> bool:
        if self.payload.get("locked"):
            self.events.append("valid")
            self.audit_log.append("rejected: locked")
            return False
        return super().valid()

    def sync_method(self):
        super().sync_method()
        self.audit_log.append(f"synced {self.payload.get('id')}")
