"""Concrete record variants built on one shared hook configuration.

Importing this package registers every variant in VariantRegistry.
"""

from .base import Record, RECORD_ENGINE
from .synced_record import SyncedRecord
from .audited_record import AuditedRecord

__all__ = ['Record', 'RECORD_ENGINE', 'SyncedRecord', 'AuditedRecord']
