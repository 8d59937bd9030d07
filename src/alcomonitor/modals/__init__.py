"""Modal screens."""

from alcomonitor.modals.name_entry_modal import NameEntryModal

__all__ = ["NameEntryModal"]
