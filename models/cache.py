import threading

from models.geo import GeoRecord


class ServerIPCache:
    """
    Process-wide holder of the most recent server geolocation.

    Records are immutable snapshots; a write installs a whole new record, so a
    reader never sees fields from two different lookups. Concurrent writers
    race and the last one wins.
    """

    def __init__(self, record=None):
        self._record = record if record is not None else GeoRecord.empty()
        self.lock = threading.Lock()

    def replace(self, record: GeoRecord):
        """Install a new record."""
        with self.lock:
            self._record = record

    def current_value(self) -> GeoRecord:
        """Return the current record snapshot."""
        with self.lock:
            return self._record
