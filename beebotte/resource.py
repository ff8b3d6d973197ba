"""Resource handle: a client bound to one ``channel/resource`` path."""
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import pandas as pd

from .exceptions import NotFoundError

if TYPE_CHECKING:
    from .client import BBT


class Resource:
    """
    Wrapper around the ``BBT`` calls of a single resource.

    Example:
        >>> temperature = Resource(bbt, "dev", "temperature")
        >>> temperature.write(21.5)
        >>> temperature.recent_value()["data"]
        21.5
    """

    def __init__(self, bbt: "BBT", channel: str, resource: str):
        self.bbt = bbt
        self.channel = channel
        self.resource = resource

    def __repr__(self) -> str:
        return f"Resource({self.channel!r}, {self.resource!r})"

    def write(self, data: Any, ts: Optional[int] = None) -> Any:
        """Persist a value to this resource."""
        return self.bbt.write(self.channel, self.resource, data, ts)

    def publish(self, data: Any, ts: Optional[int] = None) -> Any:
        """Send a transient message to this resource."""
        return self.bbt.publish(self.channel, self.resource, data, ts)

    def read(
        self,
        owner: Optional[str] = None,
        limit: Optional[int] = None,
        source: Optional[str] = None,
        time_range: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Read records of this resource.

        Args:
            owner: Owner username for a public (unsigned) read; ``None`` reads
                the caller's own channel with a signed call
            limit: Number of records to return
            source: ``live``, ``hour-stats`` or ``day-stats``
            time_range: e.g. ``1hour``, ``today``

        Returns:
            List of records, most recent first
        """
        if owner is not None:
            return self.bbt.public_read(owner, self.channel, self.resource, limit, source, time_range)
        return self.bbt.read(self.channel, self.resource, limit, source, time_range)

    def read_dataframe(
        self,
        limit: Optional[int] = None,
        source: Optional[str] = None,
        time_range: Optional[str] = None,
    ) -> pd.DataFrame:
        """Signed read of this resource as a DataFrame."""
        return self.bbt.read_dataframe(self.channel, self.resource, limit, source, time_range)

    def recent_value(self) -> Dict[str, Any]:
        """Most recent record of this resource.

        Raises:
            NotFoundError: the resource holds no records
        """
        records = self.bbt.read(self.channel, self.resource)
        if not records:
            raise NotFoundError(f"No records in {self.channel}/{self.resource}")
        return records[0]
