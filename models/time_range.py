"""Datenmodell für ein Zeitfenster (halboffenes Intervall [start, end))."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeRange:
    """Zeitfenster zwischen zwei Zeitpunkten.

    Halboffen: ``start`` gehört dazu, ``end`` nicht. Zwei Fenster, die sich
    nur an einem Endpunkt berühren (09:00-11:00 und 11:00-13:00), überlappen
    daher NICHT.
    Immutable (frozen=True) damit es als Dict-Key / Set-Element nutzbar ist.
    """

    start: datetime
    end: datetime

    @property
    def is_valid(self) -> bool:
        """True wenn das Fenster eine positive Dauer hat (end > start)."""
        return self.end > self.start

    def overlaps(self, other: "TimeRange") -> bool:
        """Strikte Überlappung zweier halboffener Intervalle."""
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{self.start:%Y-%m-%d %H:%M} - {self.end:%Y-%m-%d %H:%M}"
