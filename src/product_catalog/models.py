import threading
from dataclasses import dataclass, field


@dataclass
class CacheMetrics:
    """Track cache activity for product lookups."""

    hits: int = 0
    misses: int = 0
    puts: int = 0
    evictions: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.lookups == 0:
            return 0.0
        return self.hits / self.lookups

    def record_hit(self) -> None:
        with self._lock:
            self.hits += 1

    def record_miss(self) -> None:
        with self._lock:
            self.misses += 1

    def record_put(self) -> None:
        with self._lock:
            self.puts += 1

    def record_eviction(self) -> None:
        with self._lock:
            self.evictions += 1

    def reset(self) -> None:
        with self._lock:
            self.hits = self.misses = self.puts = self.evictions = 0

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        with self._lock:
            return {
                "lookups": self.hits + self.misses,
                "hits": self.hits,
                "misses": self.misses,
                "puts": self.puts,
                "evictions": self.evictions,
                "hit_rate": self.hit_rate,
            }
