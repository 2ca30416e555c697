"""Bounded store of completed scan results."""

from __future__ import annotations

from agentguard.config import GuardConfig
from agentguard.constants.severity import MAX_SCORE
from agentguard.model import ScanResult
from agentguard.store.json_store import JsonListStore
from agentguard.types import JsonObject


class ResultStore:
    """Append-only history of scan results, oldest evicted first."""

    def __init__(self, store: JsonListStore) -> None:
        self._store = store

    @classmethod
    def from_config(cls, config: GuardConfig) -> ResultStore:
        return cls(JsonListStore(config.results_path, config.max_results))

    def append(self, result: ScanResult) -> list[JsonObject]:
        return self._store.append(result.to_dict())

    def read_all(self) -> list[JsonObject]:
        return self._store.read_all()

    def latest(self) -> JsonObject | None:
        results = self.read_all()
        return results[-1] if results else None

    def summary(self) -> JsonObject:
        """Aggregate view over the retained results.

        An empty history reports a perfect score.
        """
        results = self.read_all()
        latest = results[-1] if results else None
        findings = latest.get("findings") if latest else None
        return {
            "total_scans": len(results),
            "latest_score": latest.get("score", MAX_SCORE) if latest else MAX_SCORE,
            "latest_findings": len(findings) if isinstance(findings, list) else 0,
            "latest_timestamp": latest.get("timestamp") if latest else None,
            "results": list(results),
        }
