"""Tests for end-to-end scan orchestration."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

from agentguard.config import GuardConfig
from agentguard.exceptions import StoreError
from agentguard.scanner import scan_target
from agentguard.store import ResultStore


def test_vulnerable_repo_findings(vulnerable_repo_root: Path, guard_config: GuardConfig) -> None:
    result = scan_target(vulnerable_repo_root, config=guard_config, dry_run=True, base_path=vulnerable_repo_root)

    assert result.file_list == ("app.js", "package.json")
    assert result.target_path == "."
    assert [(f.file, f.rule, f.line) for f in result.findings] == [
        ("app.js", "AWS Access Key", 4),
        ("app.js", "SQL Injection - String Concatenation", 7),
        ("app.js", "eval() Usage", 8),
        ("app.js", "Hardcoded Port", 11),
        ("package.json", "Known Vulnerability", 6),
        ("package.json", "Wildcard Version", 9),
    ]
    assert result.severity_counts == {"critical": 3, "high": 1, "medium": 1, "low": 1}
    assert result.category_counts == {"Secrets": 1, "OWASP": 1, "Code Patterns": 2, "Dependencies": 2}
    assert result.total_findings == sum(result.severity_counts.values())
    assert result.score == 100 - 3 * 25 - 10 - 3 - 1


def test_clean_repo_scores_100(clean_repo_root: Path, guard_config: GuardConfig) -> None:
    result = scan_target(clean_repo_root, config=guard_config, dry_run=True, base_path=clean_repo_root)

    assert result.score == 100
    assert result.total_findings == 0
    assert result.files_scanned == 2
    assert result.severity_counts == {"critical": 0, "high": 0, "medium": 0, "low": 0}
    assert result.category_counts == {}


def test_dry_run_scans_are_idempotent(vulnerable_repo_root: Path, guard_config: GuardConfig) -> None:
    first = scan_target(vulnerable_repo_root, config=guard_config, dry_run=True)
    second = scan_target(vulnerable_repo_root, config=guard_config, dry_run=True)

    assert [f.location_key() for f in first.findings] == [f.location_key() for f in second.findings]
    assert first.id != second.id
    assert first.id.startswith("scan_")
    assert not guard_config.results_path.exists()


def test_result_is_persisted_unless_dry_run(tmp_path: Path, guard_config: GuardConfig) -> None:
    target = tmp_path / "src"
    target.mkdir()
    (target / "util.js").write_text("const out = eval(x);\n", encoding="utf-8")

    result = scan_target(target, config=guard_config, base_path=tmp_path)

    stored = json.loads(guard_config.results_path.read_text(encoding="utf-8"))
    assert [entry["id"] for entry in stored] == [result.id]
    assert stored[0]["file_list"] == ["src/util.js"]
    assert stored[0]["findings"][0]["file"] == "src/util.js"


def test_single_file_target(tmp_path: Path, guard_config: GuardConfig) -> None:
    target = tmp_path / "config.py"
    target.write_text('API_KEY = "abc"\npassword = "supersecret1"\n', encoding="utf-8")

    result = scan_target(target, config=guard_config, dry_run=True, base_path=tmp_path)

    assert result.file_list == ("config.py",)
    assert [(f.rule, f.line) for f in result.findings] == [("Hardcoded Password", 2)]


def test_empty_and_unreadable_files_are_skipped(tmp_path: Path, guard_config: GuardConfig) -> None:
    (tmp_path / "empty.js").write_text("", encoding="utf-8")
    (tmp_path / "ok.js").write_text("eval(a)\n", encoding="utf-8")
    dangling = tmp_path / "broken.js"
    dangling.symlink_to(tmp_path / "does-not-exist.js")

    result = scan_target(tmp_path, config=guard_config, dry_run=True, base_path=tmp_path)

    assert result.file_list == ("ok.js",)
    assert result.total_findings == 1


def test_store_failure_becomes_warning(clean_repo_root: Path, guard_config: GuardConfig) -> None:
    store = MagicMock(spec=ResultStore)
    store.append.side_effect = StoreError("disk full")

    result = scan_target(clean_repo_root, config=guard_config, store=store)

    store.append.assert_called_once()
    assert result.score == 100
    assert len(result.warnings) == 1
    assert "disk full" in result.warnings[0]


def test_serialized_result_shape(clean_repo_root: Path, guard_config: GuardConfig) -> None:
    payload = scan_target(clean_repo_root, config=guard_config, dry_run=True).to_dict()

    assert payload["files_scanned"] == len(payload["file_list"])
    assert payload["warnings"] == []
    assert isinstance(payload["duration_seconds"], float)
