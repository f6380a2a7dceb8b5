"""Tests for healthcheck.models: records, HealthReport, ProbeResult."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from healthcheck.models import (
    UNAVAILABLE,
    CpuRecord,
    DiskRecord,
    HealthReport,
    MemoryRecord,
    NetworkStatus,
    ProbeResult,
    ProcessRecord,
    UpdateStatus,
)


# ── records ───────────────────────────────────────────

class TestRecords:
    def test_disk_record_camel_case_keys(self):
        d = DiskRecord(drive="/", free_space_percent=25.0, free_space_gb=25.0, total_space_gb=100.0)
        assert d.model_dump(by_alias=True) == {
            "drive": "/",
            "freeSpacePercent": 25.0,
            "freeSpaceGB": 25.0,
            "totalSpaceGB": 100.0,
        }

    def test_disk_percent_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            DiskRecord(drive="/", free_space_percent=120.0, free_space_gb=1.0, total_space_gb=1.0)

    def test_records_are_frozen(self):
        m = MemoryRecord(used_percent=50.0, free_gb=1.0, total_gb=2.0)
        with pytest.raises(ValidationError):
            m.used_percent = 10.0

    def test_populate_by_alias(self):
        p = ProcessRecord.model_validate({"name": "x", "cpuTimeSeconds": 1.5, "memoryMB": 2.0})
        assert p.cpu_time_seconds == 1.5
        assert p.memory_mb == 2.0

    def test_cpu_load_may_be_absent(self):
        c = CpuRecord(name="arm64")
        assert c.load_percent is None
        assert c.model_dump(by_alias=True) == {"loadPercent": None, "name": "arm64"}

    def test_cpu_load_bounds(self):
        with pytest.raises(ValidationError):
            CpuRecord(load_percent=101, name="x")

    def test_network_status_key(self):
        assert NetworkStatus(internet_connected=True).model_dump(by_alias=True) == {
            "internetConnected": True
        }


# ── UpdateStatus ──────────────────────────────────────

class TestUpdateStatus:
    def test_integer_count(self):
        u = UpdateStatus(pending_updates=3)
        assert u.pending_updates == 3
        assert u.available is True

    def test_sentinel(self):
        u = UpdateStatus(pending_updates=UNAVAILABLE)
        assert u.pending_updates == "unavailable"
        assert u.available is False

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            UpdateStatus(pending_updates=-1)

    def test_other_strings_rejected(self):
        with pytest.raises(ValidationError):
            UpdateStatus(pending_updates="unknown")

    def test_null_rejected(self):
        with pytest.raises(ValidationError):
            UpdateStatus(pending_updates=None)


# ── HealthReport ──────────────────────────────────────

def _report(**overrides) -> HealthReport:
    fields = dict(
        computer_name="host-1",
        timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        disk=[DiskRecord(drive="/", free_space_percent=25.0, free_space_gb=25.0, total_space_gb=100.0)],
        cpu=CpuRecord(load_percent=42, name="Test CPU"),
        memory=MemoryRecord(used_percent=75.0, free_gb=3.81, total_gb=15.26),
        top_processes=[ProcessRecord(name="python", cpu_time_seconds=250.5, memory_mb=120.0)],
        network=NetworkStatus(internet_connected=True),
        updates=UpdateStatus(pending_updates=UNAVAILABLE),
    )
    fields.update(overrides)
    return HealthReport(**fields)


class TestHealthReport:
    def test_json_keys(self):
        data = json.loads(_report().model_dump_json(by_alias=True))
        assert set(data) == {
            "computerName", "timestamp", "disk", "cpu", "memory",
            "topProcesses", "network", "updates", "errors",
        }
        assert data["disk"][0]["freeSpacePercent"] == 25.0
        assert data["topProcesses"][0]["cpuTimeSeconds"] == 250.5
        assert data["updates"]["pendingUpdates"] == "unavailable"

    def test_json_round_trip(self):
        report = _report()
        parsed = HealthReport.model_validate_json(report.model_dump_json(by_alias=True))
        assert parsed == report

    def test_complete_without_errors(self):
        assert _report().complete is True

    def test_partial_report(self):
        report = _report(memory=None, errors={"memory": "OSError: boom"})
        assert report.complete is False
        assert report.memory is None

    def test_at_most_five_processes(self):
        procs = [ProcessRecord(name=f"p{i}", cpu_time_seconds=1.0, memory_mb=1.0) for i in range(6)]
        with pytest.raises(ValidationError):
            _report(top_processes=procs)


# ── ProbeResult ───────────────────────────────────────

class TestProbeResult:
    def test_ok(self):
        r = ProbeResult(probe="cpu", value=CpuRecord(name="x"))
        assert r.ok is True

    def test_failed(self):
        r = ProbeResult(probe="cpu", error="RuntimeError: nope")
        assert r.ok is False
        assert r.value is None
