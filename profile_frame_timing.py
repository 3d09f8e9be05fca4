"""
Measure per-frame latency of the three rings service: engine time, draw list
time and JSON serialization, reported by the server for a handful of clock
configurations. A frame has to fit well inside one display refresh.

Run from repo root:
    python profile_frame_timing.py
"""

from __future__ import annotations

import csv
import json
import logging
import subprocess
import sys
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from threerings.logging_setup import setup_default_logging

logger = logging.getLogger("profile_frame_timing")

HOST = "127.0.0.1"
PORT = 8000
BASE_URL = f"http://{HOST}:{PORT}"
APP_IMPORT_PATH = "threerings.main:app"
FRAMES_PER_SCENARIO = 120
FRAME_BUDGET_MS = 1000.0 / 60.0


@dataclass
class Scenario:
    name: str
    canvas_size: int
    show_inner_ring: bool
    include_draw_list: bool


SCENARIOS: List[Scenario] = [
    Scenario(name="geometry_only_800", canvas_size=800, show_inner_ring=True, include_draw_list=False),
    Scenario(name="full_frame_800", canvas_size=800, show_inner_ring=True, include_draw_list=True),
    Scenario(name="no_inner_ring_1600", canvas_size=1600, show_inner_ring=False, include_draw_list=True),
]

CSV_FIELDS = [
    "timestamp",
    "scenario",
    "frame",
    "request_ms",
    "compute_frame_ms",
    "draw_list_ms",
    "serialize_ms",
    "payload_bytes",
    "canvas_size",
]


def _ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _percentile(values: List[float], pct: float) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    k = (len(ordered) - 1) * pct / 100.0
    lower = int(k)
    upper = min(lower + 1, len(ordered) - 1)
    return ordered[lower] + (ordered[upper] - ordered[lower]) * (k - lower)


def _summary_line(values: List[float]) -> str:
    if not values:
        return "no samples"
    return (
        f"min={min(values):.3f} ms "
        f"p50={_percentile(values, 50):.3f} ms "
        f"p95={_percentile(values, 95):.3f} ms "
        f"max={max(values):.3f} ms"
    )


def _frame_payload(scenario: Scenario, frame: int) -> Dict[str, object]:
    # Walk the clock one second per frame so the growth driver moves.
    total = 3 * 3600 + frame
    return {
        "canvasSize": scenario.canvas_size,
        "config": {"showInnerRing": scenario.show_inner_ring},
        "time": {"hour": total // 3600, "minute": (total // 60) % 60, "second": total % 60},
        "includeDrawList": scenario.include_draw_list,
        "profile": True,
    }


def start_service() -> subprocess.Popen:
    cmd = [sys.executable, "-m", "uvicorn", APP_IMPORT_PATH, "--host", HOST, "--port", str(PORT)]
    return subprocess.Popen(cmd)


def wait_for_service(proc: subprocess.Popen, timeout_sec: float = 20.0) -> float:
    url = f"{BASE_URL}/api/controls"
    start = time.perf_counter()
    while time.perf_counter() - start < timeout_sec:
        if proc.poll() is not None:
            raise RuntimeError(f"Service exited early with code {proc.returncode}")
        try:
            with urllib.request.urlopen(url, timeout=2) as resp:
                if resp.status == 200:
                    return _ms(start)
        except (urllib.error.URLError, ConnectionRefusedError):
            time.sleep(0.25)
    raise RuntimeError("Service did not become ready in time")


def post_frame(payload: Dict[str, object]) -> Dict[str, Optional[float]]:
    req = urllib.request.Request(
        f"{BASE_URL}/api/frame",
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )
    start = time.perf_counter()
    with urllib.request.urlopen(req, timeout=30) as resp:
        body = resp.read()
    request_ms = _ms(start)

    profile = json.loads(body).get("meta", {}).get("profile", {})
    timings = profile.get("timingsMs", {})
    return {
        "request_ms": request_ms,
        "compute_frame_ms": timings.get("compute_frame"),
        "draw_list_ms": timings.get("draw_list"),
        "serialize_ms": timings.get("serialize_response_json"),
        "payload_bytes": profile.get("payloadBytes", len(body)),
    }


def _write_trace(rows: List[Dict[str, object]]) -> None:
    with open("profiling_runs.csv", "a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        if f.tell() == 0:
            writer.writeheader()
        writer.writerows(rows)


def main() -> None:
    setup_default_logging("INFO")
    run_timestamp = datetime.now(timezone.utc).isoformat()
    proc: Optional[subprocess.Popen] = None
    rows: List[Dict[str, object]] = []

    try:
        proc = start_service()
        ready_ms = wait_for_service(proc)
        logger.info("service ready after %.1f ms", ready_ms)

        for scenario in SCENARIOS:
            scenario_rows = []
            for frame in range(FRAMES_PER_SCENARIO):
                result = post_frame(_frame_payload(scenario, frame))
                row = {
                    "timestamp": run_timestamp,
                    "scenario": scenario.name,
                    "frame": frame,
                    "canvas_size": scenario.canvas_size,
                    **result,
                }
                scenario_rows.append(row)
            rows.extend(scenario_rows)

            engine = [r["compute_frame_ms"] for r in scenario_rows if r["compute_frame_ms"] is not None]
            draw = [r["draw_list_ms"] for r in scenario_rows if r["draw_list_ms"] is not None]
            serialize = [r["serialize_ms"] for r in scenario_rows if r["serialize_ms"] is not None]
            requests = [r["request_ms"] for r in scenario_rows]

            print(f"\nScenario: {scenario.name} ({FRAMES_PER_SCENARIO} frames, canvas={scenario.canvas_size})")
            print(f"- request: {_summary_line(requests)}")
            print(f"- compute_frame: {_summary_line(engine)}")
            print(f"- draw list: {_summary_line(draw)}")
            print(f"- serialize json: {_summary_line(serialize)}")
            over_budget = [v for v in engine if v > FRAME_BUDGET_MS]
            if over_budget:
                logger.warning("%s: %d frames exceeded %.1f ms", scenario.name, len(over_budget), FRAME_BUDGET_MS)

        _write_trace(rows)
    finally:
        if proc is not None:
            proc.terminate()
            try:
                proc.wait(timeout=5)
            except subprocess.TimeoutExpired:
                proc.kill()

    print("\nPer-frame traces appended to profiling_runs.csv")


if __name__ == "__main__":
    main()
