"""Benchmark location-history lookups against a linear scan."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Late imports rely on the adjusted sys.path above.
from photo_geolocate.config import (  # noqa: E402
    BENCHMARK_DEFAULT_FIXES,
    BENCHMARK_DEFAULT_QUERIES,
)
from photo_geolocate.history import Fix, LocationHistory  # noqa: E402

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkSummary:
    """Timing measurements (in milliseconds) for one benchmark run."""

    fix_count: int
    query_count: int
    build_ms: float
    nearest_ms: float
    interpolate_ms: float
    linear_scan_ms: float

    @property
    def speedup(self) -> float:
        """Linear-scan time divided by indexed nearest-lookup time."""

        if self.nearest_ms <= 0.0:
            return float("inf")
        return self.linear_scan_ms / self.nearest_ms


def _build_fixes(fix_count: int, rng: np.random.Generator) -> List[Fix]:
    """Generate a random walk of fixes sampled every 10-120 seconds."""

    gaps_ms = rng.integers(10_000, 120_000, size=fix_count)
    timestamps = 1_500_000_000_000 + np.cumsum(gaps_ms)
    latitudes = 520_000_000 + np.cumsum(rng.integers(-2_000, 2_000, size=fix_count))
    longitudes = 11_000_000 + np.cumsum(rng.integers(-2_000, 2_000, size=fix_count))
    accuracies = rng.integers(5, 200, size=fix_count)
    return [
        Fix(
            timestamp_ms=int(timestamp),
            latitude_e7=int(latitude),
            longitude_e7=int(longitude),
            accuracy=int(accuracy),
        )
        for timestamp, latitude, longitude, accuracy in zip(
            timestamps, latitudes, longitudes, accuracies
        )
    ]


def _linear_nearest(fixes: Sequence[Fix], timestamp: int) -> Optional[Fix]:
    """Reference nearest lookup scanning every fix."""

    timestamp_ms = timestamp * 1000
    before: Optional[Fix] = None
    for fix in fixes:
        if fix.timestamp_ms == timestamp_ms:
            return fix
        if fix.timestamp_ms > timestamp_ms:
            if before is None:
                return None
            if timestamp_ms - before.timestamp_ms > fix.timestamp_ms - timestamp_ms:
                return fix
            return before
        before = fix
    return None


def run_benchmark(fix_count: int, query_count: int, seed: int = 7) -> BenchmarkSummary:
    """Time index construction and lookups for a synthetic history."""

    if fix_count < 2:
        raise ValueError("fix_count must be at least 2")
    if query_count <= 0:
        raise ValueError("query_count must be positive")

    rng = np.random.default_rng(seed)
    fixes = _build_fixes(fix_count, rng)

    start = time.perf_counter()
    history = LocationHistory(fixes)
    build = time.perf_counter() - start

    first_s = fixes[0].timestamp
    last_s = fixes[-1].timestamp
    queries = [int(q) for q in rng.integers(first_s, last_s, size=query_count)]

    start = time.perf_counter()
    nearest = [history.get_most_likely_location(q) for q in queries]
    nearest_dur = time.perf_counter() - start

    start = time.perf_counter()
    for query in queries:
        history.interpolate_location(query)
    interpolate_dur = time.perf_counter() - start

    # The scan is quadratic overall; sample it and scale to the full query count.
    scan_sample = queries[: max(1, min(len(queries), 200))]
    start = time.perf_counter()
    scanned = [_linear_nearest(history.fixes, q) for q in scan_sample]
    scan_dur = (time.perf_counter() - start) * len(queries) / len(scan_sample)

    if scanned != nearest[: len(scan_sample)]:
        raise RuntimeError("Indexed lookup disagrees with linear scan")

    return BenchmarkSummary(
        fix_count=len(history),
        query_count=query_count,
        build_ms=build * 1000.0,
        nearest_ms=nearest_dur * 1000.0,
        interpolate_ms=interpolate_dur * 1000.0,
        linear_scan_ms=scan_dur * 1000.0,
    )


def _format_summary(summary: BenchmarkSummary) -> Dict[str, float]:
    """Return a JSON-friendly representation of the benchmark summary."""

    return {
        "fix_count": summary.fix_count,
        "query_count": summary.query_count,
        "build_ms": summary.build_ms,
        "nearest_ms": summary.nearest_ms,
        "interpolate_ms": summary.interpolate_ms,
        "linear_scan_ms": summary.linear_scan_ms,
        "speedup": summary.speedup,
    }


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the benchmark utility."""

    parser = argparse.ArgumentParser(
        description="Benchmark location-history lookups on a synthetic history",
    )
    parser.add_argument(
        "--fixes",
        type=int,
        default=BENCHMARK_DEFAULT_FIXES,
        help="Number of fixes in the synthetic history",
    )
    parser.add_argument(
        "--queries",
        type=int,
        default=BENCHMARK_DEFAULT_QUERIES,
        help="Number of random in-range lookups per policy",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=7,
        help="Random seed for the synthetic history and queries",
    )
    return parser.parse_args()


def main() -> None:
    """Entry point when running the module as a script."""

    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.INFO,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )
    args = _parse_args()
    _LOG.info("Benchmarking %d fixes with %d queries", args.fixes, args.queries)
    summary = run_benchmark(args.fixes, args.queries, seed=args.seed)
    formatted = _format_summary(summary)
    for key, value in formatted.items():
        if key in {"fix_count", "query_count"}:
            print(f"{key}: {value}")
        else:
            print(f"{key}: {value:.3f}")
    _LOG.debug(
        "Mean per-lookup nearest time: %.4f ms",
        summary.nearest_ms / summary.query_count,
    )


if __name__ == "__main__":
    main()
