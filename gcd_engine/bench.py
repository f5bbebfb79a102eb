import argparse
import os
from datetime import datetime, timezone
from typing import NamedTuple

from gcd_engine import (
    get_algorithm,
    timed_gcd2_euclidean,
    timed_gcd2_stein,
)

# ---------------- CONFIG ----------------
TIMED_GCD2 = {
    "euclidean": timed_gcd2_euclidean,
    "stein": timed_gcd2_stein,
}
BENCH_ITERATIONS = int(os.getenv("GCD_BENCH_ITERATIONS", "100000"))
BENCH_ALGORITHMS = os.getenv("GCD_BENCH_ALGORITHMS", "euclidean,stein")


class BenchResult(NamedTuple):
    algorithm: str
    checksum: int
    elapsed_ns: int


# ---------------- HELPERS ----------------
def log(msg):
    print(f"[{datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')}] {msg}")

def parse_algorithms(value):
    names = [n.strip().lower() for n in value.split(",") if n.strip()]
    for name in names:
        get_algorithm(name) # raises InvalidArgumentError for unknown names
    return names

def make_pairs(count):
    # deterministic, never both zero
    return [((i * 17) % 10000 + 1, (i * 31) % 10000 + 1) for i in range(1, count + 1)]

# ---------------- BENCH ----------------
def run_benchmark(name, pairs):
    timed_gcd2 = TIMED_GCD2[name]
    checksum = 0
    elapsed_ns = 0
    for a, b in pairs:
        value, elapsed = timed_gcd2(a, b)
        checksum += value
        elapsed_ns += elapsed
    return BenchResult(name, checksum, elapsed_ns)

# ---------------- MAIN ----------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare GCD algorithms on deterministic pairs.")
    parser.add_argument("iterations", nargs="?", type=int, default=BENCH_ITERATIONS)
    parser.add_argument("--algorithms", default=BENCH_ALGORITHMS)
    args = parser.parse_args(argv)

    names = parse_algorithms(args.algorithms)
    pairs = make_pairs(args.iterations)
    log(f"Running {len(pairs)} GCDs with: {', '.join(names)}")

    results = []
    for name in names:
        res = run_benchmark(name, pairs)
        log(f"{name}: sum of GCDs = {res.checksum}, elapsed = {res.elapsed_ns / 1e6:.3f} ms")
        results.append(res)

    if len({r.checksum for r in results}) > 1:
        raise RuntimeError(f"Algorithms disagree: {results}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
