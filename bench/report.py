"""Turn run_bench.py CSVs into a per-message cost report.

One output row per (scenario, variant, n). Every op is reduced to the median
over non-warmup reps and then expressed in milliseconds per message, so the
"different" and "same" scenarios can be read side by side. Two derived
columns answer the questions the raw timings don't:

* ``hash_share``: fraction of ``verify_messages`` spent hashing, i.e.
  (verify_messages - verify) / verify_messages. Only the "different"
  scenario times verify_messages.
* ``agg_saving``: bytes saved by sending one aggregate instead of n
  signatures, 1 - 1/n.
"""

from __future__ import annotations

import argparse
import csv
import glob
import os
from collections import defaultdict
from statistics import median
from typing import Dict, Iterable, List, Optional, Tuple

PER_MESSAGE_OPS = ["keygen", "sign", "hash", "public_keys", "aggregate", "verify", "verify_messages"]
FIXED_OPS = ["serialize", "deserialize"]

Key = Tuple[str, str, int]


def load(paths: Iterable[str], include_warmup: bool = False) -> Dict[Key, Dict[str, List[int]]]:
    """(scenario, variant, n) -> op -> elapsed_ns samples."""
    samples: Dict[Key, Dict[str, List[int]]] = defaultdict(lambda: defaultdict(list))
    for path in paths:
        with open(path, newline="") as f:
            for d in csv.DictReader(f):
                if int(d["warmup"]) and not include_warmup:
                    continue
                key = (d["scenario"], d["variant"], int(d["n"]))
                samples[key][d["op"]].append(int(d["elapsed_ns"]))
    return samples


def _ms(ns: float) -> float:
    return round(ns / 1e6, 3)


def report_row(key: Key, ops: Dict[str, List[int]]) -> Dict[str, object]:
    scenario, variant, n = key
    med = {op: median(vals) for op, vals in ops.items() if vals}
    row: Dict[str, object] = {
        "scenario": scenario,
        "variant": variant,
        "n": n,
        "reps": min((len(v) for v in ops.values()), default=0),
    }
    for op in PER_MESSAGE_OPS:
        row[f"{op}_ms_per_msg"] = _ms(med[op] / n) if op in med else ""
    for op in FIXED_OPS:
        row[f"{op}_ms"] = _ms(med[op]) if op in med else ""

    hash_share: Optional[float] = None
    if "verify_messages" in med and "verify" in med and med["verify_messages"] > 0:
        hash_share = round((med["verify_messages"] - med["verify"]) / med["verify_messages"], 3)
    row["hash_share"] = "" if hash_share is None else hash_share
    row["agg_saving"] = round(1 - 1 / n, 3)
    return row


def fieldnames() -> List[str]:
    return (
        ["scenario", "variant", "n", "reps"]
        + [f"{op}_ms_per_msg" for op in PER_MESSAGE_OPS]
        + [f"{op}_ms" for op in FIXED_OPS]
        + ["hash_share", "agg_saving"]
    )


def _print(row: Dict[str, object]) -> None:
    print(f"{row['scenario']} messages, {row['variant']}, n={row['n']} ({row['reps']} reps)")
    for op in PER_MESSAGE_OPS:
        v = row[f"{op}_ms_per_msg"]
        if v != "":
            print(f"\t{op:<16} {v:.3f}ms per message")
    if row["hash_share"] != "":
        print(f"\thashing is {row['hash_share']:.0%} of verify_messages")


def main() -> None:
    ap = argparse.ArgumentParser(description="Per-message cost report over run_bench.py CSVs.")
    ap.add_argument("inputs", nargs="*", help="Input CSVs (default: bench/outputs/*.csv)")
    ap.add_argument("--out", default="bench/outputs/report.csv")
    ap.add_argument("--include-warmup", action="store_true")
    args = ap.parse_args()

    paths = args.inputs or sorted(glob.glob("bench/outputs/*.csv"))
    paths = [p for p in paths if os.path.abspath(p) != os.path.abspath(args.out)]
    if not paths:
        ap.error("no input CSVs")

    samples = load(paths, args.include_warmup)
    rows = [report_row(key, samples[key]) for key in sorted(samples)]

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.out, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames())
        w.writeheader()
        w.writerows(rows)

    for row in rows:
        _print(row)
    print(f"Wrote: {args.out} ({len(rows)} row(s) from {len(paths)} file(s))")


if __name__ == "__main__":
    main()
