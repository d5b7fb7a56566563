# profiling/profile_find.py
"""
Small profiling harness for Trie.insert / Trie.find.
Usage:
  python -m weighted_trie.profiling.profile_find --words 20000 --iters 1000 --order desc

Builds a synthetic keyword set, times bulk insertion, then prints
mean/median/p90/max latency of prefix lookups as a rich table.
"""
import argparse
import math
import random
import statistics
import string
import time
from typing import Dict, List, Sequence

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from weighted_trie.core.trie import Trie
from weighted_trie.utils.config_manager import Config
from weighted_trie.utils.logger_utils import Log

console = Console()


def synthetic_keywords(n: int, seed: int = 7, min_len: int = 3, max_len: int = 10) -> List[tuple]:
    """(keyword, weight) pairs over a small alphabet so prefixes overlap a lot."""
    rng = random.Random(seed)
    alphabet = string.ascii_lowercase[:8]
    out = []
    for _ in range(n):
        k = "".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len)))
        out.append((k, rng.randint(-2, 100)))
    return out


def benchmark(trie: Trie, prefixes: Sequence[str], iterations: int = 200, order="ASC", seed: int = 7) -> List[float]:
    rng = random.Random(seed)
    times = []
    for _ in range(iterations):
        p = rng.choice(prefixes)
        t0 = time.perf_counter()
        trie.find(p, order)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times: Sequence[float]) -> Dict[str, float]:
    if not times:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "p90_ms": 0.0, "max_ms": 0.0}
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[math.ceil(9 * len(times_sorted) / 10) - 1],  # nearest rank
        "max_ms": times_sorted[-1],
    }


def render(summary: Dict[str, float], title: str = "find() latency") -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("stat", style="cyan")
    table.add_column("value", justify="right")
    for k, v in summary.items():
        table.add_row(k, f"{v:.4f}" if isinstance(v, float) else str(v))
    return table


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=20000, help="synthetic keywords to insert")
    parser.add_argument("--iters", type=int, default=500, help="measured find() calls")
    parser.add_argument("--order", type=str, default=None, help="asc/desc (defaults to config)")
    parser.add_argument("--config", type=str, default=None, help="optional config.json")
    args = parser.parse_args(argv)
    if args.words < 1:
        parser.error("--words must be at least 1")

    cfg = Config(args.config, autosave=False) if args.config else None
    trie = Trie.from_config(cfg) if cfg else Trie()
    log = Log(path=cfg.get("log_path") if cfg else None)

    entries = synthetic_keywords(args.words)
    with log.time_block(f"insert {len(entries)} keywords"):
        trie.insert_many(entries)
    log.info(f"trie holds {len(trie)} distinct keywords")

    prefixes = sorted({k[:n] for k, _ in entries[:200] for n in (1, 2, 3)})
    order = args.order or trie.default_order
    times = benchmark(trie, prefixes, iterations=args.iters, order=order)
    console.print(render(summarize(times)))
    sample = trie.find(prefixes[0], order, limit=5)
    console.print(f"[green]sample[/green] find({prefixes[0]!r}) -> {escape(str(sample))}")


if __name__ == "__main__":
    main()
