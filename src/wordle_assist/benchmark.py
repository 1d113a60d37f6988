#!/usr/bin/env python3
"""benchmark.py

Runs the solver against every word of a dictionary (self-play) and prints
summary statistics. Optionally writes a matplotlib graph to disk.

Examples:
  wordle-assist-bench --limit 200
  wordle-assist-bench --words my_words.txt --processes 8 --plot results.png

Notes:
- Each game is independent, so games are spread over worker processes.
- Use --plot to require matplotlib (pip install wordle-assist[plot]).
"""

from __future__ import annotations

import argparse
import statistics
import sys
from collections import Counter
from multiprocessing import Pool
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import tqdm

from .errors import InvalidWord
from .simulation import GameResult, simulate_game
from .words import DEFAULT_WORDS_PATH, Word, load_words, load_words_from_file

LogFn = Callable[[str], None]

# Data for workers is stored here, set once per process by _init_worker().
_WORKER_PERSISTENT: Dict[str, object] = {}


def _init_worker(words_text: str, max_turns: Optional[int]) -> None:
    _WORKER_PERSISTENT["words"] = load_words(words_text)
    _WORKER_PERSISTENT["max_turns"] = max_turns


def _simulate_one(item: Tuple[int, str]) -> Tuple[int, GameResult]:
    """Play one game in a worker. Returns (index, result) so order can be restored."""
    index, secret = item
    words = _WORKER_PERSISTENT["words"]
    max_turns = _WORKER_PERSISTENT["max_turns"]
    return index, simulate_game(Word.from_text(secret), words, max_turns=max_turns)  # type: ignore[arg-type]


def _iter_progress(iterable, *, enabled: bool, total: int, desc: str, unit: str):
    if enabled:
        return tqdm.tqdm(iterable, total=total, desc=desc, unit=unit)
    return iterable


def run_batch(
    secrets: Sequence[Word],
    words: Sequence[Word],
    *,
    processes: Optional[int] = None,
    max_turns: Optional[int] = None,
    show_progress: bool = True,
) -> List[GameResult]:
    """Play one game per secret and return the results in the order of `secrets`.

    processes=1 plays everything in this process; anything else uses a
    multiprocessing Pool (None = one worker per CPU).
    """
    if processes == 1 or len(secrets) < 2:
        return [
            simulate_game(secret, words, max_turns=max_turns)
            for secret in _iter_progress(
                secrets, enabled=show_progress, total=len(secrets), desc="Simulating", unit="game"
            )
        ]

    words_text = "\n".join(map(str, words))
    items = [(i, str(secret)) for i, secret in enumerate(secrets)]
    results: List[Optional[GameResult]] = [None] * len(items)
    with Pool(processes=processes, initializer=_init_worker, initargs=(words_text, max_turns)) as pool:
        done = pool.imap_unordered(_simulate_one, items, chunksize=16)
        for index, result in _iter_progress(
            done, enabled=show_progress, total=len(items), desc="Simulating", unit="game"
        ):
            results[index] = result
    return results  # type: ignore[return-value]


def summarize(results: Iterable[GameResult]) -> str:
    results = list(results)
    if not results:
        return "No results."

    solved = [r for r in results if r.solved]
    failed = [r for r in results if not r.solved]
    contradictions = [r for r in failed if r.contradiction]

    dist = Counter(r.turns for r in solved)
    first_guess_counts = Counter(r.first_guess for r in results if r.first_guess)

    lines: List[str] = []
    lines.append(f"Games: {len(results)}")
    lines.append(f"Solved: {len(solved)} ({len(solved) / len(results) * 100:.2f}%)")
    lines.append(f"Failed: {len(failed)} ({len(failed) / len(results) * 100:.2f}%)")
    if contradictions:
        lines.append(f"Ran out of candidates: {len(contradictions)}")

    if solved:
        turns_list = [r.turns for r in solved]
        lines.append(f"Avg turns (solved): {statistics.mean(turns_list):.3f}")
        lines.append(f"Median turns (solved): {statistics.median(turns_list):.1f}")
        lines.append(f"Max turns (solved): {max(turns_list)}")
        lines.append("Turn distribution (solved): " + ", ".join(f"{t}:{dist[t]}" for t in sorted(dist)))

    if first_guess_counts:
        (top_guess, top_count) = first_guess_counts.most_common(1)[0]
        lines.append(f"Most common first guess: {top_guess} ({top_count} / {len(results)})")

    if failed:
        examples = ", ".join(r.secret for r in failed[:10])
        lines.append(f"Failed examples (up to 10): {examples}")

    return "\n".join(lines)


def plot_results(*, results: List[GameResult], out_path: str) -> None:
    # Import matplotlib only if plotting is requested.
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    total = len(results)
    solved = [r for r in results if r.solved]
    failed = [r for r in results if not r.solved]

    solved_counts = Counter(r.turns for r in solved)

    max_turns = max(solved_counts, default=1)
    xs = list(range(1, max_turns + 1))
    ys = [solved_counts.get(t, 0) for t in xs]

    fail_x = max_turns + 1
    fail_y = len(failed)

    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.bar(xs, ys, label="Solved", color="C0")
    ax.bar([fail_x], [fail_y], label="Failed", color="C3")

    ax.set_title("Wordle self-play results")
    ax.set_xlabel("Turns to solve")
    ax.set_ylabel("# games")
    ax.set_xticks(xs + [fail_x])
    ax.set_xticklabels([str(t) for t in xs] + ["fail"])

    solved_pct = (len(solved) / total * 100.0) if total else 0.0
    ax.text(
        0.99,
        0.95,
        f"Solved: {len(solved)}/{total} ({solved_pct:.1f}%)",
        transform=ax.transAxes,
        ha="right",
        va="top",
    )

    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def select_secrets(
    secrets: Sequence[Word],
    words: Sequence[Word],
    *,
    limit: int = 0,
    log: Optional[LogFn] = None,
) -> List[Word]:
    """Drop secrets the dictionary doesn't contain (they can't be solved) and apply limit."""
    known = set(words)
    selected = [s for s in secrets if s in known]
    skipped = len(secrets) - len(selected)
    if skipped and log is not None:
        log(f"Skipped {skipped} secrets not in the dictionary.")
    if limit and limit > 0:
        selected = selected[:limit]
    return selected


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run solver self-play over a dictionary and print statistics.")
    ap.add_argument(
        "--words",
        type=str,
        default=None,
        help="Dictionary (5-letter words, whitespace separated). Defaults to the bundled answer list.",
    )
    ap.add_argument("--secrets", type=str, default=None, help="Secrets to test (defaults to the whole dictionary).")
    ap.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    ap.add_argument("--max-turns", type=int, default=0, help="Give up after this many turns (0 = play to the end).")
    ap.add_argument("--processes", type=int, default=None, help="Worker processes (default: one per CPU, 1 = serial).")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    ap.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path (e.g. results.png).")
    args = ap.parse_args(argv)

    if args.max_turns < 0:
        ap.error("--max-turns must be 0 (no limit) or positive")
    if args.processes is not None and args.processes < 1:
        ap.error("--processes must be at least 1")

    try:
        words = load_words_from_file(args.words or DEFAULT_WORDS_PATH)
        secrets = load_words_from_file(args.secrets) if args.secrets else words
    except OSError as e:
        print(f"Failed to read word list: {e}", file=sys.stderr)
        return 2
    except InvalidWord as e:
        print(f"Malformed word list: {e}", file=sys.stderr)
        return 2

    if not words:
        print("Loaded 0 words.", file=sys.stderr)
        return 2

    secrets = select_secrets(secrets, words, limit=args.limit, log=print)

    results = run_batch(
        secrets,
        words,
        processes=args.processes,
        max_turns=args.max_turns or None,
        show_progress=not args.no_progress,
    )

    print(summarize(results))

    if args.plot:
        try:
            plot_results(results=results, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
