import argparse
import time
import utils
from utils import log_with_time, vlog, format_ladder
import os
from colorama import Fore
import concurrent.futures

from ladder import MAX_DEPTH, find_ladder, length_cap
from word import WordError, encode


DEFAULT_LOG_FILE = os.path.join("logs", "ladders.jsonl")

# Searched when no pairs are given on the command line
DEMO_PAIRS = [("sick", "true")]


def parse_pair_line(line):
    """Return ``(start, target)`` from a pairs-file line, or None for blanks and comments."""
    line = line.split("#", 1)[0].strip()
    if not line:
        return None
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        raise WordError(f"expected two words, got {line!r}")
    return parts[0], parts[1]


def load_pairs(path):
    pairs = []
    with open(path, "r") as f:
        for line in f:
            pair = parse_pair_line(line)
            if pair is not None:
                pairs.append(pair)
    return pairs


def validate_pairs(pairs, max_length=None):
    """Encode every pair up front so a bad word stops the run before any search."""
    for start, target in pairs:
        cap = length_cap(start, target, max_length)
        encode(start, cap)
        encode(target, cap)


def sort_pairs(pairs):
    """Shorter pairs first: their state spaces are smallest."""
    return sorted(pairs, key=lambda p: (max(len(p[0]), len(p[1])), len(p[0]) + len(p[1]), p[0], p[1]))


def _print_level(start, target):
    def on_level(depth, new_count, seen_count, found):
        status = " target reached" if found else ""
        log_with_time(f"{start} -> {target} depth {depth}: {new_count} new, {seen_count} seen{status}")
    return on_level


def solve_pair(start, target, max_length=None, max_depth=MAX_DEPTH, progress=False, verbose=None):
    """Run one search and return its result record.

    ``verbose`` carries the parent's flag into worker processes, which may not
    inherit module globals.
    """
    if verbose is not None:
        utils.VERBOSE = verbose
    t0 = time.time()
    on_level = _print_level(start, target) if progress else None
    result = find_ladder(start, target, max_length=max_length, max_depth=max_depth, on_level=on_level)
    return {
        "start": start,
        "target": target,
        "found": result is not None,
        "depth": result.depth if result else None,
        "path": result.path if result else None,
        "max_length": length_cap(start, target, max_length),
        "max_depth": max_depth,
        "elapsed": round(time.time() - t0, 3),
    }


def report(record, log_file=None):
    if record["found"]:
        msg = format_ladder(record["start"], record["target"], record["path"], record["depth"])
        log_with_time(msg, color=Fore.GREEN)
    else:
        msg = format_ladder(record["start"], record["target"], None, record["max_depth"])
        log_with_time(msg, color=Fore.YELLOW)
    vlog(f"{record['start']} -> {record['target']} took {record['elapsed']:.3f}s")
    if log_file:
        utils.log_result_to_file(record, log_file)


def run_pairs(pairs, max_length=None, max_depth=MAX_DEPTH, workers=1, log_file=None):
    """Search every pair, reporting each result as it completes."""
    records = []
    if workers <= 1:
        for start, target in pairs:
            record = solve_pair(start, target, max_length, max_depth, progress=True)
            report(record, log_file)
            records.append(record)
        return records

    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        future_to_pair = {
            executor.submit(solve_pair, start, target, max_length, max_depth, False, utils.VERBOSE): (start, target)
            for start, target in pairs
        }
        for future in concurrent.futures.as_completed(future_to_pair):
            record = future.result()
            report(record, log_file)
            records.append(record)
    return records


def build_parser():
    parser = argparse.ArgumentParser(description="Word ladder solver")
    parser.add_argument(
        "--pair", nargs=2, action="append", metavar=("START", "TARGET"), default=None,
        help="Word pair to search (repeatable)",
    )
    parser.add_argument("--pairs-file", type=str, default=None, help="File with one 'start target' pair per line")
    parser.add_argument(
        "--max-length", type=int, default=None,
        help="Longest word a ladder may pass through (default: longer word of each pair)",
    )
    parser.add_argument("--depth", type=int, default=MAX_DEPTH, help=f"Maximum number of steps to search (default: {MAX_DEPTH})")
    parser.add_argument("--workers", type=int, default=1, help="Number of pairs to search in parallel (default: 1)")
    parser.add_argument("--log-file", type=str, default=DEFAULT_LOG_FILE, help=f"Result log (default: {DEFAULT_LOG_FILE})")
    parser.add_argument("--no-log", action="store_true", help="Do not append results to the log file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def run_solver(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    pairs = []
    if args.pairs_file:
        try:
            pairs.extend(load_pairs(args.pairs_file))
        except FileNotFoundError:
            log_with_time(f"Could not find pairs file: {args.pairs_file}", color=Fore.RED)
            return 2
        except WordError as e:
            log_with_time(f"Invalid pairs file {args.pairs_file}: {e}", color=Fore.RED)
            return 2
    if args.pair:
        pairs.extend((start, target) for start, target in args.pair)
    if not pairs:
        pairs = list(DEMO_PAIRS)

    try:
        validate_pairs(pairs, args.max_length)
    except WordError as e:
        log_with_time(f"Invalid input: {e}", color=Fore.RED)
        return 2

    pairs = sort_pairs(pairs)
    log_with_time(f"Searching {len(pairs)} pair(s), depth limit {args.depth}", color=Fore.CYAN)
    log_file = None if args.no_log else args.log_file
    records = run_pairs(pairs, args.max_length, args.depth, args.workers, log_file)

    found = sum(1 for r in records if r["found"])
    total_elapsed = time.time() - utils.start_time
    color = Fore.GREEN if found == len(records) else Fore.YELLOW
    log_with_time(f"{found}/{len(records)} ladder(s) found in {total_elapsed:.2f}s", color=color)
    if log_file:
        log_with_time(f"Results appended to {log_file}", color=Fore.GREEN)
    return 0 if found == len(records) else 1
