import os
import json
from glob import glob
from colorama import Fore

from ladder import verify_path
from word import WordError, encode, MAX_LETTERS


def find_latest_log(logs_dir='logs'):
    files = glob(os.path.join(logs_dir, '*.jsonl'))
    if not files:
        raise FileNotFoundError('No ladder log files found.')
    return max(files, key=os.path.getmtime)


def load_log(log_path=None):
    """Return ``(records, log_path)``; lines that are not a JSON object come back as None."""
    if log_path is None:
        log_path = find_latest_log()
    records = []
    with open(log_path, 'r') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                record = None
            records.append(record if isinstance(record, dict) else None)
    return records, log_path


def check_record(record):
    """Return an error message for a bad record, or None if it replays cleanly."""
    if not record["found"]:
        return None
    path = record["path"]
    if path[0] != record["start"] or path[-1] != record["target"]:
        return "path does not join start and target"
    if record["depth"] != len(path) - 1:
        return f"depth {record['depth']} but {len(path) - 1} steps"
    cap = record.get("max_length") or MAX_LETTERS
    try:
        words = [encode(w) for w in path]
    except WordError as e:
        return str(e)
    if not verify_path(words, cap):
        return "consecutive words are not one edit apart"
    return None


def replay(records):
    """Print the status of every record; return the number of failures."""
    failures = 0
    for idx, record in enumerate(records, 1):
        if record is None:
            failures += 1
            print(f"{Fore.RED}#{idx}: unreadable log line (not a JSON object){Fore.RESET}")
            continue
        try:
            error = check_record(record)
        except (KeyError, TypeError, IndexError) as e:
            error = f"malformed record ({e})"
        label = f"#{idx}: {record.get('start')} -> {record.get('target')}"
        if error:
            failures += 1
            print(f"{Fore.RED}{label}: {error}{Fore.RESET}")
        elif record["found"]:
            print(f"{Fore.GREEN}{label}: {record['depth']} steps OK{Fore.RESET}")
        else:
            print(f"{Fore.YELLOW}{label}: no ladder within {record.get('max_depth')} steps{Fore.RESET}")
    return failures


if __name__ == '__main__':
    import argparse
    import sys
    parser = argparse.ArgumentParser(description='Replay and verify logged ladders.')
    parser.add_argument('--log', type=str, default=None, help='Path to ladder log (default: latest in logs/)')
    args = parser.parse_args()

    records, log_path = load_log(args.log)
    print(f"Loaded log: {log_path}")
    failures = replay(records)
    if failures:
        print(f"\n{Fore.RED}{failures} of {len(records)} record(s) failed verification{Fore.RESET}")
    else:
        print(f"\n{Fore.CYAN}All {len(records)} record(s) verified{Fore.RESET}")
    sys.exit(1 if failures else 0)
