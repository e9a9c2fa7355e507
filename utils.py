# --- utils.py ---

import time
import threading
import json
from colorama import Fore, Style, init
import os

init()

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def format_ladder(start, target, path, depth):
    """One-line summary of a search result; ``path`` is None when nothing was found."""
    if path is None:
        return f"{start} -> {target}: no ladder within {depth} steps"
    return f"{start} -> {target}: {depth} steps: {' '.join(path)}"

def log_result_to_file(record, log_file):
    """Append ``record`` as one JSON line to ``log_file``, creating its directory."""
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    record = dict(record)
    record.setdefault("timestamp", time.strftime('%Y-%m-%dT%H:%M:%S'))
    with open(log_file, 'a') as f:
        f.write(json.dumps(record) + "\n")
