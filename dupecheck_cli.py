import signal
import os
import sys
import time
import argparse
from typing import Dict, List, Optional
from tqdm import tqdm
from dupecheck.core import DuplicateIndex, ScanAborted, traverse_dir_recursively

stop_requested_by_user: bool = False

def signal_handler(signum, frame):
    global stop_requested_by_user
    if not stop_requested_by_user: # Print message only once
        print("\nCtrl+C detected. Stopping scan...", file=sys.stderr)
    stop_requested_by_user = True

def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="dupecheck: find files with identical content in a directory tree.")
    parser.add_argument("-p", "--path", type=str, default="", help="The directory to traverse searching for duplicates (default: current directory).")
    parser.add_argument("--skip-errors", action="store_true", help="Skip unreadable files and directories instead of aborting the scan.")
    parser.add_argument("--timeout", type=float, default=None, metavar="SECONDS", help="Abort the scan if it runs longer than this.")
    parser.add_argument("--no-progress", action="store_true", help="Do not show a progress bar.")
    return parser

def write_report(report: str) -> None:
    # Paths that are not valid in the stdout encoding are written back as the raw bytes they came from
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(report)
        return
    sys.stdout.flush()
    buffer.write(os.fsencode(report))
    buffer.flush()

def main(argv: Optional[List[str]] = None) -> int:
    global stop_requested_by_user
    stop_requested_by_user = False

    args = create_parser().parse_args(argv)
    scan_path = args.path or os.getcwd()
    deadline = time.monotonic() + args.timeout if args.timeout is not None else None

    def stop_requested() -> bool:
        if stop_requested_by_user:
            return True
        return deadline is not None and time.monotonic() > deadline

    errors: Optional[Dict[str, str]] = {} if args.skip_errors else None
    index = DuplicateIndex()

    previous_handler = signal.signal(signal.SIGINT, signal_handler)
    print(f"Scanning directory: {scan_path}", file=sys.stderr)
    try:
        with tqdm(desc="Scanning files", unit="file", disable=args.no_progress) as pbar:
            traverse_dir_recursively(index, scan_path, errors=errors, progress=pbar, stop_requested=stop_requested)
    except ScanAborted as e:
        print(f"Scan aborted: {e}", file=sys.stderr)
        return 130 if stop_requested_by_user else 1
    except OSError as e:
        print(f"Error while scanning {scan_path}: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print(f"Error while scanning {scan_path}: directory tree is too deep", file=sys.stderr)
        return 1
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    write_report(index.result())

    if errors:
        print(f"Skipped {len(errors)} path(s) because of errors:", file=sys.stderr)
        for path, message in errors.items():
            print(f"  {path}: {message}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
