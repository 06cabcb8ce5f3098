import argparse
import csv
import sys
from pathlib import Path

from summarylib.eventlog import read_scalar


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--logdir", type=str, required=True, help="Event log directory, e.g. logs/app/train")
    p.add_argument("--tags", type=str, nargs="+", required=True)
    p.add_argument("--out", type=str, default="-", help="CSV output path ('-' for stdout)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logdir = Path(args.logdir)
    assert logdir.is_dir(), f"log directory not found: {logdir}"

    out = sys.stdout if args.out == "-" else open(args.out, "w", newline="", encoding="utf-8")
    try:
        w = csv.writer(out)
        w.writerow(["tag", "step", "value", "wall_time"])
        for tag in args.tags:
            events = read_scalar(str(logdir), tag)
            if not events:
                print(f"no scalar events for tag {tag!r}", file=sys.stderr)
            for e in events:
                w.writerow([tag, e.step, e.value, e.wall_time])
    finally:
        if out is not sys.stdout:
            out.close()


if __name__ == "__main__":
    main()
