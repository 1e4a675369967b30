#!/usr/bin/env python3
"""CLI helper to print opponent summaries from saved Team Stadium responses."""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from teamstadium import analysis
from teamstadium.aptitude import FRAME_COLUMNS
from teamstadium.labels import STRINGS, default_lang
from teamstadium.models import InvalidGradeError, UnknownCategoryError

logger = logging.getLogger("teamstadium.cli")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize Team Stadium opponent responses.")
    parser.add_argument(
        "paths",
        nargs="+",
        help="Decoded JSON response files ('-' reads one response from stdin)",
    )
    parser.add_argument(
        "--lang",
        choices=sorted(STRINGS),
        default=default_lang(),
        help="Label language (default: $TEAMSTADIUM_LANG or en)",
    )
    parser.add_argument(
        "--output",
        help="Optional path to write the per-slot aptitude table of post-selection responses as CSV.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped responses and team slots.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    failed = 0
    frames = []
    for path in args.paths:
        try:
            response = analysis.load_response(path)
            lines = analysis.analyze_response(response, lang=args.lang)
            if args.output:
                frames.append(analysis.response_frame(response, lang=args.lang))
        except (InvalidGradeError, UnknownCategoryError) as exc:
            logger.error("Could not analyze %s: %s", path, exc)
            failed += 1
            continue
        except (OSError, ValueError) as exc:
            # Covers undecodable bytes as well as malformed JSON.
            logger.error("Could not read %s: %s", path, exc)
            failed += 1
            continue
        # Emit a response's lines together once it is fully analyzed.
        if lines:
            print("\n".join(lines))
        else:
            logger.debug("%s is not an opponent listing; nothing to show", path)

    if args.output:
        non_empty = [frame for frame in frames if not frame.empty]
        if non_empty:
            df = pd.concat(non_empty, ignore_index=True)
        else:
            df = pd.DataFrame(columns=["opponent_name", *FRAME_COLUMNS])
        df.to_csv(args.output, index=False)
        logger.info("Wrote %d rows to %s", len(df), args.output)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
