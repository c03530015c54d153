"""
Command-line entry point.

    python -m ats_keywords job.txt resume.txt
    python -m ats_keywords job.txt resume.txt --score --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .matcher import analyze_keywords, match_job_resume
from .settings import load_settings, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ats_keywords",
        description="Match a resume against a job description with the deterministic ATS keyword engine.",
    )
    parser.add_argument("job_description", type=Path, help="Path to the job description text file")
    parser.add_argument("resume", type=Path, help="Path to the resume text file")
    parser.add_argument("--count", type=int, default=None, help="Keyword budget (derived from the JD by default; not allowed with --score)")
    parser.add_argument("--score", action="store_true", help="Print the full 0-100 ATS score instead of the keyword analysis")
    parser.add_argument("--log-level", default=None, help="Override ATS_LOG_LEVEL")
    return parser


def _read_text(parser: argparse.ArgumentParser, path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"cannot read {path}: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.score and args.count is not None:
        parser.error("--count cannot be combined with --score (the score always uses 20 keywords)")

    try:
        settings = load_settings(log_level=args.log_level)
    except ValidationError as e:
        parser.error(f"invalid log level: {e.errors()[0]['msg']}")
    setup_logging(settings)

    job_description = _read_text(parser, args.job_description)
    resume_text = _read_text(parser, args.resume)

    if args.score:
        result = match_job_resume(job_description, resume_text)
    else:
        result = analyze_keywords(job_description, resume_text, keyword_count=args.count)

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
