"""CLI entrypoint for lecturelens: subcommand dispatcher."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from lecturelens.pipeline import AnalysisConfig


def _add_analyze_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the analyze subcommand."""
    parser.add_argument("media", help="Lecture recording (video or audio file).")
    parser.add_argument("--transcript", type=Path, default=None,
                        help="Transcript JSON file (default: built-in sample lecture)")
    parser.add_argument("--output-dir", default="./lecturelens-output",
                        help="Output directory (default: ./lecturelens-output)")
    parser.add_argument("--silence-threshold", type=float, default=0.02,
                        help="Frame RMS below which audio counts as silent (default: 0.02)")
    parser.add_argument("--min-silence", type=float, default=0.5,
                        help="Shortest silence to report, seconds (default: 0.5)")
    parser.add_argument("--segment-size", type=int, default=3,
                        help="Sentences per concept density segment (default: 3)")
    parser.add_argument("--summary-sentences", type=int, default=5,
                        help="Max sentences in the summary (default: 5)")
    parser.add_argument("--sample-rate", type=int, default=44100,
                        help="Sample rate for audio decoded from video (default: 44100)")
    parser.add_argument("--workers", type=int, default=4,
                        help="Analyzer worker threads (default: 4)")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for the sample transcript's confidences")
    parser.add_argument("--no-cache", action="store_true", default=False,
                        help="Disable caching of audio decoded from video")


def _add_export_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the export subcommand."""
    parser.add_argument("transcript", type=Path, help="Transcript JSON file.")
    parser.add_argument("--exam", action="store_true", default=False,
                        help="Export only exam-relevant sentences")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="lecturelens",
        description="Silence, importance and concept density analysis for recorded lectures",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log debug detail")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze a lecture recording",
        description="Detect silence, flag important sentences, score concept density and summarize",
    )
    _add_analyze_args(analyze_parser)

    export_parser = subparsers.add_parser(
        "export",
        help="Print a transcript as [MM:SS] lines",
        description="Render a transcript in the plain-text download format",
    )
    _add_export_args(export_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _load_transcript_or_sample(path: Path | None, seed: int | None):
    from lecturelens.transcript import load_transcript, sample_transcript

    if path is None:
        logging.getLogger("lecturelens").info("No transcript given, using the sample lecture")
        return sample_transcript(seed=seed)
    return load_transcript(path)


def _run_analyze(args: argparse.Namespace) -> None:
    """Run the analysis pipeline and write its artifacts."""
    from lecturelens.pipeline import analyze_file
    from lecturelens.transcript import export_transcript_text, transcript_to_dicts

    media = Path(args.media)
    if not media.exists():
        _fail(f"file not found: {media}")

    config = AnalysisConfig(
        silence_threshold=args.silence_threshold,
        min_silence_duration=args.min_silence,
        segment_size=args.segment_size,
        summary_sentences=args.summary_sentences,
        max_workers=args.workers,
        sample_rate=args.sample_rate,
    )

    try:
        transcript = _load_transcript_or_sample(args.transcript, args.seed)
        result = analyze_file(media, transcript, config, use_cache=not args.no_cache)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired):
        _fail(f"could not decode audio from {media}")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    analysis = result.to_dict()
    analysis["transcript"] = transcript_to_dicts(transcript)
    (output_dir / "analysis.json").write_text(json.dumps(analysis, indent=2), encoding="utf-8")
    (output_dir / "transcript.txt").write_text(
        export_transcript_text(transcript) + "\n", encoding="utf-8",
    )

    stats = result.stats
    print(f"Duration: {result.duration:.1f}s ({stats.silence_pct}% silence)")
    print(f"Silence intervals: {len(result.silence)}")
    print(f"Important sentences: {len(result.important)} of {len(transcript)}")
    print(f"Density segments: {len(result.density)}")
    print(f"Summary: {result.summary}")
    print(f"Output:")
    print(f"  {output_dir / 'analysis.json'}")
    print(f"  {output_dir / 'transcript.txt'}")


def _run_export(args: argparse.Namespace) -> None:
    """Print a transcript in the download format."""
    from lecturelens.exam import filter_exam_relevant
    from lecturelens.importance import identify_important
    from lecturelens.transcript import export_transcript_text, load_transcript

    try:
        transcript = load_transcript(args.transcript)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    if args.exam:
        transcript = filter_exam_relevant(transcript, identify_important(transcript))

    print(export_transcript_text(transcript))


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    if args.command == "analyze":
        _run_analyze(args)
    elif args.command == "export":
        _run_export(args)


if __name__ == "__main__":
    main()
