import argparse
import json
import sys
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from youtube_transcript.core.errors import TranscriptError
from youtube_transcript.models.transcript import TranscriptSegment
from youtube_transcript.transcript import fetch_transcript

console = Console()

def format_time(seconds: float) -> str:
    if seconds != seconds:
        return "--:--"
    m, s = divmod(int(seconds), 60)
    h, m = divmod(m, 60)
    if h > 0:
        return f"{h:02d}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"

def to_text(segments: List[TranscriptSegment]) -> str:
    return "\n".join(f"[{format_time(seg.offset)}] {seg.text}" for seg in segments)

def render_table(video: str, segments: List[TranscriptSegment]):
    table = Table(title=f"Transcript: {video} ({segments[0].lang})", show_header=True, header_style="bold magenta")
    table.add_column("Start", style="cyan", width=10)
    table.add_column("Duration", style="dim", width=10)
    table.add_column("Text", style="white")
    for seg in segments:
        table.add_row(format_time(seg.offset), f"{seg.duration:.2f}s", escape(seg.text))
    console.print(table)

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Fetch the captions of a YouTube video")
    parser.add_argument("video", help="Video URL or 11-character video ID")
    parser.add_argument("--lang", help="Caption language code (e.g. en, fr)")
    parser.add_argument("--format", dest="fmt", choices=["table", "json", "text"], default="table",
                        help="Output format (default: table)")
    args = parser.parse_args(argv)

    video = args.video.strip().strip('`').strip('"').strip("'").strip()

    try:
        segments = fetch_transcript(video, lang=args.lang)
    except TranscriptError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    if args.fmt == "json":
        print(json.dumps([seg.model_dump() for seg in segments], ensure_ascii=False, indent=2))
    elif args.fmt == "text":
        print(to_text(segments))
    else:
        render_table(video, segments)

if __name__ == "__main__":
    main()
