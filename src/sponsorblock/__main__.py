import argparse
import asyncio
import logging
import sys

import dotenv
dotenv.load_dotenv()

from sponsorblock import errors, hashing, types as t, util
from sponsorblock.options import Options


def _video_arg(raw: str) -> str:
    return util.extract_video_id(raw) or raw


def _print_segments(segments: list[t.Segment]):
    if not segments:
        print("No segments.")
    for s in segments:
        print(f"[{s.start_time:.1f}-{s.end_time:.1f}] {s.category} {s.uuid or ''}".rstrip())


async def _run(args, options: Options):
    from sponsorblock import api

    async with api.SponsorBlock(args.user_id, options) as sb:
        if args.command == "segments":
            video_id = _video_arg(args.video)
            if args.private:
                segments = await sb.get_segments_privately(video_id, args.category)
            else:
                segments = await sb.get_segments(video_id, args.category)
            _print_segments(segments)

        elif args.command == "locks":
            video_id = _video_arg(args.video)
            if args.private:
                categories = await sb.get_lock_categories_privately(video_id)
            else:
                categories = await sb.get_lock_categories(video_id)
            print(", ".join(categories) or "No locked categories.")

        elif args.command == "stats":
            stats = await sb.get_overall_stats()
            days = await sb.get_days_saved()
            print(f"Users: {stats.user_count}")
            print(f"Views: {stats.view_count}")
            print(f"Submissions: {stats.total_submissions}")
            print(f"Minutes saved: {stats.minutes_saved:.0f} ({days:.2f} days)")

        elif args.command == "top":
            for i, u in enumerate(await sb.get_top_users(args.sort), start=1):
                print(f"{i:3d}. {u.user_name}  views={u.view_count}  submissions={u.total_submissions}  minutes={u.minutes_saved:.1f}")


def main():
    parser = argparse.ArgumentParser(prog="sponsorblock")
    parser.add_argument("--user-id", default="sponsorblock-py-cli", help="Local user id sent with requests")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every request")
    sub = parser.add_subparsers(dest="command")

    p_segments = sub.add_parser("segments", help="List skip segments for a video")
    p_segments.add_argument("video", help="Video id or YouTube URL")
    p_segments.add_argument("--category", "-c", action="append", choices=t.CATEGORIES)
    p_segments.add_argument("--private", action="store_true", help="Query by hash prefix instead of video id")

    p_locks = sub.add_parser("locks", help="List locked categories for a video")
    p_locks.add_argument("video")
    p_locks.add_argument("--private", action="store_true")

    sub.add_parser("stats", help="Show overall service stats")

    p_top = sub.add_parser("top", help="Show top users")
    p_top.add_argument("--sort", default="minutesSaved", choices=[s.name for s in t.SortType])

    p_prefix = sub.add_parser("hash-prefix", help="Print the hash prefix sent for a video")
    p_prefix.add_argument("video")
    p_prefix.add_argument("--length", type=int, default=None)

    p_hashed = sub.add_parser("hashed-id", help="Print the public (hashed) form of a user id")
    p_hashed.add_argument("user_id")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = Options.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.command == "hash-prefix":
        length = args.length if args.length is not None else options.hash_prefix_length
        try:
            print(hashing.hash_prefix(_video_arg(args.video), length))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            sys.exit(1)

    elif args.command == "hashed-id":
        print(hashing.hashed_user_id(args.user_id))

    elif args.command in ("segments", "locks", "stats", "top"):
        try:
            asyncio.run(_run(args, options))
        except errors.SponsorBlockError as exc:
            print(exc, file=sys.stderr)
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
