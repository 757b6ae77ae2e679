import argparse
import json
import sys

from ReleaseHub.config.config import get_output_indent, get_preferred_resolutions
from ReleaseHub.processors.media_type import get_media_type
from ReleaseHub.processors.preferred_stream import build_resolution_parser, group_by_resolution
from ReleaseHub.utils.logging_utils import log_error, log_message
from ReleaseHub.utils.parse_filename import parse_multiple_files
from ReleaseHub.utils.parser.grammar import build_parser


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Decompose release names into structured attributes.")
    parser.add_argument("names", nargs="+", help="Release names or path segments to parse")
    parser.add_argument("--path", action="store_true",
                        help="Treat each name as a '/'-separated path and merge its segments")
    parser.add_argument("--media-type", action="store_true",
                        help="Classify all names as the files of a single resource")
    prefer = parser.add_mutually_exclusive_group()
    prefer.add_argument("--prefer", metavar="RES[,RES]",
                        help="Print names ordered by the given comma-separated resolutions")
    prefer.add_argument("--prefer-default", action="store_true",
                        help="Print names ordered by the resolutions in PREFERRED_RESOLUTIONS")
    parser.add_argument("--workers", type=int, default=None, help="Number of parser threads")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    indent = args.indent if args.indent is not None else get_output_indent()

    if args.workers is not None and args.workers < 1:
        log_error(f"--workers must be positive, got {args.workers}")
        return 1

    if args.prefer is not None or args.prefer_default:
        if args.prefer_default:
            preferred = get_preferred_resolutions()
        else:
            preferred = [r.strip() for r in args.prefer.split(',') if r.strip()]
        if not preferred:
            log_error("--prefer needs at least one resolution")
            return 1
        log_message(f"Grouping {len(args.names)} names by resolution: {', '.join(preferred)}", level="DEBUG")
        streams = group_by_resolution(args.names, preferred, build_resolution_parser())
        print(json.dumps(streams, indent=indent, ensure_ascii=False))
        return 0

    grammar = build_parser()
    infos = parse_multiple_files(grammar, args.names, as_paths=args.path, max_workers=args.workers)

    if args.media_type:
        media_type = get_media_type(infos)
        log_message(f"Got media type {media_type.value} for {len(infos)} items", level="INFO")
        print(json.dumps({"media_type": media_type.value}, indent=indent))
        return 0

    if len(infos) == 1:
        output = infos[0].to_dict()
    else:
        output = [info.to_dict() for info in infos]
    print(json.dumps(output, indent=indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
