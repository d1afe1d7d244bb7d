"""Command line entry point for scaffolding a new blog post.

    new-post "Poisson rates and you" --date 2024-03-01 --posts-dir posts
"""

import argparse
import logging
import sys
from typing import List, Optional

from stats_errors import FileSystemError
from post_scaffolding.post_creator import PostConfig, create_post


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="new-post", description="Scaffold a new notebook post")
    parser.add_argument("topic", help="Post title; also used to build the directory slug")
    parser.add_argument("--date", default=None, help="Post date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--posts-dir", default="posts", help="Directory that holds the posts")
    parser.add_argument("--author", default=None, help="Author written into the front matter")
    parser.add_argument("--published", action="store_true", help="Write draft: false")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    overrides = {'posts_dir': args.posts_dir, 'draft': not args.published}
    if args.author:
        overrides['author'] = args.author
    config = PostConfig.from_dict(overrides)

    try:
        path = create_post(args.topic, args.date, config)
    except FileSystemError as exc:
        logger.error("%s", exc)
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
