# main.py
# 실행: tweetcluster -q KEYWORDS   (또는 python -m tweetcluster.main -q KEYWORDS)

import argparse
import sys

from tweetcluster.api.base_client import TwitterAPIError
from tweetcluster.api.twitter_search_client import TwitterSearchClient
from tweetcluster.config import (
    SEARCH_COUNT,
    SIMILARITY_THRESHOLD,
    TWITTER_BEARER_TOKEN,
    TWITTER_KEY,
    TWITTER_SECRET,
)
from tweetcluster.pipeline import run_search_pipeline
from tweetcluster.processors.similarity import DimensionMismatchError

def build_parser():
    parser = argparse.ArgumentParser(
        prog="tweetcluster",
        description="Search tweets and group similar ones by content.",
    )
    parser.add_argument("-q", "--query", required=True, help="search strings")
    parser.add_argument("--key", default=TWITTER_KEY, help="Twitter API Key")
    parser.add_argument("--secret", default=TWITTER_SECRET, help="Twitter API Secret")
    parser.add_argument("--bearer-token", default=TWITTER_BEARER_TOKEN, help="Twitter API bearer token")
    parser.add_argument("--threshold", type=float, default=SIMILARITY_THRESHOLD,
                        help="cosine similarity a tweet must exceed to join a cluster")
    parser.add_argument("--count", type=int, default=SEARCH_COUNT, help="tweets per search")
    parser.add_argument("--save-csv", action="store_true", help="also save clusters as CSV")
    return parser


def build_client(args):
    # key/secret이 있으면 bearer token을 새로 발급받는다
    if args.key or args.secret:
        return TwitterSearchClient.from_credentials(args.key, args.secret)
    return TwitterSearchClient(args.bearer_token)


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        client = build_client(args)
        run_search_pipeline(
            args.query,
            client,
            threshold=args.threshold,
            save_csv=args.save_csv,
            count=args.count,
        )
    except (TwitterAPIError, DimensionMismatchError, ValueError) as e:
        print(f"!!! [{args.query}] pipeline failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
