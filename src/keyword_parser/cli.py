# src/keyword_parser/cli.py
import argparse
import json
import logging
import sys

from .utils import enable_topics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kwp",
        description="Split keyword input (e.g. +foo,-bar,+baz) into positive, negative and other.",
        epilog="Input starting with '-' must follow '--', e.g. kwp -- -youth,+hoodie",
    )
    parser.add_argument("input", help="Keyword string to parse (e.g. +hoodie,-youth)")
    parser.add_argument("--separator", default=None, help="Token separator (default ',')")
    parser.add_argument("--positive", default=None, help="Positive marker (default '+')")
    parser.add_argument("--negative", default=None, help="Negative marker (default '-')")
    parser.add_argument(
        "--retain-prefix",
        action="store_true",
        dest="retain_prefix",
        help="Keep markers on printed positive/negative keywords (product matching ignores them)",
    )
    parser.add_argument(
        "--product",
        action="append",
        default=[],
        dest="products",
        help="Product name to filter with the parsed keywords (repeatable)",
    )
    parser.add_argument(
        "--fuzzy-threshold",
        type=float,
        default=None,
        dest="fuzzy_threshold",
        help="Accept partial fuzzy matches at or above this score (0-100)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: parse a keyword string and print the buckets (plus product matches) as JSON."""
    from .parsing import KeywordParserError, Parser, Prefixes

    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
        enable_topics("all")

    try:
        prefixes = Prefixes.from_env(
            separator=args.separator,
            positive=args.positive,
            negative=args.negative,
        )
        parser = Parser(args.input, prefixes, retain_prefix=args.retain_prefix)
        result = parser.parse()._asdict()
        result = {name: list(tokens) for name, tokens in result.items()}
        if args.products:
            # matching always uses marker-free keywords
            result["matches"] = parser.match_products(
                args.products, fuzzy_threshold=args.fuzzy_threshold
            )
    except (KeywordParserError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
