"""Command-line interface for appstorehub."""

import argparse
import asyncio
import json
import logging
import sys

from .core.config import settings
from .core.constants import Collection, FileConstants, LimitConstants, Sort, values_of
from .services.appstore import AppStoreService
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=FileConstants.LOG_FORMAT
    )


def _app_ref(args) -> dict:
    app_id = args.app
    if app_id.isdigit():
        return {"id": app_id}
    return {"app_id": app_id}


def build_call(args):
    """Map parsed arguments onto an (operation, params) pair."""
    common = {"country": args.country, "throttle": args.throttle}

    if args.command == 'app':
        operation = 'app_with_ratings' if args.ratings else 'app'
        return operation, {**_app_ref(args), "lang": args.lang, **common}
    if args.command == 'list':
        operation = 'list_apps_detailed' if args.full_detail else 'list_apps'
        params = {"collection": args.collection, "category": args.category, "num": args.num, **common}
        if args.full_detail:
            params["lang"] = args.lang
        return operation, params
    if args.command == 'search':
        operation = 'search_ids' if args.ids_only else 'search'
        return operation, {"term": args.term, "num": args.num, "page": args.page, "lang": args.lang, **common}
    if args.command == 'developer':
        return 'developer', {"dev_id": args.dev_id, "lang": args.lang, **common}
    if args.command == 'reviews':
        return 'reviews', {**_app_ref(args), "sort": args.sort, "page": args.page, **common}
    if args.command == 'similar':
        return 'similar', {**_app_ref(args), "lang": args.lang, **common}
    if args.command == 'suggest':
        return 'suggest', {"term": args.term, **common}
    if args.command in ('ratings', 'privacy', 'version-history'):
        operation = args.command.replace('-', '_')
        if getattr(args, 'api', False):
            operation += '_from_api'
        return operation, {"id": args.id, **common}
    raise ValueError(f"Unknown command {args.command}")


async def run_call(service: AppStoreService, operation: str, params: dict):
    return await getattr(service, operation)(**params)


def cmd_fetch(args):
    """Run one App Store operation and print or export the result."""
    operation, params = build_call(args)
    service = AppStoreService()
    result = asyncio.run(run_call(service, operation, params))
    payload = prepare_export(operation, params, result)

    if args.out:
        export_to_json(payload, args.out)
        print(f"Results exported to {args.out}")
    else:
        print(json.dumps(payload["result"], indent=2, ensure_ascii=False))


def _add_common(parser, lang=True):
    parser.add_argument('--country', default=None, help='Two-letter storefront country code')
    parser.add_argument('--throttle', type=float, default=None, help='Maximum requests per second')
    parser.add_argument('--out', help='Output JSON file')
    if lang:
        parser.add_argument('--lang', default=None, help='Result language, e.g. en-us')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="appstorehub - App Store catalog, review and privacy data")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    app_parser = subparsers.add_parser('app', help='Fetch app details')
    app_parser.add_argument('app', help='Numeric app id or bundle id')
    app_parser.add_argument('--ratings', action='store_true', help='Include the ratings histogram')
    _add_common(app_parser)

    list_parser = subparsers.add_parser('list', help='Fetch a top chart')
    list_parser.add_argument('--collection', default=Collection.TOP_FREE_IOS, choices=values_of(Collection))
    list_parser.add_argument('--category', type=int, default=None, help='Genre id')
    list_parser.add_argument('--num', type=int, default=LimitConstants.DEFAULT_LIST_NUM)
    list_parser.add_argument('--full-detail', action='store_true', help='Resolve entries to full app records')
    _add_common(list_parser)

    search_parser = subparsers.add_parser('search', help='Search apps')
    search_parser.add_argument('term', help='Search term')
    search_parser.add_argument('--num', type=int, default=LimitConstants.DEFAULT_SEARCH_NUM)
    search_parser.add_argument('--page', type=int, default=1)
    search_parser.add_argument('--ids-only', action='store_true', help='Return app ids only')
    _add_common(search_parser)

    developer_parser = subparsers.add_parser('developer', help='List apps by developer id')
    developer_parser.add_argument('dev_id', help='Developer (artist) id')
    _add_common(developer_parser)

    reviews_parser = subparsers.add_parser('reviews', help='Fetch one page of reviews')
    reviews_parser.add_argument('app', help='Numeric app id or bundle id')
    reviews_parser.add_argument('--sort', default=Sort.RECENT, choices=values_of(Sort))
    reviews_parser.add_argument('--page', type=int, default=1)
    _add_common(reviews_parser, lang=False)

    similar_parser = subparsers.add_parser('similar', help='Fetch similar apps')
    similar_parser.add_argument('app', help='Numeric app id or bundle id')
    _add_common(similar_parser)

    suggest_parser = subparsers.add_parser('suggest', help='Search term suggestions')
    suggest_parser.add_argument('term', help='Partial search term')
    _add_common(suggest_parser, lang=False)

    ratings_parser = subparsers.add_parser('ratings', help='Ratings histogram')
    ratings_parser.add_argument('id', help='Numeric app id')
    _add_common(ratings_parser, lang=False)

    for name, help_text in (('privacy', 'Privacy labels'), ('version-history', 'Version history')):
        page_parser = subparsers.add_parser(name, help=help_text)
        page_parser.add_argument('id', help='Numeric app id')
        page_parser.add_argument('--api', action='store_true', help='Use the token-gated catalog API')
        _add_common(page_parser, lang=False)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        cmd_fetch(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
