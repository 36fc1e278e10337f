"""
cps-request - Build a CPS request from the command line

Prints the XML document of the request, or sends it to a server with --url
and prints the raw answer.
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from CPS.Client.Command import Command
from CPS.Client.Config import Config
from CPS.Client.HTTP.Client import Client
from CPS.Client.Logger import Logger
from CPS.Client.Request import (
    AlternativesRequest,
    BeginTransactionRequest,
    CommitTransactionRequest,
    DeleteRequest,
    InsertRequest,
    ListFacetsRequest,
    ListFirstRequest,
    ListLastRequest,
    ListPathsRequest,
    ListWordsRequest,
    LookupRequest,
    PartialReplaceRequest,
    ReplaceRequest,
    Request,
    RetrieveFirstRequest,
    RetrieveLastRequest,
    RetrieveRequest,
    RollbackTransactionRequest,
    SQLSearchRequest,
    SearchDeleteRequest,
    SearchRequest,
    ShowHistoryRequest,
    SimilarDocumentsRequest,
    SimilarTextRequest,
    StatusRequest,
    UpdateRequest,
)
from CPS.Client.Version import VERSION


def _listing_policy(pairs: Optional[List[str]]) -> Optional[Dict[str, str]]:
    """Turn 'path=value' pairs into a listing policy."""
    if not pairs:
        return None
    policy = {}
    for pair in pairs:
        path, _, value = pair.partition('=')
        policy[path] = value or 'yes'
    return policy


def _one_or_many(values: Optional[List[str]]) -> Any:
    if not values:
        return None
    return values[0] if len(values) == 1 else values


def _similar(args: argparse.Namespace, **params: Any) -> Request:
    if args.text is not None:
        return SimilarTextRequest(args.text, args.len, args.quota,
                                  args.offset, args.docs, args.query, **params)
    return SimilarDocumentsRequest(_one_or_many(args.id), args.len, args.quota,
                                   args.offset, args.docs, args.query, **params)


def _search(args: argparse.Namespace, **params: Any) -> Request:
    if args.sql is not None:
        return SQLSearchRequest(args.sql, **params)
    return SearchRequest(args.query, args.offset, args.docs,
                         _listing_policy(args.list), **params)


BUILDERS: Dict[str, Callable[..., Request]] = {
    Command.SEARCH: _search,
    Command.SEARCH_DELETE: lambda a, **p: SearchDeleteRequest(a.query, **p),
    Command.ALTERNATIVES: lambda a, **p: AlternativesRequest(a.query, a.cr, a.idif, a.h, **p),
    Command.LIST_WORDS: lambda a, **p: ListWordsRequest(a.query, **p),
    Command.INSERT: lambda a, **p: InsertRequest(a.document, **p),
    Command.UPDATE: lambda a, **p: UpdateRequest(a.document, **p),
    Command.REPLACE: lambda a, **p: ReplaceRequest(a.document, **p),
    Command.PARTIAL_REPLACE: lambda a, **p: PartialReplaceRequest(a.document, **p),
    Command.DELETE: lambda a, **p: DeleteRequest(_one_or_many(a.id), **p),
    Command.STATUS: lambda a, **p: StatusRequest(**p),
    Command.RETRIEVE: lambda a, **p: RetrieveRequest(_one_or_many(a.id), **p),
    Command.LOOKUP: lambda a, **p: LookupRequest(_one_or_many(a.id), _listing_policy(a.list), **p),
    Command.LIST_LAST: lambda a, **p: ListLastRequest(_listing_policy(a.list), a.offset, a.docs, **p),
    Command.LIST_FIRST: lambda a, **p: ListFirstRequest(_listing_policy(a.list), a.offset, a.docs, **p),
    Command.RETRIEVE_LAST: lambda a, **p: RetrieveLastRequest(a.offset, a.docs, **p),
    Command.RETRIEVE_FIRST: lambda a, **p: RetrieveFirstRequest(a.offset, a.docs, **p),
    Command.LIST_PATHS: lambda a, **p: ListPathsRequest(**p),
    Command.LIST_FACETS: lambda a, **p: ListFacetsRequest(_one_or_many(a.path), **p),
    Command.SIMILAR: _similar,
    Command.SHOW_HISTORY: lambda a, **p: ShowHistoryRequest(_one_or_many(a.id), a.return_docs, **p),
    Command.BEGIN_TRANSACTION: lambda a, **p: BeginTransactionRequest(**p),
    Command.COMMIT_TRANSACTION: lambda a, **p: CommitTransactionRequest(**p),
    Command.ROLLBACK_TRANSACTION: lambda a, **p: RollbackTransactionRequest(**p),
}


def build_request(args: argparse.Namespace, **params: Any) -> Request:
    """Build the request described by the parsed command line."""
    return BUILDERS[Command(args.command)](args, **params)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cps-request',
        description='Build a CPS request, print it or send it to a server',
    )
    parser.add_argument('-c', '--command', default=Command.SEARCH.value,
                        choices=[command.value for command in Command],
                        help='request command (default: search)')
    parser.add_argument('-q', '--query', help='query string')
    parser.add_argument('--sql', help='SQL-like query string, for search')
    parser.add_argument('--offset', type=int, help='number of results to skip')
    parser.add_argument('--docs', type=int, help='number of documents to return')
    parser.add_argument('--list', action='append', metavar='PATH=VALUE',
                        help='listing policy entry, may be repeated')
    parser.add_argument('--id', action='append', help='document id, may be repeated')
    parser.add_argument('--document', action='append',
                        help='XML document, may be repeated')
    parser.add_argument('--path', action='append', help='facet path, may be repeated')
    parser.add_argument('--text', help='text to find similar documents to')
    parser.add_argument('--len', type=int, help='number of keywords to extract')
    parser.add_argument('--quota', type=int, help='minimum number of matching keywords')
    parser.add_argument('--cr', type=float, help='alternatives occurrence ratio')
    parser.add_argument('--idif', type=float, help='alternatives difference limit')
    parser.add_argument('--h', type=float, help='alternatives quality limit')
    parser.add_argument('--return-docs', action='store_true',
                        help='return historical document contents, for show-history')
    parser.add_argument('-u', '--url', help='send the request to this server URL')
    parser.add_argument('--conf-file', help='configuration file')
    parser.add_argument('--timeout', type=int, help='connection timeout in seconds')
    parser.add_argument('-P', '--proxy', help='use proxy (http://proxy:port)')
    parser.add_argument('--no-ssl-check', action='store_true', help='disable SSL check')
    parser.add_argument('--debug', action='count', default=0, help='debug mode, may be repeated')
    parser.add_argument('--version', action='version', version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(options={
            'conf-file': args.conf_file,
            'server': args.url,
            'timeout': args.timeout,
            'proxy': args.proxy,
            'no-ssl-check': args.no_ssl_check or None,
            'debug': args.debug or None,
        })
    except (RuntimeError, OSError) as e:
        print(f"cps-request: {e}", file=sys.stderr)
        return 2

    if args.docs is None:
        args.docs = config['docs']

    logger = Logger(config=config)
    request = build_request(args, logger=logger)

    if not config['server']:
        print(request.getContent())
        return 0

    try:
        client = Client(config=config, logger=logger)
    except ValueError as e:
        print(f"cps-request: {e}", file=sys.stderr)
        return 2

    with client:
        answer = client.send(request)

    if answer is None:
        return 1

    print(answer)
    return 0


if __name__ == '__main__':
    sys.exit(main())
