"""
Command line entry point.

Usage:
    oauth_sign [-q|-b|-cc] <consumer_key> <consumer_key_secret> <token> <token_secret> <method> <url> [name=value ...]
"""

import sys
import logging
from argparse import ArgumentParser

from .errors import UsageError, SigningError
from .signer import Signer, HTTP_METHODS

logger = logging.getLogger("oauthsign")

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_SOFTWARE = 70

PROGRAM_NAME = "oauth_sign"


class SignArgumentParser(ArgumentParser):
    """Reports usage problems as UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def make_parser() -> SignArgumentParser:
    parser = SignArgumentParser(
        prog=PROGRAM_NAME,
        description="Sign an HTTP request with OAuth 1.0 HMAC-SHA1 (RFC 5849).")
    parser.add_argument(
        "-q",
        dest="query_mode",
        action="store_true",
        help="Print the signature as query-string suffix instead of an Authorization header.")
    parser.add_argument(
        "-b",
        dest="show_signature_base",
        action="store_true",
        help="Print the signature base string to stderr before the result.")
    parser.add_argument(
        "-cc",
        dest="show_curl",
        action="store_true",
        help="Also print a curl command which sends the signed request.")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr.")
    parser.add_argument("consumer_key")
    parser.add_argument("consumer_key_secret")
    parser.add_argument("token")
    parser.add_argument("token_secret")
    parser.add_argument("method")
    parser.add_argument("url")
    parser.add_argument("params", nargs="*", metavar="name=value")
    return parser


def check_method(method: str) -> str:
    method = method.upper()
    if method not in HTTP_METHODS:
        raise UsageError(f"method must be {', '.join(HTTP_METHODS[:-1])}, or {HTTP_METHODS[-1]}")
    return method


def run(args) -> str:
    """Sign the request described by the parsed arguments, return what is printed."""
    if args.query_mode and args.params:
        raise UsageError("-q doesn't work with extra POST parameters")
    if args.query_mode and args.show_curl:
        raise UsageError("-q doesn't work with -cc")
    method = check_method(args.method)

    signer = Signer(show_signature_base=args.show_signature_base)
    try:
        signer.set_consumer_key(args.consumer_key)
        signer.set_consumer_secret(args.consumer_key_secret)
        signer.set_token(args.token)
        signer.set_token_secret(args.token_secret)
        signer.set_http_method(method)
        signer.set_base_url(args.url)
        signer.set_request_params(args.params)
        if args.query_mode:
            return signer.query_suffix()
        result = signer.authorization_header()
        if args.show_curl:
            result += "\n" + signer.curl_command()
        return result
    finally:
        signer.destroy()


def main(argv=None) -> int:
    parser = make_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EX_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(asctime)s] [%(name)s] %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        result = run(args)
    except UsageError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        return EX_USAGE
    except SigningError as e:
        logger.debug(f"Signing failed: {e}")
        print(f"{PROGRAM_NAME}: signing failed: {e}", file=sys.stderr)
        return EX_SOFTWARE

    print(result)
    return EX_OK


if __name__ == "__main__":
    sys.exit(main())
