"""
CLI entry point for the OAuth 1.0 Mock Server.

Usage:
    python -m oauthsign.test.mock_server [--host HOST] [--port PORT]
"""

import argparse
from .server import run_server


def main():
    parser = argparse.ArgumentParser(
        description='OAuth 1.0 Mock Server for testing HMAC-SHA1 request signatures'
    )
    parser.add_argument(
        '--host',
        default='127.0.0.1',
        help='Host to bind to (default: 127.0.0.1)'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=8080,
        help='Port to bind to (default: 8080)'
    )
    args = parser.parse_args()

    print("=" * 70)
    print("OAuth 1.0 Mock Server")
    print("=" * 70)
    print()
    print("Test clients configured:")
    print("  • client_id: test-client")
    print("    secret:    test-secret")
    print("    token:     test-token / test-token-secret")
    print()
    print("Endpoints:")
    print(f"  • Update:    http://{args.host}:{args.port}/1/statuses/update.json (POST, signed)")
    print(f"  • Resource:  http://{args.host}:{args.port}/resource (GET, signed)")
    print(f"  • Public:    http://{args.host}:{args.port}/public")
    print()
    print("=" * 70)
    print()

    run_server(host=args.host, port=args.port)


if __name__ == '__main__':
    main()
