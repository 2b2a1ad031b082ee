#!/usr/bin/env python3
"""
Command line access to a few Flickr calls.

Usage:
    flickr-client echo foo=bar           # Round-trip parameters through flickr.test.echo
    flickr-client check-token            # Show who the configured token belongs to
    flickr-client find-place <query>     # Look up place IDs
    flickr-client find-place --lat 37.77 --lon -122.42

Credentials come from FLICKR_API_KEY, FLICKR_API_SECRET and FLICKR_TOKEN_FILE
(environment or .env).
"""
import argparse
import logging
import sys

from .client import FlickrClient
from .config import Config
from .diagnostics import DiagnosticsApi
from .exceptions import AuthenticationError, FlickrClientError, ServiceError
from .logger import StdoutLogger, logger
from .oauth import OAuthApi
from .places import PlacesApi


def echo(client: FlickrClient, pairs):
    """Echo key=value pairs."""
    params = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        params[key] = value
    resp = DiagnosticsApi(client).echo(params)
    for key, value in sorted(resp.echoed().items()):
        print(f"{key}={value}")


def check_token(client: FlickrClient):
    """Show the account behind the configured token."""
    if client.access_token is None:
        raise AuthenticationError("No access token configured; set FLICKR_TOKEN_FILE.")
    creds = OAuthApi(client).check_token(client.access_token.token)
    print(f"✓ Token valid for {creds.username} ({creds.nsid}), perms={creds.perms}")


def find_place(client: FlickrClient, args):
    """Find places by query or coordinate."""
    places = PlacesApi(client)
    if args.query:
        resp = places.find(" ".join(args.query))
    else:
        resp = places.find_by_lat_lon(args.lat, args.lon, args.accuracy)
    found = resp.place_list()
    if not found:
        print("No places found.")
        return
    for place in found:
        print(f"{place.place_id} | {place.place_type} | {place.name}")


def main(argv=None):
    logging.basicConfig(level=getattr(logging, Config.LOG_LEVEL))

    parser = argparse.ArgumentParser(description="Flickr API client")
    parser.add_argument("--verbose", action="store_true", help="Print parameters, URLs and responses")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    echo_parser = subparsers.add_parser("echo", help="Call flickr.test.echo")
    echo_parser.add_argument("pairs", nargs="*", help="key=value parameters")

    subparsers.add_parser("check-token", help="Check the configured access token")

    place_parser = subparsers.add_parser("find-place", help="Find places")
    place_parser.add_argument("query", nargs="*", help="Place query")
    place_parser.add_argument("--lat", type=float)
    place_parser.add_argument("--lon", type=float)
    place_parser.add_argument("--accuracy", type=int)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        client = FlickrClient.from_config(
            verbose_logging=args.verbose or Config.VERBOSE_LOGGING,
            log_sink=StdoutLogger(),
        )
        if args.command == "echo":
            echo(client, args.pairs)
        elif args.command == "check-token":
            check_token(client)
        elif args.command == "find-place":
            find_place(client, args)
    except ServiceError as e:
        logger.error(f"Flickr error {e.code}: {e.message}")
        print(f"✗ Flickr error {e.code}: {e.message}")
        return 2
    except FlickrClientError as e:
        logger.error(f"Error running {args.command}: {e}")
        print(f"✗ Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
