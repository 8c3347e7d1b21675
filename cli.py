#!/usr/bin/env python3
"""
Command-line interface for the notification patterns demo.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run the MarketBridge demo
    send        Create one notification through a factory
    test        Run the test suite
    serve       Start the API server

Examples:
    uv run python cli.py demo
    uv run python cli.py send email "Your order has shipped" --observers 2
    uv run python cli.py serve
"""

import argparse
import logging
import subprocess
import sys
from typing import Optional


def configure_logging(verbose: bool) -> None:
    """Send logs to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
        datefmt="%H:%M:%S",
    )


def run_demo() -> None:
    """Run the MarketBridge demo."""
    from notifications.demo import run_marketbridge_demo
    run_marketbridge_demo()


def run_send(kind: str, content: str, observers: int) -> None:
    """Create a single notification with console observers attached."""
    from notifications.factory import create_factory
    from notifications.models import NotificationKind
    from notifications.observers import EmailObserver, SMSObserver

    try:
        factory = create_factory(kind)
    except ValueError as e:
        print(e)
        sys.exit(1)

    observer_type = EmailObserver if factory.kind == NotificationKind.EMAIL else SMSObserver
    for _ in range(observers):
        factory.add_observer(observer_type())

    factory.create_notification(content)


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = ["uv", "run", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Notification Patterns Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s send sms "Hello from MarketBridge!"
  %(prog)s send email "Bye from MarketBridge!" --observers 2
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    subparsers.add_parser("demo", help="Run the MarketBridge demo")

    # Send command
    send_parser = subparsers.add_parser("send", help="Create one notification")
    send_parser.add_argument("kind", help="Notification kind (email or sms)")
    send_parser.add_argument("content", help="Notification content")
    send_parser.add_argument(
        "--observers",
        type=int,
        default=1,
        help="How many console observers to register",
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "demo":
        run_demo()
    elif args.command == "send":
        run_send(args.kind, args.content, args.observers)
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
