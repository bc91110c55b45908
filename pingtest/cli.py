"""CLI for pingtest: run the server or a single probe from the shell."""
import argparse
import logging
import sys

from pingtest.config import settings
from pingtest.errors import InvalidHostError, PingError, SystemInfoError
from pingtest.services.commands import get_commands


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "pingtest.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def cmd_ping(args: argparse.Namespace) -> int:
    try:
        result = get_commands().ping(args.host)
    except InvalidHostError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except PingError as e:
        print(f"error: {e}", file=sys.stderr)
        print(e.result.model_dump_json())
        return 1
    print(result.model_dump_json())
    return 0


def cmd_sysinfo(args: argparse.Namespace) -> int:
    try:
        info = get_commands().get_system_info()
    except SystemInfoError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(info.model_dump_json())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ICMP ping and system info service")
    sub = parser.add_subparsers(dest="cmd", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=settings.host, help="Listen address")
    serve.add_argument("--port", type=int, default=settings.port, help="Listen port")
    serve.set_defaults(func=cmd_serve)

    ping = sub.add_parser("ping", help="Ping a host once and print the result as JSON")
    ping.add_argument("host", help="Hostname or IP address")
    ping.set_defaults(func=cmd_ping)

    sysinfo = sub.add_parser("sysinfo", help="Print hostname and primary IPv4 as JSON")
    sysinfo.set_defaults(func=cmd_sysinfo)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
