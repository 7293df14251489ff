"""Command-line launcher — run one of the services under uvicorn.

Usage:
    python -m practice_api products --port 3000
    python -m practice_api users
"""

import argparse

from uvicorn import run

from practice_api.config import get_settings
from practice_api.core.domain_types import ServiceName

APP_PATHS = {
    ServiceName.PRODUCTS: "practice_api.main:products_app",
    ServiceName.USERS: "practice_api.main:users_app",
}


def build_parser(with_service: bool = True) -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="practice_api", description="Run an in-memory CRUD service",
    )
    if with_service:
        parser.add_argument(
            "service", choices=[s.value for s in ServiceName],
            help="Which service to start",
        )
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes",
    )
    return parser


def serve(service: ServiceName, host: str, port: int, reload: bool = False):
    run(APP_PATHS[service], host=host, port=port, reload=reload)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    serve(ServiceName(args.service), args.host, args.port, args.reload)


def main_products(argv: list[str] | None = None) -> None:
    args = build_parser(with_service=False).parse_args(argv)
    serve(ServiceName.PRODUCTS, args.host, args.port, args.reload)


def main_users(argv: list[str] | None = None) -> None:
    args = build_parser(with_service=False).parse_args(argv)
    serve(ServiceName.USERS, args.host, args.port, args.reload)


if __name__ == "__main__":
    main()
