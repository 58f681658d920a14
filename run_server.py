"""HATEOAS Links resolution server."""

from __future__ import annotations

import argparse
import logging
import sys


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the HATEOAS link resolution server")
    parser.add_argument("--host", default="127.0.0.1", help="interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="port to listen on")
    parser.add_argument("--verbose", action="store_true", help="log requests and debug output")
    return parser.parse_args(argv)


def run_server(host: str, port: int, verbose: bool = False) -> None:
    """Run the FastAPI server."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("uvicorn").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)

    import uvicorn
    from hateoas_links.main import app

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level="debug" if verbose else "warning",
        access_log=verbose,
    )
    server = uvicorn.Server(config)
    server.run()


def main() -> None:
    args = _parse_args(sys.argv[1:])
    run_server(args.host, args.port, verbose=args.verbose)


if __name__ == "__main__":
    main()
