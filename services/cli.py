"""Command line runner for the alert service and the camera gateway."""

import argparse
import sys

APPS = {
    "alert-service": "services.alert_service.app:app",
    "camera-gateway": "services.camera_gateway.app:app",
}


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Camera gateway and alert service runner",
        prog="camera-alert",
    )
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Start one of the services")
    serve_parser.add_argument("service", choices=sorted(APPS))
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8080)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args()

    if args.command == "serve":
        run_server(args)
    else:
        parser.print_help()
        sys.exit(1)


def run_server(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        APPS[args.service],
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
