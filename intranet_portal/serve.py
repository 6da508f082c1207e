"""
Intranet Portal - FastAPI Service Entrypoint

Usage:
    python -m intranet_portal.serve [--host HOST] [--port PORT] [--intent-provider NAME]
"""

import argparse
import os
import sys


def start_service(host: str, port: int, reload: bool = False) -> None:
    """Start the uvicorn server."""
    import uvicorn

    print(f"[Portal] Starting service on {host}:{port}")
    print(f"[Portal] Intent provider: {os.environ.get('INTENT_PROVIDER', 'none')}")

    uvicorn.run(
        "intranet_portal.api:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
        access_log=True,
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Intranet Portal - FastAPI Service")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    parser.add_argument(
        "--intent-provider",
        choices=["none", "groq"],
        default=None,
        help="Intent classifier for /chat/intent (default: from environment)",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    # Settings are read at import time, so this must precede importing the app
    if args.intent_provider:
        os.environ["INTENT_PROVIDER"] = args.intent_provider
    os.environ["PYTHONUNBUFFERED"] = "1"

    try:
        start_service(args.host, args.port, reload=args.reload)
        return 0
    except KeyboardInterrupt:
        print("\n[Portal] Service stopped by user")
        return 0
    except Exception as e:
        print(f"[ERROR] Service failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
