"""Run the ytmproxy HTTP API under uvicorn: python -m ytmproxy_api.

Settings come from YTMPROXY_* environment variables or a .env file. An
invalid value is reported on stderr and exits with status 1 before the
server starts.
"""

import sys

import uvicorn
from pydantic import ValidationError

from ytmproxy_api.settings import get_settings


def main() -> None:
    """Start the ytmproxy API server."""
    try:
        settings = get_settings()
    except ValidationError as e:
        error = e.errors()[0]
        field = "_".join(str(part) for part in error["loc"]).upper()
        print(
            f"Configuration error: YTMPROXY_{field}: {error['msg']}",
            file=sys.stderr,
        )
        sys.exit(1)
    uvicorn.run(
        "ytmproxy_api.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
