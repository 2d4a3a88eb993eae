"""HTTP transport: serve the application with a local uvicorn listener."""

from __future__ import annotations

import uvicorn

from hello_app.main import create_app
from hello_app.settings import get_settings

app = create_app()


def main() -> None:  # pragma: no cover - manual run helper
    settings = get_settings()
    uvicorn.run(
        "transports.http_local:app",
        host=settings.host,
        port=settings.port,
        reload=settings.dev_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - manual run helper
    main()
