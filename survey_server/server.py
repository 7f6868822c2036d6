#!/usr/bin/env python3
"""
Rider Survey Engagement Server entrypoint.

Run: survey-server (console script) or python -m survey_server.server
"""

import uvicorn

from .app import app
from .config import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
