#!/usr/bin/env python3
"""Start the Post-Frame Building Estimator API server."""

import uvicorn

from postframe import config

if __name__ == "__main__":
    config.configure_logging()
    uvicorn.run(
        "postframe.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
        reload_dirs=["postframe"],
        log_level=config.LOG_LEVEL.lower(),
    )
