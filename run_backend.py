#!/usr/bin/env python3
"""Start the Shed BIM Generator API server."""

import uvicorn

from shedbim.api.settings import Settings

if __name__ == "__main__":
    uvicorn.run(
        "shedbim.api.main:app",
        host=Settings.HOST,
        port=Settings.PORT,
        reload=Settings.RELOAD,
        reload_dirs=["shedbim"],
    )
