#!/usr/bin/env python3
"""Entry point for running the ID Field Extractor API server."""

import os

from id_extractor.api.server import app
import uvicorn

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get('ID_EXTRACTOR_PORT', '8000')), reload=False)
