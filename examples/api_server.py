"""
API Server Example - serve dealer configs and theme stylesheets.

Run with: uvicorn examples.api_server:app --reload
Then try:
    curl http://localhost:8000/sites/acme-motors/config
    curl -X PATCH http://localhost:8000/sites/acme-motors/config \
        -H 'Content-Type: application/json' -d '{"colors": {"primary": "#16a34a"}}'
    curl http://localhost:8000/sites/acme-motors/theme.css
"""

import logging

from dealersite.api import create_app

logging.basicConfig(level=logging.INFO)

app = create_app()
