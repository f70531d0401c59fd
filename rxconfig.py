import os

import reflex as rx
from reflex.constants import LogLevel

config = rx.Config(
    app_name="pager_app",
    loglevel=LogLevel(os.getenv("PAGER_REFLEX_LOG_LEVEL", "info")),
    plugins=[
        rx.plugins.SitemapPlugin(),
        rx.plugins.TailwindV3Plugin(
            config={
                "darkMode": "class",
                "theme": {
                    "extend": {
                        "fontFamily": {
                            "sans": ["Inter", "system-ui", "sans-serif"],
                        }
                    }
                }
            }
        ),
    ],
    frontend_port=int(os.getenv("PAGER_FRONTEND_PORT", "3000")),
    backend_port=int(os.getenv("PAGER_BACKEND_PORT", "8000")),
)
