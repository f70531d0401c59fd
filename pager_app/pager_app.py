import reflex as rx

from pager_app.utils.logger import get_logger, setup_logging

# Setup logging first
setup_logging()
logger = get_logger(__name__)

from .pages.results import results_page

logger.info("Starting pager app")

app = rx.App(
    theme=rx.theme(
        appearance="light",
        accent_color="purple",
        gray_color="slate",
        radius="medium",
        scaling="100%",
    ),
    stylesheets=[
        "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap",
    ],
    style={
        rx.el.body: {
            "font_family": "Inter, sans-serif",
        }
    },
)

app.add_page(results_page, route="/", title="Results")
