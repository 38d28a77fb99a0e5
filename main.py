# main.py
"""Main entry point for the Route Forecast Streamlit application."""

import sys
import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import card_route_forecast
from src.ui.common import load_css

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize and render the Route Forecast page."""
    try:
        logger.info("Starting Route Forecast")
        st.set_page_config(
            page_title="Route Forecast",
            layout="wide",
            page_icon="🚴",
        )
        load_css("style.css")

        card_route_forecast()

    except KeyboardInterrupt:
        logger.info("Route Forecast shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
