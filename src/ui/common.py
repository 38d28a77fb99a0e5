# src/ui/common.py
from __future__ import annotations

from html import escape

import streamlit as st

from src.paths import asset_path


def load_css(file_name: str) -> None:
    path = asset_path(file_name)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def section_title(html: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title; html is inserted as is."""
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{html}</div>",
        unsafe_allow_html=True,
    )


def card(title: str, body_html: str, height_dvh: int = 16) -> None:
    """Render a card with a title and HTML body.

    Args:
        title: Card title text.
        body_html: HTML content for the card body.
        height_dvh: Minimum height in dvh units (default: 16).
    """
    st.markdown(
        f"""
        <section class="card" style="min-height:{height_dvh}dvh; position:relative; overflow:hidden;">
          <div class="card-title">{escape(title)}</div>
          <div class="card-body">{body_html}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )


def hint_card(title: str, message: str, height_dvh: int = 12) -> None:
    """Card with a single plain-text hint line (errors, empty states)."""
    card(title, f"<span class='hint'>{escape(message)}</span>", height_dvh=height_dvh)
