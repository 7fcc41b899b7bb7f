"""
Frontend module for the chat UIKit bridge.

Applies generated theme palettes to Streamlit host pages.
"""

from chat_uikit_bridge.frontend.styles import apply_palette, palette_css, render_connection_status

__all__ = ["apply_palette", "palette_css", "render_connection_status"]
