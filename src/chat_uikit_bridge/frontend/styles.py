"""
Theme application for Streamlit host pages.

Publishes a generated palette as CSS custom properties so embedded chat
components pick up the host's primary color.
"""

import streamlit as st

from chat_uikit_bridge.core.config import settings
from chat_uikit_bridge.core.events import DispatchEvent
from chat_uikit_bridge.core.theme import Palette


def palette_css(palette: Palette, prefix: str | None = None) -> str:
    """Render a palette as a ``:root`` CSS block.

    Args:
        palette: Palette to render.
        prefix: Variable prefix. Defaults to settings.css_variable_prefix.

    Returns:
        ``<style>`` element declaring one custom property per palette role.

    Example:
        >>> css = palette_css(generate_palette(210))
        >>> "--cui-color-primary: hsla(210, 100%, 60%, 1);" in css
        True
    """
    declarations = "\n".join(
        f"    {name}: {value};"
        for name, value in palette.css_variables(prefix or settings.css_variable_prefix).items()
    )
    primary = palette["primary"].to_css()

    return f"""
        <style>
        :root {{
{declarations}
        }}

        /* Accent elements follow the primary color */
        .stButton > button {{
            background-color: {primary};
            border: none;
        }}
        </style>
    """


def apply_palette(palette: Palette) -> None:
    """Inject the palette CSS into the current Streamlit page.

    Args:
        palette: Palette to apply, usually ``ProviderContext.palette``.
    """
    st.markdown(palette_css(palette), unsafe_allow_html=True)


def render_connection_status(event: DispatchEvent | None, label: str = "Chat") -> None:
    """Render the session status from the latest ``"open"`` event.

    Args:
        event: Last dispatched open event, or None if none arrived yet.
        label: Label text to display.
    """
    connected = event is not None and event.kind == "success"
    status_class = "status-connected" if connected else "status-disconnected"
    status_text = "Connected" if connected else "Disconnected"
    st.markdown(
        f'<span class="{status_class}">{label}: {status_text}</span>',
        unsafe_allow_html=True,
    )
