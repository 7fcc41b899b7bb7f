"""
Translation resource selection.

The host may override the bundled resources. Overrides are used as given
(no merging); only the fallback language is filled in when missing.
"""

from dataclasses import dataclass, field

from chat_uikit_bridge.core.config import settings
from chat_uikit_bridge.core.models import LocaleConfig

Resources = dict[str, dict[str, dict[str, str]]]

DEFAULT_RESOURCES: Resources = {
    "en": {
        "translation": {
            "conversationList": "Conversations",
            "contacts": "Contacts",
            "send": "Send",
            "typing": "Typing...",
            "offline": "Offline",
            "online": "Online",
            "loginFailed": "Login failed",
        }
    },
    "zh": {
        "translation": {
            "conversationList": "会话列表",
            "contacts": "联系人",
            "send": "发送",
            "typing": "正在输入...",
            "offline": "离线",
            "online": "在线",
            "loginFailed": "登录失败",
        }
    },
}


@dataclass(frozen=True)
class LocaleSettings:
    """Resolved translation setup for the UI layer."""

    lng: str | None
    fallback_lng: str
    resources: Resources = field(default_factory=dict)


def resolve_locale(local: LocaleConfig | None = None) -> LocaleSettings:
    """Resolve the translation setup from an optional host override.

    Args:
        local: Host override. When absent the bundled resources are used
            with the default language.

    Returns:
        Language, fallback language and resources to initialize with.
    """
    default = settings.default_language

    if local is None:
        return LocaleSettings(lng=default, fallback_lng=default, resources=DEFAULT_RESOURCES)

    return LocaleSettings(
        lng=local.lng,
        fallback_lng=local.fallback_lng or default,
        resources=local.resources or DEFAULT_RESOURCES,
    )
