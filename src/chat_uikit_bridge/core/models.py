"""
Pydantic models for the provider configuration surface.

Host applications hand the bridge a camelCase configuration object
(``initConfig``, ``theme``, ``local`` ...). These models accept either the
camelCase keys or the snake_case field names.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chat_uikit_bridge.core.config import settings
from chat_uikit_bridge.core.logging import get_logger

logger = get_logger("models")


class HostModel(BaseModel):
    """Base model accepting both host (camelCase) and Python field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class IdentityConfig(HostModel):
    """Tenant identity and transport options for the messaging backend.

    Attributes:
        app_key: Application key identifying the tenant.
        app_id: Application id, used only when no app key is supplied.
        msync_url: Message sync endpoint.
        rest_url: REST endpoint.
        is_http_dns: Resolve endpoints through HTTP DNS (defaults to True at build time).
        device_id: Explicit device id.
        is_fixed_device_id: Keep the device id stable (defaults to True at build time).
        use_own_upload_fun: Host provides its own upload function (defaults to False).
        use_replaced_message_contents: Deliver server-replaced message contents.
    """

    app_key: str | None = Field(default=None, alias="appKey")
    app_id: str | None = Field(default=None, alias="appId")
    msync_url: str | None = Field(default=None, alias="msyncUrl")
    rest_url: str | None = Field(default=None, alias="restUrl")
    is_http_dns: bool | None = Field(default=None, alias="isHttpDNS")
    device_id: str | None = Field(default=None, alias="deviceId")
    is_fixed_device_id: bool | None = Field(default=None, alias="isFixedDeviceId")
    use_own_upload_fun: bool | None = Field(default=None, alias="useOwnUploadFun")
    use_replaced_message_contents: bool | None = Field(
        default=None, alias="useReplacedMessageContents"
    )

    @model_validator(mode="after")
    def check_identity(self) -> "IdentityConfig":
        """Require an app key or app id; warn when both are supplied."""
        if not self.app_key and not self.app_id:
            raise ValueError("Either appKey or appId must be provided")
        if self.app_key and self.app_id:
            logger.warning("Both appKey and appId supplied, appKey takes precedence")
        return self


class InitConfig(IdentityConfig):
    """Full client initialization config: identity plus user credentials.

    Attributes:
        user_id: User to log in as.
        token: Auth token, preferred over the password.
        password: Password used when no token is present.
        translation_target_language: Default target language for translation.
        use_user_info: Fetch user profile info after login.
        max_messages: Max messages kept per conversation view.
    """

    user_id: str | None = Field(default=None, alias="userId")
    token: str | None = None
    password: str | None = None
    translation_target_language: str | None = Field(
        default=None, alias="translationTargetLanguage"
    )
    use_user_info: bool | None = Field(default=None, alias="useUserInfo")
    max_messages: int = Field(default_factory=lambda: settings.max_messages, alias="maxMessages")


class ConnectionParameters(HostModel):
    """Normalized options handed to the messaging client constructor.

    Immutable once built. Exactly one of ``app_key``/``app_id`` is set.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    delivery: bool = True
    url: str | None = None
    api_url: str | None = Field(default=None, alias="apiUrl")
    is_http_dns: bool = Field(default=True, alias="isHttpDNS")
    device_id: str | None = Field(default=None, alias="deviceId")
    use_replaced_message_contents: bool | None = Field(
        default=None, alias="useReplacedMessageContents"
    )
    is_fixed_device_id: bool = Field(default=True, alias="isFixedDeviceId")
    use_own_upload_fun: bool = Field(default=False, alias="useOwnUploadFun")
    app_key: str | None = Field(default=None, alias="appKey")
    app_id: str | None = Field(default=None, alias="appId")

    def to_options(self) -> dict[str, Any]:
        """Return the client constructor options, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ThemeConfig(HostModel):
    """Theme settings. Only ``primary_color`` drives palette generation."""

    primary_color: str | int | float | None = Field(default=None, alias="primaryColor")
    mode: Literal["light", "dark"] | None = None
    avatar_shape: Literal["circle", "square"] | None = Field(default=None, alias="avatarShape")
    bubble_shape: Literal["round", "square"] | None = Field(default=None, alias="bubbleShape")
    components_shape: Literal["round", "square"] | None = Field(
        default=None, alias="componentsShape"
    )
    ripple: bool | None = None

    @field_validator("primary_color", mode="before")
    @classmethod
    def drop_boolean_color(cls, value: Any) -> Any:
        """Map boolean colors to no seed so they fall back to the default hue."""
        if isinstance(value, bool):
            logger.debug("Ignoring boolean primaryColor", value=value)
            return None
        return value


class LocaleConfig(HostModel):
    """Translation override supplied by the host."""

    lng: str | None = None
    fallback_lng: str | None = Field(default=None, alias="fallbackLng")
    resources: dict[str, dict[str, dict[str, str]]] | None = None


class ProviderProps(HostModel):
    """Everything the host passes to the chat provider."""

    init_config: InitConfig = Field(..., alias="initConfig")
    local: LocaleConfig | None = None
    features: dict[str, Any] | None = None
    reaction_config: dict[str, Any] | None = Field(default=None, alias="reactionConfig")
    theme: ThemeConfig | None = None
    presence_map: dict[str, Any] | None = Field(default=None, alias="presenceMap")
