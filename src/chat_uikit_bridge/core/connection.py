"""
Connection parameter building.

Turns the host identity config into the normalized options the
messaging client constructor expects.
"""

from chat_uikit_bridge.core.models import ConnectionParameters, IdentityConfig


def build_connection_parameters(identity: IdentityConfig) -> ConnectionParameters:
    """Build normalized connection parameters from an identity config.

    Absent flags fall back to ``isHttpDNS=True``, ``isFixedDeviceId=True``
    and ``useOwnUploadFun=False``. A truthy app key always wins; the app id
    is only copied when no app key is present.

    Args:
        identity: Validated identity config (an ``InitConfig`` works too).

    Returns:
        Frozen connection parameters carrying exactly one identity field.

    Example:
        >>> params = build_connection_parameters(IdentityConfig(appKey="org#app"))
        >>> params.to_options()["appKey"]
        'org#app'
    """
    identity_field = (
        {"app_key": identity.app_key} if identity.app_key else {"app_id": identity.app_id}
    )

    return ConnectionParameters(
        delivery=True,
        url=identity.msync_url,
        api_url=identity.rest_url,
        is_http_dns=_default(identity.is_http_dns, True),
        device_id=identity.device_id,
        use_replaced_message_contents=identity.use_replaced_message_contents,
        is_fixed_device_id=_default(identity.is_fixed_device_id, True),
        use_own_upload_fun=_default(identity.use_own_upload_fun, False),
        **identity_field,
    )


def _default(value: bool | None, fallback: bool) -> bool:
    return fallback if value is None else value
