"""Provider profile normalization.

Each provider returns its profile in its own layout (Google's flat userinfo
document, Facebook's Graph object with a nested picture). These functions map
them onto CanonicalProfile so nothing downstream sees provider field names.
"""

from typing import Any, Callable

from userhub.domain.error import MalformedProfileError
from userhub.domain.value import AuthProvider, CanonicalProfile


def _require(provider: AuthProvider, payload: dict[str, Any], key: str) -> Any:
    value = payload.get(key)
    if value is None or value == "":
        raise MalformedProfileError(provider.value, key)
    return value


def normalize_google_profile(payload: dict[str, Any]) -> CanonicalProfile:
    """Normalize a Google ``userinfo`` payload.

    Expected keys: ``id``, ``email``, ``given_name``, ``family_name``, ``picture``.
    """
    provider = AuthProvider.GOOGLE
    return CanonicalProfile(
        provider=provider,
        external_id=str(_require(provider, payload, "id")),
        email=_require(provider, payload, "email"),
        given_name=payload.get("given_name") or "",
        family_name=payload.get("family_name") or "",
        avatar_source_url=_require(provider, payload, "picture"),
    )


def normalize_facebook_profile(payload: dict[str, Any]) -> CanonicalProfile:
    """Normalize a Facebook Graph ``me`` payload.

    Expected keys: ``id``, ``email``, ``first_name``, ``last_name`` and
    ``picture.data.url``.
    """
    provider = AuthProvider.FACEBOOK
    picture = payload.get("picture") or {}
    picture_data = picture.get("data") or {}
    picture_url = picture_data.get("url")
    if not picture_url:
        raise MalformedProfileError(provider.value, "picture.data.url")

    return CanonicalProfile(
        provider=provider,
        external_id=str(_require(provider, payload, "id")),
        email=_require(provider, payload, "email"),
        given_name=payload.get("first_name") or "",
        family_name=payload.get("last_name") or "",
        avatar_source_url=picture_url,
    )


NORMALIZERS: dict[AuthProvider, Callable[[dict[str, Any]], CanonicalProfile]] = {
    AuthProvider.GOOGLE: normalize_google_profile,
    AuthProvider.FACEBOOK: normalize_facebook_profile,
}


def normalize(provider: AuthProvider, raw_profile: dict[str, Any]) -> CanonicalProfile:
    """Map a raw provider profile to the canonical shape.

    Args:
        provider: Provider that produced the payload
        raw_profile: Provider-specific payload

    Returns:
        Canonical profile

    Raises:
        MalformedProfileError: If a required field is missing
        ValueError: If provider not supported
    """
    normalizer = NORMALIZERS.get(provider)
    if not normalizer:
        raise ValueError(f"Unsupported provider: {provider}")
    return normalizer(raw_profile)
