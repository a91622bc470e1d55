# core/services/core_settings.py
from __future__ import annotations

from django.core.cache import cache
from django.db import transaction

from core.models import CoreSetting

CACHE_TTL_SECONDS = 60  # 0 disables caching
SETTINGS_MAP_CACHE_KEY = "core_settings:map"


def get_settings_map() -> dict[str, str]:
    """Flat code -> value map handed to the document assemblers."""
    cached = cache.get(SETTINGS_MAP_CACHE_KEY)
    if cached is not None:
        return dict(cached)

    data = dict(CoreSetting.objects.values_list("code", "value"))
    cache.set(SETTINGS_MAP_CACHE_KEY, data, CACHE_TTL_SECONDS)
    return data


@transaction.atomic
def save_settings(values: dict) -> int:
    """Upsert every key in one transaction; returns the number of keys written."""
    for code, value in values.items():
        CoreSetting.objects.update_or_create(
            code=code,
            defaults={"value": "" if value is None else str(value)},
        )

    # cleared after commit so a concurrent read cannot re-cache the old map
    transaction.on_commit(_invalidate)
    return len(values)


def _invalidate():
    cache.delete(SETTINGS_MAP_CACHE_KEY)
