"""High-availability configuration checks over Flink properties."""

from __future__ import annotations

from collections.abc import Mapping

HA_CONFIG_TYPE = "high-availability"
HA_CONFIG_STORAGE_DIR = "high-availability.storageDir"
HA_CONFIG_CLUSTER_ID = "kubernetes.cluster-id"

_HA_DISABLED = "none"
_HA_CONFIG_MAP_NAME_TEMPLATE = "{cluster_id}-cluster-config-map"


def is_high_availability_enabled(properties: Mapping[str, str] | None) -> bool:
    """HA needs a non-``none`` type, a cluster id and a storage directory."""

    if properties is None:
        return False

    ha_type = properties.get(HA_CONFIG_TYPE)
    if ha_type is None or ha_type.lower() == _HA_DISABLED:
        return False
    cluster_id = properties.get(HA_CONFIG_CLUSTER_ID)
    if cluster_id is None or not cluster_id.strip():
        return False
    storage_dir = properties.get(HA_CONFIG_STORAGE_DIR)
    if storage_dir is None or not storage_dir.strip():
        return False
    return True


def get_ha_config_map_name(properties: Mapping[str, str] | None) -> str:
    """Return the HA config map name, or an empty string when HA is disabled."""

    if not is_high_availability_enabled(properties):
        return ""
    assert properties is not None
    return _HA_CONFIG_MAP_NAME_TEMPLATE.format(cluster_id=properties[HA_CONFIG_CLUSTER_ID])


__all__ = [
    "HA_CONFIG_CLUSTER_ID",
    "HA_CONFIG_STORAGE_DIR",
    "HA_CONFIG_TYPE",
    "get_ha_config_map_name",
    "is_high_availability_enabled",
]
