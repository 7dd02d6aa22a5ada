"""Default locations shown when a config lists none."""

from weatherview.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(name="Rio de Janeiro", region_code="BR"),
    LocationConfig(name="Beijing", region_code="CN"),
    LocationConfig(name="Los Angeles", region_code="US"),
]
