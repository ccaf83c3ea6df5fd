"""Load the persisted lookup tables (wire catalog, design templates)."""

import logging
from pathlib import Path

from pydantic import ValidationError

from voltage_drop.db.models import ElectricalPackSettings
from voltage_drop.errors import SettingsError

logger = logging.getLogger(__name__)


def load_settings(path: str | Path | None) -> ElectricalPackSettings:
    """Read pack settings from a JSON file.

    Parameters
    ----------
    path : str | Path | None
        Settings file. ``None`` yields empty settings, i.e. the default wire
        size and no length reserve.

    Returns
    -------
    ElectricalPackSettings
        Parsed lookup tables.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SettingsError
        If the file is not valid JSON or does not match the settings schema.
    """
    if path is None:
        return ElectricalPackSettings()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings not found: {path}")
    try:
        settings = ElectricalPackSettings.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise SettingsError(path, f"{exc.error_count()} validation error(s)") from exc

    sizes = len(settings.wire_size_tables[0].wire_sizes) if settings.wire_size_tables else 0
    logger.info("Loaded settings from %s (%d wire sizes)", path, sizes)
    return settings
