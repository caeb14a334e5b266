"""CSV ingestion for device spec catalogs.

Handles the quirks of hand-maintained or exported spec sheets:
- Header variants ("Device Name", "DPI", "Refresh Rate (Hz)")
- Unit suffixes on numbers (e.g., '6.7"', "120Hz", "440 dpi")
- Free-text platform values ("Android 14", "iOS", "iPadOS")
- Blank rows and duplicate device names
"""

import logging
import re
from pathlib import Path

import pandas as pd

from src.device_lookup.config import CATALOG_COLUMNS, NOT_APPLICABLE, UNKNOWN
from src.device_lookup.models import DeviceSpecs, normalize_device_name

logger = logging.getLogger(__name__)

# Normalized header -> canonical column
_COLUMN_ALIASES = {
    "device": "device_name",
    "name": "device_name",
    "model": "device_name",
    "os": "platform",
    "screen": "screen_size",
    "screen_size_in": "screen_size",
    "display_size": "screen_size",
    "refresh": "refresh_rate",
    "refresh_rate_hz": "refresh_rate",
    "dpi": "default_dpi",
    "density": "default_dpi",
}

_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")


class CatalogIngestionError(Exception):
    """Raised when a device catalog cannot be read."""


def _normalize_header(header: str) -> str:
    key = re.sub(r"[^a-z0-9]+", "_", str(header).strip().lower()).strip("_")
    return _COLUMN_ALIASES.get(key, key)


def _parse_number(value):
    """Parse a number with an optional unit suffix ('120Hz' -> 120.0)."""
    if pd.isna(value):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER.match(str(value).replace(",", ""))
    return float(match.group(1)) if match else float("nan")


def _normalize_platform(value) -> str:
    if pd.isna(value):
        return UNKNOWN
    text = str(value).strip().lower()
    if text.startswith("android"):
        return "android"
    if text.startswith("ios") or text.startswith("ipados"):
        return "ios"
    return UNKNOWN


def _format_number(value, integer: bool) -> str:
    if pd.isna(value):
        return UNKNOWN
    if integer:
        return str(int(value))
    return f"{value:g}"


class DeviceCatalogIngester:
    """Reads a device catalog CSV into a cleaned DataFrame.

    The returned DataFrame has exactly the columns in ``CATALOG_COLUMNS``,
    numeric specs parsed as floats, platforms normalized, one row per
    normalized device name (last occurrence wins).
    """

    def __init__(self, csv_path: Path):
        self.csv_path = Path(csv_path)

    def read_catalog(self) -> pd.DataFrame:
        """Read and clean the catalog.

        Raises:
            FileNotFoundError: if the CSV does not exist.
            CatalogIngestionError: if the CSV has no device name column.
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Expected file not found: {self.csv_path}")

        logger.info("Reading device catalog: %s", self.csv_path.name)
        df = pd.read_csv(self.csv_path, dtype=str, skip_blank_lines=True)
        df.columns = [_normalize_header(c) for c in df.columns]

        # Aliases can map several raw headers onto one column; first one wins
        duplicated = df.columns.duplicated()
        if duplicated.any():
            logger.warning(
                "Ignoring duplicate catalog columns in %s: %s",
                self.csv_path.name,
                sorted(set(df.columns[duplicated])),
            )
            df = df.loc[:, ~duplicated]

        if "device_name" not in df.columns:
            raise CatalogIngestionError(
                f"No device name column in {self.csv_path.name}: {list(df.columns)}"
            )

        for col in CATALOG_COLUMNS:
            if col not in df.columns:
                df[col] = pd.NA

        df = self.clean(df[CATALOG_COLUMNS].copy())
        logger.info("Loaded %d devices", len(df))
        return df

    @staticmethod
    def clean(df: pd.DataFrame) -> pd.DataFrame:
        """Strip text, parse numbers, normalize platforms, de-duplicate."""
        df["device_name"] = df["device_name"].str.strip('"').str.strip()
        df = df[df["device_name"].notna() & (df["device_name"] != "")].copy()

        df["platform"] = df["platform"].apply(_normalize_platform)
        for col in ("screen_size", "refresh_rate", "default_dpi"):
            df[col] = df[col].apply(_parse_number)

        df["_key"] = df["device_name"].map(normalize_device_name)
        before = len(df)
        df = df.drop_duplicates(subset="_key", keep="last")
        if len(df) < before:
            logger.warning("Dropped %d duplicate device rows", before - len(df))

        return df.drop(columns="_key").reset_index(drop=True)

    def read_specs(self) -> dict[str, DeviceSpecs]:
        """Catalog rows as cache entries keyed by normalized device name."""
        df = self.read_catalog()
        specs: dict[str, DeviceSpecs] = {}
        for _, row in df.iterrows():
            platform = row["platform"]
            if platform == "ios":
                dpi = NOT_APPLICABLE
            else:
                dpi = _format_number(row["default_dpi"], integer=True)
            device = DeviceSpecs(
                device_name=str(row["device_name"]),
                platform=platform,
                screen_size=_format_number(row["screen_size"], integer=False),
                refresh_rate=_format_number(row["refresh_rate"], integer=True),
                default_dpi=dpi,
            )
            specs[normalize_device_name(device.device_name)] = device
        return specs
