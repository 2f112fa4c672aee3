# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Application Configuration
All settings are loaded from environment variables with defaults that
match the classic 800px tier list. Override via .env or environment.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from tierlist.models.layout import FetchLimits, LayoutSettings


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Canvas Geometry ─────────────────────────────────────────────────────
    canvas_width: int = 800
    tier_label_width: int = 100
    item_size: int = 80
    item_padding: int = 5
    row_min_height: int = 100
    header_height: int = 60
    # Gap left below every row
    row_separator: int = 2

    # ─── Safety Limits ───────────────────────────────────────────────────────
    max_items: int = 50
    max_canvas_height: int = 5000
    image_timeout_ms: int = 5000
    max_image_mb: int = 5
    user_agent: str = "TierListRenderer/1.0 (non-commercial tool)"

    # ─── Style ───────────────────────────────────────────────────────────────
    default_background: str = "#1e1e1e"
    font_family: str = "DejaVuSans"
    # Explicit font files win over the family name
    font_path: Optional[Path] = None
    font_bold_path: Optional[Path] = None

    # ─── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ─── Server ──────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ─── Derived helpers ─────────────────────────────────────────────────────
    @property
    def max_image_bytes(self) -> int:
        return self.max_image_mb * 1024 * 1024

    @property
    def layout_settings(self) -> LayoutSettings:
        return LayoutSettings(
            canvas_width=self.canvas_width,
            tier_label_width=self.tier_label_width,
            item_size=self.item_size,
            item_padding=self.item_padding,
            row_min_height=self.row_min_height,
            header_height=self.header_height,
            row_separator=self.row_separator,
            max_items=self.max_items,
            max_canvas_height=self.max_canvas_height,
        )

    @property
    def fetch_limits(self) -> FetchLimits:
        return FetchLimits(
            timeout_seconds=self.image_timeout_ms / 1000,
            max_bytes=self.max_image_bytes,
            user_agent=self.user_agent,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()
