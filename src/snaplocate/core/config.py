"""Configuration management for snaplocate."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()


class Config(BaseSettings):
    """Configuration class for the text locator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SNAPLOCATE_",
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars rather than raising errors
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False, description="Also write rotating log files")
    log_dir: str = Field(default="logs")

    # OCR Engine
    # Path to the Tesseract OCR binary (leave None to use system PATH).
    # Process-wide: applied once when snaplocate.vision.recognizer is imported.
    tesseract_cmd: Optional[str] = Field(default=None, description="Path to Tesseract executable")
    tesseract_lang: str = Field(default="eng")
    tesseract_config: str = Field(default="", description="Extra CLI flags passed to tesseract")

    # Preprocessing variants
    threshold_cutoff: int = Field(default=128, description="Binarization cutoff (0-255)")
    crop_target_width: int = Field(default=2000, gt=0, description="Width crop variants are resized to")
    footer_crop_start: float = Field(default=0.6, description="Fraction of height where the footer crop starts")
    header_crop_end: float = Field(default=0.4, description="Fraction of height where the header crop ends")

    # Locator
    bounds_tolerance_px: int = Field(default=1, ge=0)
    locator_workers: int = Field(default=1, ge=1, description="Threads used to evaluate variants")

    # Debug output
    save_vision_debug: bool = Field(default=False)
    ocr_images_dir: str = Field(default="ocr_images")

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if self.threshold_cutoff < 0 or self.threshold_cutoff > 255:
            raise ValueError("Threshold cutoff must be between 0 and 255")

        for name in ("footer_crop_start", "header_crop_end"):
            value = getattr(self, name)
            if value <= 0 or value >= 1:
                raise ValueError(f"{name} must be strictly between 0 and 1")

        return True


# Global configuration instance
config = Config()
