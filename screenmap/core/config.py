"""Configuration management for the screenmap framework."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()


class Config(BaseSettings):
    """Configuration class for screenmap."""

    model_config = SettingsConfigDict(
        env_prefix="SCREENMAP_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars rather than raising errors
    )

    # OCR Engine
    # Path to the Tesseract OCR binary (leave None to use system PATH)
    tesseract_cmd: Optional[str] = Field(default=None, description="Path to Tesseract executable")
    ocr_lang: str = Field(default="eng")
    ocr_psm: int = Field(default=11, description="Tesseract page segmentation mode")
    ocr_preprocess: bool = Field(default=True, description="Grayscale + Otsu threshold before OCR")
    ocr_timeout: float = Field(default=30.0, description="Seconds to wait for one recognition pass")
    ocr_workers: int = Field(default=2)
    min_confidence: float = Field(default=0.0, description="Drop OCR lines below this confidence")

    # Classification
    navigation_threshold: float = Field(default=0.2, description="Normalized x below which text is navigation")

    # Screen geometry overrides (0 means ask the display)
    screen_width: float = Field(default=0.0)
    screen_height: float = Field(default=0.0)

    # Automation
    fallback_home_x: float = Field(default=40.0)
    fallback_home_y: float = Field(default=320.0)
    pointer_move_duration: float = Field(default=0.0)

    # Debug output
    save_vision_debug: bool = Field(default=False)
    ocr_images_dir: str = Field(default="ocr_images")
    screenshot_dir: str = Field(default="screenshots")

    # Framework Configuration
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False)
    logs_dir: str = Field(default="logs")

    # API Configuration
    api_host: str = Field(default="localhost")
    api_port: int = Field(default=8000)
    cors_origins: list[str] = Field(default=["http://localhost:3000"])

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if self.min_confidence < 0 or self.min_confidence > 1:
            raise ValueError("OCR minimum confidence must be between 0 and 1")

        if self.ocr_timeout <= 0:
            raise ValueError("OCR timeout must be positive")

        if self.ocr_workers < 1:
            raise ValueError("OCR worker count must be at least 1")

        if self.screen_width < 0 or self.screen_height < 0:
            raise ValueError("Screen size overrides must not be negative")

        return True

    def get_screenshot_path(self) -> str:
        """Get the full path to screenshot directory."""
        return os.path.join(os.getcwd(), self.screenshot_dir)


# Global configuration instance
config = Config()
