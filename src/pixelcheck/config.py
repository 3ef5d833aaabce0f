"""Configuration management using Pydantic settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from pixelcheck.verify import ExpectedLayout


class Settings(BaseSettings):
    """Settings loaded from PIXELCHECK_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="PIXELCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Where the capture layer drops screenshots
    screenshot_dir: Path = Path("./test-results")

    # Reference scenario: browser window placed at (30, 30), 1000x1080 on a
    # 1080-row screen, so the bottom edge is clipped. The page's red area
    # starts below the browser header, whose height is measured from the
    # screenshot rather than configured.
    page_left: int = 30
    page_top: int = 30
    page_width: int = 1000
    page_height: int = 1080
    screen_height: int = 1080

    # Popup window expected at (180, 270), 700x600
    popup_left: int = 180
    popup_top: int = 270
    popup_width: int = 700
    popup_height: int = 600

    def expected_layout(self) -> ExpectedLayout:
        return ExpectedLayout(
            page_left=self.page_left,
            page_top=self.page_top,
            page_width=self.page_width,
            page_height=self.page_height,
            popup_left=self.popup_left,
            popup_top=self.popup_top,
            popup_width=self.popup_width,
            popup_height=self.popup_height,
            screen_height=self.screen_height,
        )


settings = Settings()
