"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Where blog data comes from: "file", "sample", or "" to pick by environment
    data_source: str = ""

    # Site
    blog_title: str = "Tech Blog"
    posts_per_page: int = 10
    social_links: dict[str, str] = {
        "Twitter": "https://twitter.com/yourusername",
        "Twitch": "https://twitch.tv/yourusername",
        "GitHub": "https://github.com/yourusername",
    }

    # Paths (relative paths resolve against the project root)
    content_dir: Path = Path("content/posts")
    artifact_path: Path = Path("dist/blog-data.json")
    static_dir: Path = Path("static")

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def use_artifact_file(self) -> bool:
        if self.data_source:
            return self.data_source.lower() == "file"
        return self.environment == "development"

    def resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else PROJECT_ROOT / path


@lru_cache
def get_settings() -> Settings:
    return Settings()
