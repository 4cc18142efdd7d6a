"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of content_hub/); .env is loaded from here so it works regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Supabase project URL and anon key. The anon key doubles as the static `apikey`
    # header the generation endpoints expect.
    supabase_url: str = ""
    supabase_key: str = ""

    # Database (Supabase: use Connection string from Supabase Dashboard → Settings → Database)
    database_url: str = ""

    @property
    def database_url_sync(self) -> str:
        """Sync URL for Alembic (replace +asyncpg with empty string)."""
        if not self.database_url:
            return ""
        return self.database_url.replace("+asyncpg", "") if "+asyncpg" in self.database_url else self.database_url

    # Generation webhooks
    blog_generation_url: str = "https://leyu1qigsf.execute-api.ap-south-1.amazonaws.com/blog/manual-generate"
    post_generation_url: str = "https://3vpkgdhdy4.execute-api.ap-south-1.amazonaws.com/generate/manual"
    linkedin_publish_url: str = ""
    video_script_url: str = "https://spmsuccess.app.n8n.cloud/webhook/generate-video-script"
    video_generation_url: str = "https://spmsuccess.app.n8n.cloud/webhook/video-generator"
    # None = wait as long as the webhook takes
    generation_timeout_seconds: float | None = None

    # LinkedIn generation defaults
    linkedin_post_length: str = "short"
    linkedin_additional_instructions: str = "Focus on the cost-saving benefits."
    linkedin_max_characters: int = 2000
    linkedin_optimal_min: int = 150
    linkedin_optimal_max: int = 300

    # Reconciliation: how many lookups for the generated row, and the pause between them
    reconcile_attempts: int = 1
    reconcile_interval_seconds: float = 1.0

    # Content column names, tried in order on write (legacy schemas only have one of them)
    content_field_candidates: list[str] = ["content", "html_content"]

    # App
    log_level: str = "INFO"


settings = Settings()
