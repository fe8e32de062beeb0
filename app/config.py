# app/config.py

from dotenv import load_dotenv
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()  # .env 먼저 읽기

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    # 환경 구분
    app_env: str = "local"

    # DB
    database_url: str = "sqlite:///./questions.db"   # DATABASE_URL

    # OpenAI (키가 없으면 생성만 실패하고 서버는 뜬다)
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_timeout_sec: float = 30.0
    openai_temperature: float = 0.7

    # 인증이 없으므로 기본 사용자
    default_user_id: str = "user1"

    # 시작 시 기본 문제 seed
    seed_on_startup: bool = True

    # dashboard / static
    static_dir: Path = BASE_DIR / "public"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()

if __name__ == "__main__":
    print("BASE_DIR:", BASE_DIR)
    print("DATABASE_URL:", settings.database_url)
    print("OPENAI_MODEL:", settings.openai_model)
    print("OPENAI_API_KEY set:", bool(settings.openai_api_key))
