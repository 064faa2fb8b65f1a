from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_title: str = os.getenv("GRADEPOINT_TITLE", "GradePoint")
    web_mode: bool = _flag("GRADEPOINT_WEB")
    port: int = int(os.getenv("PORT", "8550"))
    debug: bool = _flag("GRADEPOINT_DEBUG")


settings = Settings()
