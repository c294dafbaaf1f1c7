"""Application configuration."""

import os
import tempfile
from dataclasses import dataclass, field

# The remote source serves fixed-size pages
PAGE_SIZE = 10


def _default_export_dir() -> str:
    return os.path.join(tempfile.gettempdir(), "deposit_report")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""
    
    # API settings
    host: str = "0.0.0.0"
    port: int = 8000
    
    # Remote report API
    report_api_url: str = "http://localhost:3000"
    request_timeout: float = 30.0
    page_size: int = PAGE_SIZE
    
    # Export settings
    # Hard ceiling on pages fetched by a single export
    max_export_pages: int = 1000
    export_dir: str = field(default_factory=_default_export_dir)
    
    log_level: str = "INFO"
    
    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            report_api_url=os.getenv(
                "REPORT_API_URL",
                "http://localhost:3000"
            ),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30.0")),
            max_export_pages=int(os.getenv("MAX_EXPORT_PAGES", "1000")),
            export_dir=os.getenv("EXPORT_DIR", _default_export_dir()),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
