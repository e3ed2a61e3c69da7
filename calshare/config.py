"""Configuration for calendar sharing."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from calshare.constants import ICS_EXPORT_FILENAME, ShareSite

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None


class ShareConfig(BaseModel):
    """Share configuration with Pydantic validation."""

    # Value written to the VEVENT URL property
    source_url: str = Field(default="")

    # Share target used when none is given
    default_site: ShareSite = Field(default=ShareSite.GOOGLE)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="calshare.log")

    # File naming
    output_filename: str = Field(default=ICS_EXPORT_FILENAME)

    @classmethod
    def from_env(cls) -> "ShareConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv(Path(".env"))

        config_dict = {}

        if "CALSHARE_SOURCE_URL" in os.environ:
            config_dict["source_url"] = os.environ["CALSHARE_SOURCE_URL"]

        if "CALSHARE_DEFAULT_SITE" in os.environ:
            try:
                config_dict["default_site"] = ShareSite(
                    os.environ["CALSHARE_DEFAULT_SITE"].lower()
                )
            except ValueError:
                pass  # Keep default if invalid

        # Logging
        if "CALSHARE_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["CALSHARE_LOG_DIR"])
        if "CALSHARE_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["CALSHARE_LOG_FILENAME"]

        # File naming
        if "CALSHARE_OUTPUT_FILENAME" in os.environ:
            config_dict["output_filename"] = os.environ["CALSHARE_OUTPUT_FILENAME"]

        return cls(**config_dict)
