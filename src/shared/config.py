import json
from pathlib import Path
from typing import Dict, Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Process-level settings for the storage write benchmarks."""

    log_level: str = "INFO"
    hdfs_url: Optional[str] = None
    hdfs_user: Optional[str] = None
    hadoop_conf_dir: Path = Path("conf")
    gcs_project: Optional[str] = None
    payload_seed: int = 42
    payload_buffer_size: int = 64 * 1024 * 1024
    resumable_chunk_size: int = 32 * 1024 * 1024
    http_max_retries: int = 0
    library_log_levels: Dict[str, str] = {
        "urllib3": "WARNING",
        "google": "WARNING",
        "hdfs": "WARNING"
    }

    model_config = SettingsConfigDict(
        env_prefix='STORAGE_BENCH_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path("config.json")
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Convert hadoop_conf_dir to Path if it's a string
                if "hadoop_conf_dir" in config:
                    config["hadoop_conf_dir"] = Path(config["hadoop_conf_dir"])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
