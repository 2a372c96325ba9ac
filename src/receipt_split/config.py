from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from receipt_split import __version__

load_dotenv()


class Settings(BaseSettings):
    app_name: str = "receipt-split"
    app_version: str = __version__

    # Allowed absolute difference between computed sums and the declared total
    consistency_tolerance: float = 0.01

    # foo.json -> foo_output.json
    output_suffix: str = "_output"
    schema_output_path: Path = Path("receipt_schema.json")

    log_level: str = "INFO"
    log_file: Optional[Path] = None

    class Config:
        env_file = ".env"
        env_prefix = "RECEIPT_SPLIT_"
        extra = "ignore"


settings = Settings()
