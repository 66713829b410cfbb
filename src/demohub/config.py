"""Configuration management for the DemoHub catalog tooling."""

import os
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class WarehouseConfig(BaseModel):
    """Target warehouse connection settings."""

    url: Optional[str] = Field(default_factory=lambda: os.getenv("WAREHOUSE_URL"))
    host: str = Field(default_factory=lambda: os.getenv("WAREHOUSE_HOST", "localhost"))
    port: int = Field(default_factory=lambda: int(os.getenv("WAREHOUSE_PORT", "5432")))
    database: str = Field(default_factory=lambda: os.getenv("WAREHOUSE_DATABASE", "demohub"))
    username: str = Field(default_factory=lambda: os.getenv("WAREHOUSE_USERNAME", "demohub"))
    password: str = Field(default_factory=lambda: os.getenv("WAREHOUSE_PASSWORD", ""))
    echo: bool = Field(default_factory=lambda: os.getenv("WAREHOUSE_ECHO", "false").lower() == "true")

    @property
    def connection_string(self) -> str:
        """Explicit WAREHOUSE_URL, or a PostgreSQL URL built from the parts."""
        if self.url:
            return self.url
        return f"postgresql://{self.username}:{self.password}@{self.host}:{self.port}/{self.database}"


class StageConfig(BaseModel):
    """Public S3 stage holding the staged demo files."""

    bucket: str = Field(default_factory=lambda: os.getenv("STAGE_BUCKET", "demohubpublic"))
    prefix: str = Field(default_factory=lambda: os.getenv("STAGE_PREFIX", "data/"))
    region: str = Field(default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"))
    anonymous: bool = Field(default_factory=lambda: os.getenv("STAGE_ANONYMOUS", "true").lower() == "true")
    cache_dir: str = Field(default_factory=lambda: os.getenv("STAGE_CACHE_DIR", "data/stage"))


class CatalogConfig(BaseModel):
    """Course catalog scaffolding settings."""

    root: str = Field(default_factory=lambda: os.getenv("CATALOG_ROOT", "."))


class QualityConfig(BaseModel):
    """Data quality monitoring settings."""

    timezone: str = Field(default_factory=lambda: os.getenv("SESSION_TIMEZONE", "America/Chicago"))
    results_table: str = Field(
        default_factory=lambda: os.getenv("DQ_RESULTS_TABLE", "data_quality_monitoring_results")
    )


class Config(BaseModel):
    """Main configuration object."""

    warehouse: WarehouseConfig = Field(default_factory=WarehouseConfig)
    stage: StageConfig = Field(default_factory=StageConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    quality: QualityConfig = Field(default_factory=QualityConfig)

    # Project settings
    project_name: str = "demohub-catalog"
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


# Global configuration instance
config = Config()
