"""Configuration models."""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AWSEC2Config(BaseModel):
    """Defaults layered onto every aws-ec2 options object."""
    repo_upgrade: Literal["none", "security", "bugfix", "all"] = Field(default="none")
    enable_monitoring: bool = Field(default=False)


class SoftLayerConfig(BaseModel):
    """Defaults layered onto every softlayer options object."""
    domain_name: Optional[str] = Field(None, description="Domain for ordered guests")


class NimbusConfig(BaseModel):
    """Main configuration model."""
    model_config = ConfigDict(extra="ignore")

    log_level: str = Field(default="INFO")
    default_provider: str = Field(default="generic")
    templates_dir: str = Field(default="templates")
    aws_ec2: AWSEC2Config = Field(default_factory=AWSEC2Config)
    softlayer: SoftLayerConfig = Field(default_factory=SoftLayerConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()
