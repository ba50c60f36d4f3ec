"""Configuration for document generation.

Loaded from a YAML file. Keys may be written in snake_case or with the
camelCase names used by existing swaggerdoc configs (dirScanner, basePath,
apiInfo, enableSecurity, securityDefinitions, dirContract).
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from swagger_doc.errors import ConfigError

SECURITY_TYPES = ("apiKey", "oauth2", "basic")


class SwaggerDocConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_dir: Path = Path(".")
    dir_scanner: str = Field(default="app/controller", alias="dirScanner")
    suffix: str = ".js"
    dir_contract: str | None = Field(default="app/contract", alias="dirContract")
    base_path: str = Field(default="/", alias="basePath")
    api_info: dict = Field(
        default_factory=lambda: {
            "title": "swagger-doc",
            "description": "API documentation generated from source comments",
            "version": "1.0.0",
        },
        alias="apiInfo",
    )
    schemes: list[str] = ["http", "https"]
    consumes: list[str] = ["application/json"]
    produces: list[str] = ["application/json"]
    enable_security: bool = Field(default=False, alias="enableSecurity")
    security_definitions: dict[str, dict] = Field(default_factory=dict, alias="securityDefinitions")

    @field_validator("suffix")
    @classmethod
    def _suffix_has_dot(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"suffix must start with '.', got {v!r}")
        return v

    @field_validator("security_definitions")
    @classmethod
    def _known_security_types(cls, v: dict[str, dict]) -> dict[str, dict]:
        for name, scheme in v.items():
            scheme_type = scheme.get("type")
            if scheme_type not in SECURITY_TYPES:
                raise ValueError(f"security scheme {name!r} has unsupported type {scheme_type!r}")
            if scheme_type == "oauth2" and not isinstance(scheme.get("scopes"), dict):
                raise ValueError(f"oauth2 security scheme {name!r} needs a 'scopes' mapping")
        return v

    @property
    def scan_dir(self) -> Path:
        return self.base_dir / self.dir_scanner

    @property
    def contract_dir(self) -> Path | None:
        if not self.dir_contract:
            return None
        return self.base_dir / self.dir_contract


def load_config(file_path: Path) -> SwaggerDocConfig:
    """Load a YAML config file. base_dir defaults to the file's directory."""
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config {file_path} must be a mapping")

    base_dir = Path(data.pop("base_dir", data.pop("baseDir", ".")))
    if not base_dir.is_absolute():
        base_dir = file_path.parent / base_dir

    try:
        return SwaggerDocConfig(base_dir=base_dir, **data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {file_path}: {e}") from e
