"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clixmcp import __version__

DOCS_INDEX_URL = "https://docs.clix.so/llms.txt"
SDK_MAPPING_URL = (
    "https://raw.githubusercontent.com/clix-so/clix-mcp-server/refs/heads/main/llms.txt"
)


class FetchConfig(BaseModel):
    """Outbound HTTP settings shared by every search tool."""

    user_agent: str = f"clix-mcp-server/{__version__}"
    request_timeout: float = Field(default=15.0, gt=0)  # seconds, per index request
    fetch_timeout: float = Field(default=10.0, gt=0)  # seconds, per content fetch
    overall_timeout: float = Field(default=30.0, gt=0)  # seconds, whole search call


class RankingConfig(BaseModel):
    """BM25 constants and field weights."""

    k1: float = Field(default=1.2, ge=0)
    b: float = Field(default=0.75, ge=0, le=1)
    title_weight: float = Field(default=3.0, gt=0)
    description_weight: float = Field(default=1.0, gt=0)

    @model_validator(mode="after")
    def _title_outweighs_description(self) -> "RankingConfig":
        if self.title_weight < 1.5 * self.description_weight:
            raise ValueError("title_weight must be at least 1.5x description_weight")
        # A description hit saturates at (k1 + 1) times its idf; an unnormalized title hit is worth its idf.
        if self.title_weight <= self.description_weight * (self.k1 + 1):
            raise ValueError("title_weight must exceed description_weight * (k1 + 1)")
        return self


class DocsSearchConfig(BaseModel):
    """Documentation search tool configuration."""

    enabled: bool = True
    index_url: str = DOCS_INDEX_URL
    max_content_chars: int = Field(default=8000, ge=200)


class SdkSearchConfig(BaseModel):
    """SDK source search tool configuration."""

    enabled: bool = True
    index_url: str = SDK_MAPPING_URL
    max_content_chars: int = Field(default=6000, ge=200)


class ToolsConfig(BaseModel):
    """Tools configuration."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    docs: DocsSearchConfig = Field(default_factory=DocsSearchConfig)
    sdk: SdkSearchConfig = Field(default_factory=SdkSearchConfig)


class Config(BaseSettings):
    """Root configuration for clixmcp."""

    api_key: str = ""
    api_base_url: str = "https://api.clix.so"
    user_id: str | None = None
    client_id: str | None = None
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    model_config = SettingsConfigDict(
        env_prefix="CLIX_",
        env_nested_delimiter="__",
    )
