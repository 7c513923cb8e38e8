"""Site-wide configuration shared by every page render.

Values are read from ``SITE_*`` environment variables (or a ``.env`` file) the
first time :func:`get_site_config` is called and then kept for the lifetime of
the process.  The model is frozen so it can be shared between concurrent
renders without locking.

Example:
    >>> config = SiteConfig(name="Notes", url="https://notes.example.com")
    >>> config.base_url
    'https://notes.example.com'
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NoindexRules(BaseModel):
    """Taxonomy listings that must be kept out of search indexes."""

    model_config = ConfigDict(frozen=True)

    tags: bool = True
    categories: bool = True


class SiteConfig(BaseSettings):
    """Read-only site configuration.

    Attributes:
        name: Site name, used for ``og:site_name`` and schema.org publisher
        description: Default page description
        default_image: Default social-sharing image (path or absolute URL)
        url: Absolute base URL of the site
        noindex: Which taxonomy listings are excluded from indexing
    """

    name: str = ""
    description: str = ""
    default_image: str = "/og-image.png"
    url: str = ""
    noindex: NoindexRules = NoindexRules()

    model_config = SettingsConfigDict(
        env_prefix="SITE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("url")
    @classmethod
    def strip_url(cls: type["SiteConfig"], v: str) -> str:
        return v.strip()

    @property
    def base_url(self) -> str:
        return self.url


@lru_cache(maxsize=1)
def get_site_config() -> SiteConfig:
    """Return the process-wide :class:`SiteConfig`, loading it on first use."""
    return SiteConfig()
