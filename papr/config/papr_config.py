"""Configuration models for parsing and rendering."""

from pydantic import BaseModel, Field, field_validator


class ParserConfig(BaseModel):
    """Parser settings."""

    workers: int = 1
    strict: bool = True

    @field_validator("workers")
    def validate_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("workers must be at least 1")
        return v


class StyleConfig(BaseModel):
    """rich style strings per rendered field ("" disables styling)."""

    daemon: str = "dim"
    timestamp: str = "dim"
    header_key: str = "bold"
    name: str = "bold green"
    user: str = "green"
    domain: str = "cyan"
    date: str = "yellow"
    subject_tag: str = "magenta"
    subject_version: str = "bold blue"
    subject_index: str = "blue"
    description: str = "bold"
    footer_key: str = "bold cyan"
    footer_value: str = ""
    delimiter: str = "dim"


class EmailDisplayConfig(BaseModel):
    """How addresses are displayed."""

    domain_separator: str = "@"
    omit_domain: bool = False


class PersonDisplayConfig(BaseModel):
    """How persons are displayed."""

    # Only applies to persons that have a display name
    omit_email: bool = False


class FrontMatterConfig(BaseModel):
    """Front-matter display mode settings."""

    headers: list[str] = Field(default_factory=lambda: ["From", "Date", "Subject"])


class RendererConfig(BaseModel):
    """Renderer configuration."""

    color: bool = True
    styles: StyleConfig = Field(default_factory=StyleConfig)
    email: EmailDisplayConfig = Field(default_factory=EmailDisplayConfig)
    person: PersonDisplayConfig = Field(default_factory=PersonDisplayConfig)
    frontmatter: FrontMatterConfig = Field(default_factory=FrontMatterConfig)


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    parser: ParserConfig = Field(default_factory=ParserConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
