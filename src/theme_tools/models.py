from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCSS_SYNTAX = "postcss-scss"


class LintOverride(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    files: list[Any] | None = None
    custom_syntax: Any = Field(default=None, alias="customSyntax")

    @field_validator("files", mode="before")
    @classmethod
    def _files_must_be_list(cls, value: Any) -> list[Any] | None:
        if isinstance(value, list):
            return value
        if isinstance(value, str):
            return [value]
        # Anything else is not a pattern list; treat the override as unscoped.
        return None

    def applies_to_scss(self) -> bool:
        if self.custom_syntax != SCSS_SYNTAX:
            return False
        # An override without a files list applies to every file.
        if self.files is None:
            return True
        return any(isinstance(pattern, str) and "scss" in pattern for pattern in self.files)


class LintConfig(BaseModel):
    """The subset of ``.stylelintrc.json`` the lint wrapper inspects."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    plugins: list[Any] = Field(default_factory=list)
    overrides: list[LintOverride] = Field(default_factory=list)
    custom_syntax: Any = Field(default=None, alias="customSyntax")

    @field_validator("plugins", mode="before")
    @classmethod
    def _plugins_must_be_list(cls, value: Any) -> list[Any]:
        return value if isinstance(value, list) else []

    @field_validator("overrides", mode="before")
    @classmethod
    def _overrides_must_be_objects(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]

    def has_plugin(self, name: str) -> bool:
        return name in self.plugins

    def has_scss_syntax(self) -> bool:
        # Root-level customSyntax is the pre-v15 form; overrides are preferred.
        if self.custom_syntax == SCSS_SYNTAX:
            return True
        return any(override.applies_to_scss() for override in self.overrides)
