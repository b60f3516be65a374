import random
from typing import Literal, Optional

from pydantic import Field, PositiveInt, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from typing_extensions import Self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="PASSGEN_",
    )

    min_length: PositiveInt = 8
    max_length: PositiveInt = 128
    random_source: Literal["system", "pseudo"] = "system"
    seed: Optional[int] = None
    max_attempts: Optional[PositiveInt] = Field(default=None)

    @model_validator(mode="after")
    def check_length_range(self) -> Self:
        if self.min_length > self.max_length:
            raise ValueError(
                "min_length (%d) must not be greater than max_length (%d)"
                % (self.min_length, self.max_length)
            )
        return self

    def create_rng(self) -> random.Random:
        """
        Returns the operating system CSPRNG, unless a seed is configured or the
        ``pseudo`` source is selected.
        """
        if self.seed is not None or self.random_source == "pseudo":
            return random.Random(self.seed)
        return random.SystemRandom()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings
