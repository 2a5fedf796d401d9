"""Uploader configuration.

The configuration is a frozen struct with defaults. Options supplied by the
caller override the defaults once, at construction; unrecognized keys are kept
on the model but have no effect.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from squash_uploader.exceptions import ConfigurationError
from squash_uploader.matchers import StatusClass

DEFAULT_OPEN_TIMEOUT = 15
DEFAULT_READ_TIMEOUT = 15


class UploaderConfig(BaseModel):
    """Options for communicating with a Squash host.

    Attributes:
        open_timeout: Seconds to wait when opening a connection
        read_timeout: Seconds to wait for data from the host
        skip_verification: If True, TLS peer verification is not performed.
            Only meant for self-signed or test endpoints.
        success_criteria: Status classes or status codes that count as a
            successful response. Checked when a batch is dispatched.

    Example:
        >>> config = UploaderConfig.from_options({"open_timeout": 5})
        >>> config.open_timeout, config.read_timeout
        (5.0, 15)
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    open_timeout: float = Field(
        default=DEFAULT_OPEN_TIMEOUT,
        gt=0,
        validation_alias=AliasChoices("open_timeout", "openTimeoutSeconds"),
    )
    read_timeout: float = Field(
        default=DEFAULT_READ_TIMEOUT,
        gt=0,
        validation_alias=AliasChoices("read_timeout", "readTimeoutSeconds"),
    )
    skip_verification: bool = Field(
        default=False,
        validation_alias=AliasChoices("skip_verification", "skipVerification"),
    )
    success_criteria: tuple[Any, ...] = Field(
        default=(StatusClass.SUCCESS,),
        validation_alias=AliasChoices("success_criteria", "successCriteria", "success"),
    )

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | UploaderConfig | None = None
    ) -> UploaderConfig:
        """Merge caller options over the defaults.

        Args:
            options: Option overlay, or an already built configuration. Keys
                are converted to strings; unrecognized ones are kept as extras.

        Returns:
            Effective configuration

        Raises:
            ConfigurationError: If a recognized option has an invalid value
        """
        if isinstance(options, UploaderConfig):
            return options

        try:
            return cls.model_validate(
                {str(key): value for key, value in (options or {}).items()}
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid uploader options: {e}", cause=e) from e

    @property
    def timeout(self) -> tuple[float, float]:
        """Connect and read timeouts in the form ``requests`` expects."""
        return (self.open_timeout, self.read_timeout)

    @property
    def verify(self) -> bool:
        return not self.skip_verification
