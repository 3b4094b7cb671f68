"""Reader configuration for ``transaction_report``.

:class:`ReaderConfig` names the CSV columns, the two recognized transaction
type labels, and how the file is decoded. Defaults match the bank export this
tool was written for (``id``, ``tipo``, ``monto``; ``Crédito``/``Débito``).

Every field can be overridden from the environment with a
``TRANSACTION_REPORT_`` prefix, e.g. ``TRANSACTION_REPORT_CREDIT_LABEL``. The
CLI loads a local ``.env`` before calling :meth:`ReaderConfig.from_env`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

ENV_PREFIX = "TRANSACTION_REPORT_"

DEFAULT_CREDIT_LABEL = "Crédito"
DEFAULT_DEBIT_LABEL = "Débito"


class ReaderConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id_column: str = "id"
    type_column: str = "tipo"
    amount_column: str = "monto"
    credit_label: str = DEFAULT_CREDIT_LABEL
    debit_label: str = DEFAULT_DEBIT_LABEL
    encoding: str = "utf-8-sig"
    delimiter: str = ","

    @field_validator(
        "id_column", "type_column", "amount_column", "credit_label", "debit_label", "encoding"
    )
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must be non-empty")
        return v

    @field_validator("delimiter")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be exactly one character")
        return v

    @model_validator(mode="after")
    def _distinct_labels(self) -> ReaderConfig:
        if self.credit_label == self.debit_label:
            raise ValueError("credit_label and debit_label must differ")
        return self

    @property
    def required_columns(self) -> tuple[str, str, str]:
        return (self.id_column, self.type_column, self.amount_column)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReaderConfig:
        """Build a config from ``TRANSACTION_REPORT_*`` variables.

        Unset or empty variables keep the field default. Invalid values raise
        :class:`pydantic.ValidationError` (a ``ValueError``).
        """

        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = env.get(ENV_PREFIX + name.upper())
            if value:
                overrides[name] = value
        return cls(**overrides)


__all__ = ["DEFAULT_CREDIT_LABEL", "DEFAULT_DEBIT_LABEL", "ENV_PREFIX", "ReaderConfig"]
