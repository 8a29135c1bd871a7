"""Asset domain model.

Assets are opaque identifiers used only as registry keys.  They are pure
domain objects — no ORM or persistence concerns.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import AssetKind

MAX_ASSETS = 256  # asset indices are 8-bit
_KEY_PART = r"^[^:]+$"  # ":" separates key parts


class Asset(BaseModel):
    """A priced asset: either the chain's native asset or an issued one.

    NATIVE carries neither code nor issuer.
    OTHER requires both a code (e.g. "USDC") and the issuing authority.
    """

    model_config = ConfigDict(frozen=True)

    kind: AssetKind
    code: str | None = Field(default=None, pattern=_KEY_PART)
    issuer: str | None = Field(default=None, pattern=_KEY_PART)

    @model_validator(mode="after")
    def _fields_match_kind(self) -> Asset:
        if self.kind == AssetKind.NATIVE:
            if self.code is not None or self.issuer is not None:
                raise ValueError("native asset takes no code or issuer")
        elif self.code is None or self.issuer is None:
            raise ValueError("other asset requires both code and issuer")
        return self

    @classmethod
    def native(cls) -> Asset:
        return cls(kind=AssetKind.NATIVE)

    @classmethod
    def other(cls, code: str, issuer: str) -> Asset:
        return cls(kind=AssetKind.OTHER, code=code, issuer=issuer)

    @classmethod
    def from_key(cls, key: str) -> Asset:
        """Inverse of `key`."""
        if key == AssetKind.NATIVE.value:
            return cls.native()
        kind, sep, rest = key.partition(":")
        code, sep2, issuer = rest.partition(":")
        if kind != AssetKind.OTHER.value or not sep or not sep2:
            raise ValueError(f"Malformed asset key: {key!r}")
        return cls.other(code, issuer)

    @property
    def key(self) -> str:
        """Canonical storage identity: "native" or "other:<code>:<issuer>"."""
        if self.kind == AssetKind.NATIVE:
            return AssetKind.NATIVE.value
        return f"{AssetKind.OTHER.value}:{self.code}:{self.issuer}"
