"""Type aliases used across za_identity."""

from __future__ import annotations

SanitizedDigits = str
IdentityNumber = str
YYMMDD = str
