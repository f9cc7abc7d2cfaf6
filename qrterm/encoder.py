"""QR encoding via the qrcode library, reduced to a flat module matrix."""

from enum import Enum

import qrcode
import qrcode.constants
from qrcode.exceptions import DataOverflowError

from qrterm.logging import audit, get_logger
from qrterm.matrix import ModuleColor, flatten_modules

log = get_logger("encoder")

__all__ = ["DataOverflowError", "ECCLevel", "ECC_NAMES", "DEFAULT_ECC", "get_module_matrix"]


class ECCLevel(Enum):
    L = qrcode.constants.ERROR_CORRECT_L  # 7%
    M = qrcode.constants.ERROR_CORRECT_M  # 15%
    Q = qrcode.constants.ERROR_CORRECT_Q  # 25%
    H = qrcode.constants.ERROR_CORRECT_H  # 30%


ECC_NAMES = {"L": ECCLevel.L, "M": ECCLevel.M, "Q": ECCLevel.Q, "H": ECCLevel.H}

DEFAULT_ECC = "M"


def _ecc_level(ecc: str) -> ECCLevel:
    try:
        return ECC_NAMES[ecc.upper()]
    except KeyError:
        raise ValueError(f"unknown error correction level {ecc!r}, expected one of L/M/Q/H") from None


def get_module_matrix(
    data: str,
    ecc: str = DEFAULT_ECC,
    version: int | None = None,
    mask: int | None = None,
) -> list[ModuleColor]:
    """Encode ``data`` and return its modules as a flat row-major bitmatrix.

    No quiet zone is included; padding is the caller's job.

    Args:
        data: Text to encode.
        ecc: Error correction level: L/M/Q/H.
        version: QR version 1-40 (None = smallest that fits).
        mask: Mask pattern 0-7 (None = auto-select best).

    Raises:
        DataOverflowError: ``data`` does not fit the requested version, or
            any version at this error correction level.
        ValueError: invalid ``ecc``, ``version`` or ``mask``.
    """
    ecc_level = _ecc_level(ecc)
    qr = qrcode.QRCode(
        version=version,
        error_correction=ecc_level.value,
        box_size=1,
        border=0,
        mask_pattern=mask,
    )
    qr.add_data(data)
    if version is None:
        try:
            qr.make(fit=True)
        except ValueError as exc:
            # qrcode >= 8 reports "no version fits" as an invalid version 41
            raise DataOverflowError(f"data does not fit any QR version at level {ecc_level.name}") from exc
    else:
        qr.make(fit=False)

    size = qr.version * 4 + 17
    audit("qr.encoded", logger=log,
          data=data[:80], version=qr.version, size=f"{size}x{size}",
          ecc=ecc_level.name, mask=mask if mask is not None else "auto")
    return flatten_modules(qr.modules)
