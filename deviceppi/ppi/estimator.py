"""
Fallback PPI estimate for devices missing from the classification table.

The rules only use the form factor and the scale factors:

    tablet, logical 2x            -> 264
    tablet, other                 -> 132
    phone,  logical 3x, native 3x -> 458
    phone,  logical 3x, other     -> 401  (downsampled 3x buffer)
    phone,  other                 -> 326

Every class other than TABLET takes the phone branch.
"""

from deviceppi.ppi.types import DeviceClass, ScaleSignal

TABLET_RETINA_PPI = 264.0
TABLET_BASE_PPI = 132.0
PHONE_NATIVE_3X_PPI = 458.0
PHONE_DOWNSAMPLED_3X_PPI = 401.0
PHONE_BASE_PPI = 326.0

GUESS_VALUES = frozenset(
    [
        TABLET_RETINA_PPI,
        TABLET_BASE_PPI,
        PHONE_NATIVE_3X_PPI,
        PHONE_DOWNSAMPLED_3X_PPI,
        PHONE_BASE_PPI,
    ]
)


def guess(device_class: DeviceClass, scale: ScaleSignal) -> float:
    """Return a best-guess PPI for the given form factor and scale."""
    if device_class == DeviceClass.TABLET:
        return TABLET_RETINA_PPI if scale.logical_scale == 2 else TABLET_BASE_PPI
    if scale.logical_scale == 3:
        if scale.native_scale == 3:
            return PHONE_NATIVE_3X_PPI
        return PHONE_DOWNSAMPLED_3X_PPI
    return PHONE_BASE_PPI
