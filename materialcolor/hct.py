"""HCT colours: CAM16 hue and chroma with L* as tone."""

from __future__ import annotations

from materialcolor.cam import cam_from_int
from materialcolor.color_utils import lstar_from_argb
from materialcolor.hct_solver import solve_to_int


class Hct:
    """A colour described by hue, chroma and tone.

    Hue and chroma come from CAM16 in default viewing conditions; tone is the
    L* of L*a*b*. A tone difference of 40 guarantees a contrast ratio of at
    least 3.0, and a difference of 50 one of at least 4.5.

    Assigning ``hue``, ``chroma`` or ``tone`` re-solves the colour; chroma may
    come out lower than requested, since its maximum depends on hue and tone.
    """

    __slots__ = ("_hue", "_chroma", "_tone", "_argb")

    def __init__(self, argb: int = 0) -> None:
        self._set_internal_state(argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """Create the colour closest to the given hue, chroma and tone."""
        return cls(solve_to_int(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> "Hct":
        """Create an HCT colour from an ARGB integer."""
        return cls(argb)

    @property
    def hue(self) -> float:
        """Hue in degrees, 0 <= hue < 360."""
        return self._hue

    @hue.setter
    def hue(self, new_hue: float) -> None:
        self._set_internal_state(solve_to_int(new_hue, self._chroma, self._tone))

    @property
    def chroma(self) -> float:
        """CAM16 chroma."""
        return self._chroma

    @chroma.setter
    def chroma(self, new_chroma: float) -> None:
        self._set_internal_state(solve_to_int(self._hue, new_chroma, self._tone))

    @property
    def tone(self) -> float:
        """Tone (L*), 0 <= tone <= 100."""
        return self._tone

    @tone.setter
    def tone(self, new_tone: float) -> None:
        self._set_internal_state(solve_to_int(self._hue, self._chroma, new_tone))

    def to_int(self) -> int:
        """Return the colour as an ARGB integer."""
        return self._argb

    def __lt__(self, other: "Hct") -> bool:
        return self._hue < other._hue

    def __repr__(self) -> str:
        return (
            f"Hct(hue={self._hue:.3f}, chroma={self._chroma:.3f}, "
            f"tone={self._tone:.3f}, argb=0x{self._argb:08X})"
        )

    def _set_internal_state(self, argb: int) -> None:
        self._argb = argb
        cam = cam_from_int(argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(argb)