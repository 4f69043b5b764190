"""Colours whose tone depends on a scheme and on contrast requirements.

A scheme is any object with ``contrast_level`` (float) and ``is_dark`` (bool)
attributes. A palette is any object whose ``get(tone)`` returns an ARGB
integer.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from materialcolor.contrast import darker, darker_unsafe, lighter, lighter_unsafe, ratio_of_tones
from materialcolor.contrast_curve import ContrastCurve
from materialcolor.hct import Hct

Scheme = Any
Palette = Any


def _round(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def tone_prefers_light_foreground(tone: float) -> bool:
    """Whether ``tone`` looks best with a light foreground (below T60)."""
    return _round(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    """Whether ``tone`` can reach a 4.5 contrast ratio with a lighter colour."""
    return _round(tone) <= 49


def enable_light_foreground(tone: float) -> float:
    """Darken ``tone`` to 49 if it prefers, but cannot support, a light foreground."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """A foreground tone reaching as close to ``ratio`` with ``bg_tone`` as possible."""
    lighter_tone = lighter_unsafe(bg_tone, ratio)
    darker_tone = darker_unsafe(bg_tone, ratio)
    lighter_ratio = ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = ratio_of_tones(darker_tone, bg_tone)
    if tone_prefers_light_foreground(bg_tone):
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone
    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


class TonePolarity(enum.Enum):
    """How the tone of one colour relates to another's."""

    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True)
class ToneDeltaPair:
    """A constraint that two colours' tones stay ``delta`` apart.

    ``polarity`` describes ``role_a`` compared with ``role_b``; "nearer" and
    "farther" refer to closeness to the surface. ``stay_together`` keeps both
    roles on the same side of the awkward zone T50-59.
    """

    role_a: "DynamicColor"
    role_b: "DynamicColor"
    delta: float
    polarity: TonePolarity
    stay_together: bool


@dataclass
class DynamicColor:
    """A named colour resolved against a scheme.

    ``palette`` and ``tone`` give the colour's palette and initial tone for a
    scheme; ``background``, ``second_background``, ``contrast_curve`` and
    ``tone_delta_pair`` adjust the tone to meet contrast requirements.
    """

    name: str
    palette: Callable[[Scheme], Palette]
    tone: Callable[[Scheme], float]
    is_background: bool = False
    background: Optional[Callable[[Scheme], "DynamicColor"]] = None
    second_background: Optional[Callable[[Scheme], "DynamicColor"]] = None
    contrast_curve: Optional[ContrastCurve] = None
    tone_delta_pair: Optional[Callable[[Scheme], ToneDeltaPair]] = None

    @classmethod
    def from_palette(
        cls,
        name: str,
        palette: Callable[[Scheme], Palette],
        tone: Callable[[Scheme], float],
    ) -> "DynamicColor":
        """A colour with only a name, palette and tone."""
        return cls(name, palette, tone)

    def get_argb(self, scheme: Scheme) -> int:
        """The ARGB colour in ``scheme``."""
        return self.palette(scheme).get(self.get_tone(scheme))

    def get_hct(self, scheme: Scheme) -> Hct:
        """The HCT colour in ``scheme``."""
        return Hct.from_argb(self.get_argb(scheme))

    def _curve(self) -> ContrastCurve:
        if self.contrast_curve is None:
            raise ValueError(f"dynamic color {self.name!r} has no contrast curve")
        return self.contrast_curve

    def _background_tone(self, scheme: Scheme) -> float:
        if self.background is None:
            raise ValueError(f"dynamic color {self.name!r} has no background")
        return self.background(scheme).get_tone(scheme)

    def get_tone(self, scheme: Scheme) -> float:
        """The tone in ``scheme``, adjusted for contrast and tone constraints."""
        if self.tone_delta_pair is not None:
            return self._paired_tone(scheme)
        return self._single_tone(scheme)

    def _paired_tone(self, scheme: Scheme) -> float:
        decreasing_contrast = scheme.contrast_level < 0
        pair = self.tone_delta_pair(scheme)
        delta = pair.delta
        bg_tone = self._background_tone(scheme)

        a_is_nearer = (
            pair.polarity is TonePolarity.NEARER
            or (pair.polarity is TonePolarity.LIGHTER and not scheme.is_dark)
            or (pair.polarity is TonePolarity.DARKER and scheme.is_dark)
        )
        nearer, farther = (
            (pair.role_a, pair.role_b) if a_is_nearer else (pair.role_b, pair.role_a)
        )
        am_nearer = self.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0

        n_contrast = nearer._curve().get(scheme.contrast_level)
        f_contrast = farther._curve().get(scheme.contrast_level)

        n_initial_tone = nearer.tone(scheme)
        n_tone = (
            n_initial_tone
            if ratio_of_tones(bg_tone, n_initial_tone) >= n_contrast
            else foreground_tone(bg_tone, n_contrast)
        )
        f_initial_tone = farther.tone(scheme)
        f_tone = (
            f_initial_tone
            if ratio_of_tones(bg_tone, f_initial_tone) >= f_contrast
            else foreground_tone(bg_tone, f_contrast)
        )

        if decreasing_contrast:
            n_tone = foreground_tone(bg_tone, n_contrast)
            f_tone = foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            f_tone = min(100.0, max(0.0, n_tone + delta * expansion_dir))
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = min(100.0, max(0.0, f_tone - delta * expansion_dir))

        def move_both() -> None:
            nonlocal n_tone, f_tone
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)

        if 50 <= n_tone < 60:
            move_both()
        elif 50 <= f_tone < 60:
            if pair.stay_together:
                move_both()
            else:
                f_tone = 60.0 if expansion_dir > 0 else 49.0

        return n_tone if am_nearer else f_tone

    def _single_tone(self, scheme: Scheme) -> float:
        answer = self.tone(scheme)
        if self.background is None:
            return answer

        bg_tone = self._background_tone(scheme)
        desired_ratio = self._curve().get(scheme.contrast_level)

        if ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = foreground_tone(bg_tone, desired_ratio)
        if scheme.contrast_level < 0:
            answer = foreground_tone(bg_tone, desired_ratio)

        if self.is_background and 50 <= answer < 60:
            answer = 49.0 if ratio_of_tones(49, bg_tone) >= desired_ratio else 60.0

        if self.second_background is None:
            return answer

        bg_tone_1 = bg_tone
        bg_tone_2 = self.second_background(scheme).get_tone(scheme)
        upper = max(bg_tone_1, bg_tone_2)
        lower = min(bg_tone_1, bg_tone_2)

        if (
            ratio_of_tones(upper, answer) >= desired_ratio
            and ratio_of_tones(lower, answer) >= desired_ratio
        ):
            return answer

        light_option = lighter(upper, desired_ratio)
        dark_option = darker(lower, desired_ratio)
        availables = [option for option in (light_option, dark_option) if option is not None]

        if tone_prefers_light_foreground(bg_tone_1) or tone_prefers_light_foreground(bg_tone_2):
            return 100.0 if light_option is None else light_option
        if len(availables) == 1:
            return availables[0]
        return 0.0 if dark_option is None else dark_option