# materialcolor

Perceptually accurate color tools in pure Python, with no dependencies.
Colors are plain integers in ARGB form, e.g. `0xFF4285F4`.

- `materialcolor.color_utils`: ARGB packing and unpacking, sRGB
  linearization, L* and Y conversions, angle helpers (`sanitize_degrees_double`,
  `diff_degrees`, `rotation_direction`), `lerp` and `matrix_multiply`.
- `materialcolor.viewing_conditions`: the frozen `ViewingConditions`
  dataclass, `create_viewing_conditions`, `default_with_background_lstar`,
  `format_default_frame` and the `DEFAULT_VIEWING_CONDITIONS` constant.
- `materialcolor.cam`: the CAM16 model. `Cam` holds hue, chroma, J, Q, M, s
  and the UCS coordinates J*, a*, b*; `cam_from_int`, `int_from_cam`,
  `cam_from_xyz_and_viewing_conditions`, `cam_from_jch_and_viewing_conditions`,
  `cam_from_ucs_and_viewing_conditions` and `cam_distance` convert and compare.
- `materialcolor.hct_solver`: `solve_to_int`, `solve_to_cam` and
  `int_from_hcl` find an sRGB color with a given hue, chroma and L*. When the
  chroma is out of gamut, hue and L* are kept and chroma is maximised.
- `materialcolor.hct`: the `Hct` class. Its `hue`, `chroma` and `tone`
  properties can be assigned; each assignment re-solves the color, so chroma
  may come out lower than asked for.
- `materialcolor.contrast`: `ratio_of_tones`, `ratio_of_ys`, and `lighter` /
  `darker`, which return a tone reaching a contrast ratio or `None` when none
  exists; `lighter_unsafe` / `darker_unsafe` return 100 / 0 instead.
- `materialcolor.blend`: `blend_harmonize`, `blend_hct_hue` and
  `blend_cam16_ucs`.
- `materialcolor.dislike`: `is_disliked` and `fix_if_disliked` for dark
  yellow-greens.
- `materialcolor.contrast_curve`: `ContrastCurve`, a value given at contrast
  levels -1.0, 0.0, 0.5 and 1.0 and interpolated between them.
- `materialcolor.dynamic_color`: `DynamicColor`, `ToneDeltaPair`,
  `TonePolarity` and the helpers `foreground_tone`,
  `enable_light_foreground`, `tone_prefers_light_foreground` and
  `tone_allows_light_foreground`.
- `materialcolor.variant`: the `Variant` enum and `variant_to_string`.

## Installation

```
pip install .
```

## Examples

```python
from materialcolor.hct import Hct
from materialcolor.blend import blend_harmonize
from materialcolor.contrast import ratio_of_tones, lighter
from materialcolor.dislike import is_disliked, fix_if_disliked

color = Hct.from_argb(0xFF4285F4)
print(color.hue, color.chroma, color.tone)

# From hue, chroma and tone; chroma is reduced if out of gamut.
teal = Hct.from_hct(180.0, 40.0, 50.0)
print(hex(teal.to_int()))

teal.tone = 80.0            # re-solves the color at the new tone
print(hex(teal.to_int()))

# Rotate a design color's hue at most 15 degrees toward a key color.
print(hex(blend_harmonize(0xFFFF0000, 0xFF0000FF)))

print(ratio_of_tones(0.0, 100.0))   # about 21.0
print(lighter(40.0, 4.5))           # a tone >= 40 reaching 4.5:1, or None

olive = Hct.from_hct(100.0,40.0, 50.0)
if is_disliked(olive):
    olive = fix_if_disliked(olive)  # same hue and chroma at tone 70
```

Lower-level CAM16 access:

```python
from materialcolor.cam import cam_from_int, int_from_cam, cam_distance

cam = cam_from_int(0xFF00FF00)
print(cam.hue, cam.chroma, cam.j)
print(hex(int_from_cam(cam)))
print(cam_distance(cam_from_int(0xFFFF0000), cam_from_int(0xFF00FF00)))
```

### Dynamic colors

A `DynamicColor` is resolved against a *scheme*, which is any object with
`contrast_level` and `is_dark` attributes, and draws its color from a
*palette*, any object whose `get(tone)` returns an ARGB integer.

```python
from dataclasses import dataclass

from materialcolor.contrast_curve import ContrastCurve
from materialcolor.dynamic_color import DynamicColor
from materialcolor.hct import Hct


@dataclass
class Palette:
    hue: float
    chroma: float

    def get(self, tone: float) -> int:
        return Hct.from_hct(self.hue, self.chroma, tone).to_int()


@dataclass
class Scheme:
    is_dark: bool
    contrast_level: float
    neutral: Palette
    primary: Palette


surface = DynamicColor(
    "surface",
    palette=lambda s: s.neutral,
    tone=lambda s: 6.0 if s.is_dark else 98.0,
    is_background=True,
)
on_surface = DynamicColor(
    "on_surface",
    palette=lambda s: s.neutral,
    tone=lambda s: 90.0 if s.is_dark else 10.0,
    background=lambda s: surface,
    contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
)

scheme = Scheme(False, 0.0, Palette(260.0, 4.0), Palette(260.0, 48.0))
print(on_surface.get_tone(scheme), hex(on_surface.get_argb(scheme)))
```

## What this package does not do

It provides no tonal palette type, no scheme type, and no predefined set of
color roles (primary, surface, error and so on). `Variant` only names scheme
styles; nothing here builds a scheme from it. To use `DynamicColor`, supply
your own scheme and palette objects as shown above. There is no command-line
tool.

## Running the tests

```
pip install .[test]
pytest
```