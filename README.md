# paintkit

Building blocks for a raster paint program, in plain Python with NumPy:

- **Lanczos image resizing** (`paintkit.lancir`, built on
  `paintkit.lancir_filters` and `paintkit.lancir_scanline`): resize 1 to 4
  channel images of `uint8`, `uint16`, `uint32` (treated as 16-bit range),
  `float32` or `float64` data.
- **Script function descriptions** (`paintkit.script_info`): `FunctionInfo`
  and `ParameterInfo` describe a script function and its parameters.
- **Script effect settings** (`paintkit.script_settings`): a settings model
  with one typed control per parameter of a script function.
- **Shortcut capture** (`paintkit.shortcut`): records a key combination as
  text such as `Ctrl+S`.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Resizing an image

```python
import numpy as np
from paintkit.lancir import LancirParams, LancirResizer, resize_image

src = np.random.randint(0, 256, size=(100, 150, 3), dtype=np.uint8)

# One call with the default parameters (Lanczos a = 3, centred output).
small = resize_image(src, 75, 50, None)
print(small.shape)  # (50, 75, 3)

# Reuse a resizer for several images; its filter banks and positions are cached.
resizer = LancirResizer()
params = LancirParams()
frames = [resizer.resize(img, 300, 200, params) for img in (src, src)]

# Convert to floating point while resizing: values are rescaled to 0..1.
as_float = resize_image(src, 75, 50, LancirParams(out_dtype=np.float32))
```

`LancirParams` holds the resizing steps `kx`/`ky` (0 picks them from the
image sizes; a negative step skips the centring adjustment), the start
offsets `ox`/`oy`, the Lanczos parameter `la` (at least 2.0) and `out_dtype`.
Integer output is rounded and clamped to the range of its type
(`round_clamp` does this for a single value); floating-point output is not
clamped. An image with zero width or height resizes to all zeros. Invalid
arguments raise `ValueError`.

The lower-level pieces can be used directly: `ResizeFilters` builds and caches
normalised fractional-delay filters, `ResizeScanline` computes per-pixel
positions and padding for one axis, and `copy_scanline_vertical`,
`pad_scanline_horizontal` and `resize_scanline` work on single scanlines.

## Script effect parameters

```python
from paintkit.script_info import FunctionInfo, ParameterInfo
from paintkit.script_settings import ScriptEffectSettings

info = FunctionInfo(
    name="blur",
    parameters=[
        ParameterInfo(name="image", annotation="<class 'numpy.ndarray'>"),
        ParameterInfo(name="radius", full_name="Radius",
                      annotation="<class 'float'>", default_value=1.5),
    ],
)
print(info.is_creating_function())  # False: the first parameter is an image

settings = ScriptEffectSettings(info)
print(settings.effect_settings())   # [1.5]
settings.set_text(0, "2.25")
print(settings.effect_settings())   # [2.25]
```

`control_kind` picks a `ControlKind` from an annotation's text,
`format_float` formats a number with six decimals, and `parse_complex` turns
text such as `1.5-2j` into a complex number. `set_text` raises `ValueError`
for text that a float or complex control would not accept, and calls the
optional `on_change` callback when a value changes.

## Shortcuts

```python
from paintkit.shortcut import Modifier, ShortcutEdit

edit = ShortcutEdit()
edit.key_press("s", Modifier.CTRL)     # returns "Ctrl+S"
edit.key_press("Shift")                # modifier alone: ignored, returns None
print(edit.text, edit.clear_button_visible)  # Ctrl+S True
edit.clear()
```

## What is not included

paintkit has no window, canvas or drawing tools, no colour palette or pen
state, and no ready-made convolution filter matrices. It does not load or run
scripts and does not read or write image files; it works on arrays and
values you pass in. There is no command-line program.