# Palettes run from densest glyph to the blank one; the mapper indexes them by luminance.
PALETTE = "█░@%=+*:-. "

# Wider ramp with finer steps in the mid tones
SIMPLE_PALETTE = "█░@&$%!()=+^*;:_-\"/,. "

BLANK = PALETTE[-1]
