"""Quickstart example for strictdate.

This example demonstrates compiling a pattern once, parsing strictly,
and formatting at full fractional-second resolution.

Note: Examples print errors with str(error), which renders the
diagnostic with a caret under the offending input.
"""

from strictdate import (
    Instant,
    compile_pattern,
    format_instant,
    parse,
    parse_zoned,
)

# Example 1: Compile once, reuse everywhere
print("=" * 50)
print("Example 1: Compile and Parse")
print("=" * 50)

pattern, errors = compile_pattern("dd/MM/yyyy")
assert pattern is not None, errors

instant, errors = parse("30/12/2019", pattern)
print(instant)
# Output: 2019-12-30T00:00:00.000000000

# Example 2: Week-based year is rejected before any input is seen
print("\n" + "=" * 50)
print("Example 2: No Week-Based Year")
print("=" * 50)

_, errors = compile_pattern("dd/MM/YYYY")
for error in errors:
    print(error)

# Example 3: No leniency
print("\n" + "=" * 50)
print("Example 3: Strict Matching")
print("=" * 50)

us_pattern, _ = compile_pattern("MM/dd/yyyy")
assert us_pattern is not None
_, errors = parse("2020/02/20", us_pattern)
print(errors[0])

_, errors = parse("31/04/2020", pattern)
print(errors[0])

_, errors = parse("29/02/2021", pattern)
print(errors[0])

# Example 4: Sub-second fidelity
print("\n" + "=" * 50)
print("Example 4: Fractional Seconds")
print("=" * 50)

iso, _ = compile_pattern("yyyy-MM-dd'T'HH:mm:ss.SSSSS'Z'")
assert iso is not None
instant, _ = parse("2019-12-30T15:26:22.23879Z", iso)
assert instant is not None
print(instant.nanosecond)
# Output: 238790000

text, _ = format_instant(instant, iso)
print(text)
# Output: 2019-12-30T15:26:22.23879Z

# Example 5: Zone offsets
print("\n" + "=" * 50)
print("Example 5: Zone Offsets")
print("=" * 50)

zoned_pattern, _ = compile_pattern("yyyy-MM-dd HH:mmXXX")
assert zoned_pattern is not None
zoned, _ = parse_zoned("2020-06-01 09:00+02:00", zoned_pattern)
assert zoned is not None
print(zoned.instant, zoned.offset_minutes)
# Output: 2020-06-01T07:00:00.000000000 120

text, _ = format_instant(Instant.of(2020, 6, 1, 7), zoned_pattern, zone_offset_minutes=-300)
print(text)
# Output: 2020-06-01 02:00-05:00
