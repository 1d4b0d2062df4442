# paxkit

Building blocks for computing per-pixel metrics from point clouds (for
example airborne laser scanning height values), plus a few small utilities.
It has no third-party dependencies.

## Modules

- `paxkit.ordered`: statistics on samples sorted in ascending order.
  `order` returns a sorted list. The other functions expect sorted input:
  `min_value`, `max_value`, `count_lt`, `count_ge`, `quantile` (linear
  interpolation, `q` clamped to [0, 1]), `percentile`, `quartile`, `median`
  and `quartiles` (a tuple of min, first quartile, median, third quartile and
  max). `median_mad` returns a frozen `MAD` holding `median` and `mad`. Its
  `valid()` is false for an empty sample, where `mad` is -1. L-moments come
  from `l_moment(values, r)`, `l_moments(values, r)` (returns
  `[n, L1, ..., Lr]`) and `l_moment_ratio(values, r)`. Trimmed L-moments come
  from `tl_moment`, `tl_moments` and `tl_moment_ratio`, which take trimming
  counts `s` and `t` (`t` defaults to `s`). `binom(a, b)` is the binomial
  coefficient. Empty or too short samples give NaN. Invalid orders and
  trimming larger than the sample raise `ValueError`.
- `paxkit.function`: `Function` is a metric named by a string: `"count"`,
  `"mean"`, `"mean2"`, `"variance"`, `"skewness"`, `"kurtosis"`, `"L2"`,
  `"L3"`, `"L4"`, `"mad"` or `"p0"` to `"p100"`. An unknown name raises
  `ValueError`. A `Function` can also be built with class methods such as
  `Function.mean()` or `Function.p(95)`. Call it with a sorted sample to get
  the value. `str(f)` gives its name back, and `f.description()` gives a short
  text. `Function.help(pre)` returns a list of all metrics, one per line.
  Functions compare equal, order and hash by kind and percentile.
- `paxkit.bbox`: `align_le` and `align_ge` snap a value down or up to a
  multiple of an alignment. `Box2` is a bounding box. `bbox_of(points)` bounds
  `(x, y, ...)` points. `BboxIndexer(box, resolution)` aligns a box to the
  resolution and maps coordinates to `row`, `col` and a row-major `index`, with
  row 0 at the top. Points exactly on the border are nudged inside, and points
  outside raise `ValueError`. `affine_vector()` returns the GDAL-style
  geotransform. `indexer_for_points(points, alignment)` builds an indexer for
  two or more points.
- `paxkit.plot`: `PlotBase(east, north)` is a circular plot centre.
  `in_box(bbox, max_distance)` tells whether the box fully contains the plot.
  `contains(x, y, max_distance)` tells whether a point is within the radius.
  `PlotBase.inclusion_id()` returns `"contained"`.
- `paxkit.header`: `Header` is a list of column ids. It has `id(i)` (returns
  `""` when out of range) and `index(item)` (returns -1 when missing).
  `add(item)` does not add duplicates and rejects empty ids. `stream(out,
  col_mark)` writes the ids joined by the column mark.
- `paxkit.strided`: `StridedIterator(data, position, stride)` is a cursor
  that moves `stride` items per step, and the stride may be negative. It
  supports `value()`, indexing, `increment()`, `decrement()`, `+`, `-`, `+=`
  and `-=`. Subtracting one iterator from another gives the distance in
  strides.
- `paxkit.seconds`: `seconds_to_float` accepts a `timedelta` or a number.
  `seconds_to_string(secs, digits)` formats a duration in s, min, h, days,
  weeks or years. A negative `digits` pads the result so that decimal points
  line up.
- `paxkit.argsjson`: `parse_json_value`, `parse_json_string` and
  `parse_json_file` flatten a JSON document into a list of argument strings
  that starts with `"from json"`. Object keys are visited in sorted order. An
  optional `exists` callable decides which keys to keep.
- `paxkit.terminal`: `Terminal` reports the terminal size in `chars` and
  `lines` and falls back to the given defaults. Pass `detect=False` to use the
  defaults as they are. `wrap(out, tab, text)` writes word-wrapped text to a
  stream and indents continuation lines by `tab`.

## Example

```python
from paxkit.ordered import order, median, l_moment
from paxkit.function import Function

sample = order([1909, 1955, 1789, 1773, 2515, 2727, 2524, 2105])
print(median(sample))
print(l_moment(sample, 2))
print(Function("p90")(sample))
```

## What it does not do

paxkit is a library only. It has no command-line program. It does not read
point-cloud files and does not write raster files. You supply the
coordinates and heights, and you store the per-pixel metric values yourself.
`paxkit.argsjson` produces argument lists but does not parse or validate
them.

## Running the tests

```
pip install -e .[test]
pytest
```