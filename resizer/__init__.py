"""resizer: fast separable resizing of images by arbitrary scale factors.

.. include:: ../README.md
"""

from __future__ import annotations

__docformat__ = 'google'
__version__ = '0.1.0'
__version_info__ = tuple(int(num) for num in __version__.split('.'))

from collections.abc import Callable, Iterable, Sequence
import abc
import dataclasses
import logging
import math
import typing
from typing import Any

import numba
import numpy as np
import numpy.typing as npt
import scipy.sparse

if typing.TYPE_CHECKING:
  _DType = np.dtype[Any]
  _NDArray = npt.NDArray[Any]
  _DTypeLike = npt.DTypeLike
  _ArrayLike = npt.ArrayLike
else:
  _DType = Any
  _NDArray = Any
  _DTypeLike = Any
  _ArrayLike = Any

_logger = logging.getLogger(__name__)


def _check_eq(a: Any, b: Any) -> None:
  """If the two values or arrays are not equal, raise an exception with a useful message."""
  are_equal = np.all(a == b) if isinstance(a, np.ndarray) else a == b
  if not are_equal:
    raise AssertionError(f'{a!r} == {b!r}')


def _check_scale_factor(scale_factor: float) -> None:
  """Raise if `scale_factor` is not a finite positive number."""
  if not (math.isfinite(scale_factor) and scale_factor > 0.0):
    raise ValueError(f'Scale factor {scale_factor} must be finite and positive.')


def _sinc(x: _ArrayLike) -> _NDArray:
  """Return the value `np.sinc(x)` but improved to:
  (1) ignore underflow that occurs at 0.0 for np.float32, and
  (2) output exact zero for integer input values.

  >>> _sinc(np.array([-3, -2, -1, 0], dtype=np.float32))
  array([0., 0., 0., 1.], dtype=float32)

  >>> _sinc(0)
  1.0
  """
  x = np.asarray(x)
  x_is_scalar = x.ndim == 0
  with np.errstate(under='ignore'):
    result = np.sinc(np.atleast_1d(x))
    result[np.atleast_1d(x == np.floor(x))] = 0.0
    result[np.atleast_1d(x == 0)] = 1.0
    return result.item() if x_is_scalar else result


@dataclasses.dataclass(frozen=True, eq=False)
class Buffer:
  """Image samples indexed as `array[x, y, channel]`, positioned at an integer `origin`.

  The coordinates covered along each axis are `origin[axis] + range(array.shape[axis])`, so
  buffers need not start at zero.  A resize only reads the input buffer and only writes into
  the caller-provided output buffer.

  >>> buffer = Buffer(np.zeros((4, 3, 2), np.float32), origin=(10, 0, 0))
  >>> buffer.coords(0).tolist()
  [10, 11, 12, 13]
  """

  array: _NDArray
  """Floating-point sample values with axes (x, y, channel)."""

  origin: tuple[int, int, int] = (0, 0, 0)
  """Minimum coordinate along each of the axes (x, y, channel)."""

  def __post_init__(self) -> None:
    array = self.array
    if not isinstance(array, np.ndarray) or array.ndim != 3:
      raise ValueError(f'Buffer must be a 3D array (x, y, channel); got shape {np.shape(array)}.')
    if not np.issubdtype(array.dtype, np.floating):
      raise ValueError(f'Type {array.dtype} is not floating-point.')
    origin = tuple(self.origin)
    if len(origin) != 3 or not all(isinstance(o, (int, np.integer)) for o in origin):
      raise ValueError(f'Origin {self.origin} must contain 3 integers.')
    object.__setattr__(self, 'origin', tuple(int(o) for o in origin))

  @property
  def extent(self) -> tuple[int, int, int]:
    """Number of samples along the axes (x, y, channel)."""
    width, height, ch = self.array.shape
    return width, height, ch

  def min(self, axis: int) -> int:
    """Return the smallest valid coordinate along `axis`."""
    return self.origin[axis]

  def coords(self, axis: int) -> _NDArray:
    """Return the integer coordinates covered along `axis`."""
    return self.origin[axis] + np.arange(self.array.shape[axis])


@dataclasses.dataclass(frozen=True, eq=False)
class RepeatEdge:
  """Read-only view of a `Buffer` in which out-of-range x or y coordinates repeat the nearest
  edge sample.  The channel axis is never clamped."""

  buffer: Buffer

  def clamp(self, index: _ArrayLike, axis: int) -> _NDArray:
    """Map coordinates along spatial `axis` (0 for x, 1 for y) into the buffer's valid range."""
    assert axis in (0, 1), axis
    low = self.buffer.min(axis)
    high = low + self.buffer.extent[axis] - 1
    return np.clip(index, low, high)

  def array_index(self, index: _ArrayLike, axis: int) -> _NDArray:
    """Return the clamped coordinates as indices into `buffer.array`."""
    return self.clamp(index, axis) - self.buffer.min(axis)

  def __getitem__(self, key: tuple[_ArrayLike, _ArrayLike, _ArrayLike]) -> Any:
    x, y, c = key
    channel = np.asarray(c) - self.buffer.min(2)
    return self.buffer.array[self.array_index(x, 0), self.array_index(y, 1), channel]


@dataclasses.dataclass(frozen=True)
class Kernel(abc.ABC):
  """Abstract base class for interpolation kernels.

  Each kernel is a zero-phase function with `taps` nonzero samples at native resolution,
  i.e., its support is the interval [-radius, radius] with `radius = taps / 2`.  When
  downsampling, the kernel is widened by the inverse of the scale factor to act as a low-pass
  filter.
  """

  name: str
  """Kernel name."""

  taps: int
  """Number of source samples weighted when upsampling (the native tap count)."""

  @property
  def radius(self) -> float:
    """Max absolute value of x for which self(x) may be nonzero."""
    return 0.5 * self.taps

  @abc.abstractmethod
  def __call__(self, x: _ArrayLike) -> _NDArray:
    """Return evaluation of the kernel at locations x."""


class BoxKernel(Kernel):
  """See https://en.wikipedia.org/wiki/Box_function.

  The kernel function has value 1.0 over the closed interval [-.5, .5].  Upsampling with it
  reproduces nearest-neighbor sampling, and downsampling by an integer factor averages blocks.
  """

  def __init__(self) -> None:
    super().__init__(name='box', taps=1)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    return np.where(np.abs(x) <= 0.5, 1.0, 0.0)


class LinearKernel(Kernel):
  """See https://en.wikipedia.org/wiki/Triangle_function.

  Also known as the hat or tent function; used for bilinear interpolation.
  """

  def __init__(self) -> None:
    super().__init__(name='linear', taps=2)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    return (1.0 - np.abs(x)).clip(0.0, 1.0)


class CubicKernel(Kernel):
  """Cubic convolution kernel with parameter `a`.

  The default `a = -0.5` is the Keys (Catmull-Rom) cubic, which is interpolating, C^1 continuous,
  and has negative lobes that may overshoot near edges.

  [R. G. Keys.  Cubic convolution interpolation for digital image processing.
  IEEE Trans. on Acoustics, Speech, and Signal Processing, 29(6), 1981.]
  """

  def __init__(self, *, a: float = -0.5) -> None:
    super().__init__(name='cubic' if a == -0.5 else f'cubic_a{a}', taps=4)
    self.a = a

  def __call__(self, x: _ArrayLike) -> _NDArray:
    x = np.abs(x)
    a = self.a
    x2 = x * x
    x3 = x2 * x
    v01 = (a + 2.0) * x3 - (a + 3.0) * x2 + 1.0
    v12 = a * x3 - 5.0 * a * x2 + 8.0 * a * x - 4.0 * a
    return np.where(x < 1.0, v01, np.where(x < 2.0, v12, 0.0))


class LanczosKernel(Kernel):
  """High-quality kernel: sinc function modulated by a sinc window.

  Args:
    lobes: Number of lobes on each side; the support window is [-lobes, lobes].

  See https://en.wikipedia.org/wiki/Lanczos_kernel.
  """

  def __init__(self, *, lobes: int = 3) -> None:
    super().__init__(name='lanczos' if lobes == 3 else f'lanczos{lobes}', taps=2 * lobes)
    self.lobes = lobes

  def __call__(self, x: _ArrayLike) -> _NDArray:
    x = np.abs(np.asarray(x, np.float64))
    return np.where(x < self.lobes, _sinc(x) * _sinc(x / self.lobes), 0.0)


DEFAULT_KERNEL = 'cubic'

_DICT_KERNELS = {
    'box': BoxKernel(),
    'linear': LinearKernel(),
    'cubic': CubicKernel(),
    'lanczos': LanczosKernel(),
}

KERNELS = list(_DICT_KERNELS)
r"""Shortcut names for the predefined interpolation kernels:

| name        | `Kernel`          | taps | comments |
|-------------|-------------------|:----:|----------|
| `'box'`     | `BoxKernel()`     | 1    | *nearest* when upsampling, *area* average when downsampling |
| `'linear'`  | `LinearKernel()`  | 2    | *bilinear* in 2D |
| `'cubic'`   | `CubicKernel()`   | 4    | Keys cubic with a = -0.5 (default) |
| `'lanczos'` | `LanczosKernel()` | 6    | 3-lobe Lanczos |

Any other `Kernel` instance may be passed wherever a name is accepted.
"""


def get_kernel(kernel: str | Kernel) -> Kernel:
  """Return a `Kernel`, which can be specified as a name in `KERNELS`."""
  if isinstance(kernel, Kernel):
    return kernel
  if kernel not in _DICT_KERNELS:
    raise ValueError(f'Interpolation type {kernel!r} is not one of {KERNELS}.')
  return _DICT_KERNELS[kernel]


def kernel_support(kernel: str | Kernel, scale_factor: float,
                   upsample: bool) -> tuple[float, float, int]:
  """Return `(kernel_scaling, radius, num_taps)` for resampling with `kernel`.

  When downsampling, the kernel is stretched by `1 / scale_factor` so that it also acts as
  an antialiasing low-pass filter; its radius and tap count grow accordingly.

  >>> kernel_support('cubic', 0.25, upsample=False)
  (0.25, 8.0, 16)
  """
  kernel = get_kernel(kernel)
  _check_scale_factor(scale_factor)
  kernel_scaling = 1.0 if upsample else float(scale_factor)
  radius = 0.5 * kernel.taps / kernel_scaling
  num_taps = math.ceil(kernel.taps / kernel_scaling)
  return kernel_scaling, radius, num_taps


@dataclasses.dataclass(frozen=True, eq=False)
class WeightTable:
  """Kernel taps along one axis: output sample `i` is the sum over `k` of
  `weight[i, k] * source[begin[i] + k]`."""

  begin: _NDArray
  """First (unclamped) source coordinate touched by each output sample, shape (n,)."""

  weight: _NDArray
  """Normalized tap weights, shape (n, num_taps); each row sums to 1."""

  @property
  def num_taps(self) -> int:
    num_taps: int = self.weight.shape[1]
    return num_taps

  def source_index(self) -> _NDArray:
    """Return the source coordinate of every tap, shape (n, num_taps)."""
    return self.begin[:, None] + np.arange(self.num_taps)


def kernel_weights(coords: _ArrayLike, scale_factor: float, kernel: str | Kernel = DEFAULT_KERNEL,
                   upsample: bool = False, dtype: _DTypeLike = np.float32) -> WeightTable:
  """Compute the normalized kernel taps for the output samples at `coords` along one axis.

  Args:
    coords: Integer output coordinates (scalar or 1D array).
    scale_factor: Ratio of output size to input size.
    kernel: Interpolation kernel, as a name in `KERNELS` or a `Kernel` instance.
    upsample: Whether the kernel keeps its native width (True) or is widened by
      `1 / scale_factor` (False).
    dtype: Precision of the returned weights; they are computed in float64.

  Returns:
    The `WeightTable` whose rows correspond to `coords`.

  >>> table = kernel_weights([0, 1, 2, 3], 2.0, 'box', upsample=True)
  >>> table.begin.tolist()
  [0, 0, 1, 1]
  """
  kernel = get_kernel(kernel)
  kernel_scaling, radius, num_taps = kernel_support(kernel, scale_factor, upsample)
  coords = np.atleast_1d(np.asarray(coords, np.float64))
  if coords.ndim != 1:
    raise ValueError(f'Coordinates must be 1D; got shape {coords.shape}.')
  # Output sample centers mapped into the source coordinate space.
  source = (coords + 0.5) / scale_factor - 0.5
  begin = np.ceil(source - radius).astype(np.int64)
  offset = (begin[:, None] + np.arange(num_taps) - source[:, None]) * kernel_scaling
  weight = np.asarray(kernel(offset), np.float64).reshape(offset.shape)
  weight = weight / weight.sum(axis=-1)[..., None]
  return WeightTable(begin, weight.astype(dtype, copy=False))


def _create_resize_matrix(src_index: _NDArray, weight: _NDArray,
                          src_size: int) -> scipy.sparse.csr_matrix:
  """Return the sparse matrix whose rows express output samples as combinations of the source
  samples.  Taps that reference the same (clamped) source index are summed."""
  _check_eq(src_index.shape, weight.shape)
  dst_size, num_taps = src_index.shape
  row_ind = np.arange(dst_size).repeat(num_taps)
  col_ind = src_index.reshape(-1)
  return scipy.sparse.csr_matrix((weight.reshape(-1), (row_ind, col_ind)),
                                 shape=(dst_size, src_size))


def _separable_filter_using_sparse_matrices(
    src: _NDArray, indices: Sequence[_NDArray], weights: Sequence[_NDArray], dst: _NDArray,
    dim_order: Sequence[int]) -> None:
  """Resample the whole `src` one axis at a time and store the clamped result in `dst`."""
  array = src.astype(weights[0].dtype, copy=False)
  for dim in dim_order:
    resize_matrix = _create_resize_matrix(indices[dim], weights[dim], array.shape[dim])
    array_dim = np.moveaxis(array, dim, 0)
    array_flat = array_dim.reshape(array_dim.shape[0], -1)
    array_flat = resize_matrix @ array_flat
    array_dim = array_flat.reshape(array_flat.shape[0], *array_dim.shape[1:])
    array = np.moveaxis(array_dim, 0, dim)
  dst[...] = array.clip(0.0, 1.0)


class _TiledSeparableFilter:
  """Tiled, parallel separable filtering using cached numba-jitted functions.

  Output tiles are processed independently: each tile filters the source along its first axis
  into a private intermediate plane that covers only the rows (or columns) referenced by the
  tile's taps, then filters that plane along the second axis.  Rows of tiles are distributed
  across threads.
  """

  def __init__(self) -> None:
    # Resampling function for params (dtype, x_first, tile_width, tile_height, parallel).
    self._jitted_function: dict[tuple[_DType, bool, int, int, bool], Callable[..., None]] = {}

  def __call__(self, src: _NDArray, index_x: _NDArray, weight_x: _NDArray,
               index_y: _NDArray, weight_y: _NDArray, dst: _NDArray, *,
               x_first: bool, tile_shape: tuple[int, int], parallel: bool = True) -> None:
    _check_eq(index_x.shape, weight_x.shape)
    _check_eq(index_y.shape, weight_y.shape)
    _check_eq((index_x.shape[0], index_y.shape[0]), dst.shape[:2])
    dtype = weight_x.dtype
    float_type = dtype.type
    src = src.astype(dtype, copy=False)
    tile_width, tile_height = tile_shape

    # Innermost loops run across the x lanes (output or source columns) of the tile.
    def resample_x_then_y(src: _NDArray, index_x: _NDArray, weight_x: _NDArray,
                          index_y: _NDArray, weight_y: _NDArray, dst: _NDArray) -> None:
      width, height, ch = dst.shape
      num_taps_x, num_taps_y = index_x.shape[1], index_y.shape[1]
      num_tiles_x = (width + tile_width - 1) // tile_width
      num_tiles_y = (height + tile_height - 1) // tile_height
      zero, one = float_type(0.0), float_type(1.0)
      for tile_y in numba.prange(num_tiles_y):
        y0 = tile_y * tile_height
        y1 = min(y0 + tile_height, height)
        # Source rows referenced by the y taps of this row of tiles.
        row0 = index_y[y0:y1].min()
        num_rows = index_y[y0:y1].max() - row0 + 1
        acc = np.empty(tile_width, float_type)
        for tile_x in range(num_tiles_x):
          x0 = tile_x * tile_width
          num_x = min(tile_width, width - x0)
          resized_x = np.empty((ch, num_rows, num_x), float_type)
          for c in range(ch):
            for row in range(num_rows):
              plane_row = resized_x[c, row]
              plane_row[:] = zero
              for k in range(num_taps_x):
                for x in range(num_x):
                  plane_row[x] += weight_x[x0 + x, k] * src[index_x[x0 + x, k], row0 + row, c]
            for y in range(y0, y1):
              acc[:num_x] = zero
              for k in range(num_taps_y):
                weight = weight_y[y, k]
                plane_row = resized_x[c, index_y[y, k] - row0]
                for x in range(num_x):
                  acc[x] += weight * plane_row[x]
              for x in range(num_x):
                dst[x0 + x, y, c] = min(max(acc[x], zero), one)

    def resample_y_then_x(src: _NDArray, index_x: _NDArray, weight_x: _NDArray,
                          index_y: _NDArray, weight_y: _NDArray, dst: _NDArray) -> None:
      width, height, ch = dst.shape
      num_taps_x, num_taps_y = index_x.shape[1], index_y.shape[1]
      num_tiles_x = (width + tile_width - 1) // tile_width
      num_tiles_y = (height + tile_height - 1) // tile_height
      zero, one = float_type(0.0), float_type(1.0)
      for tile_y in numba.prange(num_tiles_y):
        y0 = tile_y * tile_height
        y1 = min(y0 + tile_height, height)
        acc = np.empty(tile_width, float_type)
        for tile_x in range(num_tiles_x):
          x0 = tile_x * tile_width
          num_x = min(tile_width, width - x0)
          # Source columns referenced by the x taps of this tile.
          col0 = index_x[x0:x0 + num_x].min()
          num_cols = index_x[x0:x0 + num_x].max() - col0 + 1
          resized_y = np.empty((ch, y1 - y0, num_cols), float_type)
          for c in range(ch):
            for y in range(y0, y1):
              plane_row = resized_y[c, y - y0]
              plane_row[:] = zero
              for k in range(num_taps_y):
                weight = weight_y[y, k]
                source_y = index_y[y, k]
                for col in range(num_cols):
                  plane_row[col] += weight * src[col0 + col, source_y, c]
              acc[:num_x] = zero
              for k in range(num_taps_x):
                for x in range(num_x):
                  acc[x] += weight_x[x0 + x, k] * plane_row[index_x[x0 + x, k] - col0]
              for x in range(num_x):
                dst[x0 + x, y, c] = min(max(acc[x], zero), one)

    signature = dtype, x_first, tile_width, tile_height, parallel
    jitted_function = self._jitted_function.get(signature)
    if not jitted_function:
      _logger.debug('Creating numba jit-wrapper for %s.', signature)
      func = resample_x_then_y if x_first else resample_y_then_x
      jitted_function = self._jitted_function[signature] = numba.njit(func, parallel=parallel)
    jitted_function(src, index_x, weight_x, index_y, weight_y, dst)


_tiled_separable_filter = _TiledSeparableFilter()

_VECTOR_WIDTH = 8
_X_FIRST_TILE_SHAPE = 16, 64
_Y_FIRST_TILE_SHAPE = 32, 8

STRATEGIES = ['tiled', 'separable']
"""Execution strategies for `Resizer`.  Both compute the same result:

- `'tiled'`: numba-jitted loops over output tiles, parallel across rows of tiles, each tile
  with a private intermediate plane bounded by its tap window (default).
- `'separable'`: whole-image multiplication by one `scipy.sparse` resize matrix per axis.
"""


@dataclasses.dataclass(frozen=True)
class Resizer:
  """Configured resize operation; invoke it as `resizer(input, output, scale_factor)`.

  All configuration is validated on construction, before any pixel is touched.

  Examples:
    `Resizer()(input, output, 0.5)`  # Cubic downsampling by half.

    `Resizer('lanczos', upsample=True)(input, output, 2.5)`  # Lanczos upsampling.
  """

  interpolation_type: str | Kernel = DEFAULT_KERNEL
  """The kernel, as a name in `KERNELS` or a `Kernel` instance."""

  upsample: bool = False
  """True when `scale_factor >= 1`.  Selects the native (unwidened) kernel and resampling x before
  y; otherwise the kernel is widened for antialiasing and y is resampled before x."""

  strategy: str = 'tiled'
  """Execution strategy, an element of `STRATEGIES`."""

  dim_order: Iterable[int] | None = None
  """Override the order in which the axes are resampled (0 for x, 1 for y).  It affects
  performance only."""

  tile_shape: tuple[int, int] | None = None
  """Output tile (width, height) for the `'tiled'` strategy.  The width must be a multiple
  of 8.  The default depends on the axis order."""

  parallel: bool = True
  """Distribute tiles across threads in the `'tiled'` strategy."""

  def __post_init__(self) -> None:
    get_kernel(self.interpolation_type)
    if self.strategy not in STRATEGIES:
      raise ValueError(f'Strategy {self.strategy!r} is not one of {STRATEGIES}.')
    if self.dim_order is not None:
      dim_order = tuple(self.dim_order)
      if sorted(dim_order) != [0, 1]:
        raise ValueError(f'{dim_order} not a permutation of {[0, 1]}.')
      object.__setattr__(self, 'dim_order', dim_order)
    if self.tile_shape is not None:
      tile_shape = tuple(self.tile_shape)
      if len(tile_shape) != 2 or not all(isinstance(n, (int, np.integer)) and n > 0
                                         for n in tile_shape):
        raise ValueError(f'Tile shape {self.tile_shape} must be two positive integers.')
      if tile_shape[0] % _VECTOR_WIDTH != 0:
        raise ValueError(f'Tile width {tile_shape[0]} is not a multiple of {_VECTOR_WIDTH}.')
      object.__setattr__(self, 'tile_shape', tuple(int(n) for n in tile_shape))

  @property
  def kernel(self) -> Kernel:
    return get_kernel(self.interpolation_type)

  def axis_order(self) -> tuple[int, int]:
    """Return the axes in the order they are resampled."""
    if self.dim_order is not None:
      return typing.cast(tuple[int, int], self.dim_order)
    # x first when upsampling, y first when downsampling.
    return (0, 1) if self.upsample else (1, 0)

  def __call__(self, input: Buffer, output: Buffer, scale_factor: float) -> Buffer:
    """Resample `input` into `output` and return `output`.

    Args:
      input: Source samples; they are read through a `RepeatEdge` view.
      output: Destination buffer, written in place.  Its extent and origin determine which
        output coordinates are computed; its channel extent must equal that of `input`.
      scale_factor: Ratio of output to input resolution, uniform for x and y.  It must be
        consistent with `upsample`.

    Returns:
      The `output` buffer, with all values clamped to [0, 1].
    """
    _check_scale_factor(scale_factor)
    if self.upsample and scale_factor < 1.0:
      raise ValueError(f'Scale factor {scale_factor} < 1 is inconsistent with upsample=True.')
    if not self.upsample and scale_factor > 1.0:
      raise ValueError(f'Scale factor {scale_factor} > 1 requires upsample=True.')
    if input.extent[2] != output.extent[2]:
      raise ValueError(f'Channel extents differ: {input.extent[2]} and {output.extent[2]}.')
    if 0 in input.extent[:2] or 0 in output.extent[:2]:
      _logger.debug('Skipping resize of %s to %s: empty extent.', input.extent, output.extent)
      return output

    kernel = self.kernel
    boundary = RepeatEdge(input)
    tables = [kernel_weights(output.coords(dim), scale_factor, kernel, self.upsample)
              for dim in range(2)]
    indices = [boundary.array_index(table.source_index(), dim)
               for dim, table in enumerate(tables)]
    weights = [table.weight for table in tables]
    dim_order = self.axis_order()
    _logger.debug('Resizing %s to %s: kernel=%s, taps=%s, dim_order=%s, strategy=%s.',
                  input.extent, output.extent, kernel.name,
                  [table.num_taps for table in tables], dim_order, self.strategy)

    if self.strategy == 'tiled':
      x_first = dim_order[0] == 0
      tile_shape = self.tile_shape
      if tile_shape is None:
        tile_shape = _X_FIRST_TILE_SHAPE if x_first else _Y_FIRST_TILE_SHAPE
      _tiled_separable_filter(input.array, indices[0], weights[0], indices[1], weights[1],
                              output.array, x_first=x_first, tile_shape=tile_shape,
                              parallel=self.parallel)
    else:
      _separable_filter_using_sparse_matrices(
          input.array, indices, weights, output.array, dim_order)
    return output


def resize_buffer(input: Buffer, output: Buffer, scale_factor: float, **kwargs: Any) -> Buffer:
  """Resample `input` into `output` using a `Resizer` configured by `**kwargs`.

  >>> input = Buffer(np.array([[[0.0], [1.0]], [[1.0], [0.0]]], np.float32))
  >>> output = Buffer(np.empty((4, 4, 1), np.float32))
  >>> resize_buffer(input, output, 2.0, interpolation_type='box', upsample=True).array[..., 0]
  array([[0., 0., 1., 1.],
         [0., 0., 1., 1.],
         [1., 1., 0., 0.],
         [1., 1., 0., 0.]], dtype=float32)
  """
  return Resizer(**kwargs)(input, output, scale_factor)


def resize(image: _ArrayLike, scale_factor: float, shape: Iterable[int] | None = None, *,
           upsample: bool | None = None, **kwargs: Any) -> _NDArray:
  """Resize an image stored in row-major `(height, width[, channels])` layout.

  Args:
    image: Floating-point samples with values in [0, 1], with shape `(height, width)` or
      `(height, width, channels)`.
    scale_factor: Ratio of output to input resolution, uniform for both spatial axes.
    shape: Output `(height, width)`; it defaults to the input size times `scale_factor`, rounded.
    upsample: If `None`, it is set to `scale_factor > 1`.
    **kwargs: Additional `Resizer` parameters (`interpolation_type`, `strategy`, ...).

  Returns:
    A `float32` array with shape `shape` plus the channel dimension of `image` if present.
    If `image` has no rows or columns, the result is all zeros.

  >>> resize(np.full((4, 6, 3), 0.5), 0.5).shape
  (2, 3, 3)
  """
  image = np.asarray(image)
  if image.ndim not in (2, 3):
    raise ValueError(f'Image shape {image.shape} is not (height, width[, channels]).')
  if not np.issubdtype(image.dtype, np.floating):
    raise ValueError(f'Type {image.dtype} is not floating-point.')
  _check_scale_factor(scale_factor)
  if shape is None:
    shape = tuple(int(round(size * scale_factor)) for size in image.shape[:2])
  shape = tuple(shape)
  if len(shape) != 2:
    raise ValueError(f'Shape {shape} is not (height, width).')
  if upsample is None:
    upsample = scale_factor > 1.0

  array = image[..., None] if image.ndim == 2 else image
  result = np.zeros((*shape, array.shape[2]), np.float32)
  # Buffers are indexed [x, y, channel]; these are transposed views, not copies.
  input = Buffer(array.transpose(1, 0, 2))
  output = Buffer(result.transpose(1, 0, 2))
  Resizer(upsample=upsample, **kwargs)(input, output, scale_factor)
  return result[..., 0] if image.ndim == 2 else result


# For Emacs:
# Local Variables:
# fill-column: 100
# End:
